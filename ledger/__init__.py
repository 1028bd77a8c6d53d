"""
The Iron Ledger - terminal market dashboard.

Shows simulated quotes for a fixed set of fictional companies in a
bordered, scrollable two-panel terminal screen.
"""

__version__ = "0.3.0"
