"""
Core configuration and data models for the dashboard.
"""

from ledger.core.config import DEFAULT_CONFIG, DashboardConfig
from ledger.core.models import AppState, Company, Quote, StockQuote

__all__ = [
    "AppState",
    "Company",
    "DashboardConfig",
    "DEFAULT_CONFIG",
    "Quote",
    "StockQuote",
]
