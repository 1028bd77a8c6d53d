#!/usr/bin/env python3
"""
Run the market dashboard.

Usage:
    python run_dashboard.py                         # Random quotes
    python run_dashboard.py --seed 42               # Reproducible quotes
    python run_dashboard.py --log-level DEBUG       # Log key handling to iron_ledger.log

Keys:
    Left/Right  Focus market data / latest news
    Up/Down     Scroll the focused panel
    q / Esc     Quit
"""

from ledger.ui.cli import run_cli

if __name__ == "__main__":
    run_cli()
