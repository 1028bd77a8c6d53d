"""
Simulated market data source.
"""

from ledger.market.companies import COMPANIES
from ledger.market.quotes import build_app_state, generate_quotes, random_quote

__all__ = [
    "COMPANIES",
    "build_app_state",
    "generate_quotes",
    "random_quote",
]
