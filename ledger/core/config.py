"""
Dashboard configuration.

Centralizes all display strings, data ranges and runtime settings.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class DashboardConfig:
    """Configuration for the market dashboard.

    All percentage values are expressed as plain percents (e.g., 10.0 = 10%).
    """

    # =========================================================
    # Display Text
    # =========================================================

    title: str = "The Iron Ledger"
    market_data_title: str = "Realtime market data"
    latest_news_title: str = "Latest news"

    # Shown on the bottom status rule
    connection_status: str = "Connected"

    # =========================================================
    # Currency
    # =========================================================

    currency_symbol: str = "₡"
    currency_name_plural: str = "Cogmarks"

    # =========================================================
    # Simulated Quotes
    # =========================================================

    # Current price is sampled uniformly from this range
    price_min: float = 500.0
    price_max: float = 3000.0

    # Yesterday's price = price * (1 + pct / 100), pct sampled from this range
    change_pct_min: float = -10.0
    change_pct_max: float = 10.0

    # Fixed seed for reproducible quotes (None = random)
    seed: int | None = None

    # =========================================================
    # Scrolling
    # =========================================================

    # Nominal number of rows the scrollbar thumb represents
    scrollbar_viewport_length: int = 5

    # =========================================================
    # Logging
    # =========================================================

    # File only, the terminal belongs to the UI
    log_file: str = "iron_ledger.log"
    log_level: str = "INFO"


# Default configuration instance
DEFAULT_CONFIG = DashboardConfig()
