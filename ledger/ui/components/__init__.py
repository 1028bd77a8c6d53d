"""
UI components for the market dashboard.

Rich renderables for the panels, bars and the market data table.
"""

from ledger.ui.components.block import border_style, build_panel_block
from ledger.ui.components.market_data_panel import (
    FormattedRow,
    MarketDataView,
    ScrollBar,
    ScrollbarState,
    format_row,
    render_market_data,
    wrap_description,
)
from ledger.ui.components.news_panel import build_latest_news
from ledger.ui.components.status_bar import (
    build_currency_note,
    build_status_line,
    build_title_line,
)

__all__ = [
    "FormattedRow",
    "MarketDataView",
    "ScrollBar",
    "ScrollbarState",
    "border_style",
    "build_currency_note",
    "build_latest_news",
    "build_panel_block",
    "build_status_line",
    "build_title_line",
    "format_row",
    "render_market_data",
    "wrap_description",
]
