"""
Frame composition.

compose_frame() is called once per render. It derives the layout, the
visible table rows and the scrollbar state from the current AppState and
UIState and places everything on a fresh Screen. Nothing is cached between
frames and nothing is mutated.
"""

from ledger.core.config import DEFAULT_CONFIG, DashboardConfig
from ledger.core.models import AppState
from ledger.ui.components import (
    ScrollBar,
    border_style,
    build_currency_note,
    build_latest_news,
    build_panel_block,
    build_status_line,
    build_title_line,
    render_market_data,
)
from ledger.ui.layout import Area, plan_layout
from ledger.ui.screen import Screen
from ledger.ui.state import FocusedPanel, UIState

# Smallest area a titled border can be drawn in
MIN_BLOCK_WIDTH = 4
MIN_BLOCK_HEIGHT = 2


def _fits_block(area: Area) -> bool:
    return area.width >= MIN_BLOCK_WIDTH and area.height >= MIN_BLOCK_HEIGHT


def compose_frame(
    app_state: AppState,
    ui_state: UIState,
    area: Area,
    config: DashboardConfig = DEFAULT_CONFIG,
) -> Screen:
    """
    Build the full dashboard screen.

    Args:
        app_state: Quotes and currency settings
        ui_state: Focused panel and scroll offsets
        area: Terminal area to fill
        config: Display text and scrollbar settings

    Returns:
        Screen with layers "latest_news", "market_data", "title", "status",
        "market_data_table", "market_data_scrollbar", "market_data_status"
        (layers that do not fit the terminal are left out)
    """
    layout = plan_layout(area)
    screen = Screen(area.width, area.height)

    market_focused = ui_state.is_focused(FocusedPanel.MARKET_DATA)
    news_focused = ui_state.is_focused(FocusedPanel.LATEST_NEWS)

    if _fits_block(layout.latest_news_area):
        screen.place(
            "latest_news",
            build_latest_news(config.latest_news_title, news_focused),
            layout.latest_news_area,
        )
    if _fits_block(layout.market_data_area):
        screen.place(
            "market_data",
            build_panel_block(config.market_data_title, market_focused),
            layout.market_data_area,
        )

    screen.place("title", build_title_line(config.title), layout.title_area)
    screen.place("status", build_status_line(config.connection_status), layout.status_area)

    view = render_market_data(
        app_state.quotes,
        ui_state.market_data_scroll_pos,
        app_state.currency_symbol,
        layout.column_widths,
        layout.market_data_table_area,
        viewport_length=config.scrollbar_viewport_length,
    )
    screen.place(
        "market_data_table",
        view.table,
        layout.market_data_table_area,
        render_width=view.render_width,
    )

    # Drawn over the right border, between the top and bottom border rows
    panel = layout.market_data_area.inner(horizontal=0, vertical=1)
    scrollbar_area = Area(panel.right - 1, panel.y, min(1, panel.width), panel.height)
    scrollbar = ScrollBar(view.scrollbar, style=border_style(market_focused))
    if scrollbar.is_visible(scrollbar_area.height):
        screen.place("market_data_scrollbar", scrollbar, scrollbar_area)

    screen.place(
        "market_data_status",
        build_currency_note(app_state.currency_name_plural),
        layout.market_data_status_area,
    )
    return screen
