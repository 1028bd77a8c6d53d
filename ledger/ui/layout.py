"""
Screen geometry.

Derives every area of the dashboard from the terminal size:

    ┌──────────────── title (1 row) ────────────────┐
    │ market data panel      │ latest news panel    │
    │  table region (flex)   │                      │
    │  status line (1 row)   │                      │
    └──────────────── status (1 row) ───────────────┘

All values are recomputed every frame. Nothing here raises: tiny or
zero-sized terminals produce zero-sized areas.
"""

from dataclasses import dataclass

# Fixed market data column widths
TICKER_WIDTH = 8
NAME_WIDTH = 30
PRICE_WIDTH = 10
CHANGE_WIDTH = 7

# Description never gets narrower than this, whatever the terminal width
MIN_DESCRIPTION_WIDTH = 24

# Gap between adjacent columns
COLUMN_SPACING = 1
COLUMN_COUNT = 5


@dataclass(frozen=True)
class Area:
    """A rectangle in terminal cells."""

    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def inner(self, horizontal: int = 1, vertical: int = 1) -> "Area":
        """Shrink by a margin on each side, never below zero size."""
        width = max(0, self.width - 2 * horizontal)
        height = max(0, self.height - 2 * vertical)
        return Area(
            self.x + min(horizontal, self.width),
            self.y + min(vertical, self.height),
            width,
            height,
        )

    def intersection(self, other: "Area") -> "Area":
        x = max(self.x, other.x)
        y = max(self.y, other.y)
        right = min(self.right, other.right)
        bottom = min(self.bottom, other.bottom)
        return Area(x, y, max(0, right - x), max(0, bottom - y))


@dataclass(frozen=True)
class ColumnWidths:
    """Market data table column widths in cells."""

    ticker: int
    name: int
    price: int
    change: int
    description: int
    spacing: int = COLUMN_SPACING

    def as_tuple(self) -> tuple[int, int, int, int, int]:
        return (self.ticker, self.name, self.price, self.change, self.description)

    @property
    def total(self) -> int:
        """Full table width including the gaps between columns."""
        return sum(self.as_tuple()) + self.spacing * (COLUMN_COUNT - 1)


@dataclass(frozen=True)
class DashboardLayout:
    """All areas of one frame."""

    title_area: Area
    status_area: Area
    market_data_area: Area
    latest_news_area: Area
    market_data_table_area: Area
    market_data_status_area: Area
    column_widths: ColumnWidths


def split_rows(area: Area, top: int, bottom: int) -> tuple[Area, Area, Area]:
    """
    Split vertically into fixed top, flexible middle and fixed bottom.

    The top row wins when there is not enough height for everything.
    """
    top_height = min(top, area.height)
    bottom_height = min(bottom, area.height - top_height)
    middle_height = area.height - top_height - bottom_height
    return (
        Area(area.x, area.y, area.width, top_height),
        Area(area.x, area.y + top_height, area.width, middle_height),
        Area(area.x, area.y + top_height + middle_height, area.width, bottom_height),
    )


def split_halves(area: Area) -> tuple[Area, Area]:
    """Split horizontally into two equal halves; the left takes the odd column."""
    left_width = area.width - area.width // 2
    return (
        Area(area.x, area.y, left_width, area.height),
        Area(area.x + left_width, area.y, area.width - left_width, area.height),
    )


def plan_columns(table_width: int) -> ColumnWidths:
    """Fixed columns plus a description column that takes what is left."""
    fixed = TICKER_WIDTH + NAME_WIDTH + PRICE_WIDTH + CHANGE_WIDTH
    remaining = table_width - fixed - COLUMN_SPACING * (COLUMN_COUNT - 1)
    return ColumnWidths(
        ticker=TICKER_WIDTH,
        name=NAME_WIDTH,
        price=PRICE_WIDTH,
        change=CHANGE_WIDTH,
        description=max(remaining, MIN_DESCRIPTION_WIDTH),
    )


def plan_layout(area: Area) -> DashboardLayout:
    """Compute every dashboard area for a terminal of the given size."""
    area = Area(area.x, area.y, max(0, area.width), max(0, area.height))

    title_area, body_area, status_area = split_rows(area, top=1, bottom=1)
    market_data_area, latest_news_area = split_halves(body_area)

    # Table and its status line live inside the panel border
    _, table_area, market_status_area = split_rows(market_data_area.inner(), top=0, bottom=1)

    return DashboardLayout(
        title_area=title_area,
        status_area=status_area,
        market_data_area=market_data_area,
        latest_news_area=latest_news_area,
        market_data_table_area=table_area,
        market_data_status_area=market_status_area,
        column_widths=plan_columns(table_area.width),
    )
