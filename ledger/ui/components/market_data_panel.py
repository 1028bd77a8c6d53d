"""
Market data panel component.

Renders the quote table for the left panel:
- Ticker, name, price, change% and a word-wrapped description
- Rows grow to fit their wrapped description (no fixed row height)
- Scrolling skips whole rows; the header always stays visible
- A vertical scroll indicator drawn over the panel's right border
"""

import textwrap
from collections.abc import Sequence
from dataclasses import dataclass

from rich.console import Console, ConsoleOptions, RenderResult
from rich.segment import Segment
from rich.table import Table
from rich.text import Text

from ledger.core.models import StockQuote
from ledger.ui.layout import Area, ColumnWidths
from ledger.ui.theme import (
    COLOR_DOWN,
    COLOR_UP,
    HEADER_STYLE,
    SCROLLBAR_BEGIN,
    SCROLLBAR_END,
    SCROLLBAR_THUMB,
    SCROLLBAR_TRACK,
)

HEADERS = ("Ticker", "Name", "Price", "Change%", "Description")


@dataclass(frozen=True)
class FormattedRow:
    """One table row: a cell per column, `height` lines tall."""

    cells: tuple[Text, ...]
    height: int


def wrap_description(description: str, width: int) -> list[str]:
    """
    Greedy word wrap.

    Words are never split, not even at hyphens; a word longer than the
    width gets a line of its own. Widths below 1 are treated as 1.
    """
    lines = textwrap.wrap(
        description,
        width=max(1, width),
        break_long_words=False,
        break_on_hyphens=False,
    )
    return lines or [""]


def format_change(percent_change: float) -> Text:
    """Signed change with 2 decimals; zero counts as up."""
    color = COLOR_UP if percent_change >= 0 else COLOR_DOWN
    return Text(f"{percent_change:>+6.2f}%", style=color)


def format_row(
    stock_quote: StockQuote, currency_symbol: str, description_width: int
) -> FormattedRow:
    """
    Format one quote as a table row.

    Args:
        stock_quote: Company and its quote
        currency_symbol: Shown after the price
        description_width: Columns available for the wrapped description

    Returns:
        FormattedRow whose height is the number of wrapped description lines
    """
    company = stock_quote.company
    quote = stock_quote.quote
    description_lines = wrap_description(company.description, description_width)

    cells = (
        Text(company.ticker),
        Text(company.name),
        Text(f"{quote.price:>7.2f} {currency_symbol:<3}"),
        format_change(quote.percent_change),
        Text("\n".join(description_lines)),
    )
    return FormattedRow(cells=cells, height=len(description_lines))


@dataclass(frozen=True)
class ScrollbarState:
    """
    Scroll indicator state, derived fresh every frame.

    content_length: total number of rows
    position: index of the first visible row
    viewport_content_length: nominal rows per page, sizes the thumb
    """

    content_length: int
    position: int
    viewport_content_length: int = 5

    def thumb(self, track_length: int) -> tuple[int, int] | None:
        """
        Thumb placement on a track.

        Returns:
            (start, length) in track rows, or None when nothing is drawn
        """
        if self.content_length <= 0 or track_length <= 0:
            return None

        viewport = max(0, self.viewport_content_length)
        max_position = self.content_length - 1
        start_position = min(max(self.position, 0), max_position)
        span = max_position + viewport
        if span <= 0:
            return 0, track_length

        start = round(start_position * track_length / span)
        end = round((start_position + viewport) * track_length / span)
        start = min(max(start, 0), track_length - 1)
        end = min(max(end, 0), track_length)
        return start, max(end - start, 1)


class ScrollBar:
    """Vertical scroll indicator: begin arrow, track with thumb, end arrow."""

    def __init__(self, state: ScrollbarState, style: str = "none"):
        self.state = state
        self.style = style

    def is_visible(self, height: int) -> bool:
        return self.state.thumb(height - 2) is not None

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        height = options.height or 0
        thumb = self.state.thumb(height - 2)
        if thumb is None:
            return

        style = console.get_style(self.style)
        start, length = thumb
        yield Segment(SCROLLBAR_BEGIN, style)
        yield Segment.line()
        for row in range(height - 2):
            glyph = SCROLLBAR_THUMB if start <= row < start + length else SCROLLBAR_TRACK
            yield Segment(glyph, style)
            yield Segment.line()
        yield Segment(SCROLLBAR_END, style)
        yield Segment.line()


@dataclass(frozen=True)
class MarketDataView:
    """Everything the frame needs to draw the market data table."""

    table: Table
    scrollbar: ScrollbarState
    rows: tuple[FormattedRow, ...]
    column_widths: ColumnWidths
    viewport: Area

    @property
    def render_width(self) -> int:
        """Natural table width; wider than the viewport on narrow terminals."""
        return self.column_widths.total


def build_table(rows: Sequence[FormattedRow], column_widths: ColumnWidths) -> Table:
    """Header, blank separator line, then the data rows."""
    table = Table.grid(padding=(0, column_widths.spacing), pad_edge=False, collapse_padding=True)
    for width in column_widths.as_tuple():
        table.add_column(width=width, no_wrap=True, overflow="crop")

    table.add_row(*(Text(header) for header in HEADERS), style=HEADER_STYLE)
    table.add_row()
    for row in rows:
        table.add_row(*row.cells)
    return table


def render_market_data(
    quotes: Sequence[StockQuote],
    scroll_pos: int,
    currency_symbol: str,
    column_widths: ColumnWidths,
    viewport: Area,
    viewport_length: int = 5,
) -> MarketDataView:
    """
    Build the market data table for the current scroll position.

    The first `scroll_pos` quotes are skipped; every remaining quote is laid
    out at its own height and the surface clips whatever does not fit.
    """
    visible = quotes[max(0, scroll_pos) :]
    rows = tuple(format_row(quote, currency_symbol, column_widths.description) for quote in visible)
    return MarketDataView(
        table=build_table(rows, column_widths),
        scrollbar=ScrollbarState(
            content_length=len(quotes),
            position=scroll_pos,
            viewport_content_length=viewport_length,
        ),
        rows=rows,
        column_widths=column_widths,
        viewport=viewport,
    )
