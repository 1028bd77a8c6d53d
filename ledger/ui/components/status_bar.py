"""
Title and status bar components.

One-row renderables for the top title line, the bottom connection status
rule and the market data panel's currency note.
"""

from rich.rule import Rule
from rich.text import Text

from ledger.ui.theme import PANEL_STATUS_STYLE, TITLE_STYLE


def build_title_line(title: str) -> Text:
    """Centered bold title."""
    return Text(title, style=TITLE_STYLE, justify="center", no_wrap=True, overflow="crop")


def build_status_line(status: str) -> Rule:
    """Horizontal rule with the connection status at its left end."""
    return Rule(Text(status), characters="─", align="left", style="none")


def build_currency_note(currency_name_plural: str) -> Text:
    """Footer line of the market data panel."""
    return Text(
        f"Prices in {currency_name_plural}",
        style=PANEL_STATUS_STYLE,
        justify="left",
        no_wrap=True,
        overflow="crop",
    )
