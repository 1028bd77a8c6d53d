"""
Bordered panel block shared by both content panels.
"""

from rich import box
from rich.panel import Panel
from rich.text import Text

from ledger.ui.theme import ACTIVE_BORDER_STYLE, INACTIVE_BORDER_STYLE


def border_style(focused: bool) -> str:
    """Focus is shown by border color only."""
    return ACTIVE_BORDER_STYLE if focused else INACTIVE_BORDER_STYLE


def build_panel_block(title: str, focused: bool) -> Panel:
    """Empty bordered block with a left-aligned title."""
    return Panel(
        Text(""),
        title=Text(title),
        title_align="left",
        box=box.SQUARE,
        border_style=border_style(focused),
        padding=0,
    )
