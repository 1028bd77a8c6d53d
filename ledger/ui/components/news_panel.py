"""
Latest news panel component.

News content is not available yet; the panel is an empty bordered block
that can still take focus and track its own scroll offset.
"""

from rich.panel import Panel

from ledger.ui.components.block import build_panel_block


def build_latest_news(title: str, focused: bool) -> Panel:
    """The news panel: just its block until there is news to show."""
    return build_panel_block(title, focused)
