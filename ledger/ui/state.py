"""
Panel focus and scroll state.

UIState is replaced, never mutated in place: every key press goes through
apply_key() which returns the next state. All transitions are total.

    Left  -> focus market data
    Right -> focus latest news
    Up    -> scroll the focused panel up (stops at 0)
    Down  -> scroll the focused panel down (market data stops at the last quote)
    q/Esc -> quit (handled by the app)
"""

import logging
from dataclasses import dataclass, replace
from enum import Enum

logger = logging.getLogger(__name__)


class FocusedPanel(Enum):
    """Which content panel receives scroll keys."""

    MARKET_DATA = "market_data"
    LATEST_NEWS = "latest_news"


class Key(Enum):
    """Keys the dashboard reacts to."""

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    QUIT = "quit"
    OTHER = "other"


# Terminal key names -> dashboard keys
KEY_NAMES = {
    "left": Key.LEFT,
    "right": Key.RIGHT,
    "up": Key.UP,
    "down": Key.DOWN,
    "q": Key.QUIT,
    "escape": Key.QUIT,
}


def key_from_name(name: str) -> Key:
    """Map a terminal key name to a dashboard key; unknown keys are OTHER."""
    return KEY_NAMES.get(name, Key.OTHER)


def is_quit_key(key: Key) -> bool:
    return key is Key.QUIT


@dataclass(frozen=True)
class UIState:
    """Interactive state: focused panel plus one scroll offset per panel."""

    focused_panel: FocusedPanel = FocusedPanel.MARKET_DATA
    market_data_scroll_pos: int = 0
    # No news yet, so this offset has no upper bound
    latest_news_scroll_pos: int = 0

    def is_focused(self, panel: FocusedPanel) -> bool:
        return self.focused_panel is panel


def apply_key(state: UIState, key: Key, quote_count: int) -> UIState:
    """
    Compute the state after one key press.

    Args:
        state: Current state
        key: The key pressed
        quote_count: Number of quotes in the market data table

    Returns:
        The next state (the same object when the key changes nothing)
    """
    if key is Key.LEFT:
        return _focus(state, FocusedPanel.MARKET_DATA)
    if key is Key.RIGHT:
        return _focus(state, FocusedPanel.LATEST_NEWS)
    if key is Key.UP:
        return _scroll(state, -1, quote_count)
    if key is Key.DOWN:
        return _scroll(state, 1, quote_count)
    return state


def _focus(state: UIState, panel: FocusedPanel) -> UIState:
    if state.focused_panel is panel:
        return state
    logger.debug(f"Focus -> {panel.value}")
    return replace(state, focused_panel=panel)


def _scroll(state: UIState, step: int, quote_count: int) -> UIState:
    if state.focused_panel is FocusedPanel.MARKET_DATA:
        last_row = max(0, quote_count - 1)
        position = min(last_row, max(0, state.market_data_scroll_pos + step))
        if position == state.market_data_scroll_pos:
            return state
        logger.debug(f"Market data scroll -> {position}")
        return replace(state, market_data_scroll_pos=position)

    # TODO: bound by the news list length once news items exist
    position = max(0, state.latest_news_scroll_pos + step)
    if position == state.latest_news_scroll_pos:
        return state
    return replace(state, latest_news_scroll_pos=position)
