#!/usr/bin/env python3
"""
Unit tests for panel focus and scroll handling.

Run with:
    python -m pytest tests/test_state.py -v
"""

import random
import sys
from pathlib import Path

# Add project root to path for standalone execution
sys.path.insert(0, str(Path(__file__).parent.parent))

from ledger.ui.state import (
    FocusedPanel,
    Key,
    UIState,
    apply_key,
    is_quit_key,
    key_from_name,
)


def press(state: UIState, keys: list[Key], quote_count: int = 10) -> UIState:
    for key in keys:
        state = apply_key(state, key, quote_count)
    return state


class TestKeyMapping:
    """Tests for terminal key name mapping."""

    def test_arrows(self):
        assert key_from_name("left") is Key.LEFT
        assert key_from_name("right") is Key.RIGHT
        assert key_from_name("up") is Key.UP
        assert key_from_name("down") is Key.DOWN

    def test_quit_keys(self):
        assert is_quit_key(key_from_name("q"))
        assert is_quit_key(key_from_name("escape"))

    def test_unknown_key(self):
        assert key_from_name("x") is Key.OTHER
        assert key_from_name("pagedown") is Key.OTHER
        assert not is_quit_key(Key.OTHER)


class TestFocus:
    """Tests for panel focus changes."""

    def test_starts_on_market_data(self):
        state = UIState()
        assert state.is_focused(FocusedPanel.MARKET_DATA)
        assert not state.is_focused(FocusedPanel.LATEST_NEWS)

    def test_right_then_left(self):
        state = press(UIState(), [Key.RIGHT])
        assert state.focused_panel is FocusedPanel.LATEST_NEWS
        state = press(state, [Key.LEFT])
        assert state.focused_panel is FocusedPanel.MARKET_DATA

    def test_last_direction_wins(self):
        """After any Left/Right sequence exactly one panel is focused: the last one pressed."""
        rng = random.Random(3)
        state = UIState()
        for _ in range(200):
            key = rng.choice([Key.LEFT, Key.RIGHT])
            state = apply_key(state, key, 10)
            expected = FocusedPanel.MARKET_DATA if key is Key.LEFT else FocusedPanel.LATEST_NEWS
            assert state.focused_panel is expected
            focused = [panel for panel in FocusedPanel if state.is_focused(panel)]
            assert focused == [expected]

    def test_focus_keeps_scroll_offsets(self):
        state = press(UIState(), [Key.DOWN, Key.DOWN, Key.RIGHT, Key.DOWN, Key.LEFT])
        assert state.market_data_scroll_pos == 2
        assert state.latest_news_scroll_pos == 1


class TestMarketDataScroll:
    """Tests for scrolling the market data table."""

    def test_down_nine_times_reaches_last_row(self):
        state = press(UIState(), [Key.DOWN] * 9)
        assert state.market_data_scroll_pos == 9

    def test_tenth_down_is_noop(self):
        state = press(UIState(), [Key.DOWN] * 9)
        assert apply_key(state, Key.DOWN, 10) is state

    def test_up_stops_at_zero(self):
        state = UIState()
        assert apply_key(state, Key.UP, 10) is state
        state = press(state, [Key.DOWN, Key.UP, Key.UP])
        assert state.market_data_scroll_pos == 0

    def test_empty_quotes(self):
        state = press(UIState(), [Key.DOWN, Key.DOWN, Key.UP, Key.DOWN], quote_count=0)
        assert state.market_data_scroll_pos == 0

    def test_scroll_bound_random_sequences(self):
        """Any key sequence keeps the offset within [0, max(0, count - 1)]."""
        rng = random.Random(11)
        keys = [Key.UP, Key.DOWN, Key.LEFT, Key.RIGHT, Key.OTHER]
        for quote_count in (0, 1, 2, 10):
            state = UIState()
            for _ in range(500):
                state = apply_key(state, rng.choice(keys), quote_count)
                assert 0 <= state.market_data_scroll_pos <= max(0, quote_count - 1)

    def test_news_scroll_untouched(self):
        state = press(UIState(), [Key.DOWN, Key.DOWN])
        assert state.latest_news_scroll_pos == 0


class TestLatestNewsScroll:
    """Tests for the news panel offset (no news list yet, so no upper bound)."""

    def test_down_is_unbounded(self):
        state = press(UIState(), [Key.RIGHT] + [Key.DOWN] * 25, quote_count=3)
        assert state.latest_news_scroll_pos == 25
        assert state.market_data_scroll_pos == 0

    def test_up_stops_at_zero(self):
        state = press(UIState(), [Key.RIGHT, Key.DOWN, Key.UP, Key.UP])
        assert state.latest_news_scroll_pos == 0


class TestOtherKeys:
    """Tests for keys the controller ignores."""

    def test_other_key_is_noop(self):
        state = press(UIState(), [Key.DOWN, Key.RIGHT])
        assert apply_key(state, Key.OTHER, 10) is state

    def test_quit_leaves_state_alone(self):
        state = press(UIState(), [Key.DOWN])
        assert apply_key(state, Key.QUIT, 10) is state
