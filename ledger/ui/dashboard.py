#!/usr/bin/env python3
"""
Terminal Market Dashboard.

A full-screen, keyboard-driven view of simulated quotes:
- Market data table with word-wrapped descriptions
- Latest news panel (placeholder)
- Focus follows Left/Right, Up/Down scroll the focused panel

Textual owns the terminal session: it switches to the alternate screen on
start, delivers key presses to the bindings below and restores the
terminal on every exit path, errors included.

Run with:
    python run_dashboard.py --seed 42
"""

import logging

from rich.console import RenderableType
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.reactive import reactive
from textual.widget import Widget

from ledger.core.config import DEFAULT_CONFIG, DashboardConfig
from ledger.core.models import AppState
from ledger.ui.frame import compose_frame
from ledger.ui.layout import Area
from ledger.ui.state import UIState, apply_key, is_quit_key, key_from_name

logger = logging.getLogger("dashboard")


def configure_logging(log_file: str, level: str = "INFO") -> None:
    """File only - anything written to the terminal would corrupt the UI."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        handlers=[
            logging.FileHandler(log_file),
        ],
    )


class FrameView(Widget):
    """Draws the whole dashboard frame at the widget's current size."""

    DEFAULT_CSS = """
    FrameView {
        width: 100%;
        height: 100%;
    }
    """

    # Replacing the state triggers a repaint
    ui_state: reactive[UIState] = reactive(UIState)

    def __init__(self, app_state: AppState, config: DashboardConfig, **kwargs):
        super().__init__(**kwargs)
        self.app_state = app_state
        self.config = config

    def render(self) -> RenderableType:
        width, height = self.size
        return compose_frame(self.app_state, self.ui_state, Area(0, 0, width, height), self.config)


class IronLedgerDashboard(App):
    """Market data dashboard."""

    TITLE = "The Iron Ledger"
    BINDINGS = [
        Binding("q", "quit", "Quit", priority=True),
        Binding("escape", "quit", "Quit", show=False, priority=True),
        Binding("left", "navigate('left')", "Market data", show=False, priority=True),
        Binding("right", "navigate('right')", "Latest news", show=False, priority=True),
        Binding("up", "navigate('up')", "Scroll up", show=False, priority=True),
        Binding("down", "navigate('down')", "Scroll down", show=False, priority=True),
    ]

    def __init__(self, app_state: AppState, config: DashboardConfig | None = None):
        super().__init__()
        self.config = config or DEFAULT_CONFIG
        self.app_state = app_state
        self.title = self.config.title

    def compose(self) -> ComposeResult:
        yield FrameView(self.app_state, self.config, id="frame")

    def on_mount(self) -> None:
        logger.info(f"Dashboard started with {self.app_state.quote_count} quotes")

    @property
    def ui_state(self) -> UIState:
        return self.query_one(FrameView).ui_state

    def action_navigate(self, key_name: str) -> None:
        """Feed one key press through the focus and scroll controller."""
        key = key_from_name(key_name)
        if is_quit_key(key):
            self.exit()
            return

        frame = self.query_one(FrameView)
        frame.ui_state = apply_key(frame.ui_state, key, self.app_state.quote_count)

    async def action_quit(self) -> None:
        logger.info("Quit requested")
        self.exit()
