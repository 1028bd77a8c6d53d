"""
Theme colors and styles (Rich style strings).
"""

COLOR_UP = "#44ffaa"  # Bright green for zero/positive change
COLOR_DOWN = "#ff7777"  # Bright red for negative change

# Border of the focused panel vs everything else
ACTIVE_BORDER_STYLE = "yellow"
INACTIVE_BORDER_STYLE = "none"

TITLE_STYLE = "bold yellow"
HEADER_STYLE = "bold"
PANEL_STATUS_STYLE = "italic grey70"

# Scroll indicator glyphs
SCROLLBAR_BEGIN = "↑"
SCROLLBAR_END = "↓"
SCROLLBAR_TRACK = "║"
SCROLLBAR_THUMB = "█"
