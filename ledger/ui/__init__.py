"""
Terminal UI for the market dashboard.

Layout planning, table rendering, focus/scroll handling and the Textual
application that ties them together.
"""
