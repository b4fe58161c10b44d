"""App-level keyboard bindings.

This module contains Textual Binding objects for app-level bindings
that work from any screen.
"""

from textual.binding import Binding

# ============================================================================
# Textual Binding objects for app-level bindings
# ============================================================================

APP_BINDINGS: list[Binding] = [
    # Not a priority binding, so image names typed into the scan input keep "q"
    Binding("q", "app.quit", "Quit"),
]

__all__ = [
    "APP_BINDINGS",
]
