"""Terminal host for overlays."""

from pickpanel.cli.ui.interactive import run_overlay, run_stack
from pickpanel.cli.ui.panels import (
    clear_screen,
    console,
    get_terminal_size,
    reset_cursor,
    show_cursor,
)

__all__ = [
    "clear_screen",
    "console",
    "get_terminal_size",
    "reset_cursor",
    "run_overlay",
    "run_stack",
    "show_cursor",
]
