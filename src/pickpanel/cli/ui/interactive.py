"""Interactive overlay loop."""

from typing import Optional

import readchar
from rich.text import Text

from pickpanel.cli.ui.panels import (
    clear_screen,
    console,
    get_terminal_size,
    reset_cursor,
    show_cursor,
)
from pickpanel.core import OverlayStack, SelectionOverlay, build_panel, dispatch
from pickpanel.core.base import Overlay
from pickpanel.utils.config import Config, get_pickpanel_dir
from pickpanel.utils.debug import set_stderr_echo


def _read_key() -> str:
    """Read one key. Ctrl+C arrives as a cancel key, not an exception."""
    try:
        return readchar.readkey()
    except KeyboardInterrupt:
        return readchar.key.CTRL_C


def _draw(overlay: Overlay, border_style: str) -> None:
    if isinstance(overlay, SelectionOverlay):
        console.print(build_panel(overlay, border_style=border_style))
    else:
        console.print(Text.from_ansi(overlay.render()))


def run_stack(
    stack: OverlayStack, border_style: Optional[str] = None
) -> list[Overlay]:
    """Drive a stack of overlays until it is empty.

    Args:
        stack: Overlays to show, the last one first
        border_style: Panel border style (defaults to config)

    Returns:
        Overlays in the order they closed
    """
    if border_style is None:
        border_style = Config(get_pickpanel_dir()).border_style

    closed: list[Overlay] = []
    previous_echo = set_stderr_echo(False)
    try:
        drawn = None
        while stack.top is not None:
            overlay = stack.top
            overlay.set_size(*get_terminal_size())

            if overlay is not drawn:
                clear_screen()
                drawn = overlay
            else:
                reset_cursor()
            _draw(overlay, border_style)

            stack, done = dispatch(stack, _read_key())
            if done is not None:
                closed.append(done)
    finally:
        set_stderr_echo(previous_echo)
        show_cursor()

    return closed


def run_overlay(
    overlay: SelectionOverlay, border_style: Optional[str] = None
) -> Optional[str]:
    """Show a single selection overlay until it closes.

    Returns:
        The selected option if submitted, None if cancelled
    """
    if overlay.closed:
        return overlay.selected_option if overlay.submitted else None

    run_stack(OverlayStack((overlay,)), border_style=border_style)
    clear_screen()
    show_cursor()

    if overlay.submitted:
        return overlay.selected_option
    return None

