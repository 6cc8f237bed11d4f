"""Rendering of selection overlays.

Everything here is a pure function of overlay state: nothing is mutated and
repeated calls with the same state produce the same output.
"""

import io
from typing import TYPE_CHECKING

from rich import box
from rich.cells import cell_len
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from pickpanel.utils.constants import (
    DEFAULT_BORDER_STYLE,
    HINT_TEXT,
    SELECTED_MARKER,
    UNSELECTED_MARKER,
    Styles,
)

if TYPE_CHECKING:
    from pickpanel.core.selection import SelectionOverlay

# Panel padding (vertical, horizontal)
PANEL_PADDING = (1, 2)


def build_body(overlay: "SelectionOverlay") -> Text:
    """Build panel content: title, one line per option, key legend."""
    body = Text()
    body.append(overlay.title, style=Styles.TITLE)
    body.append("\n\n")

    for i, option in enumerate(overlay.options):
        if i == overlay.selected_index:
            body.append(SELECTED_MARKER)
            body.append(option, style=Styles.SELECTED)
        else:
            body.append(UNSELECTED_MARKER)
            body.append(option, style=Styles.OPTION)
        body.append("\n")

    if overlay.options:
        body.append("\n")
    body.append(HINT_TEXT, style=Styles.HINT)
    return body


def build_panel(
    overlay: "SelectionOverlay", border_style: str = DEFAULT_BORDER_STYLE
) -> Panel:
    """Wrap the overlay body in a rounded, padded panel sized to its content."""
    return Panel(
        build_body(overlay),
        box=box.ROUNDED,
        border_style=border_style,
        padding=PANEL_PADDING,
        expand=False,
    )


def _content_width(overlay: "SelectionOverlay") -> int:
    """Widest line of the panel body, in terminal cells."""
    widths = [cell_len(overlay.title), cell_len(HINT_TEXT)]
    widths.extend(cell_len(SELECTED_MARKER + option) for option in overlay.options)
    return max(widths)


def render(
    overlay: "SelectionOverlay",
    color: bool = False,
    border_style: str = DEFAULT_BORDER_STYLE,
) -> str:
    """Render the overlay panel to a text block.

    Args:
        overlay: Overlay to render
        color: Include ANSI styling (reverse video for the selected row)
        border_style: Rich style for the border

    Returns:
        The panel as newline-separated lines, without a trailing newline
    """
    # Border and padding on both sides; options never wrap
    width = _content_width(overlay) + 2 * PANEL_PADDING[1] + 2
    console = Console(
        file=io.StringIO(),
        width=width,
        color_system="truecolor" if color else None,
        force_terminal=color,
        highlight=False,
        legacy_windows=False,
    )
    console.print(build_panel(overlay, border_style=border_style))
    return console.file.getvalue().rstrip("\n")
