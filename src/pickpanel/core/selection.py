"""Single-choice selection overlay.

The overlay is a two-state machine: open (initial) and closed (entered by
confirm or cancel, never left). All input arrives through handle_key().
"""

from typing import Callable, Optional, Sequence, Union

from pickpanel.core.keys import KeyEvent, classify_key
from pickpanel.core.render import render
from pickpanel.utils.constants import DEFAULT_BORDER_STYLE
from pickpanel.utils.debug import debug_overlay

SubmitCallback = Callable[[str], None]


class SelectionOverlay:
    """Titled list of options with a clamped cursor.

    Args:
        title: Heading shown above the options
        options: Choices, in display order. May be empty.
    """

    def __init__(self, title: str, options: Sequence[str]):
        self.title = title
        self.options: tuple[str, ...] = tuple(options)
        self.selected_index = 0
        self.submitted = False
        self.canceled = False
        self.on_submit: Optional[SubmitCallback] = None
        self.width = 0
        self.height = 0

    def __repr__(self) -> str:
        return (
            f"SelectionOverlay(title={self.title!r}, options={len(self.options)}, "
            f"selected_index={self.selected_index}, submitted={self.submitted}, "
            f"canceled={self.canceled})"
        )

    @property
    def closed(self) -> bool:
        return self.submitted or self.canceled

    @property
    def selected_option(self) -> str:
        """Currently highlighted option, or "" when there is none."""
        if 0 <= self.selected_index < len(self.options):
            return self.options[self.selected_index]
        return ""

    def set_on_submit(self, callback: Optional[SubmitCallback]) -> None:
        """Attach or replace the confirm callback."""
        self.on_submit = callback

    def set_size(self, width: int, height: int) -> None:
        """Record the advisory viewport size. Layout does not depend on it."""
        self.width = width
        self.height = height

    def handle_key(self, event: Union[KeyEvent, str]) -> bool:
        """Process one key event.

        Args:
            event: A classified KeyEvent, or a raw readchar key string

        Returns:
            True if the host should close this overlay now
        """
        if not isinstance(event, KeyEvent):
            event = classify_key(event)

        if self.closed:
            # Closed overlays ignore further input
            debug_overlay("ignored after close", event=event.value)
            return True

        if event.is_up:
            self._move(-1)
            return False
        if event.is_down:
            self._move(1)
            return False
        if event == KeyEvent.CONFIRM:
            self._submit()
            return True
        if event == KeyEvent.CANCEL:
            self.canceled = True
            debug_overlay("canceled", title=self.title)
            return True
        return False

    def _move(self, delta: int) -> None:
        """Move the cursor by delta, clamped to the option range."""
        last = max(0, len(self.options) - 1)
        new_index = min(last, max(0, self.selected_index + delta))
        if new_index != self.selected_index:
            debug_overlay("move", old=self.selected_index, new=new_index)
        self.selected_index = new_index

    def _submit(self) -> None:
        self.submitted = True
        has_selection = 0 <= self.selected_index < len(self.options)
        debug_overlay(
            "submitted",
            title=self.title,
            index=self.selected_index,
            has_selection=has_selection,
        )
        if self.on_submit is not None and has_selection:
            self.on_submit(self.options[self.selected_index])

    def render(
        self, color: bool = False, border_style: str = DEFAULT_BORDER_STYLE
    ) -> str:
        """Render the overlay panel as a text block."""
        return render(self, color=color, border_style=border_style)
