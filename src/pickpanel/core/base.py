"""Base protocol for overlays."""

from typing import Protocol, Union, runtime_checkable

from pickpanel.core.keys import KeyEvent


@runtime_checkable
class Overlay(Protocol):
    """Protocol for modal views a host can stack.

    Allows hosts to drive any overlay without knowing its concrete type.
    """

    @property
    def closed(self) -> bool:
        """Whether the overlay reached a terminal state."""
        ...

    def handle_key(self, event: Union[KeyEvent, str]) -> bool:
        """Consume one key event, return True if the host should close it."""
        ...

    def set_size(self, width: int, height: int) -> None:
        """Record the advisory viewport size."""
        ...

    def render(self) -> str:
        """Return the current text block for display."""
        ...
