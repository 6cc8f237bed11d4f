"""Overlay stack as explicit host state.

The host keeps an OverlayStack value and replaces it with whatever
dispatch() returns. Overlays never see the stack they live in.
"""

from dataclasses import dataclass
from typing import Optional, Union

from pickpanel.core.base import Overlay
from pickpanel.core.keys import KeyEvent
from pickpanel.utils.debug import debug_stack


@dataclass(frozen=True)
class OverlayStack:
    """Immutable stack of overlays; the last one is active."""

    overlays: tuple[Overlay, ...] = ()

    def __len__(self) -> int:
        return len(self.overlays)

    @property
    def top(self) -> Optional[Overlay]:
        """Active overlay, or None when the stack is empty."""
        return self.overlays[-1] if self.overlays else None

    def push(self, overlay: Overlay) -> "OverlayStack":
        return OverlayStack(self.overlays + (overlay,))

    def pop(self) -> "OverlayStack":
        """Drop the active overlay. Popping an empty stack is a no-op."""
        return OverlayStack(self.overlays[:-1])


def dispatch(
    stack: OverlayStack, event: Union[KeyEvent, str]
) -> tuple[OverlayStack, Optional[Overlay]]:
    """Deliver one key event to the active overlay.

    Args:
        stack: Current host stack
        event: Classified KeyEvent or raw key string

    Returns:
        Tuple of (new_stack, closed_overlay). closed_overlay is the overlay
        that closed on this event (already popped), or None.
    """
    overlay = stack.top
    if overlay is None:
        return stack, None

    if not overlay.handle_key(event):
        return stack, None

    debug_stack("closed overlay popped", depth=len(stack) - 1)
    return stack.pop(), overlay
