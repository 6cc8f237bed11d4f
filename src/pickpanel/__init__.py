"""pickpanel - Modal single-choice selection overlay for terminal UIs."""

from importlib.metadata import version

__version__ = version("pickpanel")

from pickpanel.core import KeyEvent, OverlayStack, SelectionOverlay, dispatch

__all__ = [
    "KeyEvent",
    "OverlayStack",
    "SelectionOverlay",
    "dispatch",
]
