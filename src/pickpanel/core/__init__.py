"""Core overlay components."""

from pickpanel.core.base import Overlay
from pickpanel.core.keys import KeyEvent, classify_key
from pickpanel.core.render import build_body, build_panel, render
from pickpanel.core.selection import SelectionOverlay
from pickpanel.core.stack import OverlayStack, dispatch

__all__ = [
    "KeyEvent",
    "Overlay",
    "OverlayStack",
    "SelectionOverlay",
    "build_body",
    "build_panel",
    "classify_key",
    "dispatch",
    "render",
]
