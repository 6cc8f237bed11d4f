"""Key-event classification.

Raw key strings from readchar are normalized here into a small closed set
before they reach any overlay, so overlays never see terminal escape codes.
"""

from enum import Enum

from readchar import key as rkey

from pickpanel.utils.debug import debug_key


class KeyEvent(Enum):
    """Classified key events understood by overlays."""

    UP = "up"
    DOWN = "down"
    CONFIRM = "confirm"
    CANCEL = "cancel"
    VIM_UP = "vim_up"
    VIM_DOWN = "vim_down"
    OTHER = "other"

    @property
    def is_up(self) -> bool:
        return self in (KeyEvent.UP, KeyEvent.VIM_UP)

    @property
    def is_down(self) -> bool:
        return self in (KeyEvent.DOWN, KeyEvent.VIM_DOWN)


_KEY_MAP: dict[str, KeyEvent] = {
    rkey.UP: KeyEvent.UP,
    rkey.DOWN: KeyEvent.DOWN,
    rkey.ENTER: KeyEvent.CONFIRM,
    rkey.CR: KeyEvent.CONFIRM,
    rkey.LF: KeyEvent.CONFIRM,
    rkey.ESC: KeyEvent.CANCEL,
    rkey.CTRL_C: KeyEvent.CANCEL,
    "q": KeyEvent.CANCEL,
    "k": KeyEvent.VIM_UP,
    "j": KeyEvent.VIM_DOWN,
}


def _is_escape_pair(key: str) -> bool:
    """Esc followed by a plain key.

    On POSIX readchar waits for a second character after Esc, so a lone Esc
    arrives glued to whatever key comes next: Esc then j reads as ESC + "j".
    """
    return len(key) == 2 and key[0] == rkey.ESC and key[1] not in "[O"


def classify_key(key: str) -> KeyEvent:
    """Map a raw key string (as returned by readchar.readkey) to a KeyEvent."""
    event = _KEY_MAP.get(key, KeyEvent.OTHER)
    if event == KeyEvent.OTHER and _is_escape_pair(key):
        event = KeyEvent.CANCEL
    debug_key("classified", raw=repr(key), event=event.value)
    return event
