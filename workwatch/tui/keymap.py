"""Translate curses key codes into KeyEvents."""

import curses
from typing import Optional, Union

from workwatch.keys import Key, KeyEvent

SPECIAL_KEYS = {
    curses.KEY_ENTER: Key.ENTER,
    curses.KEY_BACKSPACE: Key.BACKSPACE,
    curses.KEY_DC: Key.DELETE,
    curses.KEY_LEFT: Key.LEFT,
    curses.KEY_RIGHT: Key.RIGHT,
    curses.KEY_UP: Key.UP,
    curses.KEY_DOWN: Key.DOWN,
    curses.KEY_HOME: Key.HOME,
    curses.KEY_END: Key.END,
}

CONTROL_CHARS = {
    '\n': Key.ENTER,
    '\r': Key.ENTER,
    '\x1b': Key.ESCAPE,
    '\x7f': Key.BACKSPACE,
    '\b': Key.BACKSPACE,
}


def decode_key(code: Union[str, int]) -> Optional[KeyEvent]:
    """Decode a value returned by ``window.get_wch()``.

    Args:
        code: A character string or a curses ``KEY_*`` constant

    Returns:
        KeyEvent, or None for keys WorkWatch ignores (resize, function keys...)
    """
    if isinstance(code, str):
        if code in CONTROL_CHARS:
            return KeyEvent(CONTROL_CHARS[code])
        if code.isprintable():
            return KeyEvent.of(code)
        return None

    key = SPECIAL_KEYS.get(code)
    if key is None:
        return None
    return KeyEvent(key)
