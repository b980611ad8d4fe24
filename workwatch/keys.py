"""Keyboard event model shared by the state machines and the terminal layer."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Key(Enum):
    """Non-character keys WorkWatch reacts to."""
    CHAR = 'char'
    ENTER = 'enter'
    ESCAPE = 'escape'
    BACKSPACE = 'backspace'
    DELETE = 'delete'
    LEFT = 'left'
    RIGHT = 'right'
    UP = 'up'
    DOWN = 'down'
    HOME = 'home'
    END = 'end'


class KeyKind(Enum):
    """Whether the key went down, auto-repeated or came up."""
    PRESS = 'press'
    REPEAT = 'repeat'
    RELEASE = 'release'


@dataclass(frozen=True)
class KeyEvent:
    """A single decoded keyboard event."""
    key: Key
    char: str = ''
    kind: KeyKind = KeyKind.PRESS

    @classmethod
    def of(cls, char: str) -> 'KeyEvent':
        """Build a character key press."""
        return cls(Key.CHAR, char)

    @property
    def is_release(self) -> bool:
        return self.kind is KeyKind.RELEASE

    @property
    def letter(self) -> Optional[str]:
        """Lower-cased character for CHAR events, None otherwise."""
        if self.key is Key.CHAR and self.char:
            return self.char.lower()
        return None
