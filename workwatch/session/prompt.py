"""Single-line text prompt layered over the application state."""

from enum import Enum
from typing import Optional

from prompt_toolkit.buffer import Buffer
from prompt_toolkit.document import Document

from workwatch.keys import Key, KeyEvent
from workwatch.session.logs import SessionLogs
from workwatch.utils.logger import setup_logger

logger = setup_logger(__name__)


class PromptState(Enum):
    """Whether a prompt is open and what confirming it does."""
    NO_PROMPT = 'none'
    INPUT = 'input'
    EDIT = 'edit'


class Prompt:
    """Text prompt for adding or editing a session log.

    While open, the prompt consumes every key: Enter confirms, Escape
    cancels and everything else edits the text buffer.
    """

    def __init__(self):
        self.state = PromptState.NO_PROMPT
        self.buffer = Buffer(multiline=False)
        self.edit_index: Optional[int] = None

    @property
    def active(self) -> bool:
        return self.state is not PromptState.NO_PROMPT

    @property
    def text(self) -> str:
        return self.buffer.text

    @property
    def cursor_position(self) -> int:
        return self.buffer.cursor_position

    def begin_input(self):
        """Open an empty prompt for a new log entry."""
        self.buffer.reset()
        self.edit_index = None
        self.state = PromptState.INPUT

    def begin_edit(self, index: int, text: str):
        """Open a prompt seeded with an existing entry.

        Args:
            index: Position of the entry being edited
            text: Current entry text, cursor placed at the end
        """
        self.buffer.reset(Document(text))
        self.edit_index = index
        self.state = PromptState.EDIT

    def handle_key(self, event: KeyEvent, logs: SessionLogs) -> bool:
        """Offer a key to the prompt.

        Returns:
            True if the prompt was open and consumed the key
        """
        if not self.active:
            return False

        if event.key is Key.ENTER:
            self.confirm(logs)
        elif event.key is Key.ESCAPE:
            self.cancel()
        else:
            self._edit_buffer(event)
        return True

    def confirm(self, logs: SessionLogs):
        """Apply the buffer to ``logs`` and close the prompt."""
        text = self.buffer.text

        if not text.strip():
            logger.debug("Ignoring blank log entry")
        elif self.state is PromptState.INPUT:
            logs.append(text)
        elif self.state is PromptState.EDIT:
            if not logs.replace(self.edit_index, text):
                logger.debug(f"Discarding edit of missing log {self.edit_index}")

        self._close()

    def cancel(self):
        """Close the prompt without touching the logs."""
        self._close()

    def _close(self):
        self.buffer.reset()
        self.edit_index = None
        self.state = PromptState.NO_PROMPT

    def _edit_buffer(self, event: KeyEvent):
        buffer = self.buffer
        if event.key is Key.CHAR:
            if event.char.isprintable():
                buffer.insert_text(event.char)
        elif event.key is Key.BACKSPACE:
            buffer.delete_before_cursor()
        elif event.key is Key.DELETE:
            buffer.delete()
        elif event.key is Key.LEFT:
            buffer.cursor_left()
        elif event.key is Key.RIGHT:
            buffer.cursor_right()
        elif event.key is Key.HOME:
            buffer.cursor_position = 0
        elif event.key is Key.END:
            buffer.cursor_position = len(buffer.text)
