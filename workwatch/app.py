"""WorkWatch application state machine."""

from enum import Enum
from typing import Optional

from workwatch.keys import Key, KeyEvent
from workwatch.notifications import Notifier, NullNotifier
from workwatch.session import Prompt, SessionLogs
from workwatch.utils.duration import compact_duration, verbose_duration
from workwatch.utils.logger import setup_logger

logger = setup_logger(__name__)

MAX_ELAPSED = 2**64 - 1


class AppState(Enum):
    """Top-level screens."""
    MENU = 'Menu'
    WORKING = 'Working'
    LOGS = 'Logs'


class WorkWatchApp:
    """Everything the terminal loop needs to draw and drive one session.

    Keys go to the prompt first; only when no prompt is open are they
    matched against the bindings of the current screen.
    """

    def __init__(self, username: str, notifier: Optional[Notifier] = None):
        self.username = username
        self.notifier = notifier or NullNotifier()
        self.state = AppState.MENU
        self.elapsed = 0
        self.logs = SessionLogs()
        self.prompt = Prompt()

    @property
    def clocked_in(self) -> bool:
        return self.state is not AppState.MENU

    @property
    def compact_time(self) -> str:
        return compact_duration(self.elapsed)

    @property
    def verbose_time(self) -> str:
        return verbose_duration(self.elapsed)

    def tick(self):
        """Advance the timer by one second while clocked in."""
        if self.clocked_in:
            self.elapsed = min(self.elapsed + 1, MAX_ELAPSED)

    def handle_key(self, event: KeyEvent) -> bool:
        """Route a key event.

        Returns:
            False when the user asked to quit
        """
        if event.is_release:
            return True

        if self.prompt.handle_key(event, self.logs):
            return True

        if self.state is AppState.MENU:
            return self._handle_menu(event)
        if self.state is AppState.WORKING:
            self._handle_working(event)
        else:
            self._handle_logs(event)
        return True

    def clock_in(self):
        """Start a new session with an empty log."""
        self.logs.clear()
        self.state = AppState.WORKING
        self.notifier.clock_in(self.username)
        self.elapsed = 0
        logger.info(f"{self.username} clocked in")

    def clock_out(self):
        """End the session, reporting its length and logs."""
        total = self.elapsed
        self.state = AppState.MENU
        self.notifier.clock_out(self.username, total, self.logs.entries)
        self.elapsed = 0
        logger.info(f"{self.username} clocked out after {verbose_duration(total)}")

    def _handle_menu(self, event: KeyEvent) -> bool:
        letter = event.letter
        if letter == 'c':
            self.clock_in()
        elif letter == 'q':
            return False
        return True

    def _handle_working(self, event: KeyEvent):
        letter = event.letter
        if letter == 'c':
            self.clock_out()
        elif letter == 'a':
            self.prompt.begin_input()
        elif letter == 'l':
            self.state = AppState.LOGS

    def _handle_logs(self, event: KeyEvent):
        letter = event.letter
        if letter == 't':
            self.state = AppState.WORKING
        elif letter == 'a':
            self.prompt.begin_input()
        elif letter == 'e':
            if self.logs.selected is not None:
                self.prompt.begin_edit(self.logs.selected, self.logs.selected_entry)
        elif letter == 'd':
            self.logs.delete_selected()
        elif letter == 'c':
            self.clock_out()
        elif event.key is Key.UP or letter == 'k':
            self.logs.select_previous()
        elif event.key is Key.DOWN or letter == 'j':
            self.logs.select_next()
