"""Terminal event loop."""

import curses
from typing import Callable

from workwatch.app import WorkWatchApp
from workwatch.tui.keymap import decode_key
from workwatch.tui.view import init_colors, render
from workwatch.utils.logger import setup_logger

logger = setup_logger(__name__)

ESCAPE_DELAY_MS = 25


def event_loop(
    stdscr,
    app: WorkWatchApp,
    poll_seconds: float = 1.0,
    draw: Callable = render
):
    """Draw, wait up to ``poll_seconds`` for a key, repeat until quit.

    A poll that times out without a key counts as one timer tick.

    Raises:
        ValueError: If ``poll_seconds`` is under one millisecond
    """
    timeout_ms = int(poll_seconds * 1000)
    if timeout_ms < 1:
        raise ValueError(f"Poll interval must be at least 1 ms: {poll_seconds}")
    stdscr.timeout(timeout_ms)

    while True:
        draw(stdscr, app)

        try:
            code = stdscr.get_wch()
        except curses.error:
            # No input before the timeout
            app.tick()
            continue

        event = decode_key(code)
        if event is None:
            continue
        if not app.handle_key(event):
            break


def _setup_screen(stdscr):
    curses.set_escdelay(ESCAPE_DELAY_MS)
    init_colors()
    stdscr.keypad(True)


def run_tui(app: WorkWatchApp, poll_seconds: float = 1.0):
    """Run WorkWatch in the terminal until the user quits.

    ``curses.wrapper`` restores the terminal on every exit path; errors
    raised by the loop propagate to the caller.
    """
    def session(stdscr):
        _setup_screen(stdscr)
        event_loop(stdscr, app, poll_seconds)

    logger.info("Starting terminal UI")
    curses.wrapper(session)
    logger.info("Terminal UI closed")
