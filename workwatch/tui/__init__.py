"""Curses front end for WorkWatch."""

from workwatch.tui.keymap import decode_key
from workwatch.tui.loop import event_loop, run_tui
from workwatch.tui.view import render

__all__ = ['decode_key', 'event_loop', 'run_tui', 'render']
