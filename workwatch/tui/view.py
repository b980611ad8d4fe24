"""Draw the WorkWatch screen with curses."""

import curses

from prompt_toolkit.utils import get_cwidth

from workwatch.app import AppState, WorkWatchApp
from workwatch.session import PromptState

BOX_HEIGHT = 3
MIN_WIDTH = 10
SELECTED_PAIR = 1

CONTROLS = {
    AppState.MENU: " C - Clock In | Q - Quit ",
    AppState.WORKING: " L - View Logs | A - Add Log | C - Clock Out ",
    AppState.LOGS: (
        " T - View Time | A - Add Log | E - Edit Log | D - Delete Log | C - Clock Out "
    ),
}

PROMPT_TITLES = {
    PromptState.INPUT: "Input",
    PromptState.EDIT: "Edit",
}


def init_colors():
    """Set up the highlight colour for the selected log, if the terminal has colour."""
    if not curses.has_colors():
        return
    curses.start_color()
    curses.use_default_colors()
    curses.init_pair(SELECTED_PAIR, curses.COLOR_GREEN, -1)


def _selected_attr() -> int:
    if curses.has_colors():
        return curses.color_pair(SELECTED_PAIR) | curses.A_BOLD
    return curses.A_BOLD


def body_lines(app: WorkWatchApp):
    """Lines for the main box as (text, highlighted) pairs."""
    if app.state is AppState.MENU:
        return [(f"Welcome To WorkWatch, {app.username}", False)]
    if app.state is AppState.WORKING:
        return [(f"Elapsed Time: {app.compact_time}", False)]
    if not len(app.logs):
        return [("No Logs Yet", False)]
    return [
        (entry, index == app.logs.selected)
        for index, entry in enumerate(app.logs)
    ]


def fit_cells(text: str, cells: int) -> str:
    """Cut ``text`` to at most ``cells`` terminal columns, keeping whole glyphs."""
    out = []
    used = 0
    for char in text:
        width = get_cwidth(char)
        if used + width > cells:
            break
        out.append(char)
        used += width
    return ''.join(out)


def prompt_window(text: str, cursor: int, cells: int):
    """Scroll a prompt so the cursor stays on screen.

    Returns:
        (first visible character, cursor column relative to it)
    """
    offset = 0
    while offset < cursor and get_cwidth(text[offset:cursor]) > cells - 1:
        offset += 1
    return offset, get_cwidth(text[offset:cursor])


def _box(stdscr, top: int, height: int, width: int, title: str):
    win = stdscr.derwin(height, width, top, 0)
    win.box()
    win.addnstr(0, 2, title, max(width - 4, 0))
    return win


def render(stdscr, app: WorkWatchApp):
    """Draw one frame: main box, optional prompt box and the controls box."""
    stdscr.erase()
    height, width = stdscr.getmaxyx()

    prompt_rows = BOX_HEIGHT if app.prompt.active else 0
    main_height = height - BOX_HEIGHT - prompt_rows
    if main_height < BOX_HEIGHT or width < MIN_WIDTH:
        stdscr.addnstr(0, 0, "Terminal too small", max(width - 1, 0))
        stdscr.refresh()
        return

    inner = width - 2
    main = _box(stdscr, 0, main_height, width, app.state.value)
    visible = main_height - 2
    first = max((app.logs.selected or 0) - visible + 1, 0) if app.state is AppState.LOGS else 0
    for row, (text, highlighted) in enumerate(body_lines(app)[first:first + visible]):
        text = fit_cells(text, inner)
        col = 1 + (inner - get_cwidth(text)) // 2
        main.addstr(row + 1, col, text, _selected_attr() if highlighted else 0)

    cursor = None
    if app.prompt.active:
        top = main_height
        prompt_box = _box(stdscr, top, BOX_HEIGHT, width, PROMPT_TITLES[app.prompt.state])
        # Keep the cursor in view on long entries
        offset, column = prompt_window(app.prompt.text, app.prompt.cursor_position, inner)
        prompt_box.addstr(1, 1, fit_cells(app.prompt.text[offset:], inner))
        cursor = (top + 1, 1 + column)

    controls = _box(stdscr, height - BOX_HEIGHT, BOX_HEIGHT, width, "Controls")
    controls.addnstr(1, 1, CONTROLS[app.state], inner)

    if cursor is not None:
        stdscr.move(*cursor)
    stdscr.refresh()
