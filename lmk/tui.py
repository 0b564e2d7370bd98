"""Curses front end for the selection controller.

Screen layout, bottom up:
  status line
  ==========
  query line
  ----------
  list of <Current> + ranked names (scrolls with the cursor)
"""

import curses
from pathlib import Path
from typing import Callable

from .selection import Key, Result, SelectionController

ESC = 27

KEYMAP = {
    ESC: Key.CANCEL,
    curses.KEY_UP: Key.UP,
    curses.KEY_DOWN: Key.DOWN,
    curses.KEY_HOME: Key.HOME,
    curses.KEY_END: Key.END,
    curses.KEY_BACKSPACE: Key.BACKSPACE,
    127: Key.BACKSPACE,
    8: Key.BACKSPACE,
    curses.KEY_DC: Key.DELETE,
    curses.KEY_ENTER: Key.CONFIRM,
    10: Key.CONFIRM,
    13: Key.CONFIRM,
}


def decode_key(code: int) -> Key | str | None:
    """Translate a getch() code into a controller signal."""
    if code in KEYMAP:
        return KEYMAP[code]
    if 0 <= code < 128:
        return chr(code)
    return None


def visible_window(cursor: int, total: int, height: int) -> tuple[int, int]:
    """First and last-exclusive row indices keeping `cursor` on screen."""
    if height <= 0:
        return 0, 0
    top = max(0, min(cursor - height // 2, total - height))
    return top, min(total, top + height)


class Screen:
    """Draws a SelectionController onto a curses window."""

    def __init__(self, stdscr):
        self.stdscr = stdscr
        curses.curs_set(0)
        # Make ESC register without the default one-second delay.
        curses.set_escdelay(25)
        stdscr.keypad(True)

    def read_key(self) -> Key | str:
        while True:
            signal = decode_key(self.stdscr.getch())
            if signal is not None:
                return signal

    def render(self, controller: SelectionController) -> None:
        height, width = self.stdscr.getmaxyx()
        list_height = max(0, height - 5)
        labels = controller.labels

        self.stdscr.erase()
        if height < 6 or width < 2:
            self.stdscr.refresh()
            return
        top, bottom = visible_window(controller.cursor, len(labels), list_height)
        for row, index in enumerate(range(top, bottom)):
            attrs = curses.A_REVERSE if index == controller.cursor else curses.A_NORMAL
            self.stdscr.addnstr(row, 0, labels[index], width - 1, attrs)

        self.stdscr.hline(height - 5, 0, "-", width)
        self.stdscr.addnstr(height - 4, 0, controller.query, width - 1)
        self.stdscr.hline(height - 3, 0, "=", width)
        self.stdscr.addnstr(height - 2, 0, controller.status, width - 1, curses.A_DIM)
        self.stdscr.refresh()


def run_session(
    controller: SelectionController,
    execute: Callable[[Result], bool],
) -> list[tuple[Result, bool]]:
    """Run selection rounds until the user cancels.

    Each confirmed Result is passed to `execute` and its outcome reported
    back to the controller.

    Returns:
        (result, success) for every executed action, in order.
    """
    outcomes = []

    def loop(stdscr):
        screen = Screen(stdscr)
        while True:
            result = controller.run_round(screen.read_key, screen.render)
            if result is None:
                return
            success = execute(result)
            controller.notify(result, success)
            outcomes.append((result, success))

    curses.wrapper(loop)
    return outcomes


def default_root(manifest_path: Path) -> Path:
    return manifest_path.resolve().parent
