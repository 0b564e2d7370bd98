"""Tests for key decoding and list scrolling in the curses front end."""

import curses

import pytest

from lmk.selection import Key
from lmk.tui import decode_key, visible_window


@pytest.mark.parametrize(
    "code, signal",
    [
        (27, Key.CANCEL),
        (curses.KEY_UP, Key.UP),
        (curses.KEY_DOWN, Key.DOWN),
        (curses.KEY_HOME, Key.HOME),
        (curses.KEY_END, Key.END),
        (curses.KEY_BACKSPACE, Key.BACKSPACE),
        (127, Key.BACKSPACE),
        (curses.KEY_DC, Key.DELETE),
        (ord("\n"), Key.CONFIRM),
        (curses.KEY_ENTER, Key.CONFIRM),
        (ord("a"), "a"),
        (ord("Z"), "Z"),
        (ord("_"), "_"),
    ],
)
def test_decode_key(code, signal):
    assert decode_key(code) == signal


@pytest.mark.parametrize("code", [0xC3, 0xA9, 0xE9, 255])
def test_non_ascii_bytes_ignored(code):
    assert decode_key(code) is None


def test_unknown_special_keys_ignored():
    assert decode_key(curses.KEY_F1) is None


@pytest.mark.parametrize(
    "cursor, total, height, window",
    [
        (0, 3, 10, (0, 3)),
        (0, 50, 10, (0, 10)),
        (20, 50, 10, (15, 25)),
        (49, 50, 10, (40, 50)),
        (5, 50, 0, (0, 0)),
    ],
)
def test_visible_window(cursor, total, height, window):
    assert visible_window(cursor, total, height) == window
