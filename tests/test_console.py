"""Tests for colouring and the progress bar."""

import io

from maplab import GameMap, Theme
from maplab.console import RESET, colorize, progress_bar, show_map


def test_colorize_wraps_text():
    assert colorize("hi", Theme.GREEN) == "\033[92mhi" + RESET


def test_colorize_disabled():
    assert colorize("hi", Theme.GREEN, enabled=False) == "hi"


def test_every_theme_has_a_colour():
    for theme in Theme:
        assert colorize("x", theme).endswith(RESET)


def test_show_map_with_prefix():
    out = io.StringIO()
    show_map(GameMap.create("Forest", Theme.GREEN), out, color=False, prefix="#1 ")

    assert out.getvalue() == "#1 Map: Forest | Sky: Empty\n[          ]\n"


def test_progress_bar_sleeps_per_step():
    out = io.StringIO()
    delays = []

    progress_bar(out, steps=4, delay=0.25, sleep=delays.append)

    assert out.getvalue() == "[====] Done!\n"
    assert delays == [0.25] * 4


def test_progress_bar_without_delay_never_sleeps():
    out = io.StringIO()
    delays = []

    progress_bar(out, steps=3, delay=0.0, sleep=delays.append)

    assert out.getvalue() == "[===] Done!\n"
    assert delays == []
