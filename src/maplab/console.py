from __future__ import annotations

import time
from typing import Callable, TextIO

from .gamemap import GameMap, Theme

RESET = "\033[0m"

THEME_CODES = {
    Theme.GREEN: "\033[92m",
    Theme.DARK_GRAY: "\033[90m",
    Theme.GRAY: "\033[37m",
    Theme.RED: "\033[91m",
    Theme.YELLOW: "\033[93m",
    Theme.BLUE: "\033[94m",
    Theme.CYAN: "\033[96m",
    Theme.MAGENTA: "\033[95m",
    Theme.WHITE: "\033[97m",
}


def colorize(text: str, theme: Theme, enabled: bool = True) -> str:
    if not enabled:
        return text
    return f"{THEME_CODES[theme]}{text}{RESET}"


def show_map(game_map: GameMap, out: TextIO, color: bool = True, prefix: str = "") -> None:
    out.write(prefix + colorize(game_map.render(), game_map.theme, color) + "\n")


def progress_bar(
    out: TextIO,
    steps: int,
    delay: float,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """Draw a fixed-length bar one tick at a time. Purely cosmetic."""
    out.write("[")
    out.flush()
    for _ in range(steps):
        if delay > 0:
            sleep(delay)
        out.write("=")
        out.flush()
    out.write("] Done!\n")
