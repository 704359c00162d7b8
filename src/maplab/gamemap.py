from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List

TILE_COUNT = 10
BLANK_TILE = " "
DEFAULT_ENVIRONMENT = "Empty"
CLONE_SUFFIX = " (Clone)"


class Theme(Enum):
    """Display colour attached to a map and used by the console layer."""

    GREEN = "green"
    DARK_GRAY = "dark_gray"
    GRAY = "gray"
    RED = "red"
    YELLOW = "yellow"
    BLUE = "blue"
    CYAN = "cyan"
    MAGENTA = "magenta"
    WHITE = "white"


@dataclass
class GameMap:
    name: str
    theme: Theme
    environment: str = DEFAULT_ENVIRONMENT
    tiles: List[str] = field(default_factory=lambda: [BLANK_TILE] * TILE_COUNT)

    def __post_init__(self) -> None:
        if len(self.tiles) != TILE_COUNT:
            raise ValueError(f"GameMap needs exactly {TILE_COUNT} tiles, got {len(self.tiles)}.")

    @classmethod
    def create(cls, name: str, theme: Theme) -> "GameMap":
        return cls(name=name, theme=theme)

    def clone(self) -> "GameMap":
        """Return an independent copy; the tile row is never shared."""
        return GameMap(
            name=f"{self.name}{CLONE_SUFFIX}",
            theme=self.theme,
            environment=self.environment,
            tiles=[tile for tile in self.tiles],
        )

    def set_tile(self, index: int, glyph: str) -> None:
        if not 0 <= index < TILE_COUNT:
            raise IndexError(f"Tile index {index} outside 0..{TILE_COUNT - 1} for map '{self.name}'.")
        if len(glyph) != 1:
            raise ValueError(f"Tile glyph must be a single character, got {glyph!r}.")
        self.tiles[index] = glyph

    def fill(self, glyph: str) -> None:
        for index in range(TILE_COUNT):
            self.set_tile(index, glyph)

    def render(self) -> str:
        return f"Map: {self.name} | Sky: {self.environment}\n[{''.join(self.tiles)}]"
