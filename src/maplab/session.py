from __future__ import annotations

import logging
from typing import List, Mapping, Optional, Sequence, Tuple

from .builder import Director
from .config import VariantConfig
from .gamemap import GameMap

logger = logging.getLogger(__name__)

MODIFIED_NAME = "DESTROYED MAP"
MODIFIED_INDEX = 5
MODIFIED_GLYPH = "X"


class NoOriginalError(RuntimeError):
    pass


class UnknownVariantError(KeyError):
    pass


class Session:
    """The current original map and the clones taken from it.

    Clones belong to one generation of the original: every build replaces
    the original and clears the history, even when the same variant is
    rebuilt.
    """

    def __init__(self, variants: Mapping[str, VariantConfig]) -> None:
        self._variants = dict(variants)
        self.original: Optional[GameMap] = None
        self.clones: List[GameMap] = []

    @property
    def variants(self) -> Mapping[str, VariantConfig]:
        return self._variants

    def build(self, variant: str) -> GameMap:
        config = self._variants.get(variant)
        if config is None:
            raise UnknownVariantError(f"Unknown map variant '{variant}'.")
        self.original = Director.construct(config)
        self.clones = []
        logger.debug("Built new original '%s'", self.original.name)
        return self.original

    def clone(self) -> GameMap:
        original = self._require_original("clone")
        copy = original.clone()
        self.clones.append(copy)
        logger.debug("Cloned '%s' (%d clones)", original.name, len(self.clones))
        return copy

    def modify_original(self) -> GameMap:
        original = self._require_original("modify")
        original.set_tile(MODIFIED_INDEX, MODIFIED_GLYPH)
        original.name = MODIFIED_NAME
        logger.debug("Modified original in place")
        return original

    def recent_clones(self, limit: int) -> Sequence[Tuple[int, GameMap]]:
        """Return up to ``limit`` newest clones with their 1-based history number."""
        if limit <= 0:
            return ()
        start = max(0, len(self.clones) - limit)
        return tuple((number, clone) for number, clone in enumerate(self.clones[start:], start=start + 1))

    def _require_original(self, action: str) -> GameMap:
        if self.original is None:
            raise NoOriginalError(f"Cannot {action}: no map has been built yet.")
        return self.original
