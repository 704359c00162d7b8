from __future__ import annotations

import logging
from typing import Optional

from .config import DUNGEON, FOREST, VariantConfig
from .gamemap import TILE_COUNT, GameMap

logger = logging.getLogger(__name__)


class MapBuilder:
    """Builds a :class:`GameMap` step by step from a variant table entry.

    The builder owns one map at a time. ``reset`` replaces it wholesale and
    ``get_map`` hands out the reference, not a copy. The canonical layout is
    reached by calling reset, terrain, walls, enemies and loot in that order;
    later steps overwrite cells written by earlier ones.
    """

    def __init__(self, variant: VariantConfig) -> None:
        self._variant = variant
        self._map = GameMap.create(variant.label, variant.theme)

    @property
    def variant(self) -> VariantConfig:
        return self._variant

    def reset(self) -> None:
        self._map = GameMap.create(self._variant.label, self._variant.theme)
        logger.debug("Reset %s builder", self._variant.key)

    def build_terrain(self) -> None:
        self._map.fill(self._variant.terrain)
        logger.debug("Filled %s terrain with %r", self._variant.key, self._variant.terrain)

    def build_walls(self) -> None:
        self._map.set_tile(0, self._variant.wall)
        self._map.set_tile(TILE_COUNT - 1, self._variant.wall)

    def build_enemies(self) -> None:
        enemy = self._variant.enemy
        self._map.set_tile(enemy.index, enemy.glyph)

    def build_loot(self) -> None:
        loot = self._variant.loot
        self._map.set_tile(loot.index, loot.glyph)

    def get_map(self) -> GameMap:
        return self._map


class ForestBuilder(MapBuilder):
    def __init__(self) -> None:
        super().__init__(FOREST)


class DungeonBuilder(MapBuilder):
    def __init__(self) -> None:
        super().__init__(DUNGEON)


def _run_steps(builder: MapBuilder) -> None:
    builder.reset()
    builder.build_terrain()
    builder.build_walls()
    builder.build_enemies()
    builder.build_loot()
    logger.debug("Constructed %s map: %s", builder.variant.key, "".join(builder.get_map().tiles))


class Director:
    def __init__(self, builder: Optional[MapBuilder] = None) -> None:
        self._builder = builder

    def set_builder(self, builder: MapBuilder) -> None:
        self._builder = builder

    def construct_full_map(self) -> None:
        if self._builder is None:
            raise RuntimeError("Director has no builder; call set_builder() first.")
        _run_steps(self._builder)

    @staticmethod
    def construct(variant: VariantConfig) -> GameMap:
        """Build a complete map for ``variant`` on a throwaway builder."""
        builder = MapBuilder(variant)
        _run_steps(builder)
        return builder.get_map()
