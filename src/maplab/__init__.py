"""Builder and prototype demonstration over small themed tile maps."""

from .builder import Director, DungeonBuilder, ForestBuilder, MapBuilder
from .config import Config, VariantConfig, default_config, load_config
from .gamemap import TILE_COUNT, GameMap, Theme
from .session import NoOriginalError, Session, UnknownVariantError

__all__ = [
    "Config",
    "Director",
    "DungeonBuilder",
    "ForestBuilder",
    "GameMap",
    "MapBuilder",
    "NoOriginalError",
    "Session",
    "TILE_COUNT",
    "Theme",
    "UnknownVariantError",
    "VariantConfig",
    "default_config",
    "load_config",
]
