from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Mapping

try:  # Python 3.11+
    import tomllib
except ModuleNotFoundError:  # pragma: no cover - fallback for 3.10
    import tomli as tomllib  # type: ignore[no-redef]

from .gamemap import TILE_COUNT, Theme


def _check_glyph(value: str, what: str) -> None:
    if len(value) != 1:
        raise ValueError(f"{what} must be a single character, got {value!r}.")


def _int_value(value: Any, where: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{where} must be an integer, got {value!r}.")
    return value


def _float_value(value: Any, where: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{where} must be a number, got {value!r}.")
    return float(value)


def _bool_value(value: Any, where: str) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"{where} must be true or false, got {value!r}.")
    return value


def _str_value(value: Any, where: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"{where} must be a string, got {value!r}.")
    return value


@dataclass(frozen=True)
class Placement:
    index: int
    glyph: str

    def __post_init__(self) -> None:
        if not 0 <= self.index < TILE_COUNT:
            raise ValueError(f"Placement index {self.index} outside 0..{TILE_COUNT - 1}.")
        _check_glyph(self.glyph, "Placement glyph")


@dataclass(frozen=True)
class VariantConfig:
    key: str
    label: str
    theme: Theme
    terrain: str
    wall: str
    enemy: Placement
    loot: Placement

    def __post_init__(self) -> None:
        _check_glyph(self.terrain, f"Terrain glyph of variant '{self.key}'")
        _check_glyph(self.wall, f"Wall glyph of variant '{self.key}'")


@dataclass(frozen=True)
class DisplayConfig:
    clone_preview: int = 3
    color: bool = True


@dataclass(frozen=True)
class ProgressConfig:
    steps: int = 10
    delay: float = 0.1


@dataclass(frozen=True)
class Config:
    display: DisplayConfig
    progress: ProgressConfig
    variants: Mapping[str, VariantConfig]


FOREST = VariantConfig(
    key="forest",
    label="Forest",
    theme=Theme.GREEN,
    terrain="w",
    wall="T",
    enemy=Placement(index=5, glyph="W"),
    loot=Placement(index=4, glyph="*"),
)

DUNGEON = VariantConfig(
    key="dungeon",
    label="Dungeon",
    theme=Theme.DARK_GRAY,
    terrain=".",
    wall="#",
    enemy=Placement(index=3, glyph="S"),
    loot=Placement(index=6, glyph="$"),
)


def default_config() -> Config:
    return Config(
        display=DisplayConfig(),
        progress=ProgressConfig(),
        variants={FOREST.key: FOREST, DUNGEON.key: DUNGEON},
    )


def _parse_theme(key: str, value: Any) -> Theme:
    name = _str_value(value, f"variants.{key}.theme").strip().lower().replace("-", "_").replace(" ", "_")
    try:
        return Theme(name)
    except ValueError:
        known = ", ".join(theme.value for theme in Theme)
        raise ValueError(f"Unknown theme '{value}' for variant '{key}' (expected one of: {known}).") from None


def _parse_placement(key: str, field_name: str, raw: Any, base: Placement | None) -> Placement:
    if raw is None:
        if base is None:
            raise ValueError(f"Variant '{key}' is missing its '{field_name}' table.")
        return base
    if not isinstance(raw, Mapping):
        raise ValueError(f"[variants.{key}.{field_name}] must be a table.")
    index = raw.get("index", base.index if base is not None else None)
    glyph = raw.get("glyph", base.glyph if base is not None else None)
    if index is None or glyph is None:
        raise ValueError(f"[variants.{key}.{field_name}] needs both 'index' and 'glyph'.")
    where = f"variants.{key}.{field_name}"
    return Placement(
        index=_int_value(index, f"{where}.index"),
        glyph=_str_value(glyph, f"{where}.glyph"),
    )


def _parse_variant(key: str, raw: Any, base: VariantConfig | None) -> VariantConfig:
    if not isinstance(raw, Mapping):
        raise ValueError(f"[variants.{key}] must be a table.")

    def pick(name: str) -> Any:
        if name in raw:
            return raw[name]
        if base is None:
            raise ValueError(f"Variant '{key}' is missing '{name}'.")
        return getattr(base, name)

    theme_raw = raw.get("theme")
    if theme_raw is None and base is not None:
        theme = base.theme
    elif theme_raw is None:
        raise ValueError(f"Variant '{key}' is missing 'theme'.")
    else:
        theme = _parse_theme(key, theme_raw)

    return VariantConfig(
        key=key,
        label=_str_value(
            raw.get("label", base.label if base is not None else key.capitalize()), f"variants.{key}.label"
        ),
        theme=theme,
        terrain=_str_value(pick("terrain"), f"variants.{key}.terrain"),
        wall=_str_value(pick("wall"), f"variants.{key}.wall"),
        enemy=_parse_placement(key, "enemy", raw.get("enemy"), base.enemy if base is not None else None),
        loot=_parse_placement(key, "loot", raw.get("loot"), base.loot if base is not None else None),
    )


def _parse_display(raw: Any, base: DisplayConfig) -> DisplayConfig:
    if raw is None:
        return base
    if not isinstance(raw, Mapping):
        raise ValueError("[display] must be a table if provided.")
    clone_preview = _int_value(raw.get("clone_preview", base.clone_preview), "display.clone_preview")
    if clone_preview < 0:
        raise ValueError("display.clone_preview must not be negative.")
    color = _bool_value(raw.get("color", base.color), "display.color")
    return DisplayConfig(clone_preview=clone_preview, color=color)


def _parse_progress(raw: Any, base: ProgressConfig) -> ProgressConfig:
    if raw is None:
        return base
    if not isinstance(raw, Mapping):
        raise ValueError("[progress] must be a table if provided.")
    steps = _int_value(raw.get("steps", base.steps), "progress.steps")
    delay = _float_value(raw.get("delay", base.delay), "progress.delay")
    if steps < 0:
        raise ValueError("progress.steps must not be negative.")
    if delay < 0:
        raise ValueError("progress.delay must not be negative.")
    return ProgressConfig(steps=steps, delay=delay)


def parse_config(raw: Mapping[str, Any]) -> Config:
    base = default_config()
    variants: Dict[str, VariantConfig] = dict(base.variants)
    variants_raw = raw.get("variants", {})
    if not isinstance(variants_raw, Mapping):
        raise ValueError("[variants] must be a table if provided.")
    for key, entry in variants_raw.items():
        key = str(key).strip().lower()
        if not key:
            raise ValueError("Variant names must not be empty.")
        variants[key] = _parse_variant(key, entry, variants.get(key))

    return Config(
        display=_parse_display(raw.get("display"), base.display),
        progress=_parse_progress(raw.get("progress"), base.progress),
        variants=variants,
    )


def load_config(path: str | Path) -> Config:
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with config_path.open("rb") as handle:
        raw = tomllib.load(handle)
    return parse_config(raw)


def with_overrides(config: Config, color: bool | None = None, delay: float | None = None) -> Config:
    """Apply command-line overrides on top of a loaded configuration."""
    if color is not None:
        config = replace(config, display=replace(config.display, color=color))
    if delay is not None:
        if delay < 0:
            raise ValueError("Progress delay must not be negative.")
        config = replace(config, progress=replace(config.progress, delay=delay))
    return config
