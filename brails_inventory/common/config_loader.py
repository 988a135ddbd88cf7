"""Configuration loading and validation."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from brails_inventory.common.constants import (
    DEFAULT_ASSET_TYPE,
    DEFAULT_ASSET_TYPES,
    DEFAULT_LAT_CANDIDATES,
    DEFAULT_LON_CANDIDATES,
    GEOJSON_INDENT,
    WGS84_EPSG,
)
from brails_inventory.common.errors import ConfigError
from brails_inventory.common.fs import read_yaml
from brails_inventory.common.schema import validate_inventory_config

CONFIG_FILENAME = "inventory.yml"


@dataclass(frozen=True)
class InventoryConfig:
    lat_candidates: tuple[str, ...] = DEFAULT_LAT_CANDIDATES
    lon_candidates: tuple[str, ...] = DEFAULT_LON_CANDIDATES
    allowed_types: tuple[str, ...] = DEFAULT_ASSET_TYPES
    default_type: str = DEFAULT_ASSET_TYPE
    default_epsg: int = WGS84_EPSG
    geojson_indent: int = GEOJSON_INDENT

    @classmethod
    def from_dict(cls, cfg: dict) -> "InventoryConfig":
        return cls(
            lat_candidates=tuple(str(name).lower() for name in cfg["fields"]["lat_candidates"]),
            lon_candidates=tuple(str(name).lower() for name in cfg["fields"]["lon_candidates"]),
            allowed_types=tuple(cfg["asset_types"]["allowed"]),
            default_type=cfg["asset_types"]["default"],
            default_epsg=int(cfg["crs"]["default_epsg"]),
            geojson_indent=int(cfg["output"]["geojson_indent"]),
        )


def _deep_merge(base: Any, overlay: Any) -> Any:
    if isinstance(base, dict) and isinstance(overlay, dict):
        merged = dict(base)
        for key, value in overlay.items():
            if key in merged:
                merged[key] = _deep_merge(merged[key], value)
            else:
                merged[key] = value
        return merged
    return overlay


def _load_yaml_with_overlay(path: Path, overlay_path: Path | None) -> dict:
    if not path.exists():
        raise ConfigError(f"Missing config file: {path}")
    base = read_yaml(path)
    if overlay_path is None or not overlay_path.exists():
        return base
    overlay = read_yaml(overlay_path)
    return _deep_merge(base, overlay)


def default_inventory_config() -> InventoryConfig:
    return InventoryConfig()


def load_inventory_config(
    config_dir: Path,
    *,
    allow_unknown: bool = False,
    overlay_config_dir: Path | None = None,
) -> InventoryConfig:
    overlay_path = None
    if overlay_config_dir is not None:
        overlay_path = overlay_config_dir / CONFIG_FILENAME
    cfg = _load_yaml_with_overlay(config_dir / CONFIG_FILENAME, overlay_path)
    return InventoryConfig.from_dict(validate_inventory_config(cfg, allow_unknown=allow_unknown))
