"""Minimal strict schemas for YAML config validation."""

from __future__ import annotations

from brails_inventory.common.errors import ConfigError


def _assert_required_keys(obj: dict, required: set[str], ctx: str) -> None:
    if not isinstance(obj, dict):
        raise ConfigError(f"{ctx} must be a mapping")
    missing = required - set(obj)
    if missing:
        missing_str = ", ".join(sorted(missing))
        raise ConfigError(f"Missing keys in {ctx}: {missing_str}")


def _assert_no_unknown_keys(obj: dict, known: set[str], ctx: str, allow_unknown: bool) -> None:
    if allow_unknown:
        return
    unknown = set(obj) - known
    if unknown:
        unknown_str = ", ".join(sorted(unknown))
        raise ConfigError(f"Unknown keys in {ctx}: {unknown_str}")


def _assert_non_empty_list(value, ctx: str) -> None:
    if not isinstance(value, list) or not value:
        raise ConfigError(f"{ctx} must be a non-empty list")


def validate_inventory_config(cfg: dict, *, allow_unknown: bool = False) -> dict:
    top_required = {"fields", "asset_types", "crs", "output"}
    _assert_required_keys(cfg, top_required, "inventory config")
    _assert_no_unknown_keys(cfg, top_required, "inventory config", allow_unknown)

    _assert_required_keys(cfg["fields"], {"lat_candidates", "lon_candidates"}, "fields")
    _assert_non_empty_list(cfg["fields"]["lat_candidates"], "fields.lat_candidates")
    _assert_non_empty_list(cfg["fields"]["lon_candidates"], "fields.lon_candidates")

    _assert_required_keys(cfg["asset_types"], {"allowed", "default"}, "asset_types")
    _assert_non_empty_list(cfg["asset_types"]["allowed"], "asset_types.allowed")
    if cfg["asset_types"]["default"] not in cfg["asset_types"]["allowed"]:
        raise ConfigError("asset_types.default must be one of asset_types.allowed")

    _assert_required_keys(cfg["crs"], {"default_epsg"}, "crs")
    if not isinstance(cfg["crs"]["default_epsg"], int):
        raise ConfigError("crs.default_epsg must be an integer EPSG code")

    _assert_required_keys(cfg["output"], {"geojson_indent"}, "output")

    return cfg
