"""CSV row parsing, numeric coercion and coordinate column resolution."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable

from brails_inventory.common.errors import AssetIdError, AssetTypeError, MissingColumnError
from brails_inventory.common.fs import read_csv_rows
from brails_inventory.common.geometry import transform_to_wgs84
from brails_inventory.common.logging import get_logger, log_warning

_LOGGER = get_logger("csv")


def is_float(value: Any) -> bool:
    if value is None:
        return False
    try:
        float(value)
        return True
    except (TypeError, ValueError):
        return False


def coerce_value(value: Any) -> Any:
    """Convert a CSV cell to int, then float, falling back to the raw text."""
    if not isinstance(value, str):
        return value
    text = value.strip()
    if not text or "_" in text:
        return value
    try:
        return int(text)
    except ValueError:
        pass
    if is_float(text):
        return float(text)
    return value


def coerce_row(row: dict) -> dict:
    # DictReader stores overflow cells under a None key.
    return {key: coerce_value(value) for key, value in row.items() if key is not None}


def find_column(header: Iterable[str], candidates: Iterable[str]) -> str | None:
    wanted = {name.lower() for name in candidates}
    for column in header:
        if column is not None and column.lower() in wanted:
            return column
    return None


def resolve_coordinate_columns(
    header: list[str],
    lat_candidates: Iterable[str],
    lon_candidates: Iterable[str],
) -> tuple[str, str]:
    lat_candidates = tuple(lat_candidates)
    lon_candidates = tuple(lon_candidates)
    lat_key = find_column(header, lat_candidates)
    if lat_key is None:
        names = " or ".join(f"'{name}'" for name in lat_candidates)
        raise MissingColumnError(
            f"The key {names} (case insensitive) not found. Please specify the asset latitude."
        )
    lon_key = find_column(header, lon_candidates)
    if lon_key is None:
        names = " or ".join(f"'{name}'" for name in lon_candidates)
        raise MissingColumnError(
            f"The key {names} (case insensitive) not found. Please specify the asset longitude."
        )
    return lat_key, lon_key


def load_coerced_rows(file_path: Path, logger: logging.Logger | None = None) -> tuple[list[str], list[dict]]:
    header, rows = read_csv_rows(Path(file_path))
    for line_number, row in enumerate(rows, start=2):
        if row.get(None):
            log_warning(
                logger or _LOGGER,
                f"Row {line_number} of {file_path} has {len(row[None])} more cells than the header; extra cells ignored.",
                event="CSV_EXTRA_CELLS",
                source=str(file_path),
            )
    return header, [coerce_row(row) for row in rows]


def next_numeric_id(existing_ids: Iterable[Any]) -> int:
    ids = list(existing_ids)
    if not ids:
        return 1
    non_numeric = [asset_id for asset_id in ids if isinstance(asset_id, bool) or not isinstance(asset_id, (int, float))]
    if non_numeric:
        raise AssetIdError(
            "Cannot assign new ids while keeping the existing inventory: "
            f"existing ids must be numeric, found {non_numeric[0]!r}."
        )
    return int(max(ids)) + 1


def build_point(row: dict, lat_key: str, lon_key: str, source_epsg: int) -> list[list[Any]]:
    """Pop the lat/lon cells from ``row`` and return ``[[lon, lat]]``."""
    lat = row.pop(lat_key)
    lon = row.pop(lon_key)
    if isinstance(lat, (int, float)) and isinstance(lon, (int, float)):
        lon, lat = transform_to_wgs84(lon, lat, source_epsg)
    return [[lon, lat]]


def apply_asset_type(row: dict, default_type: str, allowed_types: Iterable[str], file_path: Path) -> None:
    allowed = tuple(allowed_types)
    if "type" in row:
        if row["type"] not in allowed:
            raise AssetTypeError(
                f"The csv file {file_path} has a 'type' value {row['type']!r}; "
                f"allowed values are {', '.join(allowed)}."
            )
    else:
        row["type"] = default_type


def read_row_id(row: dict, id_column: str, file_path: Path) -> Any:
    if id_column not in row:
        raise MissingColumnError(f"The key '{id_column}' not found in {file_path}")
    asset_id = row[id_column]
    if asset_id is None or asset_id == "":
        raise MissingColumnError(f"A row in {file_path} has no value in the id column '{id_column}'")
    return asset_id
