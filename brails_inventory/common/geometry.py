"""Coordinate validation and GeoJSON geometry helpers."""

from __future__ import annotations

from functools import lru_cache
from typing import Any

import numpy as np
from pyproj import CRS, Transformer
from pyproj.exceptions import CRSError

from brails_inventory.common.constants import WGS84_EPSG
from brails_inventory.common.errors import CrsError


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _valid_lat_lon(lat: float, lon: float) -> bool:
    return -90 <= lat <= 90 and -180 <= lon <= 180


def validate_coordinates(coordinates: Any) -> tuple[bool, str]:
    """Check a ``[[lon1, lat1], ..., [lonN, latN]]`` list.

    Returns a pass/fail flag and a message describing the first problem
    found. The list as a whole is rejected if any pair is malformed.
    """
    if not isinstance(coordinates, (list, tuple)):
        return False, "Coordinates must be a list of [longitude, latitude] pairs."
    if not coordinates:
        return True, "Coordinates input is an empty list."

    for idx, pair in enumerate(coordinates):
        if not isinstance(pair, (list, tuple)) or len(pair) != 2:
            return False, f"Coordinate entry {idx} is not a [longitude, latitude] pair."
        lon, lat = pair
        if not (_is_number(lon) and _is_number(lat)):
            return False, f"Coordinate entry {idx} contains non-numeric values."
        if not _valid_lat_lon(lat, lon):
            return False, (
                f"Coordinate entry {idx} ({lon}, {lat}) is outside longitude "
                "[-180, 180] or latitude [-90, 90]."
            )

    return True, "Coordinates input is valid."


def geometry_from_coordinates(coordinates: list[list[float]]) -> dict:
    if len(coordinates) == 1:
        return {"type": "Point", "coordinates": [list(coordinates[0])]}
    if len(coordinates) == 2:
        return {"type": "LineString", "coordinates": [list(pair) for pair in coordinates]}
    return {"type": "Polygon", "coordinates": [[list(pair) for pair in coordinates]]}


def ring_from_geometry(geometry: dict) -> list[list[float]]:
    coordinates = geometry.get("coordinates") or []
    if geometry.get("type") == "Polygon":
        return coordinates[0] if coordinates else []
    return coordinates


def centroid(coordinates: list[list[float]]) -> tuple[float, float]:
    """Mean latitude and longitude of a coordinate list, NaN when empty."""
    if not coordinates:
        return float("nan"), float("nan")
    values = np.asarray(coordinates, dtype=float)
    return float(values[:, 1].mean()), float(values[:, 0].mean())


@lru_cache(maxsize=None)
def _transformer_to_wgs84(source_epsg: int) -> Transformer:
    try:
        return Transformer.from_crs(CRS.from_epsg(source_epsg), CRS.from_epsg(WGS84_EPSG), always_xy=True)
    except CRSError as exc:
        raise CrsError(f"Cannot transform from EPSG:{source_epsg} to WGS84: {exc}") from exc


def transform_to_wgs84(x: float, y: float, source_epsg: int) -> tuple[float, float]:
    """Return ``(lon, lat)`` in WGS84 for an ``(x, y)`` pair in ``source_epsg``."""
    if source_epsg == WGS84_EPSG:
        return x, y
    lon, lat = _transformer_to_wgs84(source_epsg).transform(x, y)
    return float(lon), float(lat)
