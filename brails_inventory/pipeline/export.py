"""GeoJSON FeatureCollection export."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from brails_inventory.common.constants import CRS84_NAME, GEOJSON_INDENT, PACKAGE_VERSION
from brails_inventory.common.fs import write_json
from brails_inventory.common.geometry import geometry_from_coordinates
from brails_inventory.common.time_utils import utc_timestamp_iso


def build_feature(coordinates: list[list[float]], properties: dict) -> dict:
    return {
        "type": "Feature",
        "properties": properties,
        "geometry": geometry_from_coordinates(coordinates),
    }


def build_feature_collection(assets: Iterable) -> dict:
    # Properties are not normalised across assets; heterogeneous keys pass through.
    return {
        "type": "FeatureCollection",
        "generated": utc_timestamp_iso(),
        "brails_version": PACKAGE_VERSION,
        "crs": {"type": "name", "properties": {"name": CRS84_NAME}},
        "features": [build_feature(asset.coordinates, asset.features) for asset in assets],
    }


def write_geojson(path: Path, geojson: dict, indent: int = GEOJSON_INDENT) -> Path:
    write_json(path, geojson, indent=indent)
    return path
