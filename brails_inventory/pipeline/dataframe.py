"""Tabular views of an inventory, including possible-world expansion."""

from __future__ import annotations

from typing import Any, Iterable

import pandas as pd

from brails_inventory.common.constants import INDEX_COLUMN, TYPE_FEATURE
from brails_inventory.common.errors import PossibleWorldsError
from brails_inventory.common.geometry import centroid, geometry_from_coordinates, ring_from_geometry


def _vector_columns(rows: list[dict], forced: Iterable[str]) -> list[str]:
    columns: dict[str, None] = {}
    for row in rows:
        for key, value in row.items():
            if isinstance(value, list):
                columns[key] = None
    for key in forced:
        columns[key] = None
    columns.pop(INDEX_COLUMN, None)
    columns.pop(TYPE_FEATURE, None)
    return list(columns)


def expand_possible_worlds(
    rows: list[dict],
    n_possible_worlds: int,
    features_possible_worlds: Iterable[str] = (),
) -> list[dict]:
    """Flatten per-world features into ``<feature>_<world>`` columns.

    List values must hold exactly ``n_possible_worlds`` realizations. Scalars
    in a per-world column are repeated in every world; a one-element list is
    a mismatch, not a scalar.
    """
    vector_columns = _vector_columns(rows, features_possible_worlds)

    flat_rows = []
    for entry in rows:
        row = {key: value for key, value in entry.items() if key not in vector_columns}
        for key in vector_columns:
            value = entry.get(key)
            if isinstance(value, list):
                if len(value) != n_possible_worlds:
                    raise PossibleWorldsError(
                        f"The specified number of possible worlds is {n_possible_worlds} but feature "
                        f"'{key}' of asset {entry.get(INDEX_COLUMN)!r} contains {len(value)} realizations."
                    )
                for world in range(n_possible_worlds):
                    row[f"{key}_{world + 1}"] = value[world]
            else:
                for world in range(n_possible_worlds):
                    row[f"{key}_{world + 1}"] = value
        flat_rows.append(row)
    return flat_rows


def build_properties_frame(
    rows: list[dict],
    n_possible_worlds: int = 1,
    features_possible_worlds: Iterable[str] = (),
) -> pd.DataFrame:
    if n_possible_worlds < 1:
        raise PossibleWorldsError(f"Number of possible worlds must be at least 1, got {n_possible_worlds}.")
    if n_possible_worlds > 1:
        rows = expand_possible_worlds(rows, n_possible_worlds, features_possible_worlds)

    frame = pd.DataFrame(rows) if rows else pd.DataFrame(columns=[INDEX_COLUMN])
    frame = frame.drop(columns=[TYPE_FEATURE], errors="ignore")
    return frame.set_index(INDEX_COLUMN)


def build_geometry_frame(items: list[tuple[Any, list[list[float]]]]) -> pd.DataFrame:
    lat_values = []
    lon_values = []
    for _asset_id, coordinates in items:
        ring = ring_from_geometry(geometry_from_coordinates(coordinates))
        lat, lon = centroid(ring)
        lat_values.append(lat)
        lon_values.append(lon)

    frame = pd.DataFrame(
        {
            "Lat": pd.Series(lat_values, dtype=float),
            "Lon": pd.Series(lon_values, dtype=float),
            INDEX_COLUMN: [asset_id for asset_id, _coordinates in items],
        }
    )
    return frame.set_index(INDEX_COLUMN)
