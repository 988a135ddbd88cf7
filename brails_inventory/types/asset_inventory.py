"""In-memory collection of assets keyed by asset id, with format conversions."""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Iterable

import pandas as pd

from brails_inventory.common.config_loader import InventoryConfig, default_inventory_config
from brails_inventory.common.errors import AssetNotFoundError, SampleSizeError
from brails_inventory.common.logging import get_logger, log_event, log_warning
from brails_inventory.pipeline.csv_ingest import (
    apply_asset_type,
    build_point,
    load_coerced_rows,
    next_numeric_id,
    read_row_id,
    resolve_coordinate_columns,
)
from brails_inventory.pipeline.dataframe import build_geometry_frame, build_properties_frame
from brails_inventory.pipeline.export import build_feature_collection, write_geojson
from brails_inventory.types.asset import Asset, AssetId, FeatureValue

_LOGGER = get_logger("inventory")


class AssetInventory:
    """Assets stored in a dict keyed by asset id.

    Insertion never overwrites: adding an existing id returns ``False`` and
    logs a warning. Removing a missing id raises ``AssetNotFoundError``.
    """

    def __init__(self, logger: logging.Logger | None = None, config: InventoryConfig | None = None):
        self.inventory: dict[AssetId, Asset] = {}
        self.logger = logger or _LOGGER
        self.config = config or default_inventory_config()

    def __len__(self) -> int:
        return len(self.inventory)

    def __contains__(self, asset_id: object) -> bool:
        return asset_id in self.inventory

    def print_info(self) -> None:
        print(self.__class__.__name__)
        print("Inventory stored in: ", self.inventory.__class__.__name__)
        for key, asset in self.inventory.items():
            print("Key: ", key, "Asset:")
            asset.print_info()

    def add_asset(self, asset_id: AssetId, asset: Asset) -> bool:
        if asset_id in self.inventory:
            log_warning(
                self.logger,
                f"Asset with id {asset_id} already exists. Asset was not added",
                event="DUPLICATE_ASSET_ID",
                asset_id=asset_id,
            )
            return False

        self.inventory[asset_id] = asset
        return True

    def add_asset_coordinates(self, asset_id: AssetId, coordinates: list[list[float]]) -> bool:
        if asset_id in self.inventory:
            log_warning(
                self.logger,
                f"Asset with id {asset_id} already exists. Coordinates were not added",
                event="DUPLICATE_ASSET_ID",
                asset_id=asset_id,
            )
            return False

        return self.add_asset(asset_id, Asset(asset_id, coordinates, logger=self.logger))

    def add_asset_features(
        self,
        asset_id: AssetId,
        new_features: dict[str, FeatureValue],
        overwrite: bool = True,
    ) -> bool:
        asset = self.inventory.get(asset_id)
        if asset is None:
            log_warning(
                self.logger,
                f"No existing Asset with id {asset_id} found. Asset features not added.",
                event="ASSET_NOT_FOUND",
                asset_id=asset_id,
            )
            return False

        return asset.add_features(new_features, overwrite)

    def remove_asset(self, asset_id: AssetId) -> bool:
        if asset_id not in self.inventory:
            raise AssetNotFoundError(f"No asset with id {asset_id!r} in the inventory")
        del self.inventory[asset_id]
        return True

    def get_asset_features(self, asset_id: AssetId) -> tuple[bool, dict]:
        asset = self.inventory.get(asset_id)
        if asset is None:
            return False, {}
        return True, asset.features

    def get_asset_coordinates(self, asset_id: AssetId) -> tuple[bool, list]:
        asset = self.inventory.get(asset_id)
        if asset is None:
            return False, []
        return True, asset.coordinates

    def get_asset_ids(self) -> list[AssetId]:
        return list(self.inventory.keys())

    def get_random_sample(
        self,
        nsamples: int,
        seed: int | float | str | bytes | bytearray | None = None,
    ) -> "AssetInventory":
        """Return a new inventory holding copies of ``nsamples`` random assets.

        The same ``seed`` over the same inventory always selects the same ids.
        The global ``random`` state is left untouched.
        """
        if nsamples < 0 or nsamples > len(self.inventory):
            raise SampleSizeError(
                f"Cannot sample {nsamples} assets from an inventory of {len(self.inventory)}"
            )

        rng = random.Random(seed)
        result = AssetInventory(logger=self.logger, config=self.config)
        for key in rng.sample(list(self.inventory.keys()), nsamples):
            result.add_asset(key, self.inventory[key].copy())
        return result

    def get_coordinates(self) -> tuple[list[list[list[float]]], list[AssetId]]:
        result_coordinates = []
        result_keys = []
        for key, asset in self.inventory.items():
            result_coordinates.append(asset.coordinates)
            result_keys.append(key)
        return result_coordinates, result_keys

    def get_geojson(self) -> dict:
        return build_feature_collection(self.inventory.values())

    def write_to_geojson(self, output_file: str | Path = "") -> dict:
        geojson = self.get_geojson()
        if output_file:
            write_geojson(Path(output_file), geojson, indent=self.config.geojson_indent)
            log_event(
                self.logger,
                f"wrote {len(geojson['features'])} assets to {output_file}",
                event="GEOJSON_WRITTEN",
                source=str(output_file),
                rows_out=len(geojson["features"]),
            )
        return geojson

    def read_from_csv(
        self,
        file_path: str | Path,
        keep_existing: bool,
        str_type: str | None = None,
        id_column: str | None = None,
        source_epsg: int | None = None,
    ) -> bool:
        """Load assets from a CSV table with a latitude and a longitude column.

        Every row becomes a single-point asset. Cells are converted to int or
        float where possible. Rows already inserted stay inserted if a later
        row fails.
        """
        file_path = Path(file_path)
        str_type = str_type or self.config.default_type
        epsg = source_epsg if source_epsg is not None else self.config.default_epsg

        if keep_existing:
            id_counter = next_numeric_id(self.inventory.keys()) if id_column is None else 1
        else:
            self.inventory = {}
            id_counter = 1

        header, rows = load_coerced_rows(file_path, self.logger)
        lat_key, lon_key = resolve_coordinate_columns(
            header, self.config.lat_candidates, self.config.lon_candidates
        )

        added = 0
        for features in rows:
            coordinates = build_point(features, lat_key, lon_key, epsg)
            apply_asset_type(features, str_type, self.config.allowed_types, file_path)

            if id_column is None:
                asset_id = id_counter
            else:
                asset_id = read_row_id(features, id_column, file_path)

            asset = Asset(asset_id, coordinates, features, logger=self.logger)
            if self.add_asset(asset_id, asset):
                added += 1
            id_counter += 1

        log_event(
            self.logger,
            f"read {added} assets from {file_path}",
            event="CSV_READ",
            source=str(file_path),
            rows_in=len(rows),
            rows_out=added,
        )
        return True

    def add_asset_features_from_csv(self, file_path: str | Path, id_column: str) -> bool:
        file_path = Path(file_path)
        _header, rows = load_coerced_rows(file_path, self.logger)

        updated = 0
        for features in rows:
            asset_id = read_row_id(features, id_column, file_path)
            if self.add_asset_features(asset_id, features):
                updated += 1

        log_event(
            self.logger,
            f"updated features of {updated} assets from {file_path}",
            event="CSV_FEATURES_READ",
            source=str(file_path),
            rows_in=len(rows),
            rows_out=updated,
        )
        return True

    def get_dataframe(
        self,
        n_possible_worlds: int = 1,
        features_possible_worlds: Iterable[str] | None = None,
    ) -> tuple[pd.DataFrame, pd.DataFrame, int]:
        """Return ``(properties, geometry, count)`` frames indexed by asset id.

        With more than one possible world, list-valued features expand to
        ``<feature>_1 .. <feature>_n`` and scalars in those columns are
        repeated per world. The ``type`` feature is never included.
        """
        rows = [asset.features | {"index": asset_id} for asset_id, asset in self.inventory.items()]
        properties = build_properties_frame(rows, n_possible_worlds, features_possible_worlds or ())
        geometry = build_geometry_frame(
            [(asset_id, asset.coordinates) for asset_id, asset in self.inventory.items()]
        )
        return properties, geometry, len(rows)
