"""Single asset record: identifier, geometry and feature attributes."""

from __future__ import annotations

import copy
import logging
from typing import Union

from brails_inventory.common.geometry import validate_coordinates
from brails_inventory.common.logging import get_logger, log_warning

FeatureValue = Union[int, float, str, list["FeatureValue"]]
AssetId = Union[str, int]

_LOGGER = get_logger("asset")


class Asset:
    """A physical asset (building, bridge) with its coordinates and features.

    Coordinates are ``[[lon1, lat1], ..., [lonN, latN]]``. Invalid
    coordinates do not abort construction: they are logged and replaced by
    an empty list, so callers detect bad geometry by checking emptiness.
    """

    def __init__(
        self,
        asset_id: AssetId,
        coordinates: list[list[float]],
        features: dict[str, FeatureValue] | None = None,
        logger: logging.Logger | None = None,
    ):
        self.asset_id = asset_id
        self._logger = logger or _LOGGER

        coords_ok, message = validate_coordinates(coordinates)
        if coords_ok:
            self.coordinates = [list(pair) for pair in coordinates]
        else:
            log_warning(
                self._logger,
                f"{message} Setting coordinates for asset {asset_id} to an empty list.",
                event="INVALID_COORDINATES",
                asset_id=asset_id,
            )
            self.coordinates = []

        self.features: dict[str, FeatureValue] = features if features is not None else {}

    def add_features(self, additional_features: dict[str, FeatureValue], overwrite: bool = True) -> bool:
        if overwrite:
            self.features.update(additional_features)
        else:
            for key, value in additional_features.items():
                self.features.setdefault(key, value)
        return True

    def copy(self) -> "Asset":
        clone = Asset.__new__(Asset)
        clone.asset_id = self.asset_id
        clone._logger = self._logger
        clone.coordinates = copy.deepcopy(self.coordinates)
        clone.features = copy.deepcopy(self.features)
        return clone

    def print_info(self) -> None:
        print("\t Coordinates: ", self.coordinates)
        print("\t Features: ", self.features)

    def __repr__(self) -> str:
        return f"Asset(asset_id={self.asset_id!r}, coordinates={self.coordinates!r}, features={self.features!r})"
