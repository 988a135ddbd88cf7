"""Abstract interface for filling in missing asset features."""

from __future__ import annotations

from abc import ABC, abstractmethod

from brails_inventory.types.asset_inventory import AssetInventory


class Imputation(ABC):
    """Fills in missing features of an inventory in place."""

    @abstractmethod
    def impute(self, inventory: AssetInventory) -> AssetInventory:
        """Impute missing features and return the same inventory."""
        raise NotImplementedError
