import pytest

from brails_inventory.imputers.imputation import Imputation
from brails_inventory.types.asset import Asset
from brails_inventory.types.asset_inventory import AssetInventory


class _FillStories(Imputation):
    def impute(self, inventory: AssetInventory) -> AssetInventory:
        for asset_id in inventory.get_asset_ids():
            inventory.add_asset_features(asset_id, {"stories": 1}, overwrite=False)
        return inventory


def test_imputation_is_abstract():
    with pytest.raises(TypeError):
        Imputation()


def test_imputation_mutates_features_in_place():
    inventory = AssetInventory()
    inventory.add_asset(1, Asset(1, [[-118.0, 34.0]], {"stories": 4}))
    inventory.add_asset(2, Asset(2, [[-118.1, 34.1]]))

    result = _FillStories().impute(inventory)

    assert result is inventory
    assert inventory.get_asset_features(1) == (True, {"stories": 4})
    assert inventory.get_asset_features(2) == (True, {"stories": 1})
