from pathlib import Path

import pytest

from brails_inventory.types.asset_inventory import AssetInventory


@pytest.mark.integration
def test_csv_to_dataframe_with_possible_worlds(tmp_path: Path):
    csv_path = tmp_path / "assets.csv"
    csv_path.write_text("id,lat,lon,stories,type\n1,34.0,-118.0,3,building\n2,34.1,-118.1,2,bridge\n", encoding="utf-8")
    inventory = AssetInventory()
    inventory.read_from_csv(csv_path, keep_existing=False, id_column="id")

    inventory.add_asset_features(1, {"height": [10.0, 12.0]})
    inventory.add_asset_features(2, {"height": [7.0, 7.5]})

    properties, geometry, count = inventory.get_dataframe(n_possible_worlds=2)

    assert count == 2
    assert list(properties.index) == [1, 2]
    assert properties.loc[1, "height_2"] == 12.0
    assert properties.loc[2, "height_1"] == 7.0
    assert properties.loc[2, "stories"] == 2
    assert geometry.loc[2, "Lat"] == pytest.approx(34.1)
    assert properties.join(geometry).shape[0] == 2


@pytest.mark.integration
def test_sample_then_export_geojson(tmp_path: Path):
    csv_path = tmp_path / "assets.csv"
    rows = "\n".join(f"{34 + idx / 10},{-118 - idx / 10}" for idx in range(10))
    csv_path.write_text(f"lat,lon\n{rows}\n", encoding="utf-8")
    inventory = AssetInventory()
    inventory.read_from_csv(csv_path, keep_existing=False)

    sample = inventory.get_random_sample(4, seed=11)
    geojson = sample.write_to_geojson(tmp_path / "sample.geojson")

    assert len(geojson["features"]) == 4
    assert all(feature["geometry"]["type"] == "Point" for feature in geojson["features"])
    assert all(feature["properties"]["type"] == "building" for feature in geojson["features"])
