import json
from pathlib import Path

from brails_inventory.common.constants import CRS84_NAME, PACKAGE_VERSION
from brails_inventory.types.asset import Asset
from brails_inventory.types.asset_inventory import AssetInventory

RING = [[-118.0, 34.0], [-118.0, 34.1], [-118.1, 34.1], [-118.0, 34.0]]


def _inventory() -> AssetInventory:
    inventory = AssetInventory()
    inventory.add_asset(1, Asset(1, [[-118.0, 34.0]], {"stories": 3, "type": "building"}))
    inventory.add_asset(2, Asset(2, [[-118.0, 34.0], [-118.1, 34.1]], {"spans": 2}))
    inventory.add_asset(3, Asset(3, RING, {"roof": "hip"}))
    inventory.add_asset(4, Asset(4, []))
    return inventory


def test_geojson_top_level_block():
    geojson = _inventory().get_geojson()

    assert geojson["type"] == "FeatureCollection"
    assert geojson["brails_version"] == PACKAGE_VERSION
    assert geojson["crs"] == {"type": "name", "properties": {"name": CRS84_NAME}}
    assert isinstance(geojson["generated"], str)
    assert len(geojson["features"]) == 4


def test_geojson_geometry_by_coordinate_count():
    features = _inventory().get_geojson()["features"]

    assert features[0]["geometry"] == {"type": "Point", "coordinates": [[-118.0, 34.0]]}
    assert features[1]["geometry"] == {"type": "LineString", "coordinates": [[-118.0, 34.0], [-118.1, 34.1]]}
    assert features[2]["geometry"] == {"type": "Polygon", "coordinates": [RING]}
    assert features[3]["geometry"] == {"type": "Polygon", "coordinates": [[]]}


def test_geojson_properties_are_feature_maps_verbatim():
    features = _inventory().get_geojson()["features"]

    assert [feature["type"] for feature in features] == ["Feature"] * 4
    assert features[0]["properties"] == {"stories": 3, "type": "building"}
    assert features[2]["properties"] == {"roof": "hip"}
    assert features[3]["properties"] == {}


def test_write_to_geojson_writes_indented_file(tmp_path: Path):
    out_path = tmp_path / "out" / "inventory.geojson"

    geojson = _inventory().write_to_geojson(out_path)

    text = out_path.read_text(encoding="utf-8")
    assert text.startswith('{\n  "type": "FeatureCollection"')
    assert json.loads(text) == geojson


def test_write_to_geojson_without_path_only_returns(tmp_path: Path):
    geojson = _inventory().write_to_geojson()

    assert geojson["type"] == "FeatureCollection"
    assert list(tmp_path.iterdir()) == []
