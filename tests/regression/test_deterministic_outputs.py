import json
from pathlib import Path

import pytest

from brails_inventory.types.asset_inventory import AssetInventory


def _features_for(csv_path: Path, out_path: Path) -> list[dict]:
    inventory = AssetInventory()
    inventory.read_from_csv(csv_path, keep_existing=False, id_column="id")
    inventory.get_random_sample(3, seed="stable").write_to_geojson(out_path)
    return json.loads(out_path.read_text(encoding="utf-8"))["features"]


@pytest.mark.regression
def test_seeded_sample_geojson_is_stable_across_runs(tmp_path: Path):
    csv_path = tmp_path / "assets.csv"
    rows = "\n".join(f"{idx},{34 + idx / 100},{-118 - idx / 100},{idx % 4}" for idx in range(1, 21))
    csv_path.write_text(f"id,lat,lon,stories\n{rows}\n", encoding="utf-8")

    first = _features_for(csv_path, tmp_path / "first.geojson")
    second = _features_for(csv_path, tmp_path / "second.geojson")

    assert first == second
