import math

from pyproj import Transformer

from brails_inventory.common.geometry import (
    centroid,
    geometry_from_coordinates,
    ring_from_geometry,
    transform_to_wgs84,
    validate_coordinates,
)


def test_validate_coordinates_accepts_pairs_and_empty():
    assert validate_coordinates([[-118.0, 34.0], [-118.1, 34.1]])[0] is True
    assert validate_coordinates([])[0] is True


def test_validate_coordinates_reports_first_problem():
    ok, message = validate_coordinates([[-118.0, 34.0], [-118.0, 95.0]])
    assert ok is False
    assert "entry 1" in message

    assert validate_coordinates(None)[0] is False
    assert validate_coordinates([[-118.0, 34.0, 5.0]])[0] is False
    assert validate_coordinates([[True, 34.0]])[0] is False


def test_geometry_from_coordinates_and_ring():
    point = geometry_from_coordinates([[1.0, 2.0]])
    polygon = geometry_from_coordinates([[0.0, 0.0], [0.0, 1.0], [1.0, 1.0]])

    assert point["type"] == "Point"
    assert ring_from_geometry(point) == [[1.0, 2.0]]
    assert ring_from_geometry(polygon) == [[0.0, 0.0], [0.0, 1.0], [1.0, 1.0]]


def test_centroid_returns_lat_lon_means():
    lat, lon = centroid([[0.0, 0.0], [2.0, 4.0]])
    assert (lat, lon) == (2.0, 1.0)
    assert all(math.isnan(value) for value in centroid([]))


def test_transform_to_wgs84_round_trip():
    x, y = Transformer.from_crs("EPSG:4326", "EPSG:3857", always_xy=True).transform(-2.1, 49.2)

    lon, lat = transform_to_wgs84(x, y, 3857)

    assert abs(lon - (-2.1)) < 1e-6
    assert abs(lat - 49.2) < 1e-6
    assert transform_to_wgs84(-2.1, 49.2, 4326) == (-2.1, 49.2)
