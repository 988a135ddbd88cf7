"""Application constants."""

PACKAGE_VERSION = "4.0.0"
CRS84_NAME = "urn:ogc:def:crs:OGC:1.3:CRS84"
WGS84_EPSG = 4326
DEFAULT_LAT_CANDIDATES = ("latitude", "lat")
DEFAULT_LON_CANDIDATES = ("longitude", "lon")
DEFAULT_ASSET_TYPES = ("building", "bridge")
DEFAULT_ASSET_TYPE = "building"
TYPE_FEATURE = "type"
INDEX_COLUMN = "index"
GEOJSON_INDENT = 2
EXIT_SUCCESS = 0
EXIT_HARD_FAIL = 20
JSON_LOG_FIELDS = (
    "timestamp",
    "logger",
    "level",
    "event",
    "asset_id",
    "source",
    "rows_in",
    "rows_out",
    "error_code",
    "message",
)
