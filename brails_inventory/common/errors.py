"""Domain errors and failure typing."""


class InventoryError(Exception):
    """Base class for asset inventory failures."""

    error_code = "INVENTORY_ERROR"


class ConfigError(InventoryError):
    """Raised for invalid or missing configuration."""

    error_code = "CONFIG_ERROR"


class MissingColumnError(InventoryError):
    """Raised when a required CSV column is absent."""

    error_code = "MISSING_COLUMN"


class CsvInputError(InventoryError, FileNotFoundError):
    """Raised when a CSV input file does not exist."""

    error_code = "CSV_INPUT_MISSING"


class AssetTypeError(InventoryError, ValueError):
    """Raised when an asset carries a type outside the allowed set."""

    error_code = "INVALID_ASSET_TYPE"


class AssetIdError(InventoryError, TypeError):
    """Raised when new ids cannot be derived from the existing ones."""

    error_code = "NON_NUMERIC_ID"


class AssetNotFoundError(InventoryError, KeyError):
    """Raised when an operation requires an asset that is not stored."""

    error_code = "ASSET_NOT_FOUND"


class PossibleWorldsError(InventoryError, ValueError):
    """Raised when a vector feature does not match the number of possible worlds."""

    error_code = "POSSIBLE_WORLDS_MISMATCH"


class SampleSizeError(InventoryError, ValueError):
    """Raised when a sample larger than the population is requested."""

    error_code = "SAMPLE_SIZE"


class CrsError(InventoryError, ValueError):
    """Raised when a source coordinate reference system cannot be used."""

    error_code = "CRS_ERROR"
