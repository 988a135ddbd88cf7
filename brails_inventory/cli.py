"""CLI entrypoint for converting CSV asset tables to GeoJSON."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from brails_inventory.common.config_loader import default_inventory_config, load_inventory_config
from brails_inventory.common.constants import EXIT_HARD_FAIL, EXIT_SUCCESS
from brails_inventory.common.errors import InventoryError
from brails_inventory.common.logging import build_logger, log_event
from brails_inventory.types.asset_inventory import AssetInventory

COMMANDS = ("to-geojson", "sample")


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("command", choices=COMMANDS)
    parser.add_argument("input_csv")
    parser.add_argument("output_geojson")
    parser.add_argument("--id-column", default=None)
    parser.add_argument("--asset-type", default=None)
    parser.add_argument("--source-epsg", type=int, default=None)
    parser.add_argument("--features-csv", default=None)
    parser.add_argument("--sample-size", type=int, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--config-dir", default=None)
    parser.add_argument("--overlay-config-dir", default=None)
    parser.add_argument("--log-file", default=None)
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARN", "ERROR"])
    return parser.parse_args(argv)


def run_command(args: argparse.Namespace) -> int:
    logger = build_logger("cli", log_path=Path(args.log_file) if args.log_file else None, level=args.log_level)
    if args.config_dir:
        overlay_config_dir = Path(args.overlay_config_dir) if args.overlay_config_dir else None
        config = load_inventory_config(Path(args.config_dir), overlay_config_dir=overlay_config_dir)
    else:
        config = default_inventory_config()

    inventory = AssetInventory(logger=logger, config=config)
    inventory.read_from_csv(
        args.input_csv,
        keep_existing=False,
        str_type=args.asset_type,
        id_column=args.id_column,
        source_epsg=args.source_epsg,
    )
    if args.features_csv:
        if not args.id_column:
            raise InventoryError("--features-csv requires --id-column")
        inventory.add_asset_features_from_csv(args.features_csv, args.id_column)

    if args.command == "sample":
        if args.sample_size is None:
            raise InventoryError("sample requires --sample-size")
        inventory = inventory.get_random_sample(args.sample_size, seed=args.seed)

    inventory.write_to_geojson(args.output_geojson)
    log_event(logger, "command complete", event="COMMAND_END", rows_out=len(inventory))
    return EXIT_SUCCESS


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv or sys.argv[1:])
    try:
        return run_command(args)
    except InventoryError as exc:
        print(f"{exc.error_code}: {exc}", file=sys.stderr)
        return EXIT_HARD_FAIL
    except Exception as exc:
        print(f"UNEXPECTED_ERROR: {exc}", file=sys.stderr)
        return EXIT_HARD_FAIL


if __name__ == "__main__":
    raise SystemExit(main())
