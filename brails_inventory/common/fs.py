"""Filesystem helpers."""

from __future__ import annotations

import csv
import json
from pathlib import Path

from brails_inventory.common.errors import CsvInputError


def ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def read_yaml(path: Path):
    import yaml

    with path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def write_json(path: Path, payload, *, indent: int = 2, sort_keys: bool = False) -> None:
    ensure_dir(path.parent)
    with path.open("w", encoding="utf-8") as f:
        json.dump(payload, f, ensure_ascii=False, indent=indent, sort_keys=sort_keys)
        f.write("\n")


def read_csv_rows(path: Path) -> tuple[list[str], list[dict]]:
    if not path.exists():
        raise CsvInputError(f"The file {path} does not exist.")
    with path.open("r", encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f)
        return list(reader.fieldnames or []), list(reader)
