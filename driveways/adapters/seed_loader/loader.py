"""Seed loader — reads the municipal permit export (JSON or CSV)."""

from __future__ import annotations

import csv
import json
import logging
from pathlib import Path

from driveways.adapters.seed_loader.normalizer import (
    clean_string,
    normalize_address_text,
    normalize_column_name,
)

logger = logging.getLogger(__name__)


def _read_json(file_path: Path) -> list[dict]:
    """Accept either a bare list or the open-data `{"results": [...]}` envelope."""
    with open(file_path, encoding="utf-8-sig") as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = data.get("results")
    if not isinstance(data, list):
        raise ValueError(f"{file_path} does not contain a list of permit records")
    return [
        {normalize_column_name(k): v for k, v in row.items()}
        for row in data
        if isinstance(row, dict)
    ]


def _read_csv(file_path: Path, encoding: str = "utf-8-sig") -> list[dict]:
    with open(file_path, encoding=encoding, newline="") as f:
        reader = csv.DictReader(f)
        if reader.fieldnames is None:
            raise ValueError(f"CSV file {file_path} has no header row")
        col_map = {col: normalize_column_name(col) for col in reader.fieldnames}
        return [
            {col_map[k]: v for k, v in raw_row.items() if k is not None}
            for raw_row in reader
        ]


def load_permits(file_path: Path) -> list[dict]:
    """Load and normalize permit rows.

    Expected fields (after normalization):
        date, street_name, street_no, address, street_initial (optional)

    When `address` is missing it is rebuilt from street number and name.
    """
    if file_path.suffix.lower() == ".csv":
        rows = _read_csv(file_path)
    else:
        rows = _read_json(file_path)

    permits = []
    for row in rows:
        street_name = normalize_address_text(row.get("street_name"))
        street_no = clean_string(row.get("street_no"))
        address = normalize_address_text(row.get("address"))
        if address is None and street_name:
            address = " ".join(p for p in (street_no, street_name) if p)

        permits.append({
            "date": clean_string(row.get("date")),
            "street_name": street_name,
            "street_no": street_no,
            "street_initial": clean_string(row.get("street_initial")),
            "address": address,
        })

    logger.info("Loaded %d permit records from %s", len(permits), file_path.name)
    return permits
