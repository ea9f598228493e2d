"""Tests for the permit export loader."""

import csv
import json
import tempfile
from pathlib import Path

import pytest

from driveways.adapters.seed_loader.loader import load_permits

ROWS = [
    {"date": "1993-07-12", "street_name": "ACADEMY ST", "street_no": "250", "address": "250 ACADEMY ST"},
    {"date": "2021-08-27", "street_name": "apollo st", "street_no": "11", "address": "11 apollo st"},
]


def test_load_json_results_envelope():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "permits.json"
        path.write_text(json.dumps({"results": ROWS}), encoding="utf-8")

        permits = load_permits(path)
        assert len(permits) == 2
        assert permits[0]["address"] == "250 ACADEMY ST"
        assert permits[0]["date"] == "1993-07-12"
        assert permits[1]["street_name"] == "APOLLO ST"
        assert permits[1]["address"] == "11 APOLLO ST"


def test_load_json_bare_list():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "permits.json"
        path.write_text(json.dumps(ROWS), encoding="utf-8")
        assert len(load_permits(path)) == 2


def test_load_json_rejects_non_list():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "permits.json"
        path.write_text(json.dumps({"count": 2}), encoding="utf-8")
        with pytest.raises(ValueError):
            load_permits(path)


def test_address_rebuilt_from_parts():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "permits.json"
        path.write_text(
            json.dumps([{"date": "2000-10-17", "street_name": "ARLINGTON AVE", "street_no": 246}]),
            encoding="utf-8",
        )
        permits = load_permits(path)
        assert permits[0]["address"] == "246 ARLINGTON AVE"
        assert permits[0]["street_no"] == "246"


def test_load_csv_with_bom_and_header_case():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "permits.csv"
        with open(path, "w", encoding="utf-8-sig", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=["Date", "Street Name", "Street No", "Address"])
            writer.writeheader()
            writer.writerow({
                "Date": "1994-04-14", "Street Name": "ARLINGTON AVE",
                "Street No": "400", "Address": "400 ARLINGTON AVE",
            })

        permits = load_permits(path)
        assert permits == [{
            "date": "1994-04-14",
            "street_name": "ARLINGTON AVE",
            "street_no": "400",
            "street_initial": None,
            "address": "400 ARLINGTON AVE",
        }]
