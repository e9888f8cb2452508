"""Unit tests for the output service."""

import json
from pathlib import Path

import pandas as pd
import pytest

from weight_ledger.domain.weight import UnrecognizedUnitRecord, WeightRecord, WeightUnit
from weight_ledger.services.output import TABLE_COLUMNS, OutputService
from weight_ledger.services.statistics import compute_statistics


def _records() -> list[WeightRecord]:
    return [
        WeightRecord(
            id="rec-2", name="Letter", weight=1, unit=WeightUnit.OUNCE, date="15 January 2024 10:31"
        ),
        WeightRecord(
            id="rec-1",
            name="Parcel",
            weight=1,
            unit=WeightUnit.POUND,
            date="15 January 2024 10:30",
            notes="fragile",
        ),
    ]


def test_table_row() -> None:
    """Test the display row of a record."""
    row = OutputService().table_row(_records()[1])

    expected = {
        "id": "rec-1",
        "name": "Parcel",
        "weight": "1.000000 lb",
        "weight_kg": "0.453592",
        "date": "15 January 2024 10:30",
        "notes": "fragile",
    }
    if row != expected:
        raise AssertionError(f"Unexpected row: {row}")


def test_table_row_without_notes() -> None:
    """Test that empty notes render as a dash."""
    row = OutputService().table_row(_records()[0])

    if row["notes"] != "-":
        raise AssertionError(f"Expected '-', got {row['notes']!r}")
    if row["weight_kg"] != "0.028350":
        raise AssertionError(f"Expected '0.028350', got {row['weight_kg']!r}")


def test_dataframe_keeps_ledger_order() -> None:
    """Test that the table lists records in ledger order."""
    df = OutputService().to_dataframe(_records())

    if list(df.columns) != TABLE_COLUMNS:
        raise AssertionError(f"Unexpected columns: {list(df.columns)}")
    if list(df["id"]) != ["rec-2", "rec-1"]:
        raise AssertionError(f"Unexpected order: {list(df['id'])}")


def test_render_empty_table() -> None:
    """Test rendering with no records."""
    if OutputService().render_table([]) != "No records yet.":
        raise AssertionError("Expected empty-state message")


def test_render_statistics() -> None:
    """Test rendering of the summary figures."""
    text = OutputService().render_statistics(compute_statistics(_records()))

    if "Total records:  2" not in text:
        raise AssertionError(f"Missing count in {text!r}")
    if "0.481942 kg" not in text:
        raise AssertionError(f"Missing total in {text!r}")


def test_export_csv(tmp_path: Path) -> None:
    """Test CSV export of the table."""
    records = _records()
    path = OutputService().export(
        records, compute_statistics(records), tmp_path / "out" / "records.csv", "csv"
    )

    df = pd.read_csv(path, dtype=str, keep_default_na=False)

    if len(df) != 2:
        raise AssertionError(f"Expected 2 rows, got {len(df)}")
    if df.loc[1, "weight_kg"] != "0.453592":
        raise AssertionError(f"Unexpected weight_kg: {df.loc[1, 'weight_kg']}")


def test_export_json(tmp_path: Path) -> None:
    """Test JSON export with statistics."""
    records = _records()
    path = OutputService().export(
        records, compute_statistics(records), tmp_path / "records.json", "json"
    )

    with open(path, encoding="utf-8") as f:
        payload = json.load(f)

    if payload["statistics"]["total_kg"] != "0.481942":
        raise AssertionError(f"Unexpected statistics: {payload['statistics']}")
    if [r["id"] for r in payload["records"]] != ["rec-2", "rec-1"]:
        raise AssertionError(f"Unexpected records: {payload['records']}")


def test_export_unknown_format(tmp_path: Path) -> None:
    """Test that unsupported formats are refused."""
    with pytest.raises(ValueError):
        OutputService().export([], compute_statistics([]), tmp_path / "x.xml", "xml")


def test_table_row_unrecognized_unit() -> None:
    """Test that a stored unknown unit is shown as stored and converted as kilograms."""
    record = UnrecognizedUnitRecord(
        id="rec-3", name="Crate", weight=2, unit="stone", date="15 January 2024 10:32"
    )

    row = OutputService().table_row(record)

    if row["weight"] != "2.000000 stone":
        raise AssertionError(f"Unexpected weight: {row['weight']!r}")
    if row["weight_kg"] != "2.000000":
        raise AssertionError(f"Unexpected weight_kg: {row['weight_kg']!r}")
