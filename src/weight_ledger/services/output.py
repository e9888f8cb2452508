"""
Output service for rendering and exporting the record table.

Each table row carries the original weight with its unit, the weight in
kilograms, the timestamp, the notes and the item name.
"""

import json
import logging
from pathlib import Path
from typing import Any

import pandas as pd

from weight_ledger.domain.weight import WeightRecord
from weight_ledger.services.conversion import format_magnitude, format_weight, to_canonical
from weight_ledger.services.statistics import LedgerStatistics

logger = logging.getLogger(__name__)

TABLE_COLUMNS = ["id", "name", "weight", "weight_kg", "date", "notes"]

EMPTY_NOTES = "-"


class OutputService:
    """
    Service for turning records into display rows and export files.

    Weights are always shown with six digits after the decimal point.
    """

    def table_row(self, record: WeightRecord) -> dict[str, str]:
        """
        Build the display row for one record.

        Args:
            record: Record to render.

        Returns:
            Mapping of column name to display string.
        """
        return {
            "id": record.id,
            "name": record.name,
            "weight": format_weight(record.weight, record.unit),
            "weight_kg": format_magnitude(to_canonical(record.weight, record.unit)),
            "date": record.date,
            "notes": record.notes or EMPTY_NOTES,
        }

    def to_dataframe(self, records: list[WeightRecord]) -> pd.DataFrame:
        """
        Build the record table as a DataFrame, newest first.

        Args:
            records: Records in ledger order.

        Returns:
            DataFrame with TABLE_COLUMNS.
        """
        return pd.DataFrame([self.table_row(r) for r in records], columns=TABLE_COLUMNS)

    def render_table(self, records: list[WeightRecord]) -> str:
        """Render the record table as plain text."""
        if not records:
            return "No records yet."
        return self.to_dataframe(records).to_string(index=False)

    def render_statistics(self, stats: LedgerStatistics) -> str:
        """Render the three summary figures as plain text."""
        figures = stats.formatted()
        lines = [
            f"Total records:  {figures['count']}",
            f"Total weight:   {figures['total_kg']} kg",
            f"Average weight: {figures['average_kg']} kg",
        ]
        return "\n".join(lines)

    def export(
        self,
        records: list[WeightRecord],
        stats: LedgerStatistics,
        output_path: Path,
        output_format: str = "csv",
    ) -> Path:
        """
        Write the record table to a file.

        CSV holds the table only; JSON holds the table and the statistics.

        Args:
            records: Records in ledger order.
            stats: Statistics over the same records.
            output_path: Destination file.
            output_format: "csv" or "json".

        Returns:
            Path written.

        Raises:
            ValueError: If the format is not supported.
        """
        output_path.parent.mkdir(parents=True, exist_ok=True)

        if output_format == "csv":
            self.to_dataframe(records).to_csv(output_path, index=False, encoding="utf-8")
        elif output_format == "json":
            payload: dict[str, Any] = {
                "statistics": stats.formatted(),
                "records": [self.table_row(r) for r in records],
            }
            with open(output_path, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2, ensure_ascii=False)
        else:
            raise ValueError(f"Unsupported export format: {output_format}")

        logger.info(f"Exported {len(records)} records to {output_path}")
        return output_path
