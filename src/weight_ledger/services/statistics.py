"""Summary statistics derived from the ledger, in kilograms."""

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict

from weight_ledger.domain.weight import WeightRecord
from weight_ledger.services.conversion import format_magnitude, to_canonical


class LedgerStatistics(BaseModel):
    """Count, total and average of a set of records."""

    count: int = 0
    total_kg: float = 0.0
    average_kg: float = 0.0

    model_config = ConfigDict(frozen=True)

    def formatted(self) -> dict[str, str]:
        """Display strings for the three summary figures, six decimals each."""
        return {
            "count": str(self.count),
            "total_kg": format_magnitude(self.total_kg),
            "average_kg": format_magnitude(self.average_kg),
        }


def compute_statistics(records: Iterable[WeightRecord]) -> LedgerStatistics:
    """
    Compute statistics over the given records.

    Args:
        records: Records to summarize.

    Returns:
        Statistics with an average of exactly 0.0 when there are no records.
    """
    count = 0
    total_kg = 0.0
    for record in records:
        count += 1
        total_kg += to_canonical(record.weight, record.unit)

    average_kg = total_kg / count if count > 0 else 0.0

    return LedgerStatistics(count=count, total_kg=total_kg, average_kg=average_kg)
