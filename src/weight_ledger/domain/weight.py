"""
Weight domain models and snapshot schema.

This module defines the weight record stored in the ledger and the
set of units a record may be entered in.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class WeightUnit(str, Enum):
    """Enumeration of supported weight units."""

    KILOGRAM = "kg"
    GRAM = "g"
    POUND = "lb"
    OUNCE = "oz"


class WeightRecord(BaseModel):
    """
    A single user-entered weight measurement.

    Records are immutable once created; the ledger only ever adds or
    removes whole records.
    """

    id: str = Field(min_length=1, description="Opaque unique record identifier")
    name: str = Field(min_length=1, description="Display label of the weighed item")
    weight: float = Field(gt=0, allow_inf_nan=False, description="Magnitude in `unit`")
    unit: WeightUnit = Field(WeightUnit.KILOGRAM, description="Unit the weight was entered in")
    date: str = Field(description="Display timestamp captured at creation")
    notes: str = Field("", description="Optional free-text annotation")

    model_config = ConfigDict(frozen=True)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert record to its snapshot representation.

        Returns:
            Dictionary with plain JSON-compatible values.
        """
        return self.model_dump(mode="json")


class UnrecognizedUnitRecord(WeightRecord):
    """
    Stored record whose unit is not a WeightUnit.

    Only produced when loading a snapshot, so that entries written with
    other unit symbols are kept. Their weights are totaled as kilograms.
    """

    unit: str = Field(min_length=1, description="Unit symbol as stored")  # type: ignore[assignment]
