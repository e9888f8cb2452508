"""
Record creation from raw form input.

Checks presence of the required fields and positivity of the weight,
then stamps the record with a fresh id and display timestamp.
"""

import logging
import math
import uuid
from datetime import datetime

from weight_ledger.domain.weight import WeightRecord, WeightUnit
from weight_ledger.utils.exceptions import (
    InvalidUnitError,
    InvalidWeightError,
    MissingFieldError,
)
from weight_ledger.utils.parameters import DisplayConfig
from weight_ledger.utils.timezone_utils import format_display_timestamp, now_in_timezone

logger = logging.getLogger(__name__)


def generate_record_id() -> str:
    """Generate an opaque unique record identifier."""
    return uuid.uuid4().hex


def parse_weight(weight_input: str | float) -> float:
    """
    Parse a weight input into a positive finite float.

    Args:
        weight_input: Raw user input.

    Returns:
        Parsed weight.

    Raises:
        InvalidWeightError: If the input is not a number or is not positive.
    """
    try:
        value = float(weight_input)
    except (TypeError, ValueError) as e:
        raise InvalidWeightError(weight_input) from e

    if not math.isfinite(value) or value <= 0:
        raise InvalidWeightError(weight_input)

    return value


def parse_unit(unit: WeightUnit | str | None) -> WeightUnit:
    """
    Resolve the unit of a new record, defaulting to kilograms.

    Raises:
        InvalidUnitError: If the unit is not a supported symbol.
    """
    if not unit:
        return WeightUnit.KILOGRAM
    try:
        return WeightUnit(unit)
    except ValueError as e:
        raise InvalidUnitError(unit) from e


def validate_and_build(
    name: str | None,
    weight_input: str | float | None,
    unit: WeightUnit | str | None = None,
    notes: str | None = "",
    *,
    display: DisplayConfig | None = None,
    now: datetime | None = None,
) -> WeightRecord:
    """
    Validate raw input and build a new weight record.

    Args:
        name: Item label; required.
        weight_input: Weight as typed by the user; required.
        unit: Unit of the weight. Defaults to kilograms.
        notes: Optional annotation.
        display: Formatting settings for the record timestamp.
        now: Creation time. Defaults to the current time.

    Returns:
        New record, not yet in any ledger.

    Raises:
        MissingFieldError: If name or weight is empty or absent.
        InvalidWeightError: If the weight is not a positive number.
        InvalidUnitError: If the unit is not a supported symbol.
    """
    if not name:
        raise MissingFieldError("name")
    if weight_input is None or (isinstance(weight_input, str) and not weight_input.strip()):
        raise MissingFieldError("weight")

    weight = parse_weight(weight_input)
    record_unit = parse_unit(unit)

    display = display or DisplayConfig()
    if now is None:
        now = now_in_timezone(display.timezone)

    record = WeightRecord(
        id=generate_record_id(),
        name=name,
        weight=weight,
        unit=record_unit,
        date=format_display_timestamp(now, display.date_format, display.timezone),
        notes=notes or "",
    )
    logger.debug(f"Built record {record.id} ({record.weight} {record.unit.value})")
    return record
