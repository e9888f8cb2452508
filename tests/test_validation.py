"""Unit tests for record creation and validation."""

from datetime import datetime

import pytest
import pytz

from weight_ledger.domain.weight import WeightUnit
from weight_ledger.services.validation import parse_weight, validate_and_build
from weight_ledger.utils.exceptions import (
    InvalidUnitError,
    InvalidWeightError,
    MissingFieldError,
    ValidationError,
)
from weight_ledger.utils.parameters import DisplayConfig

DISPLAY = DisplayConfig(date_format="%Y-%m-%d %H:%M", timezone="UTC")
NOW = datetime(2024, 1, 15, 10, 30, 0, tzinfo=pytz.UTC)


def test_missing_name() -> None:
    """Test that an empty name is rejected."""
    with pytest.raises(MissingFieldError) as exc_info:
        validate_and_build("", "5", WeightUnit.KILOGRAM, "")

    if exc_info.value.field != "name":
        raise AssertionError(f"Expected field 'name', got {exc_info.value.field}")


def test_missing_weight() -> None:
    """Test that an empty or absent weight is rejected."""
    for weight_input in ("", "   ", None):
        with pytest.raises(MissingFieldError) as exc_info:
            validate_and_build("Box", weight_input, WeightUnit.KILOGRAM, "")

        if exc_info.value.field != "weight":
            raise AssertionError(f"Expected field 'weight', got {exc_info.value.field}")


def test_negative_weight() -> None:
    """Test that a negative weight is rejected."""
    with pytest.raises(InvalidWeightError):
        validate_and_build("Box", "-3", WeightUnit.KILOGRAM, "")


def test_invalid_weights() -> None:
    """Test that zero, non-numeric and non-finite weights are rejected."""
    for weight_input in ("0", "0.0", "abc", "5kg", "inf", "nan", 0, -1.5):
        with pytest.raises(InvalidWeightError):
            validate_and_build("Box", weight_input, WeightUnit.KILOGRAM, "")


def test_validation_errors_share_base() -> None:
    """Test that both error kinds are validation errors."""
    if not issubclass(MissingFieldError, ValidationError):
        raise AssertionError("MissingFieldError should subclass ValidationError")
    if not issubclass(InvalidWeightError, ValidationError):
        raise AssertionError("InvalidWeightError should subclass ValidationError")


def test_parse_weight_accepts_padding() -> None:
    """Test that surrounding whitespace is ignored."""
    if parse_weight(" 2.5 ") != 2.5:
        raise AssertionError(f"Expected 2.5, got {parse_weight(' 2.5 ')}")


def test_build_record() -> None:
    """Test building a record from valid input."""
    record = validate_and_build(
        "Box", "2", WeightUnit.GRAM, "fragile", display=DISPLAY, now=NOW
    )

    if record.name != "Box":
        raise AssertionError(f"Expected name 'Box', got {record.name}")
    if record.weight != 2.0:
        raise AssertionError(f"Expected weight 2.0, got {record.weight}")
    if record.unit != WeightUnit.GRAM:
        raise AssertionError(f"Expected unit g, got {record.unit}")
    if record.date != "2024-01-15 10:30":
        raise AssertionError(f"Expected date '2024-01-15 10:30', got {record.date}")
    if record.notes != "fragile":
        raise AssertionError(f"Expected notes 'fragile', got {record.notes}")
    if not record.id:
        raise AssertionError("Expected a non-empty id")


def test_default_unit_and_notes() -> None:
    """Test that unit defaults to kilograms and notes to empty."""
    record = validate_and_build("Box", 1.25, None, None, display=DISPLAY, now=NOW)

    if record.unit != WeightUnit.KILOGRAM:
        raise AssertionError(f"Expected unit kg, got {record.unit}")
    if record.notes != "":
        raise AssertionError(f"Expected empty notes, got {record.notes!r}")


def test_unit_symbol_is_accepted() -> None:
    """Test that a unit given as its symbol is coerced."""
    record = validate_and_build("Box", "3", "oz", display=DISPLAY, now=NOW)

    if record.unit is not WeightUnit.OUNCE:
        raise AssertionError(f"Expected unit oz, got {record.unit}")


def test_date_rendered_in_configured_timezone() -> None:
    """Test that the timestamp is rendered in the display timezone."""
    display = DisplayConfig(date_format="%Y-%m-%d %H:%M", timezone="Africa/Cairo")

    record = validate_and_build("Box", "3", display=display, now=NOW)

    if record.date != "2024-01-15 12:30":
        raise AssertionError(f"Expected '2024-01-15 12:30', got {record.date}")


def test_ids_are_unique() -> None:
    """Test that each built record gets a fresh id."""
    ids = {validate_and_build("Box", "1", display=DISPLAY, now=NOW).id for _ in range(50)}

    if len(ids) != 50:
        raise AssertionError(f"Expected 50 distinct ids, got {len(ids)}")


def test_unsupported_unit() -> None:
    """Test that a unit outside the supported set is a validation error."""
    with pytest.raises(InvalidUnitError) as exc_info:
        validate_and_build("Box", "3", "stone", display=DISPLAY, now=NOW)

    if not isinstance(exc_info.value, ValidationError):
        raise AssertionError("InvalidUnitError should be a ValidationError")
    if exc_info.value.unit != "stone":
        raise AssertionError(f"Expected unit 'stone', got {exc_info.value.unit!r}")
