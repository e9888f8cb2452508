"""
Unit conversion and display formatting.

All totals are computed in kilograms. Formatting happens only at
display time; stored magnitudes keep full float precision.
"""

import logging
from decimal import ROUND_HALF_UP, Decimal, localcontext

from weight_ledger.domain.weight import WeightUnit

logger = logging.getLogger(__name__)

DISPLAY_DECIMALS = 6

GRAMS_PER_KG = 1000

# Kilograms per one unit
KG_PER_UNIT: dict[WeightUnit, float] = {
    WeightUnit.KILOGRAM: 1.0,
    WeightUnit.POUND: 0.453592,
    WeightUnit.OUNCE: 0.0283495,
}


def to_canonical(magnitude: float, unit: WeightUnit | str) -> float:
    """
    Convert a magnitude expressed in ``unit`` to kilograms.

    Unrecognized units are treated as already being kilograms.

    Args:
        magnitude: Value in the given unit.
        unit: Unit member or its string symbol.

    Returns:
        Value in kilograms, unrounded.
    """
    try:
        unit = WeightUnit(unit)
    except ValueError:
        logger.debug(f"Unknown unit {unit!r}, treating magnitude as kilograms")
        return magnitude

    if unit is WeightUnit.GRAM:
        return magnitude / GRAMS_PER_KG
    return magnitude * KG_PER_UNIT[unit]


def format_magnitude(value: float, decimals: int = DISPLAY_DECIMALS) -> str:
    """
    Render a magnitude with a fixed number of decimal places.

    Rounds half-up after discarding float noise three places below the
    displayed precision, so 0.4819415 renders as "0.481942".

    Args:
        value: Magnitude to render.
        decimals: Digits after the decimal point.

    Returns:
        Formatted string.
    """
    quantum = Decimal(1).scaleb(-decimals)
    with localcontext() as ctx:
        ctx.prec = 350
        cleaned = Decimal(repr(round(value, decimals + 3)))
        return format(cleaned.quantize(quantum, rounding=ROUND_HALF_UP), "f")


def format_weight(
    magnitude: float, unit: WeightUnit | str, decimals: int = DISPLAY_DECIMALS
) -> str:
    """Format a magnitude followed by its unit symbol."""
    symbol = unit.value if isinstance(unit, WeightUnit) else str(unit)
    return f"{format_magnitude(magnitude, decimals)} {symbol}"
