from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


def to_decimal(value: Decimal | float | int | str) -> Decimal:
    """Convert to Decimal without dragging binary float noise along."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(float(value)))
    return Decimal(value)


def round_half_up(value: Decimal | float | int | str, places: int) -> Decimal:
    """Round half away from zero to ``places`` decimal places."""
    exponent = Decimal(1).scaleb(-places)
    return to_decimal(value).quantize(exponent, rounding=ROUND_HALF_UP)


def rounded(value: Decimal | float | int, places: int) -> float:
    """``round_half_up`` for values that leave the engine as plain floats."""
    return float(round_half_up(value, places))
