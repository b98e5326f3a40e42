"""Byte-size and percentage formatting helpers for report output."""

from decimal import ROUND_HALF_UP, Decimal

# Sizes up to this many units stay in the current unit.
_UNIT_THRESHOLD = 1024 * 5
_UNITS = ("KB", "MB", "GB", "TB")
_TWO_PLACES = Decimal("0.01")


def _two_decimals(value: float) -> str:
    """Format with two decimals, rounding ties away from zero."""
    return str(Decimal(value).quantize(_TWO_PLACES, rounding=ROUND_HALF_UP))


def get_size_from_bytes(num_bytes: int) -> str:
    """
    Render a byte count as a short human-readable string.

    Values up to 5KB are printed as whole bytes ("5120B"). Larger values are
    divided by 1024 until they fit under the threshold and printed with two
    decimals ("1.50GB"), rounding half up. PB is the largest unit; anything
    bigger stays in PB.

    Args:
        num_bytes: Byte count. Negative values are printed in bytes.

    Returns:
        Formatted size string.

    Example:
        >>> get_size_from_bytes(100)
        '100B'
        >>> get_size_from_bytes(10 * 1024 * 1024)
        '10.00MB'
    """
    if num_bytes <= _UNIT_THRESHOLD:
        return f"{num_bytes}B"

    value = float(num_bytes)
    for unit in _UNITS:
        value /= 1024
        if value <= _UNIT_THRESHOLD:
            return f"{_two_decimals(value)}{unit}"

    value /= 1024
    return f"{_two_decimals(value)}PB"


def percentage(part: int, total: int) -> int | None:
    """
    Integer percentage of part over total, truncated toward zero.

    Returns None when total is zero. No bounds are applied: part > total
    yields values above 100 and negative inputs yield negative results.
    """
    if total == 0:
        return None
    numerator = 100 * part
    quotient = abs(numerator) // abs(total)
    # Integer division toward zero, not floor
    if (numerator < 0) != (total < 0):
        return -quotient
    return quotient
