"""Significant-figure rounding."""

from decimal import ROUND_HALF_EVEN, Decimal, localcontext
from typing import Union


def round_to_significant_digits(value: Union[Decimal, float, int], digits: int) -> Decimal:
    """Round a value to a number of significant digits.

    Rounding is done in decimal arithmetic, ties to even, so no precision
    is lost to binary floating point.

    Args:
        value: Value to round. Floats are taken at their shortest repr.
        digits: Number of significant digits to keep (must be >= 1).

    Returns:
        The rounded value. Zero and non-finite values are returned unchanged.

    Raises:
        ValueError: If digits is less than 1.
    """
    if digits < 1:
        raise ValueError(f"digits must be >= 1, got {digits}")

    if not isinstance(value, Decimal):
        value = Decimal(str(value))

    if value.is_zero() or not value.is_finite():
        return value

    with localcontext() as ctx:
        ctx.prec = digits
        ctx.rounding = ROUND_HALF_EVEN
        return +value
