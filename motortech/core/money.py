"""Conversion between decimal major-unit amounts and integer minor units."""

from decimal import ROUND_HALF_UP, Decimal


def to_minor_units(amount: Decimal | float | int) -> int:
    """Convert a major-unit amount (e.g. 199.99) to minor units (19999).

    Halves round away from zero, so 0.005 becomes 1.
    """
    value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    return int((value * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
