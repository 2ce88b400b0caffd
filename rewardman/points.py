"""Tiered points calculation.

$0-$50 earns nothing, each whole dollar above $50 (up to $100) earns 1 point,
each whole dollar above $100 earns 2 points on top of the 50 from the middle band.
"""

from decimal import Decimal

# Whole-dollar tier thresholds (strict: the threshold itself earns the lower rate)
LOWER_THRESHOLD = 50
UPPER_THRESHOLD = 100


def _to_decimal(amount) -> Decimal:
    if isinstance(amount, Decimal):
        return amount
    # str() first so floats like 99.99 keep their decimal digits
    return Decimal(str(amount))


def calculate_points(amount: Decimal | int | str) -> int:
    """
    Points earned by a single purchase.

    Cents are truncated before tiering, so 100.99 earns the same as 100.00.

    Args:
        amount: Non-negative purchase amount

    Returns:
        Non-negative integer points
    """
    dollars = int(_to_decimal(amount))

    if dollars > UPPER_THRESHOLD:
        return (dollars - UPPER_THRESHOLD) * 2 + (UPPER_THRESHOLD - LOWER_THRESHOLD)
    if dollars > LOWER_THRESHOLD:
        return dollars - LOWER_THRESHOLD
    return 0
