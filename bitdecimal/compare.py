"""Ordering and equality of decimals."""

from __future__ import annotations

from bitdecimal.bigdecimal import BigDecimal, to_common_factor
from bitdecimal.value import Decimal


def _order(first: Decimal, second: Decimal) -> int:
    """Return -1, 0 or 1 as first is below, equal to or above second."""
    if first.is_zero() and second.is_zero():
        return 0
    if first.negative != second.negative:
        return -1 if first.negative else 1
    a = BigDecimal.from_decimal(first)
    b = BigDecimal.from_decimal(second)
    if a.scale != b.scale:
        a, b = to_common_factor(a, b)
    order = a.compare_magnitude(b)
    return -order if first.negative else order


def is_equal(first: Decimal, second: Decimal) -> bool:
    return _order(first, second) == 0


def is_not_equal(first: Decimal, second: Decimal) -> bool:
    return not is_equal(first, second)


def is_less(first: Decimal, second: Decimal) -> bool:
    return _order(first, second) < 0


def is_less_or_equal(first: Decimal, second: Decimal) -> bool:
    return is_less(first, second) or is_equal(first, second)


def is_greater(first: Decimal, second: Decimal) -> bool:
    return _order(first, second) > 0


def is_greater_or_equal(first: Decimal, second: Decimal) -> bool:
    return is_greater(first, second) or is_equal(first, second)