"""Aggregation logic for city temperatures."""

from __future__ import annotations

from fractions import Fraction
from typing import Sequence, Union

Number = Union[int, float]


class EmptyAggregationError(ValueError):
    """Raised when an average is requested over no temperatures."""


def _exact(temp: Number) -> Fraction:
    # Floats go through their shortest repr so 21.5 and 1e30 stay decimal-exact.
    if isinstance(temp, int):
        return Fraction(temp)
    return Fraction(repr(temp))


def average(temps: Sequence[Number]) -> int:
    """Mean of ``temps`` rounded to the nearest integer, halves away from zero.

    Both the per-band panel and the chart call this, so they always agree.
    Empty bands never reach here; an empty input is a caller bug.
    """
    if not temps:
        raise EmptyAggregationError("Cannot average an empty set of temperatures.")

    mean = sum((_exact(temp) for temp in temps), Fraction(0)) / len(temps)
    whole, remainder = divmod(abs(mean.numerator), mean.denominator)
    if 2 * remainder >= mean.denominator:
        whole += 1
    return whole if mean >= 0 else -whole
