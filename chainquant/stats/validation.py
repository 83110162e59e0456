"""
Input coercion shared by the statistics toolkit.

Every public routine runs its sequence arguments through as_series() first,
so the routine works on its own list and the caller's object is never
reordered or mutated.
"""

from __future__ import annotations

from math import isfinite
from numbers import Real
from typing import Iterable, List

from chainquant.core.exceptions import DataValidationError


def as_number(value: object, name: str = "value") -> float:
    """
    Convert a scalar argument to float.

    NaN and inf pass through; parameter range checks treat them as out of range.

    Raises:
        DataValidationError: if value is a bool or not a real number
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise DataValidationError(f"{name} must be a real number, got {type(value).__name__}")
    return float(value)


def as_series(data: Iterable[object], name: str = "data") -> List[float]:
    """
    Copy an iterable of numbers into a new list of floats.

    Args:
        data: Any iterable of real numbers (list, tuple, generator, array)
        name: Argument name used in error messages

    Returns:
        A fresh list owned by the caller of this function

    Raises:
        DataValidationError: if data is not iterable or holds a non-numeric
            or non-finite (NaN, inf) element
    """
    if isinstance(data, (str, bytes)):
        raise DataValidationError(f"{name} must be a sequence of numbers, got {type(data).__name__}")
    try:
        items = list(data)
    except TypeError as exc:
        raise DataValidationError(f"{name} must be iterable, got {type(data).__name__}") from exc

    series: List[float] = []
    for index, item in enumerate(items):
        if isinstance(item, (bool, str, bytes)):
            raise DataValidationError(
                f"{name}[{index}] is a {type(item).__name__}, expected a number"
            )
        try:
            number = float(item)
        except (TypeError, ValueError) as exc:
            raise DataValidationError(f"{name}[{index}] is not numeric: {item!r}") from exc
        if not isfinite(number):
            raise DataValidationError(f"{name}[{index}] is not finite: {item!r}")
        series.append(number)
    return series
