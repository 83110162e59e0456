"""
Descriptive statistics.

Central tendency, dispersion, percentiles and standard scores. Routines
return None when the input cannot support the statistic.
"""

from __future__ import annotations

import logging
from math import ceil, floor, sqrt
from typing import Iterable, Optional

from .validation import as_number, as_series

logger = logging.getLogger(__name__)


def mean(data: Iterable[float]) -> Optional[float]:
    """Arithmetic mean; None for empty input."""
    values = as_series(data)
    if not values:
        return None
    return sum(values) / len(values)


def median(data: Iterable[float]) -> Optional[float]:
    """Middle value of a sorted copy; mean of the two middle values for even counts."""
    values = sorted(as_series(data))
    count = len(values)
    if count == 0:
        return None

    middle = count // 2
    if count % 2 == 0:
        return (values[middle - 1] + values[middle]) / 2
    return values[middle]


def standard_deviation(data: Iterable[float], sample: bool = True) -> Optional[float]:
    """
    Standard deviation of data.

    Args:
        data: Numeric sequence
        sample: True for Bessel-corrected sample deviation (n-1), False for population (n)

    Returns:
        Deviation, or None when fewer than 2 observations
    """
    values = as_series(data)
    count = len(values)
    if count < 2:
        logger.debug("standard deviation needs 2+ points, got %d", count)
        return None

    avg = sum(values) / count
    squared = sum((v - avg) ** 2 for v in values)
    divisor = count - 1 if sample else count
    return sqrt(squared / divisor)


def variance(data: Iterable[float], sample: bool = True) -> Optional[float]:
    """Square of standard_deviation(); None under the same conditions."""
    std = standard_deviation(data, sample)
    return std ** 2 if std is not None else None


def percentile(data: Iterable[float], p: float) -> Optional[float]:
    """
    Linear-interpolation percentile.

    The position p/100 * (n-1) in a sorted copy is interpolated between its
    floor and ceiling neighbours.

    Args:
        data: Numeric sequence
        p: Percentile in [0, 100]

    Returns:
        Percentile value, or None for empty data or p outside [0, 100]
    """
    values = sorted(as_series(data))
    p = as_number(p, "p")
    if not values or not (0 <= p <= 100):
        logger.debug("percentile undefined: n=%d p=%s", len(values), p)
        return None

    index = (p / 100) * (len(values) - 1)
    lower = floor(index)
    upper = ceil(index)
    weight = index - lower
    return values[lower] * (1 - weight) + values[upper] * weight


def z_score(value: float, data: Iterable[float]) -> Optional[float]:
    """
    Standard score of value against data, using the population deviation.

    Returns None when the deviation is zero or undefined.
    """
    value = as_number(value)
    values = as_series(data)
    std = standard_deviation(values, sample=False)
    if std is None or std == 0:
        return None
    return (value - mean(values)) / std
