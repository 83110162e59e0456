"""
Time-series smoothing indicators.

All windowed routines slide a window of `period` points one step at a time.
Output index i corresponds to the window ending at input index i + period - 1.
An invalid period yields an empty list rather than None.
"""

from __future__ import annotations

import logging
from typing import Iterable, List

from .descriptive import standard_deviation
from .schema import BollingerBands
from .validation import as_series

logger = logging.getLogger(__name__)


def _valid_window(period: int, count: int, minimum: int = 1) -> bool:
    if period < minimum or period > count:
        logger.debug("window period %d invalid for %d points (minimum %d)", period, count, minimum)
        return False
    return True


def simple_moving_average(data: Iterable[float], period: int) -> List[float]:
    """Average of each window; [] if period < 1 or period > len(data)."""
    values = as_series(data)
    if not _valid_window(period, len(values)):
        return []

    return [
        sum(values[i - period + 1 : i + 1]) / period
        for i in range(period - 1, len(values))
    ]


def exponential_moving_average(data: Iterable[float], period: int) -> List[float]:
    """
    Exponential moving average seeded with the SMA of the first window.

    ema[i] = (value - ema[i-1]) * 2/(period+1) + ema[i-1]

    Returns:
        len(data) - period + 1 values, or [] if period is invalid
    """
    values = as_series(data)
    if not _valid_window(period, len(values)):
        return []

    multiplier = 2 / (period + 1)
    ema = [sum(values[:period]) / period]
    for value in values[period:]:
        ema.append((value - ema[-1]) * multiplier + ema[-1])
    return ema


def weighted_moving_average(data: Iterable[float], period: int) -> List[float]:
    """
    Linearly weighted moving average.

    Within a window the oldest point has weight 1 and the newest weight
    `period`; the divisor is the triangular number period*(period+1)/2.
    """
    values = as_series(data)
    if not _valid_window(period, len(values)):
        return []

    weight_sum = period * (period + 1) / 2
    wma = []
    for i in range(period - 1, len(values)):
        window = values[i - period + 1 : i + 1]
        weighted = sum(value * (j + 1) for j, value in enumerate(window))
        wma.append(weighted / weight_sum)
    return wma


def moving_standard_deviation(data: Iterable[float], period: int) -> List[float]:
    """Sample standard deviation of each window; requires 2 <= period <= len(data)."""
    values = as_series(data)
    if not _valid_window(period, len(values), minimum=2):
        return []

    return [
        standard_deviation(values[i - period + 1 : i + 1], sample=True)
        for i in range(period - 1, len(values))
    ]


def bollinger_bands(data: Iterable[float], period: int = 20, multiplier: float = 2.0) -> BollingerBands:
    """
    Bollinger Bands: SMA centre line +/- multiplier * moving standard deviation.

    Returns empty bands when either component is unavailable for the period.
    """
    values = as_series(data)
    middle = simple_moving_average(values, period)
    deviations = moving_standard_deviation(values, period)

    if not middle or len(middle) != len(deviations):
        return BollingerBands()

    upper = [m + d * multiplier for m, d in zip(middle, deviations)]
    lower = [m - d * multiplier for m, d in zip(middle, deviations)]
    return BollingerBands(middle=middle, upper=upper, lower=lower)


def rate_of_change(data: Iterable[float], period: int) -> List[float]:
    """
    Percent change of each value against the value `period` steps earlier.

    A zero earlier value yields 0.0 for that point instead of an error.
    Returns [] if period < 1 or period >= len(data).
    """
    values = as_series(data)
    if period < 1 or period >= len(values):
        return []

    roc = []
    for i in range(period, len(values)):
        old = values[i - period]
        roc.append((values[i] - old) / old * 100 if old != 0 else 0.0)
    return roc
