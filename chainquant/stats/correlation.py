"""
Correlation and covariance between two equally long sequences.
"""

from __future__ import annotations

import logging
from math import sqrt
from typing import Iterable, List, Optional, Tuple

from .descriptive import mean
from .validation import as_series

logger = logging.getLogger(__name__)


def _paired(x: Iterable[float], y: Iterable[float]) -> Optional[Tuple[List[float], List[float]]]:
    xs = as_series(x, "x")
    ys = as_series(y, "y")
    if len(xs) != len(ys) or len(xs) < 2:
        logger.debug("paired statistic needs equal lengths >= 2, got %d and %d", len(xs), len(ys))
        return None
    return xs, ys


def correlation(x: Iterable[float], y: Iterable[float]) -> Optional[float]:
    """
    Pearson correlation coefficient.

    Not clamped, so rounding can leave the result marginally outside [-1, 1].
    None for mismatched lengths, fewer than 2 pairs, or a constant sequence.
    """
    pair = _paired(x, y)
    if pair is None:
        return None
    xs, ys = pair

    mean_x = mean(xs)
    mean_y = mean(ys)
    numerator = 0.0
    sum_x_squared = 0.0
    sum_y_squared = 0.0
    for xi, yi in zip(xs, ys):
        dx = xi - mean_x
        dy = yi - mean_y
        numerator += dx * dy
        sum_x_squared += dx * dx
        sum_y_squared += dy * dy

    denominator = sqrt(sum_x_squared * sum_y_squared)
    if denominator == 0:
        return None
    return numerator / denominator


def covariance(x: Iterable[float], y: Iterable[float], sample: bool = True) -> Optional[float]:
    """Sample (n-1) or population (n) covariance; None for mismatched lengths or n < 2."""
    pair = _paired(x, y)
    if pair is None:
        return None
    xs, ys = pair

    mean_x = mean(xs)
    mean_y = mean(ys)
    total = sum((xi - mean_x) * (yi - mean_y) for xi, yi in zip(xs, ys))
    divisor = len(xs) - 1 if sample else len(xs)
    return total / divisor
