"""
Regression, trend classification, and linear forecasting.

linear_regression() returns a plain RegressionResult; evaluating the fit at
a new x is the separate pure function predict().
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from .descriptive import mean
from .schema import RegressionResult, TrendDirection
from .validation import as_number, as_series

logger = logging.getLogger(__name__)

# Slope below 0.1% of the window mean per step counts as flat.
SIDEWAYS_SLOPE_PERCENT = 0.1


def linear_regression(x: Iterable[float], y: Iterable[float]) -> Optional[RegressionResult]:
    """
    Ordinary least squares fit of y on x.

    slope = (n*Sxy - Sx*Sy) / (n*Sxx - Sx^2), intercept = (Sy - slope*Sx) / n

    Returns:
        RegressionResult, or None for mismatched lengths, fewer than 2 points,
        or a degenerate x (all values equal)
    """
    xs = as_series(x, "x")
    ys = as_series(y, "y")
    n = len(xs)
    if n != len(ys) or n < 2:
        return None

    sum_x = sum(xs)
    sum_y = sum(ys)
    sum_xy = sum(xi * yi for xi, yi in zip(xs, ys))
    sum_x_squared = sum(xi * xi for xi in xs)

    denominator = n * sum_x_squared - sum_x * sum_x
    if denominator == 0:
        logger.debug("regression undefined: x has no spread")
        return None

    slope = (n * sum_xy - sum_x * sum_y) / denominator
    intercept = (sum_y - slope * sum_x) / n

    mean_y = sum_y / n
    ss_total = 0.0
    ss_residual = 0.0
    for xi, yi in zip(xs, ys):
        predicted = slope * xi + intercept
        ss_total += (yi - mean_y) ** 2
        ss_residual += (yi - predicted) ** 2

    r_squared = 1 - ss_residual / ss_total if ss_total != 0 else 0.0

    return RegressionResult(
        slope=slope,
        intercept=intercept,
        r_squared=r_squared,
        equation=f"y = {slope}x + {intercept}",
    )


def predict(result: RegressionResult, x: float) -> float:
    """Evaluate a fitted line at x."""
    return result.slope * as_number(x, "x") + result.intercept


def detect_trend(data: Iterable[float], period: int = 20) -> TrendDirection:
    """
    Classify the direction of the last `period` points.

    The slope of the trailing window (regressed on 0..period-1) is expressed
    as a percentage of the window mean. Below SIDEWAYS_SLOPE_PERCENT the
    series is sideways, otherwise the slope sign decides.
    """
    values = as_series(data)
    if len(values) < period:
        return TrendDirection.INSUFFICIENT_DATA
    if period < 2:
        return TrendDirection.UNKNOWN

    recent = values[-period:]
    regression = linear_regression(range(len(recent)), recent)
    if regression is None:
        return TrendDirection.UNKNOWN

    slope = regression.slope
    average = mean(recent)
    slope_percent = abs(slope / average) * 100 if average != 0 else 0.0

    if slope_percent < SIDEWAYS_SLOPE_PERCENT:
        return TrendDirection.SIDEWAYS
    if slope > 0:
        return TrendDirection.UPTREND
    return TrendDirection.DOWNTREND


def forecast_linear(data: Iterable[float], periods: int) -> List[float]:
    """
    Extend the least-squares line through data for `periods` more steps.

    Returns [] for fewer than 2 points, periods < 1, or an undefined fit.
    """
    values = as_series(data)
    if len(values) < 2 or periods < 1:
        return []

    regression = linear_regression(range(len(values)), values)
    if regression is None:
        return []

    start = len(values)
    return [predict(regression, start + i) for i in range(periods)]
