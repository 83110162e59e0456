"""
Volatility and risk metrics.
"""

from __future__ import annotations

import logging
from math import log, sqrt
from typing import Iterable, Optional

from .descriptive import mean, percentile, standard_deviation
from .schema import Drawdown
from .validation import as_number, as_series

logger = logging.getLogger(__name__)


def historical_volatility(
    prices: Iterable[float], period: int, periods_per_year: int = 365
) -> Optional[float]:
    """
    Annualized volatility (percent) of the most recent `period` log returns.

    Args:
        prices: Price series, oldest first
        period: Number of trailing returns to use
        periods_per_year: 365 for daily prices, 8760 for hourly, etc.

    Returns:
        sample_std(returns) * sqrt(periods_per_year) * 100, or None when there
        are not enough prices or usable returns

    Notes:
        - Pairs whose previous price is zero are skipped.
        - Pairs with a non-positive price ratio are skipped (log is undefined).
    """
    values = as_series(prices, "prices")
    if len(values) < period + 1:
        logger.debug("volatility needs %d prices, got %d", period + 1, len(values))
        return None

    returns = []
    for previous, current in zip(values, values[1:]):
        if previous == 0:
            continue
        ratio = current / previous
        if ratio <= 0:
            continue
        returns.append(log(ratio))

    if len(returns) < period:
        return None

    recent = returns[-period:] if period > 0 else []
    std = standard_deviation(recent, sample=True)
    if std is None:
        return None
    return std * sqrt(periods_per_year) * 100


def sharpe_ratio(returns: Iterable[float], risk_free_rate: float = 0.0) -> Optional[float]:
    """(mean return - risk-free rate) / sample std of returns; None if undefined."""
    values = as_series(returns, "returns")
    if len(values) < 2:
        return None

    std = standard_deviation(values, sample=True)
    if std is None or std == 0:
        return None
    return (mean(values) - as_number(risk_free_rate, "risk_free_rate")) / std


def maximum_drawdown(prices: Iterable[float]) -> Drawdown:
    """
    Largest percentage decline from a running peak.

    A single left-to-right scan tracks the running peak. The reported
    peak_index is the peak in force when the worst trough was reached.
    """
    values = as_series(prices, "prices")
    if not values:
        return Drawdown()

    max_drawdown = 0.0
    peak = values[0]
    peak_index = 0
    worst_peak_index = 0
    worst_trough_index = 0

    for i, price in enumerate(values):
        if price > peak:
            peak = price
            peak_index = i

        if peak == 0:
            continue
        drawdown = (peak - price) / peak * 100

        if drawdown > max_drawdown:
            max_drawdown = drawdown
            worst_peak_index = peak_index
            worst_trough_index = i

    return Drawdown(
        max_drawdown=max_drawdown,
        peak_index=worst_peak_index,
        trough_index=worst_trough_index,
    )


def value_at_risk(returns: Iterable[float], confidence_level: float = 0.95) -> Optional[float]:
    """
    Historical Value at Risk.

    The (1 - confidence_level) percentile of the returns, negated so that a
    loss is a positive number. None for empty input or a confidence level
    outside the open interval (0, 1).
    """
    values = sorted(as_series(returns, "returns"))
    confidence_level = as_number(confidence_level, "confidence_level")
    if not values or not (0 < confidence_level < 1):
        return None

    cutoff = percentile(values, (1 - confidence_level) * 100)
    return -cutoff
