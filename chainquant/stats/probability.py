"""
Probability helpers under a normal-distribution assumption.
"""

from __future__ import annotations

from math import exp, sqrt
from typing import Dict, Iterable, Optional

from .descriptive import mean, standard_deviation, z_score
from .schema import ConfidenceInterval
from .validation import as_number, as_series

# Two-sided z critical values. Any other level falls back to 95%.
Z_TABLE: Dict[float, float] = {
    0.90: 1.645,
    0.95: 1.96,
    0.99: 2.576,
}
DEFAULT_Z = 1.96

# Abramowitz & Stegun 26.2.17
_CDF_P = 0.2316419
_CDF_DENSITY = 0.3989423
_CDF_COEFFICIENTS = (0.3193815, -0.3565638, 1.781478, -1.821256, 1.330274)


def confidence_interval(data: Iterable[float], confidence_level: float = 0.95) -> Optional[ConfidenceInterval]:
    """
    Normal-approximation interval for the mean: mean +/- z * std / sqrt(n).

    Only the levels in Z_TABLE are distinguished; small samples are not
    corrected with a t-distribution. None for fewer than 2 points.
    """
    values = as_series(data)
    if len(values) < 2:
        return None

    std = standard_deviation(values, sample=True)
    if std is None:
        return None

    avg = mean(values)
    z = Z_TABLE.get(as_number(confidence_level, "confidence_level"), DEFAULT_Z)
    margin = z * std / sqrt(len(values))
    return ConfidenceInterval(lower=avg - margin, upper=avg + margin, margin=margin, mean=avg)


def normal_cdf(z: float) -> float:
    """Standard normal CDF, five-term polynomial approximation (error < 7.5e-8)."""
    z = as_number(z, "z")
    t = 1 / (1 + _CDF_P * abs(z))
    d = _CDF_DENSITY * exp(-z * z / 2)
    b1, b2, b3, b4, b5 = _CDF_COEFFICIENTS
    p = d * t * (b1 + t * (b2 + t * (b3 + t * (b4 + t * b5))))
    return 1 - p if z > 0 else p


def probability_in_range(value: float, data: Iterable[float]) -> float:
    """
    Cumulative probability of value under a normal fit of data.

    Returns 0.5 when data has no spread.
    """
    z = z_score(value, data)
    if z is None:
        return 0.5
    return normal_cdf(z)
