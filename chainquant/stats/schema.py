"""
Result records for the statistics toolkit.

Every record is a plain pydantic model: no callables, no references back to
the input sequence, safe to serialize with model_dump().
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class TrendDirection(str, Enum):
    """Outcome of trend detection over a trailing window."""

    UPTREND = "uptrend"
    DOWNTREND = "downtrend"
    SIDEWAYS = "sideways"
    INSUFFICIENT_DATA = "insufficient_data"
    UNKNOWN = "unknown"


class AnomalyDirection(str, Enum):
    """Side of the IQR fence a flagged value falls on."""

    LOW = "low"
    HIGH = "high"


class RegressionResult(BaseModel):
    """
    Ordinary least squares fit of y = slope * x + intercept.

    Fields:
    - slope, intercept: fitted coefficients
    - r_squared: coefficient of determination (0.0 when y has no variance)
    - equation: human-readable form of the fit
    """

    slope: float
    intercept: float
    r_squared: float
    equation: str

    def predict(self, x: float) -> float:
        from .regression import predict

        return predict(self, x)


class BollingerBands(BaseModel):
    """
    Volatility envelope around a simple moving average.

    All three lists share a length and are aligned by window end index.
    """

    middle: List[float] = Field(default_factory=list)
    upper: List[float] = Field(default_factory=list)
    lower: List[float] = Field(default_factory=list)


class ConfidenceInterval(BaseModel):
    """Interval for the mean: mean +/- margin."""

    lower: float
    upper: float
    margin: float = Field(ge=0.0)
    mean: float


class Drawdown(BaseModel):
    """
    Largest peak-to-trough decline.

    peak_index is the peak that was active when the trough was reached,
    not necessarily the global maximum of the series.
    """

    max_drawdown: float = 0.0
    peak_index: int = Field(0, ge=0)
    trough_index: int = Field(0, ge=0)


class ZScoreAnomaly(BaseModel):
    """
    Point flagged by the z-score method.

    Fields:
    - z_score: absolute standardized deviation
    - deviation_percent: percent distance from the mean (None if the mean is zero)
    """

    index: int
    value: float
    z_score: float = Field(ge=0.0)
    deviation_percent: Optional[float] = None


class IQRAnomaly(BaseModel):
    """Point flagged outside the interquartile fences."""

    index: int
    value: float
    lower_bound: float
    upper_bound: float
    direction: AnomalyDirection
