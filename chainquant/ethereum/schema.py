"""
Schema definitions for the gas-price and risk façade.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class PriceTrend(str, Enum):
    """Coarse first-to-last price movement."""

    RISING = "rising"
    FALLING = "falling"
    STABLE = "stable"


class SlopeDirection(str, Enum):
    """Sign of a fitted slope."""

    POSITIVE = "positive"
    NEGATIVE = "negative"
    STABLE = "stable"


class GasPricePrediction(BaseModel):
    """
    Gas-price estimate for the next block window.

    Fields:
    - prediction: estimated price (gwei), rounded to 2 decimals
    - confidence: heuristic confidence in percent
    - method: "fallback" with no history, otherwise "sma_trend_analysis"
    - trend: first-to-last movement of the history
    - sma, volatility: inputs of the estimate (absent on fallback)
    """

    prediction: float
    confidence: int = Field(ge=0, le=100)
    method: str
    trend: PriceTrend
    sma: Optional[float] = None
    volatility: Optional[float] = None


class LinearTrend(BaseModel):
    """Least-squares line through a series regressed on its index."""

    slope: float
    intercept: float
    direction: SlopeDirection


class SystemStatus(BaseModel):
    """Static description of the engine's capabilities."""

    mathematics_engine: str = "operational"
    functions_available: List[str]
    status: str = "ready"
