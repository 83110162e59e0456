"""
Ethereum module: gas-price prediction and risk scoring over the statistics toolkit.
"""

from .engine import GasAnalyticsEngine
from .schema import GasPricePrediction, LinearTrend, PriceTrend, SlopeDirection, SystemStatus

__all__ = [
    "GasAnalyticsEngine",
    "GasPricePrediction",
    "LinearTrend",
    "PriceTrend",
    "SlopeDirection",
    "SystemStatus",
]
