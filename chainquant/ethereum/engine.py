"""
Gas-price and risk façade.

Composes the statistics toolkit with the heuristic policies from
config.gas and config.risk. Holds no state between calls apart from the
policy objects captured at construction.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from math import isfinite
from typing import Iterable, Mapping, Optional

from chainquant.core.config import Config, GasPolicyConfig, RiskScoringConfig, config
from chainquant.core.exceptions import ConfigurationError, DataValidationError
from chainquant.core.logging_config import setup_logging
from chainquant.stats import (
    as_number,
    as_series,
    linear_regression,
    mean,
    percent_change,
    standard_deviation,
)

from .schema import GasPricePrediction, LinearTrend, PriceTrend, SlopeDirection, SystemStatus

FUNCTIONS_AVAILABLE = ["SMA", "EMA", "volatility", "trend", "prediction", "risk_score", "regression"]


def round_half_up(value: float, places: int = 0) -> float:
    """Round exact halves away from zero."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


@dataclass
class GasAnalyticsEngine:
    """
    Gas-price prediction and risk scoring.

    Notes:
    - Policies default to the global config; pass explicit ones in tests.
    - settings controls the log level and handlers of logger_name (global config if omitted).
    - Inconsistent clamp bounds raise ConfigurationError at construction.
    """

    gas: GasPolicyConfig = field(default_factory=lambda: config.gas)
    risk: RiskScoringConfig = field(default_factory=lambda: config.risk)
    settings: Optional[Config] = None
    logger_name: str = "chainquant"

    def __post_init__(self) -> None:
        if self.gas.confidence_floor > self.gas.confidence_cap:
            raise ConfigurationError(
                f"confidence_floor {self.gas.confidence_floor} exceeds cap {self.gas.confidence_cap}"
            )
        if self.risk.score_floor > self.risk.score_cap:
            raise ConfigurationError(
                f"risk score_floor {self.risk.score_floor} exceeds cap {self.risk.score_cap}"
            )
        self._logger = setup_logging(self.logger_name, settings=self.settings)

    def latest_sma(self, data: Iterable[float], period: int) -> Optional[float]:
        """Mean of the last `period` values; None with fewer points."""
        values = as_series(data)
        if period < 1 or len(values) < period:
            return None
        return mean(values[-period:])

    def smoothed_ema(self, data: Iterable[float], period: int) -> Optional[float]:
        """Final EMA value, seeded with the first point; None with fewer than 2 points or period < 1."""
        values = as_series(data)
        if period < 1 or len(values) < 2:
            return None

        alpha = 2 / (period + 1)
        ema = values[0]
        for value in values[1:]:
            ema = alpha * value + (1 - alpha) * ema
        return ema

    def volatility(self, data: Iterable[float]) -> float:
        """Population standard deviation; 0.0 with fewer than 2 points."""
        std = standard_deviation(data, sample=False)
        return std if std is not None else 0.0

    def price_trend(self, data: Iterable[float]) -> PriceTrend:
        values = as_series(data)
        if len(values) < 2:
            return PriceTrend.STABLE

        change = percent_change(values[0], values[-1])
        if change is None:
            return PriceTrend.STABLE

        relative = change / 100
        if relative > self.gas.trend_threshold:
            return PriceTrend.RISING
        if relative < -self.gas.trend_threshold:
            return PriceTrend.FALLING
        return PriceTrend.STABLE

    def predict_gas_price(self, history: Iterable[float]) -> GasPricePrediction:
        """
        Estimate the next gas price from recent history.

        The trailing SMA is nudged by trend_adjustment in the direction of the
        trend. Confidence starts at confidence_base, gains confidence_per_point
        for every observation, loses volatility_penalty per unit of volatility,
        and is clamped to [confidence_floor, confidence_cap].
        """
        values = as_series(history, "history")
        if not values:
            self._logger.info("No gas history supplied, using fallback prediction")
            return GasPricePrediction(
                prediction=self.gas.fallback_prediction,
                confidence=self.gas.fallback_confidence,
                method="fallback",
                trend=PriceTrend.STABLE,
            )

        sma = self.latest_sma(values, min(self.gas.sma_window, len(values)))
        volatility = self.volatility(values)
        trend = self.price_trend(values)

        prediction = sma
        if trend == PriceTrend.RISING:
            prediction *= 1 + self.gas.trend_adjustment
        elif trend == PriceTrend.FALLING:
            prediction *= 1 - self.gas.trend_adjustment

        raw_confidence = (
            self.gas.confidence_base
            + len(values) * self.gas.confidence_per_point
            - volatility * self.gas.volatility_penalty
        )
        confidence = min(self.gas.confidence_cap, max(self.gas.confidence_floor, raw_confidence))

        self._logger.debug(
            "gas prediction: sma=%.4f trend=%s volatility=%.4f confidence=%.1f",
            sma,
            trend.value,
            volatility,
            confidence,
        )

        return GasPricePrediction(
            prediction=round_half_up(prediction, 2),
            confidence=int(round_half_up(confidence)),
            method="sma_trend_analysis",
            trend=trend,
            sma=round_half_up(sma, 2),
            volatility=round_half_up(volatility, 2),
        )

    def risk_score(self, factors: Mapping[str, float]) -> int:
        """
        Weighted sum of named risk factors, clamped and rounded.

        Factors without a configured weight contribute nothing. An empty
        mapping yields the neutral score.
        """
        if not factors:
            return self.risk.neutral_score

        score = 0.0
        for name, value in factors.items():
            weight = self.risk.weights.get(name)
            if weight is None:
                self._logger.debug("risk factor %r has no weight, ignored", name)
                continue
            number = as_number(value, name)
            if not isfinite(number):
                raise DataValidationError(f"risk factor {name!r} is not finite: {value!r}")
            score += weight * number

        return int(round_half_up(min(self.risk.score_cap, max(self.risk.score_floor, score))))

    def linear_trend(self, data: Iterable[float]) -> LinearTrend:
        """Fit data against its index; a single point or less is flat."""
        values = as_series(data)
        regression = linear_regression(range(len(values)), values) if len(values) >= 2 else None
        if regression is None:
            return LinearTrend(
                slope=0.0,
                intercept=values[0] if values else 0.0,
                direction=SlopeDirection.STABLE,
            )

        direction = SlopeDirection.POSITIVE if regression.slope > 0 else SlopeDirection.NEGATIVE
        return LinearTrend(slope=regression.slope, intercept=regression.intercept, direction=direction)

    def system_status(self) -> SystemStatus:
        return SystemStatus(functions_available=list(FUNCTIONS_AVAILABLE))
