"""
Unit tests for the gas-price and risk façade.
"""

import logging

import pytest

from chainquant.core.config import Config, GasPolicyConfig, RiskScoringConfig
from chainquant.core.exceptions import ConfigurationError, DataValidationError
from chainquant.ethereum import GasAnalyticsEngine, PriceTrend, SlopeDirection
from chainquant.ethereum.engine import round_half_up


@pytest.fixture
def engine(mock_config) -> GasAnalyticsEngine:
    return GasAnalyticsEngine(gas=mock_config.gas, risk=mock_config.risk)


class TestGasPrediction:
    """Test the SMA + trend gas-price heuristic."""

    def test_fallback_without_history(self, engine):
        result = engine.predict_gas_price([])
        assert result.prediction == 25.0
        assert result.confidence == 50
        assert result.method == "fallback"
        assert result.trend == PriceTrend.STABLE
        assert result.sma is None

    def test_rising_history(self, engine):
        result = engine.predict_gas_price([20, 21, 22, 23, 24, 25])
        assert result.trend == PriceTrend.RISING
        assert result.sma == pytest.approx(23.0)
        assert result.prediction == pytest.approx(23.46)
        assert result.volatility == pytest.approx(1.71)
        assert result.confidence == 85  # capped
        assert result.method == "sma_trend_analysis"

    def test_falling_history(self, engine):
        result = engine.predict_gas_price([30, 29, 28, 27, 26])
        assert result.trend == PriceTrend.FALLING
        assert result.prediction == pytest.approx(27.44)
        assert result.confidence == 82

    def test_single_point(self, engine):
        result = engine.predict_gas_price([30])
        assert result.trend == PriceTrend.STABLE
        assert result.prediction == pytest.approx(30.0)
        assert result.volatility == 0.0
        assert result.confidence == 65

    def test_volatile_history_hits_confidence_floor(self, engine):
        result = engine.predict_gas_price([10, 100, 10, 100])
        assert result.confidence == 60

    def test_custom_fallback_policy(self, mock_config):
        engine = GasAnalyticsEngine(
            gas=GasPolicyConfig(fallback_prediction=40.0, fallback_confidence=30),
            risk=mock_config.risk,
        )
        result = engine.predict_gas_price([])
        assert result.prediction == 40.0
        assert result.confidence == 30


class TestBuildingBlocks:
    """Test the façade's individual helpers."""

    def test_latest_sma(self, engine):
        assert engine.latest_sma([1, 2, 3, 4], 2) == pytest.approx(3.5)
        assert engine.latest_sma([1, 2, 3, 4], 5) is None

    def test_smoothed_ema(self, engine):
        assert engine.smoothed_ema([1, 2, 3], 3) == pytest.approx(2.25)
        assert engine.smoothed_ema([1], 3) is None
        assert engine.smoothed_ema([1, 2, 3], 0) is None
        assert engine.smoothed_ema([1, 2, 3], -1) is None

    def test_volatility(self, engine):
        assert engine.volatility([1, 2, 3, 4, 5]) == pytest.approx(2 ** 0.5)
        assert engine.volatility([1]) == 0.0

    def test_price_trend(self, engine):
        assert engine.price_trend([100, 104]) == PriceTrend.STABLE
        assert engine.price_trend([100, 106]) == PriceTrend.RISING
        assert engine.price_trend([100, 90]) == PriceTrend.FALLING
        assert engine.price_trend([0, 10]) == PriceTrend.STABLE
        assert engine.price_trend([5]) == PriceTrend.STABLE

    def test_linear_trend(self, engine):
        up = engine.linear_trend([1, 2, 3])
        assert up.slope == pytest.approx(1.0)
        assert up.direction == SlopeDirection.POSITIVE
        assert engine.linear_trend([3, 2, 1]).direction == SlopeDirection.NEGATIVE

    def test_linear_trend_short_input(self, engine):
        single = engine.linear_trend([5])
        assert (single.slope, single.intercept, single.direction) == (0.0, 5.0, SlopeDirection.STABLE)
        assert engine.linear_trend([]).intercept == 0.0

    def test_system_status(self, engine):
        status = engine.system_status()
        assert status.status == "ready"
        assert status.mathematics_engine == "operational"
        assert "SMA" in status.functions_available


class TestRiskScore:
    """Test the weighted risk-score combiner."""

    def test_neutral_without_factors(self, engine):
        assert engine.risk_score({}) == 50

    def test_weighted_sum(self, engine):
        assert engine.risk_score({"volatility": 50}) == 20
        assert engine.risk_score(
            {"volatility": 100, "trend_strength": 100, "market_conditions": 100}
        ) == 100

    def test_unknown_factor_ignored(self, engine):
        assert engine.risk_score({"sentiment": 1000}) == 0

    def test_clamped(self, engine):
        assert engine.risk_score({"volatility": 1000}) == 100
        assert engine.risk_score({"volatility": -80}) == 0

    def test_exact_half_rounds_up(self, engine):
        assert engine.risk_score({"volatility": 6.25}) == 3

    def test_non_finite_factor_rejected(self, engine):
        with pytest.raises(DataValidationError):
            engine.risk_score({"volatility": float("nan")})

    def test_custom_weights(self, mock_config):
        engine = GasAnalyticsEngine(
            gas=mock_config.gas,
            risk=RiskScoringConfig(weights={"liquidity": 1.0}),
        )
        assert engine.risk_score({"liquidity": 42, "volatility": 100}) == 42


def test_inconsistent_bounds_raise():
    with pytest.raises(ConfigurationError):
        GasAnalyticsEngine(gas=GasPolicyConfig(confidence_floor=90, confidence_cap=80))
    with pytest.raises(ConfigurationError):
        GasAnalyticsEngine(risk=RiskScoringConfig(score_floor=50, score_cap=10))


@pytest.mark.parametrize(
    "value, places, expected",
    [(2.5, 0, 3.0), (3.5, 0, 4.0), (-2.5, 0, -3.0), (1.005, 2, 1.01), (23.455, 2, 23.46)],
)
def test_round_half_up(value, places, expected):
    assert round_half_up(value, places) == expected


def test_engine_logs_with_its_own_settings():
    engine = GasAnalyticsEngine(
        settings=Config(log_level="ERROR"),
        logger_name="chainquant.test.engine",
    )
    logger = logging.getLogger("chainquant.test.engine")
    try:
        assert engine._logger is logger
        assert logger.level == logging.ERROR
    finally:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
