"""
Pytest configuration and shared fixtures.

Provides test configuration instances and sample series for unit and integration tests.
"""

import pytest
from typing import List

from chainquant.core.config import Config, GasPolicyConfig, RiskScoringConfig


@pytest.fixture
def mock_config() -> Config:
    """
    Fixture providing test configuration with explicit values.

    Ensures tests run consistently regardless of .env settings or
    CHAINQUANT_* environment variables.
    """
    return Config(
        log_level="WARNING",  # Reduce noise in test output
        log_to_file=False,
        gas=GasPolicyConfig(),
        risk=RiskScoringConfig(),
    )


@pytest.fixture
def price_series() -> List[float]:
    """
    Fixture providing a deterministic price path with a rally, a sell-off
    and a recovery to a new high.
    """
    return [100.0, 102.0, 105.0, 103.0, 108.0, 112.0, 110.0, 96.0, 90.0, 94.0, 101.0, 115.0]


@pytest.fixture
def daily_returns() -> List[float]:
    """Fixture providing a small set of daily returns (fractions)."""
    return [0.01, -0.02, 0.015, 0.003, -0.007, 0.012, -0.015, 0.02, 0.004, -0.001]


@pytest.fixture
def cluster_with_outlier() -> List[float]:
    """
    Fixture providing a tight cluster around 10 with 1000 appended.

    The outlier sits at index 20.
    """
    cluster = [10.0 + ((i % 5) - 2) * 0.1 for i in range(20)]
    return cluster + [1000.0]


def pytest_configure(config):
    """
    Pytest hook for custom configuration.

    Registers custom markers used throughout tests.
    """
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )
    config.addinivalue_line(
        "markers", "slow: mark test as slow running (deferred CI)"
    )
