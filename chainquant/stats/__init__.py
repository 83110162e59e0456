"""
Statistics toolkit: stateless numeric routines over in-memory sequences.

Groups:

    Descriptive (stats/descriptive.py)   mean, median, deviation, percentile, z-score
    Correlation (stats/correlation.py)   Pearson correlation, covariance
    Time series (stats/timeseries.py)    SMA, EMA, WMA, moving std, Bollinger, ROC
    Regression  (stats/regression.py)    OLS fit, trend, linear forecast
    Risk        (stats/risk.py)          volatility, Sharpe, drawdown, VaR
    Anomaly     (stats/anomaly.py)       z-score and IQR detectors
    Probability (stats/probability.py)   confidence interval, normal CDF
    Utilities   (stats/utils.py)         percent change, normalize, CAGR

Undefined results are None (scalars and records) or [] (sequences).
"""

from chainquant.stats.anomaly import detect_anomalies_iqr, detect_anomalies_zscore
from chainquant.stats.correlation import correlation, covariance
from chainquant.stats.descriptive import (
    mean,
    median,
    percentile,
    standard_deviation,
    variance,
    z_score,
)
from chainquant.stats.probability import (
    Z_TABLE,
    confidence_interval,
    normal_cdf,
    probability_in_range,
)
from chainquant.stats.regression import (
    SIDEWAYS_SLOPE_PERCENT,
    detect_trend,
    forecast_linear,
    linear_regression,
    predict,
)
from chainquant.stats.risk import (
    historical_volatility,
    maximum_drawdown,
    sharpe_ratio,
    value_at_risk,
)
from chainquant.stats.schema import (
    AnomalyDirection,
    BollingerBands,
    ConfidenceInterval,
    Drawdown,
    IQRAnomaly,
    RegressionResult,
    TrendDirection,
    ZScoreAnomaly,
)
from chainquant.stats.timeseries import (
    bollinger_bands,
    exponential_moving_average,
    moving_standard_deviation,
    rate_of_change,
    simple_moving_average,
    weighted_moving_average,
)
from chainquant.stats.utils import cagr, normalize, percent_change
from chainquant.stats.validation import as_number, as_series

__all__ = [
    # Schema
    "AnomalyDirection",
    "BollingerBands",
    "ConfidenceInterval",
    "Drawdown",
    "IQRAnomaly",
    "RegressionResult",
    "TrendDirection",
    "ZScoreAnomaly",

    # Descriptive
    "mean",
    "median",
    "standard_deviation",
    "variance",
    "percentile",
    "z_score",

    # Correlation
    "correlation",
    "covariance",

    # Time series
    "simple_moving_average",
    "exponential_moving_average",
    "weighted_moving_average",
    "moving_standard_deviation",
    "bollinger_bands",
    "rate_of_change",

    # Regression
    "linear_regression",
    "predict",
    "detect_trend",
    "forecast_linear",
    "SIDEWAYS_SLOPE_PERCENT",

    # Risk
    "historical_volatility",
    "sharpe_ratio",
    "maximum_drawdown",
    "value_at_risk",

    # Anomaly
    "detect_anomalies_zscore",
    "detect_anomalies_iqr",

    # Probability
    "confidence_interval",
    "normal_cdf",
    "probability_in_range",
    "Z_TABLE",

    # Utilities
    "percent_change",
    "normalize",
    "cagr",

    # Validation
    "as_series",
    "as_number",
]
