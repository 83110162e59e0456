"""
chainquant: statistics, smoothing, forecasting and risk metrics for numeric
time series, plus a small gas-price and risk-score façade.
"""

__version__ = "0.1.0"
