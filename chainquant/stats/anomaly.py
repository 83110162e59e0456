"""
Anomaly detectors over a whole sequence.

Implements explainable methods:
- Z-score detection (distance from the mean in standard deviations)
- IQR detection (Tukey fences around the interquartile range)
"""

from __future__ import annotations

import logging
from typing import Iterable, List

from .descriptive import mean, percentile, standard_deviation
from .schema import AnomalyDirection, IQRAnomaly, ZScoreAnomaly
from .validation import as_series

logger = logging.getLogger(__name__)


def detect_anomalies_zscore(data: Iterable[float], threshold: float = 3.0) -> List[ZScoreAnomaly]:
    """
    Flag points whose absolute z-score exceeds threshold.

    Mean and sample deviation are computed once over the full sequence.
    Needs at least 3 points and a non-zero deviation, otherwise nothing is flagged.
    """
    values = as_series(data)
    if len(values) < 3:
        return []

    avg = mean(values)
    std = standard_deviation(values, sample=True)
    if std is None or std == 0:
        logger.debug("z-score detection skipped: zero deviation")
        return []

    anomalies = []
    for index, value in enumerate(values):
        z = abs((value - avg) / std)
        if z > threshold:
            anomalies.append(
                ZScoreAnomaly(
                    index=index,
                    value=value,
                    z_score=z,
                    deviation_percent=(value - avg) / avg * 100 if avg != 0 else None,
                )
            )
    return anomalies


def detect_anomalies_iqr(data: Iterable[float], multiplier: float = 1.5) -> List[IQRAnomaly]:
    """
    Flag points outside [Q1 - multiplier*IQR, Q3 + multiplier*IQR].

    More robust to the outliers themselves than the z-score method.
    Needs at least 4 points.
    """
    values = as_series(data)
    if len(values) < 4:
        return []

    q1 = percentile(values, 25)
    q3 = percentile(values, 75)
    iqr = q3 - q1
    lower_bound = q1 - multiplier * iqr
    upper_bound = q3 + multiplier * iqr

    return [
        IQRAnomaly(
            index=index,
            value=value,
            lower_bound=lower_bound,
            upper_bound=upper_bound,
            direction=AnomalyDirection.LOW if value < lower_bound else AnomalyDirection.HIGH,
        )
        for index, value in enumerate(values)
        if value < lower_bound or value > upper_bound
    ]
