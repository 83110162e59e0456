"""
Small utilities: percent change, min-max normalization, CAGR.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from .validation import as_number, as_series


def percent_change(old_value: float, new_value: float) -> Optional[float]:
    """(new - old) / old * 100; None when old is zero."""
    old_value = as_number(old_value, "old_value")
    new_value = as_number(new_value, "new_value")
    if old_value == 0:
        return None
    return (new_value - old_value) / old_value * 100


def normalize(data: Iterable[float]) -> List[float]:
    """
    Min-max scale data into [0, 1].

    A constant sequence maps to all zeros; empty input maps to [].
    """
    values = as_series(data)
    if not values:
        return []

    low = min(values)
    span = max(values) - low
    if span == 0:
        return [0.0] * len(values)
    return [(v - low) / span for v in values]


def cagr(start_value: float, end_value: float, years: float) -> Optional[float]:
    """
    Compound annual growth rate, in percent.

    None when start_value <= 0, years <= 0, or end_value < 0.
    """
    start_value = as_number(start_value, "start_value")
    end_value = as_number(end_value, "end_value")
    years = as_number(years, "years")
    if start_value <= 0 or years <= 0 or end_value < 0:
        return None
    return ((end_value / start_value) ** (1 / years) - 1) * 100
