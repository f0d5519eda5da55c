"""Headline descriptive statistics for one or more numeric series."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Mapping, Sequence

import numpy as np
import pandas as pd

from .statistics import (
    kurtosis,
    mean,
    median,
    mode,
    percentile,
    skewness,
    standard_deviation,
    variance,
)


@dataclass(slots=True)
class DescriptiveSummary:
    """Lightweight container for the statistics shown next to a chart."""

    count: int
    mean: float
    median: float
    mode: float | None
    std: float
    variance: float
    minimum: float
    maximum: float
    q1: float
    q3: float
    iqr: float
    skewness: float
    kurtosis: float


def build_summary(values: Sequence[float]) -> DescriptiveSummary:
    """Generate headline statistics for a series; every field is 0 (mode ``None``) when empty."""
    data = np.asarray(values, dtype=float)
    if data.size == 0:
        return DescriptiveSummary(
            count=0,
            mean=0.0,
            median=0.0,
            mode=None,
            std=0.0,
            variance=0.0,
            minimum=0.0,
            maximum=0.0,
            q1=0.0,
            q3=0.0,
            iqr=0.0,
            skewness=0.0,
            kurtosis=0.0,
        )

    q1 = percentile(data, 25)
    q3 = percentile(data, 75)
    return DescriptiveSummary(
        count=int(data.size),
        mean=mean(data),
        median=median(data),
        mode=mode(data),
        std=standard_deviation(data),
        variance=variance(data),
        minimum=float(data.min()),
        maximum=float(data.max()),
        q1=q1,
        q3=q3,
        iqr=q3 - q1,
        skewness=skewness(data),
        kurtosis=kurtosis(data),
    )


_METRICS: List[tuple[str, Callable[[DescriptiveSummary], object]]] = [
    ("Count", lambda summary: summary.count),
    ("Mean", lambda summary: summary.mean),
    ("Median", lambda summary: summary.median),
    ("Mode", lambda summary: summary.mode),
    ("Std dev", lambda summary: summary.std),
    ("Variance", lambda summary: summary.variance),
    ("Min", lambda summary: summary.minimum),
    ("Q1", lambda summary: summary.q1),
    ("Q3", lambda summary: summary.q3),
    ("Max", lambda summary: summary.maximum),
    ("IQR", lambda summary: summary.iqr),
    ("Skewness", lambda summary: summary.skewness),
    ("Kurtosis", lambda summary: summary.kurtosis),
]


def summary_to_frame(summaries: Mapping[str, DescriptiveSummary]) -> pd.DataFrame:
    """
    Convert summaries into a display table.

    Columns: Metric, then one column per series label. Empty series show "—".
    """
    rows: List[Dict[str, object]] = []
    for label, func in _METRICS:
        row: Dict[str, object] = {"Metric": label}
        for series_label, summary in summaries.items():
            value = func(summary) if summary.count else None
            row[series_label] = _format_metric_value(value)
        rows.append(row)

    return pd.DataFrame(rows, columns=["Metric", *summaries.keys()])


def _format_metric_value(value: object) -> str:
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return "—"
    if isinstance(value, (int, np.integer)):
        return f"{int(value):,}"
    if isinstance(value, float):
        return f"{value:.2f}"
    return str(value)
