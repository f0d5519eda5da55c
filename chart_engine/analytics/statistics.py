"""Descriptive statistics, correlation and regression over numeric sequences.

Every function accepts any sequence of numbers and never raises on empty or
degenerate input; the neutral value returned in that case is noted per function.
"""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np
import statsmodels.api as sm

from ..config import DEFAULT_MODE_PRECISION, NOTCH_FACTOR, OUTLIER_FENCE


@dataclass(frozen=True, slots=True)
class RegressionResult:
    slope: float
    intercept: float
    r_squared: float

    def predict(self, x: float) -> float:
        return predict(x, self.slope, self.intercept)


@dataclass(frozen=True, slots=True)
class BoxPlotStatistics:
    """Five-number summary with Tukey fences."""

    minimum: float
    q1: float
    median: float
    q3: float
    maximum: float
    mean: float
    outliers: Tuple[float, ...]
    notch_extent: float


def _as_array(values: Sequence[float]) -> np.ndarray:
    return np.asarray(values, dtype=float).ravel()


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean; 0 for empty input."""
    data = _as_array(values)
    if data.size == 0:
        return 0.0
    return float(data.mean())


def median(values: Sequence[float]) -> float:
    """Middle value, averaging the two middle elements for even counts; 0 for empty input."""
    data = _as_array(values)
    if data.size == 0:
        return 0.0
    return float(np.median(data))


def mode(values: Sequence[float], precision: int = DEFAULT_MODE_PRECISION) -> float | None:
    """
    Most frequent value after rounding to ``precision`` decimals.

    Halves round away from zero. Ties go to the rounded value that appears first in
    ``values``. Returns ``None`` for empty input.
    """
    if len(values) == 0:
        return None
    counts = Counter(_round_half_away(float(value), precision) for value in values)
    # most_common is stable, so equal counts keep first-seen order
    return counts.most_common(1)[0][0]


def _round_half_away(value: float, precision: int) -> float:
    scale = 10**precision
    return math.copysign(math.floor(abs(value) * scale + 0.5), value) / scale


def variance(values: Sequence[float], population: bool = False) -> float:
    """Sample variance (n - 1 divisor) or population variance; 0 when n <= 1."""
    data = _as_array(values)
    if data.size <= 1:
        return 0.0
    return float(np.var(data, ddof=0 if population else 1))


def standard_deviation(values: Sequence[float], population: bool = False) -> float:
    return math.sqrt(variance(values, population=population))


def coefficient_of_variation(values: Sequence[float]) -> float:
    """Sample standard deviation over the mean; 0 when the mean is 0."""
    avg = mean(values)
    if avg == 0:
        return 0.0
    return standard_deviation(values) / avg


def skewness(values: Sequence[float]) -> float:
    """Bias-corrected sample skewness; 0 for n <= 2 or constant data."""
    data = _as_array(values)
    n = data.size
    if n <= 2:
        return 0.0
    std = standard_deviation(data)
    if std <= 0:
        return 0.0
    z = (data - data.mean()) / std
    return float(n / ((n - 1) * (n - 2)) * np.sum(z**3))


def kurtosis(values: Sequence[float]) -> float:
    """Bias-corrected excess kurtosis; 0 for n <= 3 or constant data."""
    data = _as_array(values)
    n = data.size
    if n <= 3:
        return 0.0
    std = standard_deviation(data)
    if std <= 0:
        return 0.0
    z = (data - data.mean()) / std
    coefficient = (n * (n + 1)) / ((n - 1) * (n - 2) * (n - 3))
    correction = (3 * (n - 1) ** 2) / ((n - 2) * (n - 3))
    return float(coefficient * np.sum(z**4) - correction)


def percentile(values: Sequence[float], p: float) -> float:
    """
    Linearly interpolated percentile at index ``p / 100 * (n - 1)`` of the sorted data.

    Returns 0 for empty input or when ``p`` lies outside ``[0, 100]``.
    """
    data = _as_array(values)
    if data.size == 0 or not 0 <= p <= 100:
        return 0.0
    return float(np.percentile(data, p, method="linear"))


def quartiles(values: Sequence[float]) -> Tuple[float, float, float]:
    return (percentile(values, 25), percentile(values, 50), percentile(values, 75))


def interquartile_range(values: Sequence[float]) -> float:
    q1, _, q3 = quartiles(values)
    return q3 - q1


def correlation(x: Sequence[float], y: Sequence[float]) -> float:
    """Pearson coefficient; 0 on length mismatch, fewer than two points or zero variance."""
    xs = _as_array(x)
    ys = _as_array(y)
    if xs.size != ys.size or xs.size <= 1:
        return 0.0
    dx = xs - xs.mean()
    dy = ys - ys.mean()
    denominator = math.sqrt(float(np.sum(dx * dx)) * float(np.sum(dy * dy)))
    if denominator <= 0:
        return 0.0
    return float(np.sum(dx * dy)) / denominator


def linear_regression(x: Sequence[float], y: Sequence[float]) -> RegressionResult:
    """
    Ordinary least squares fit of ``y`` on ``x``.

    ``r_squared`` is the squared Pearson correlation. Degenerate input (length
    mismatch, fewer than two points, constant ``x``) yields ``(0, 0, 0)``.
    """
    xs = _as_array(x)
    ys = _as_array(y)
    if xs.size != ys.size or xs.size <= 1 or np.ptp(xs) == 0:
        return RegressionResult(0.0, 0.0, 0.0)

    X = sm.add_constant(xs, has_constant="add")
    model = sm.OLS(ys, X).fit()
    intercept, slope = (float(param) for param in model.params)
    r = correlation(xs, ys)
    return RegressionResult(slope=slope, intercept=intercept, r_squared=r * r)


def predict(x: float, slope: float, intercept: float) -> float:
    return slope * x + intercept


def box_plot_statistics(values: Sequence[float]) -> BoxPlotStatistics:
    """
    Box-and-whisker summary.

    Whiskers end at the most extreme values inside ``1.5 * IQR`` of the quartiles;
    anything beyond them is reported as an outlier. Empty input yields all zeros.
    """
    data = np.sort(_as_array(values))
    if data.size == 0:
        return BoxPlotStatistics(0.0, 0.0, 0.0, 0.0, 0.0, 0.0, (), 0.0)

    q1, q2, q3 = quartiles(data)
    iqr = q3 - q1
    lower_fence = q1 - OUTLIER_FENCE * iqr
    upper_fence = q3 + OUTLIER_FENCE * iqr

    inside = data[(data >= lower_fence) & (data <= upper_fence)]
    outliers = data[(data < lower_fence) | (data > upper_fence)]
    minimum = float(inside[0]) if inside.size else float(data[0])
    maximum = float(inside[-1]) if inside.size else float(data[-1])

    return BoxPlotStatistics(
        minimum=minimum,
        q1=q1,
        median=q2,
        q3=q3,
        maximum=maximum,
        mean=float(data.mean()),
        outliers=tuple(float(value) for value in outliers),
        notch_extent=NOTCH_FACTOR * iqr / math.sqrt(data.size),
    )
