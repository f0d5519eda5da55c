"""Value scaling, axis ticks and histogram binning."""

from __future__ import annotations

import math
from typing import List, Sequence, Tuple

import numpy as np

from ..models import HistogramBin
from .statistics import interquartile_range, mean, standard_deviation


def normalize(values: Sequence[float], target: Tuple[float, float] = (0.0, 1.0)) -> List[float]:
    """
    Min-max scale ``values`` into ``target``.

    When every value is equal each maps to the midpoint of ``target``.
    """
    data = np.asarray(values, dtype=float)
    if data.size == 0:
        return []
    low, high = target
    lo, hi = float(data.min()), float(data.max())
    if hi == lo:
        return [(low + high) / 2] * int(data.size)
    scaled = (data - lo) / (hi - lo)
    return (scaled * (high - low) + low).tolist()


def z_score_normalize(values: Sequence[float]) -> List[float]:
    """Standard scores using the sample standard deviation; all zeros when it is 0."""
    data = np.asarray(values, dtype=float)
    std = standard_deviation(data)
    if std <= 0:
        return [0.0] * int(data.size)
    return ((data - mean(data)) / std).tolist()


def nice_step(raw_step: float) -> float:
    """Snap a raw step to 1, 2, 5 or 10 times its power of ten."""
    magnitude = 10 ** math.floor(math.log10(raw_step))
    residual = raw_step / magnitude
    if residual <= 1.5:
        return magnitude
    if residual <= 3:
        return 2 * magnitude
    if residual <= 7:
        return 5 * magnitude
    return 10 * magnitude


def nice_tick_values(minimum: float, maximum: float, count: int) -> List[float]:
    """
    Human-friendly axis ticks covering ``[minimum, maximum]``.

    Returns an empty list when ``maximum <= minimum`` or ``count < 2``.
    """
    if maximum <= minimum or count < 2:
        return []

    step = nice_step((maximum - minimum) / (count - 1))
    nice_min = math.floor(minimum / step) * step
    nice_max = math.ceil(maximum / step) * step
    steps = int(round((nice_max - nice_min) / step))
    decimals = max(0, -math.floor(math.log10(step))) + 1
    return [round(nice_min + index * step, decimals) for index in range(steps + 1)]


def optimal_bin_count(values: Sequence[float]) -> int:
    """Sturges' rule, at least 1."""
    n = len(values)
    if n <= 0:
        return 1
    return max(1, math.ceil(math.log2(n) + 1))


def optimal_bin_width(values: Sequence[float]) -> float:
    """Freedman-Diaconis rule; 0 for empty input."""
    n = len(values)
    if n == 0:
        return 0.0
    return 2 * interquartile_range(values) * n ** (-1 / 3)


def histogram(values: Sequence[float], bins: int | None = None) -> List[HistogramBin]:
    """Equal-width bins over the data range, Sturges' bin count by default."""
    data = np.asarray(values, dtype=float)
    if data.size == 0:
        return []
    bin_count = bins if bins is not None else optimal_bin_count(data)
    if bin_count < 1:
        raise ValueError(f"bins must be at least 1, got {bin_count}")
    counts, edges = np.histogram(data, bins=bin_count)
    return [
        HistogramBin(lower=float(edges[index]), upper=float(edges[index + 1]), count=int(count))
        for index, count in enumerate(counts)
    ]
