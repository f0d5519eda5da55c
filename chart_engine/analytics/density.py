"""Gaussian kernel density estimation."""

from __future__ import annotations

import math
from typing import List, Sequence

import numpy as np

from ..config import DEFAULT_DENSITY_POINTS, IQR_TO_SIGMA, SILVERMAN_FACTOR
from ..models import DensityPoint
from .statistics import interquartile_range, standard_deviation

_SQRT_TWO_PI = math.sqrt(2 * math.pi)


def silverman_bandwidth(values: Sequence[float]) -> float:
    """
    Silverman's rule of thumb ``0.9 * min(std, IQR / 1.34) * n ** -0.2``.

    Constant-ish data where the rule collapses to 0 falls back to
    ``0.9 * std * n ** -0.2`` and finally to 1.0.
    """
    data = np.asarray(values, dtype=float)
    n = data.size
    if n == 0:
        return 1.0
    std = standard_deviation(data)
    spread = min(std, interquartile_range(data) / IQR_TO_SIGMA)
    h = SILVERMAN_FACTOR * spread * n ** -0.2
    if h > 0:
        return h
    if std > 0:
        return SILVERMAN_FACTOR * std * n ** -0.2
    return 1.0


def kernel_density_estimate(
    values: Sequence[float],
    bandwidth: float | None = None,
    points: int = DEFAULT_DENSITY_POINTS,
) -> List[DensityPoint]:
    """
    Sample a Gaussian KDE at ``points`` evenly spaced positions over ``[min - 3h, max + 3h]``.

    Returns an empty list for empty input. The cost depends on ``points`` and the
    number of values, never on the data range.
    """
    data = np.asarray(values, dtype=float)
    if data.size == 0:
        return []
    if bandwidth is not None and bandwidth <= 0:
        raise ValueError(f"bandwidth must be positive, got {bandwidth}")
    points = max(int(points), 2)

    h = bandwidth if bandwidth is not None else silverman_bandwidth(data)
    grid = np.linspace(data.min() - 3 * h, data.max() + 3 * h, points)
    u = (grid[:, None] - data[None, :]) / h
    density = np.exp(-0.5 * u * u).sum(axis=1) / (_SQRT_TWO_PI * data.size * h)

    return [DensityPoint(value=float(x), density=float(d)) for x, d in zip(grid, density)]
