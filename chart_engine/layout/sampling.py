"""Downsampling of long ordered series before they reach a renderer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple, Union

import numpy as np

Point = Tuple[float, float]


@dataclass(frozen=True, slots=True)
class NoSampling:
    pass


@dataclass(frozen=True, slots=True)
class UniformSampling:
    pass


@dataclass(frozen=True, slots=True)
class LargestTriangleSampling:
    """Largest-Triangle-Three-Buckets with at most ``buckets`` output points."""

    buckets: int


@dataclass(frozen=True, slots=True)
class MinMaxSampling:
    pass


SamplingStrategy = Union[NoSampling, UniformSampling, LargestTriangleSampling, MinMaxSampling]


def downsample(points: Sequence[Point], target: int, strategy: SamplingStrategy = UniformSampling()) -> List[Point]:
    """
    Reduce ``points`` (ordered by x) to roughly ``target`` points.

    Series already at or below ``target`` are returned unchanged. Every strategy keeps
    the first and the last point.
    """
    data = [tuple(point) for point in points]
    target = max(int(target), 2)
    if isinstance(strategy, NoSampling) or len(data) <= target:
        return data
    if isinstance(strategy, UniformSampling):
        return _uniform(data, target)
    if isinstance(strategy, LargestTriangleSampling):
        return _largest_triangle(data, min(strategy.buckets, target))
    if isinstance(strategy, MinMaxSampling):
        return _min_max(data, target)
    raise TypeError(f"Unknown sampling strategy: {strategy!r}")


def _uniform(data: List[Point], target: int) -> List[Point]:
    step = len(data) / target
    result = [data[int(index * step)] for index in range(target)]
    result[-1] = data[-1]
    return result


def _largest_triangle(data: List[Point], buckets: int) -> List[Point]:
    if buckets < 3:
        return [data[0], data[-1]]

    values = np.asarray(data, dtype=float)
    n = len(values)
    edges = np.linspace(1, n - 1, buckets - 1).astype(int)

    result = [data[0]]
    anchor = values[0]
    for index in range(buckets - 2):
        start, end = edges[index], max(edges[index + 1], edges[index] + 1)
        next_start, next_end = end, edges[index + 2] if index + 2 < len(edges) else n
        following = values[next_start:max(next_end, next_start + 1)].mean(axis=0)

        bucket = values[start:end]
        areas = np.abs(
            (anchor[0] - following[0]) * (bucket[:, 1] - anchor[1])
            - (anchor[0] - bucket[:, 0]) * (following[1] - anchor[1])
        )
        chosen = start + int(np.argmax(areas))
        result.append(data[chosen])
        anchor = values[chosen]
    result.append(data[-1])
    return result


def _min_max(data: List[Point], target: int) -> List[Point]:
    buckets = max((target - 2) // 2, 1)
    interior = np.asarray(data[1:-1], dtype=float)
    result = [data[0]]
    for chunk_indices in np.array_split(np.arange(len(interior)), buckets):
        if chunk_indices.size == 0:
            continue
        ys = interior[chunk_indices, 1]
        low, high = chunk_indices[int(np.argmin(ys))], chunk_indices[int(np.argmax(ys))]
        for index in sorted({int(low), int(high)}):
            result.append(data[index + 1])
    result.append(data[-1])
    return result
