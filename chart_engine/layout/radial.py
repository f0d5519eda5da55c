"""Angular partitioning shared by pie, sunburst, chord and gauge charts.

Angles are in degrees. Segments are placed in input order, each starting one
padding gap after the previous one ends.
"""

from __future__ import annotations

import logging
import math
from typing import Any, List, Sequence, Tuple

import numpy as np

from ..config import (
    DEFAULT_CHORD_PADDING,
    DEFAULT_GAUGE_BANDS,
    DEFAULT_GAUGE_END_ANGLE,
    DEFAULT_GAUGE_START_ANGLE,
    DEFAULT_PIE_START_ANGLE,
    FULL_CIRCLE,
)
from ..errors import InvalidFlowError
from ..hierarchy import HierarchyNode
from ..models import AngularSegment, ChordLayout, ChordRibbon, DataPoint, GaugeBand

logger = logging.getLogger(__name__)


def partition(
    items: Sequence[Tuple[Any, float]],
    start_angle: float = 0.0,
    end_angle: float = FULL_CIRCLE,
    *,
    padding: float = 0.0,
    depth: int = 0,
    wrap: bool = False,
) -> List[AngularSegment]:
    """
    Split ``[start_angle, end_angle]`` among ``(entity, value)`` pairs proportionally.

    The available span is ``(end - start) - padding * gaps`` where ``gaps`` is
    ``count - 1``, or ``count`` when ``wrap`` reserves a gap between the last and the
    first segment of a closed circle. A reversed span (``end < start``) lays segments
    out in decreasing angle. A non-positive total gives every segment a zero span.
    """
    count = len(items)
    if count == 0:
        return []

    direction = 1.0 if end_angle >= start_angle else -1.0
    span = abs(end_angle - start_angle)
    gaps = count if wrap else count - 1
    available = max(span - padding * gaps, 0.0)
    total = math.fsum(max(float(value), 0.0) for _, value in items)

    segments: List[AngularSegment] = []
    current = start_angle
    for entity, value in items:
        share = available * max(float(value), 0.0) / total if total > 0 else 0.0
        end = current + direction * share
        segments.append(AngularSegment(entity=entity, start_angle=current, end_angle=end, depth=depth))
        current = end + direction * padding
    return segments


def pie_segments(
    points: Sequence[DataPoint],
    *,
    start_angle: float = DEFAULT_PIE_START_ANGLE,
    clockwise: bool = True,
    padding: float = 0.0,
) -> List[AngularSegment]:
    """Slices of a full circle starting at ``start_angle`` (-90 is 12 o'clock)."""
    end_angle = start_angle + (FULL_CIRCLE if clockwise else -FULL_CIRCLE)
    return partition(
        [(point, point.value) for point in points],
        start_angle,
        end_angle,
        padding=padding,
        wrap=padding > 0,
    )


def sunburst_segments(
    root: HierarchyNode,
    *,
    start_angle: float = 0.0,
    end_angle: float = FULL_CIRCLE,
    padding: float = 0.0,
    max_depth: int | None = None,
) -> List[AngularSegment]:
    """
    Concentric rings for a hierarchy; the root's children form depth 0.

    Each node's span is subdivided among its children in child order, so the
    children's spans plus the padding between them equal the parent's span.
    """
    segments: List[AngularSegment] = []
    _sunburst(root, start_angle, end_angle, 0, padding, max_depth, segments)
    return segments


def _sunburst(
    node: HierarchyNode,
    start_angle: float,
    end_angle: float,
    depth: int,
    padding: float,
    max_depth: int | None,
    segments: List[AngularSegment],
) -> None:
    if max_depth is not None and depth >= max_depth:
        return
    if node.is_leaf or node.total_value <= 0:
        return

    children = partition(
        [(child, child.total_value) for child in node.children],
        start_angle,
        end_angle,
        padding=padding,
        depth=depth,
    )
    for segment in children:
        segments.append(segment)
        if not segment.entity.is_leaf:
            _sunburst(segment.entity, segment.start_angle, segment.end_angle, depth + 1, padding, max_depth, segments)


def chord_layout(
    matrix: Sequence[Sequence[float]],
    *,
    padding: float = DEFAULT_CHORD_PADDING,
    start_angle: float = 0.0,
) -> ChordLayout:
    """
    Group arcs and ribbons for a square flow matrix.

    A group's total is its row sum plus its column sum. Group arcs share the circle
    with ``padding`` after every arc. Each positive off-diagonal cell ``(i, j)`` gets a
    ribbon whose ends are sub-arcs sized by the cell value within groups ``i`` and
    ``j``; a running offset per group stacks sub-arcs in row-major cell order.

    Raises
    ------
    InvalidFlowError
        If the matrix is not square or holds negative or non-finite values.
    """
    data = np.asarray(matrix, dtype=float)
    if data.size == 0:
        return ChordLayout(groups=(), ribbons=())
    if data.ndim != 2 or data.shape[0] != data.shape[1]:
        raise InvalidFlowError(f"Chord matrix must be square, got shape {data.shape}")
    if not np.isfinite(data).all() or (data < 0).any():
        raise InvalidFlowError("Chord matrix values must be finite and non-negative")

    group_count = data.shape[0]
    totals = data.sum(axis=1) + data.sum(axis=0)
    groups = partition(
        [(index, float(total)) for index, total in enumerate(totals)],
        start_angle,
        start_angle + FULL_CIRCLE,
        padding=padding,
        wrap=True,
    )

    offsets = [0.0] * group_count
    ribbons: List[ChordRibbon] = []
    for i in range(group_count):
        for j in range(group_count):
            value = float(data[i, j])
            if i == j or value <= 0:
                continue
            source_length = value / totals[i] * groups[i].span if totals[i] > 0 else 0.0
            target_length = value / totals[j] * groups[j].span if totals[j] > 0 else 0.0

            source_start = groups[i].start_angle + offsets[i]
            target_start = groups[j].start_angle + offsets[j]
            offsets[i] += source_length
            offsets[j] += target_length

            ribbons.append(
                ChordRibbon(
                    source=i,
                    target=j,
                    value=value,
                    source_start=source_start,
                    source_end=source_start + source_length,
                    target_start=target_start,
                    target_end=target_start + target_length,
                )
            )

    logger.debug(f"Chord layout: {group_count} groups, {len(ribbons)} ribbons")
    return ChordLayout(groups=tuple(groups), ribbons=tuple(ribbons))


def gauge_fraction(value: float, minimum: float, maximum: float) -> float:
    """Position of ``value`` within ``[minimum, maximum]`` clamped to ``[0, 1]``; 0 for an empty range."""
    value_range = maximum - minimum
    if value_range <= 0:
        return 0.0
    return min(max((value - minimum) / value_range, 0.0), 1.0)


def gauge_angle(
    value: float,
    minimum: float,
    maximum: float,
    *,
    start_angle: float = DEFAULT_GAUGE_START_ANGLE,
    end_angle: float = DEFAULT_GAUGE_END_ANGLE,
) -> float:
    """Needle angle for ``value`` on a dial sweeping from ``start_angle`` to ``end_angle``."""
    return start_angle + (end_angle - start_angle) * gauge_fraction(value, minimum, maximum)


def gauge_band(
    value: float,
    minimum: float,
    maximum: float,
    bands: Sequence[GaugeBand] = DEFAULT_GAUGE_BANDS,
) -> GaugeBand | None:
    """First band whose fractional range contains ``value``."""
    fraction = gauge_fraction(value, minimum, maximum)
    for band in bands:
        if band.contains(fraction):
            return band
    return None


def gauge_band_segments(
    bands: Sequence[GaugeBand] = DEFAULT_GAUGE_BANDS,
    *,
    start_angle: float = DEFAULT_GAUGE_START_ANGLE,
    end_angle: float = DEFAULT_GAUGE_END_ANGLE,
) -> List[AngularSegment]:
    """Dial arcs for each band, positioned by its fractional range."""
    sweep = end_angle - start_angle
    return [
        AngularSegment(
            entity=band,
            start_angle=start_angle + sweep * band.lower,
            end_angle=start_angle + sweep * band.upper,
        )
        for band in bands
    ]
