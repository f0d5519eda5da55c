"""Squarified treemap layout."""

from __future__ import annotations

import logging
import math
from typing import List, Sequence

from ..config import DEFAULT_TREEMAP_MAX_DEPTH, DEFAULT_TREEMAP_SPACING
from ..hierarchy import HierarchyNode
from ..models import LayoutRect, Rect

logger = logging.getLogger(__name__)


def compute_treemap(
    root: HierarchyNode,
    rect: Rect,
    *,
    max_depth: int = DEFAULT_TREEMAP_MAX_DEPTH,
    spacing: float = DEFAULT_TREEMAP_SPACING,
    include_internal: bool = False,
) -> List[LayoutRect]:
    """
    Partition ``rect`` among the hierarchy below ``root``.

    Children of a node are squarified into the node's rect. A child that has its own
    children and sits above ``max_depth`` is subdivided again inside its rect inset by
    ``spacing``; every other child is emitted as one ``LayoutRect`` covering its whole
    subtree. With ``include_internal`` the rect of every subdivided node is emitted too,
    ahead of its descendants.

    Parameters
    ----------
    root:
        Hierarchy to lay out.
    rect:
        Target rectangle.
    max_depth:
        Number of levels to subdivide; ``0`` returns the root's rect.
    spacing:
        Inset applied to a child's rect before it is subdivided.
    include_internal:
        Also emit subdivided nodes.

    Returns
    -------
    list[LayoutRect]
    """
    results: List[LayoutRect] = []
    _layout_node(root, rect, 0, max_depth, spacing, include_internal, results)
    return results


def _layout_node(
    node: HierarchyNode,
    rect: Rect,
    depth: int,
    max_depth: int,
    spacing: float,
    include_internal: bool,
    results: List[LayoutRect],
) -> None:
    if depth >= max_depth or node.is_leaf:
        results.append(LayoutRect(node=node, rect=rect, depth=depth))
        return

    if include_internal:
        results.append(LayoutRect(node=node, rect=rect, depth=depth))

    child_rects = squarify([child.total_value for child in node.children], rect)
    for child, child_rect in zip(node.children, child_rects):
        if depth + 1 < max_depth and not child.is_leaf:
            inner = child_rect.inset(spacing, spacing)
            _layout_node(child, inner, depth + 1, max_depth, spacing, include_internal, results)
        else:
            results.append(LayoutRect(node=child, rect=child_rect, depth=depth + 1))


def squarify(values: Sequence[float], rect: Rect) -> List[Rect]:
    """
    Return one rect per value, in input order, tiling ``rect`` with near-square cells.

    A value joins the open row while the row's worst aspect ratio does not get worse
    (ties are accepted); otherwise the row is closed along the shorter side of the
    remaining space. A zero total yields zero-size rects at the origin of ``rect``.
    """
    total = math.fsum(values)
    if total <= 0:
        return [Rect(rect.x, rect.y, 0.0, 0.0) for _ in values]

    scale = rect.area / total
    sizes = [value * scale for value in values]

    rects: List[Rect] = []
    remaining = rect
    row: List[float] = []
    rows_closed = 0

    for size in sizes:
        side = _shortest_side(remaining)
        if not row or _worst_ratio(row + [size], side) <= _worst_ratio(row, side):
            row.append(size)
            continue
        row_rects = _layout_row(row, remaining)
        rects.extend(row_rects)
        remaining = _remaining_after_row(row_rects, remaining)
        rows_closed += 1
        row = [size]

    if row:
        rects.extend(_layout_row(row, remaining))
        rows_closed += 1

    logger.debug(f"Squarified {len(sizes)} values into {rows_closed} rows")
    return rects


def _shortest_side(rect: Rect) -> float:
    return min(rect.width, rect.height)


def _worst_ratio(row: Sequence[float], side: float) -> float:
    if not row or side <= 0:
        return math.inf

    row_thickness = math.fsum(row) / side
    if row_thickness <= 0:
        return math.inf

    worst = 0.0
    for size in row:
        length = size / row_thickness
        if length <= 0:
            return math.inf
        worst = max(worst, length / row_thickness, row_thickness / length)
    return worst


def _layout_row(sizes: Sequence[float], rect: Rect) -> List[Rect]:
    """Lay a row across ``rect``: a column on the left when wide, a strip on top when tall."""
    total = math.fsum(sizes)
    horizontal = rect.width >= rect.height
    dimension = rect.height if horizontal else rect.width
    if total <= 0 or dimension <= 0:
        return [Rect(rect.x, rect.y, 0.0, 0.0) for _ in sizes]

    thickness = total / dimension
    rects: List[Rect] = []
    offset = 0.0
    for size in sizes:
        length = size / thickness
        if horizontal:
            rects.append(Rect(rect.x, rect.y + offset, thickness, length))
        else:
            rects.append(Rect(rect.x + offset, rect.y, length, thickness))
        offset += length
    return rects


def _remaining_after_row(row_rects: Sequence[Rect], rect: Rect) -> Rect:
    if not row_rects:
        return rect

    first = row_rects[0]
    if rect.width >= rect.height:
        return Rect(rect.x + first.width, rect.y, max(rect.width - first.width, 0.0), rect.height)
    return Rect(rect.x, rect.y + first.height, rect.width, max(rect.height - first.height, 0.0))
