from __future__ import annotations

import itertools

import pytest

from chart_engine.hierarchy import HierarchyNode, build_hierarchy
from chart_engine.layout.treemap import compute_treemap, squarify
from chart_engine.models import Rect


def _overlap_area(a: Rect, b: Rect) -> float:
    width = min(a.max_x, b.max_x) - max(a.x, b.x)
    height = min(a.max_y, b.max_y) - max(a.y, b.y)
    return max(width, 0.0) * max(height, 0.0)


def _sample_tree() -> HierarchyNode:
    return build_hierarchy(
        "root",
        [
            build_hierarchy("A", [HierarchyNode("A1", 6), HierarchyNode("A2", 6)]),
            build_hierarchy("B", [HierarchyNode("B1", 4), HierarchyNode("B2", 3)]),
            HierarchyNode("C", 2),
            HierarchyNode("D", 2),
            HierarchyNode("E", 1),
        ],
    )


def test_squarify_areas_are_proportional():
    bounds = Rect(0, 0, 600, 400)
    values = [6, 6, 4, 3, 2, 2, 1]
    rects = squarify(values, bounds)

    assert len(rects) == len(values)
    for value, rect in zip(values, rects):
        assert rect.area == pytest.approx(value * 10_000)
        assert bounds.contains(rect, tolerance=1e-6)
    assert sum(rect.area for rect in rects) == pytest.approx(bounds.area)


def test_squarify_rects_do_not_overlap():
    rects = squarify([6, 6, 4, 3, 2, 2, 1], Rect(0, 0, 600, 400))
    for a, b in itertools.combinations(rects, 2):
        assert _overlap_area(a, b) == pytest.approx(0.0, abs=1e-6)


def test_squarify_keeps_tied_values_in_one_row():
    first, second = squarify([1, 1], Rect(0, 0, 100, 100))
    assert first == Rect(0, 0, 100, 50)
    assert second == Rect(0, 50, 100, 50)


def test_squarify_zero_total_yields_empty_rects():
    rects = squarify([0, 0], Rect(10, 20, 100, 100))
    assert rects == [Rect(10, 20, 0, 0), Rect(10, 20, 0, 0)]


def test_compute_treemap_leaf_areas_match_values():
    bounds = Rect(0, 0, 600, 400)
    layout = compute_treemap(_sample_tree(), bounds)

    assert [item.node.name for item in layout] == ["A1", "A2", "B1", "B2", "C", "D", "E"]
    for item in layout:
        assert item.rect.area == pytest.approx(item.node.total_value * 10_000)
    for a, b in itertools.combinations(layout, 2):
        assert _overlap_area(a.rect, b.rect) == pytest.approx(0.0, abs=1e-6)


def test_compute_treemap_depth_limits():
    bounds = Rect(0, 0, 600, 400)
    assert [item.node.name for item in compute_treemap(_sample_tree(), bounds, max_depth=0)] == ["root"]

    shallow = compute_treemap(_sample_tree(), bounds, max_depth=1)
    assert [item.node.name for item in shallow] == ["A", "B", "C", "D", "E"]
    assert all(item.depth == 1 for item in shallow)


def test_compute_treemap_spacing_and_internal_nodes():
    bounds = Rect(0, 0, 600, 400)
    layout = compute_treemap(_sample_tree(), bounds, spacing=5, include_internal=True)
    names = [item.node.name for item in layout]
    assert names[0] == "root"
    assert names.index("A") < names.index("A1")

    parent = next(item for item in layout if item.node.name == "A")
    # A fills the left column of the root, so its inset rect starts 5 units in
    assert parent.rect.x == pytest.approx(5)
    assert parent.rect.y == pytest.approx(5)
    for child in (item for item in layout if item.node.name in {"A1", "A2"}):
        assert parent.rect.contains(child.rect, tolerance=1e-6)
