from __future__ import annotations

import math

import pytest

from chart_engine.errors import InvalidHierarchyError
from chart_engine.hierarchy import HierarchyNode, build_hierarchy


def _sample_tree() -> HierarchyNode:
    return build_hierarchy(
        "Total",
        [
            build_hierarchy("Europe", [HierarchyNode("France", 30), HierarchyNode("Spain", 20)]),
            HierarchyNode("Asia", 50),
        ],
    )


def test_total_value_aggregates_children():
    root = _sample_tree()
    assert root.total_value == pytest.approx(100.0)
    assert root.find("Europe").total_value == pytest.approx(50.0)
    assert root.find("Asia").total_value == pytest.approx(50.0)


def test_internal_node_own_value_is_ignored():
    node = HierarchyNode("parent", value=100, children=(HierarchyNode("child", 1),))
    assert node.total_value == 1.0


def test_traversal_helpers():
    root = _sample_tree()
    assert [node.name for node in root.iter_nodes()] == ["Total", "Europe", "France", "Spain", "Asia"]
    assert [leaf.name for leaf in root.leaves()] == ["France", "Spain", "Asia"]
    assert root.depth() == 2
    assert root.find("Missing") is None
    assert root.find("Asia").is_leaf


@pytest.mark.parametrize("value", [-1, math.nan, math.inf, "abc"])
def test_invalid_values_are_rejected(value):
    with pytest.raises(InvalidHierarchyError):
        HierarchyNode("bad", value)


def test_invalid_hierarchy_error_is_a_value_error():
    with pytest.raises(ValueError):
        HierarchyNode("bad", -5)


def test_children_must_be_nodes():
    with pytest.raises(TypeError):
        HierarchyNode("root", children=("not a node",))


def test_from_dict_builds_nested_tree():
    root = HierarchyNode.from_dict(
        {
            "name": "root",
            "children": [
                {"name": "a", "value": 2, "color": "#ff0000"},
                {"name": "b", "children": [{"name": "c", "value": 3}]},
            ],
        }
    )
    assert root.total_value == 5.0
    assert root.find("a").color == "#ff0000"
    assert root.find("b").total_value == 3.0

    with pytest.raises(InvalidHierarchyError):
        HierarchyNode.from_dict({"value": 1})
