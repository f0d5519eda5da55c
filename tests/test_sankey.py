from __future__ import annotations

import pytest

from chart_engine.errors import CyclicFlowError, InvalidFlowError
from chart_engine.layout.sankey import compute_sankey
from chart_engine.models import FlowConnection


def _connections() -> list[FlowConnection]:
    return [
        FlowConnection("A", "B", 10),
        FlowConnection("A", "C", 5),
        FlowConnection("B", "D", 10),
        FlowConnection("C", "D", 5),
    ]


def test_columns_follow_flow_direction():
    layout = compute_sankey(_connections(), 300, 200)
    assert layout.columns == (("A",), ("B", "C"), ("D",))

    columns = {node.name: node.column for node in layout.nodes}
    for flow in layout.flows:
        assert columns[flow.connection.source] < columns[flow.connection.target]


def test_node_geometry():
    layout = compute_sankey(_connections(), 300, 200, node_width=20, node_padding=10)
    scale = 190 / 15

    assert [layout.node(name).x for name in "ABD"] == pytest.approx([0, 140, 280])
    assert layout.node("A").height == pytest.approx(15 * scale)
    assert layout.node("A").y == pytest.approx(5)
    assert layout.node("B").y == pytest.approx(0)
    assert layout.node("C").y == pytest.approx(10 * scale + 10)
    assert layout.node("D").value == pytest.approx(15)


def test_flows_stack_from_node_top():
    layout = compute_sankey(_connections(), 300, 200)
    scale = 190 / 15
    a_to_b, a_to_c, b_to_d, c_to_d = layout.flows

    assert a_to_b.thickness == pytest.approx(10 * scale)
    assert a_to_b.source_y == pytest.approx(5)
    assert a_to_c.source_y == pytest.approx(5 + 10 * scale)
    assert c_to_d.target_y == pytest.approx(b_to_d.target_y + b_to_d.thickness)


def test_node_lookup_and_empty_input():
    layout = compute_sankey(_connections(), 300, 200)
    with pytest.raises(KeyError):
        layout.node("Z")

    empty = compute_sankey([], 300, 200)
    assert empty.nodes == () and empty.flows == ()


def test_cycle_raises_with_unassigned_nodes():
    connections = [
        FlowConnection("X", "A", 1),
        FlowConnection("A", "B", 1),
        FlowConnection("B", "A", 1),
    ]
    with pytest.raises(CyclicFlowError) as excinfo:
        compute_sankey(connections, 300, 200)
    assert set(excinfo.value.unassigned) == {"A", "B"}


@pytest.mark.parametrize("value", [-1.0, float("inf"), float("nan")])
def test_invalid_flow_values_are_rejected(value):
    with pytest.raises(InvalidFlowError):
        FlowConnection("A", "B", value)


def test_skip_edges_and_late_roots_wait_for_all_predecessors():
    connections = [
        FlowConnection("A", "D", 2),
        FlowConnection("A", "B", 3),
        FlowConnection("B", "C", 3),
        FlowConnection("C", "D", 4),
        FlowConnection("E", "C", 1),
    ]
    layout = compute_sankey(connections, 400, 200)
    assert layout.columns == (("A", "E"), ("B",), ("C",), ("D",))

    columns = {node.name: node.column for node in layout.nodes}
    for flow in layout.flows:
        assert columns[flow.connection.source] < columns[flow.connection.target]
