"""Layered placement and flow sizing for Sankey diagrams."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from ..config import DEFAULT_SANKEY_NODE_PADDING, DEFAULT_SANKEY_NODE_WIDTH
from ..errors import CyclicFlowError
from ..models import FlowConnection, SankeyFlowLayout, SankeyLayout, SankeyNodeLayout

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _NodeEdges:
    incoming: List[FlowConnection] = field(default_factory=list)
    outgoing: List[FlowConnection] = field(default_factory=list)

    @property
    def value(self) -> float:
        return max(
            math.fsum(conn.value for conn in self.incoming),
            math.fsum(conn.value for conn in self.outgoing),
        )


def compute_sankey(
    connections: Iterable[FlowConnection],
    width: float,
    height: float,
    *,
    node_width: float = DEFAULT_SANKEY_NODE_WIDTH,
    node_padding: float = DEFAULT_SANKEY_NODE_PADDING,
) -> SankeyLayout:
    """
    Place nodes in columns and size flows proportionally to their values.

    Nodes without incoming flows form column 0; every other node goes one column to
    the right of its right-most predecessor. Node heights and flow thicknesses share
    one vertical scale, chosen so the heaviest column fills the canvas height less
    the padding of the most crowded column. Flows stack at both ends in input order,
    starting at each node's top edge.

    Raises
    ------
    CyclicFlowError
        If some nodes can never be assigned a column because they sit on a cycle.
    """
    connections = list(connections)
    if not connections:
        return SankeyLayout(nodes=(), flows=(), columns=())

    edges: Dict[str, _NodeEdges] = {}
    for conn in connections:
        edges.setdefault(conn.source, _NodeEdges()).outgoing.append(conn)
        edges.setdefault(conn.target, _NodeEdges()).incoming.append(conn)

    columns = assign_columns(edges)
    values = {name: node.value for name, node in edges.items()}

    column_values = [math.fsum(values[name] for name in column) for column in columns]
    max_column_value = max(column_values)
    most_nodes = max(len(column) for column in columns)
    available = max(height - node_padding * (most_nodes - 1), 0.0)
    scale = available / max_column_value if max_column_value > 0 else 0.0

    column_step = (width - node_width) / (len(columns) - 1) if len(columns) > 1 else 0.0

    nodes: List[SankeyNodeLayout] = []
    for index, column in enumerate(columns):
        column_height = column_values[index] * scale + node_padding * (len(column) - 1)
        y = (height - column_height) / 2
        for name in column:
            node_height = values[name] * scale
            nodes.append(
                SankeyNodeLayout(
                    name=name,
                    column=index,
                    x=index * column_step,
                    y=y,
                    height=node_height,
                    value=values[name],
                )
            )
            y += node_height + node_padding

    outgoing_offsets = {node.name: node.y for node in nodes}
    incoming_offsets = dict(outgoing_offsets)
    flows: List[SankeyFlowLayout] = []
    for conn in connections:
        thickness = conn.value * scale
        source_y = outgoing_offsets[conn.source]
        target_y = incoming_offsets[conn.target]
        flows.append(SankeyFlowLayout(connection=conn, source_y=source_y, target_y=target_y, thickness=thickness))
        outgoing_offsets[conn.source] = source_y + thickness
        incoming_offsets[conn.target] = target_y + thickness

    logger.debug(f"Sankey layout: {len(nodes)} nodes in {len(columns)} columns, {len(flows)} flows")
    return SankeyLayout(
        nodes=tuple(nodes),
        flows=tuple(flows),
        columns=tuple(tuple(column) for column in columns),
    )


def assign_columns(edges: Dict[str, _NodeEdges]) -> List[List[str]]:
    """
    Topological layering: a node enters the next column once all its predecessors have one.

    Column 0 keeps first-appearance order; later columns are ordered by discovery
    through the previous column's outgoing flows.
    """
    assigned: set[str] = set()
    columns: List[List[str]] = []
    current = [name for name, node in edges.items() if not node.incoming]

    while current:
        columns.append(current)
        assigned.update(current)
        next_column: List[str] = []
        for name in current:
            for conn in edges[name].outgoing:
                target = conn.target
                if target in assigned or target in next_column:
                    continue
                if all(incoming.source in assigned for incoming in edges[target].incoming):
                    next_column.append(target)
        current = next_column

    unassigned = [name for name in edges if name not in assigned]
    if unassigned:
        raise CyclicFlowError(unassigned)
    return columns
