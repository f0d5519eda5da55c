"""Build engine inputs from tabular data."""

from __future__ import annotations

from typing import Dict, Iterable, List, Sequence, Tuple

import numpy as np
import pandas as pd

from .hierarchy import HierarchyNode
from .models import FlowConnection, WordCloudItem


def _require_columns(df: pd.DataFrame, columns: Iterable[str]) -> None:
    missing = [column for column in columns if column not in df.columns]
    if missing:
        raise KeyError(f"Missing required column(s): {', '.join(missing)}")


def _label(value: object) -> str:
    if value is None or (isinstance(value, float) and np.isnan(value)):
        return "Unknown"
    return str(value).strip() or "Unknown"


def hierarchy_from_frame(
    df: pd.DataFrame,
    path: Sequence[str],
    value: str,
    *,
    root_name: str = "Total",
) -> HierarchyNode:
    """
    Return a hierarchy whose levels follow the ``path`` columns.

    Rows sharing the full path are summed into one leaf. Missing labels become
    ``"Unknown"`` and missing values count as 0. Children keep first-appearance order.
    """
    if not path:
        raise ValueError("path must name at least one column")
    _require_columns(df, [*path, value])

    working = df[list(path)].apply(lambda column: column.map(_label))
    working[value] = pd.to_numeric(df[value], errors="coerce").fillna(0.0)
    grouped = working.groupby(list(path), sort=False)[value].sum().reset_index()

    return HierarchyNode(name=root_name, children=tuple(_build_level(grouped, list(path), value)))


def _build_level(frame: pd.DataFrame, path: List[str], value: str) -> List[HierarchyNode]:
    column, rest = path[0], path[1:]
    nodes: List[HierarchyNode] = []
    for label, group in frame.groupby(column, sort=False):
        if rest:
            nodes.append(HierarchyNode(name=label, children=tuple(_build_level(group, rest, value))))
        else:
            nodes.append(HierarchyNode(name=label, value=float(group[value].sum())))
    return nodes


def connections_from_frame(df: pd.DataFrame, source: str, target: str, value: str) -> List[FlowConnection]:
    """Aggregate rows into flow connections, summing duplicate source/target pairs."""
    _require_columns(df, [source, target, value])
    if df.empty:
        return []

    working = pd.DataFrame(
        {
            "source": df[source].map(_label),
            "target": df[target].map(_label),
            "value": pd.to_numeric(df[value], errors="coerce").fillna(0.0),
        }
    )
    grouped = working.groupby(["source", "target"], sort=False)["value"].sum().reset_index()
    return [
        FlowConnection(source=row.source, target=row.target, value=float(row.value))
        for row in grouped.itertuples(index=False)
    ]


def matrix_from_connections(connections: Iterable[FlowConnection]) -> Tuple[List[str], np.ndarray]:
    """Square flow matrix for chord layouts plus the row/column labels in first-appearance order."""
    connections = list(connections)
    index: Dict[str, int] = {}
    for conn in connections:
        index.setdefault(conn.source, len(index))
        index.setdefault(conn.target, len(index))

    matrix = np.zeros((len(index), len(index)), dtype=float)
    for conn in connections:
        matrix[index[conn.source], index[conn.target]] += conn.value
    return list(index), matrix


def points_from_frame(df: pd.DataFrame, x: str, y: str) -> List[Tuple[float, float]]:
    """Numeric ``(x, y)`` pairs, dropping rows where either coordinate is missing."""
    _require_columns(df, [x, y])
    working = df[[x, y]].apply(pd.to_numeric, errors="coerce").dropna()
    return [(float(px), float(py)) for px, py in working.itertuples(index=False)]


def word_items_from_frame(df: pd.DataFrame, text: str, weight: str | None = None) -> List[WordCloudItem]:
    """Word items from a text column, weighted by ``weight`` or by occurrence count."""
    _require_columns(df, [text] if weight is None else [text, weight])
    labels = df[text].map(_label)
    if weight is None:
        counts = labels.value_counts(sort=False)
    else:
        weights = pd.to_numeric(df[weight], errors="coerce").fillna(0.0)
        counts = weights.groupby(labels, sort=False).sum()
    return [WordCloudItem(text=str(label), weight=float(count)) for label, count in counts.items()]
