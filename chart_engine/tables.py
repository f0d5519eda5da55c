"""Flatten layout results into pandas tables."""

from __future__ import annotations

from typing import Iterable, Sequence, Tuple

import pandas as pd

from .models import AngularSegment, ClusterPoint, DensityPoint, LayoutRect, PlacedWord, SankeyLayout

TREEMAP_COLUMNS = ["Name", "Depth", "Value", "X", "Y", "Width", "Height"]
SANKEY_NODE_COLUMNS = ["Node", "Column", "X", "Y", "Height", "Value"]
SANKEY_FLOW_COLUMNS = ["Source", "Target", "Value", "Source Y", "Target Y", "Thickness"]
SEGMENT_COLUMNS = ["Label", "Depth", "Start Angle", "End Angle", "Span"]
DENSITY_COLUMNS = ["Value", "Density"]
CLUSTER_COLUMNS = ["X", "Y", "Weight"]
WORD_COLUMNS = ["Text", "Weight", "X", "Y", "Width", "Height", "Font Size", "Rotation", "Placed"]


def treemap_to_frame(rects: Iterable[LayoutRect]) -> pd.DataFrame:
    """One row per laid-out node, in layout order."""
    rows = [
        {
            "Name": item.node.name,
            "Depth": item.depth,
            "Value": item.node.total_value,
            "X": item.rect.x,
            "Y": item.rect.y,
            "Width": item.rect.width,
            "Height": item.rect.height,
        }
        for item in rects
    ]
    return pd.DataFrame(rows, columns=TREEMAP_COLUMNS)


def sankey_to_frames(layout: SankeyLayout) -> Tuple[pd.DataFrame, pd.DataFrame]:
    """Return ``(nodes, flows)`` tables for a Sankey layout."""
    nodes = pd.DataFrame(
        [
            {
                "Node": node.name,
                "Column": node.column,
                "X": node.x,
                "Y": node.y,
                "Height": node.height,
                "Value": node.value,
            }
            for node in layout.nodes
        ],
        columns=SANKEY_NODE_COLUMNS,
    )
    flows = pd.DataFrame(
        [
            {
                "Source": flow.connection.source,
                "Target": flow.connection.target,
                "Value": flow.connection.value,
                "Source Y": flow.source_y,
                "Target Y": flow.target_y,
                "Thickness": flow.thickness,
            }
            for flow in layout.flows
        ],
        columns=SANKEY_FLOW_COLUMNS,
    )
    return nodes, flows


def segments_to_frame(segments: Sequence[AngularSegment]) -> pd.DataFrame:
    """Angular segments with a readable label for whatever entity each one carries."""
    rows = [
        {
            "Label": _segment_label(segment.entity),
            "Depth": segment.depth,
            "Start Angle": segment.start_angle,
            "End Angle": segment.end_angle,
            "Span": segment.span,
        }
        for segment in segments
    ]
    return pd.DataFrame(rows, columns=SEGMENT_COLUMNS)


def density_to_frame(points: Iterable[DensityPoint]) -> pd.DataFrame:
    return pd.DataFrame([(p.value, p.density) for p in points], columns=DENSITY_COLUMNS)


def clusters_to_frame(clusters: Iterable[ClusterPoint]) -> pd.DataFrame:
    frame = pd.DataFrame([(c.x, c.y, c.weight) for c in clusters], columns=CLUSTER_COLUMNS)
    frame["Weight"] = frame["Weight"].astype(int)
    return frame


def words_to_frame(words: Iterable[PlacedWord]) -> pd.DataFrame:
    """Placed words; rows whose search failed keep ``Placed`` set to ``False``."""
    rows = [
        {
            "Text": word.item.text,
            "Weight": word.item.weight,
            "X": word.x,
            "Y": word.y,
            "Width": word.width,
            "Height": word.height,
            "Font Size": word.font_size,
            "Rotation": word.rotation,
            "Placed": word.placed,
        }
        for word in words
    ]
    frame = pd.DataFrame(rows, columns=WORD_COLUMNS)
    frame["Placed"] = frame["Placed"].astype(bool)
    return frame


def _segment_label(entity: object) -> str:
    for attribute in ("name", "label"):
        value = getattr(entity, attribute, None)
        if value:
            return str(value)
    return str(entity)
