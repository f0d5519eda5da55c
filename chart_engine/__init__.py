"""Layout and statistics engine for chart data."""

from .errors import ChartEngineError, CyclicFlowError, InvalidFlowError, InvalidHierarchyError
from .hierarchy import HierarchyNode, build_hierarchy
from .models import DataPoint, FlowConnection, Rect, WordCloudItem
from .analytics.summaries import DescriptiveSummary, build_summary
from .layout import chord_layout, cluster_points, compute_sankey, compute_treemap, pack_words, pie_segments, sunburst_segments

__all__ = [
    "ChartEngineError",
    "CyclicFlowError",
    "InvalidFlowError",
    "InvalidHierarchyError",
    "HierarchyNode",
    "build_hierarchy",
    "DataPoint",
    "FlowConnection",
    "Rect",
    "WordCloudItem",
    "DescriptiveSummary",
    "build_summary",
    "chord_layout",
    "cluster_points",
    "compute_sankey",
    "compute_treemap",
    "pack_words",
    "pie_segments",
    "sunburst_segments",
]
