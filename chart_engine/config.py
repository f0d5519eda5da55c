"""Named defaults and option objects for the layout engine."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Sequence, Tuple, Type, TypeVar

from .models import GaugeBand

DEFAULT_CANVAS: Tuple[float, float] = (400.0, 300.0)

# treemap
DEFAULT_TREEMAP_MAX_DEPTH = 3
DEFAULT_TREEMAP_SPACING = 0.0

# radial
FULL_CIRCLE = 360.0
DEFAULT_PIE_START_ANGLE = -90.0
DEFAULT_CHORD_PADDING = 2.0
DEFAULT_GAUGE_START_ANGLE = 135.0
DEFAULT_GAUGE_END_ANGLE = 405.0

DEFAULT_GAUGE_BANDS: Tuple[GaugeBand, ...] = (
    GaugeBand(0.0, 0.33, "Low"),
    GaugeBand(0.33, 0.66, "Medium"),
    GaugeBand(0.66, 1.0, "High"),
)
PERFORMANCE_GAUGE_BANDS: Tuple[GaugeBand, ...] = (
    GaugeBand(0.0, 0.25, "Poor"),
    GaugeBand(0.25, 0.5, "Fair"),
    GaugeBand(0.5, 0.75, "Good"),
    GaugeBand(0.75, 1.0, "Excellent"),
)

# sankey
DEFAULT_SANKEY_NODE_WIDTH = 20.0
DEFAULT_SANKEY_NODE_PADDING = 10.0

# word cloud
DEFAULT_MIN_FONT_SIZE = 12.0
DEFAULT_MAX_FONT_SIZE = 48.0
DEFAULT_WORD_PADDING = 4.0
DEFAULT_ROTATION_ANGLES: Tuple[float, ...] = (0.0, -90.0, 90.0)
CHARACTER_WIDTH_RATIO = 0.6
LINE_HEIGHT_RATIO = 1.2
SPIRAL_ANGLE_STEP = 0.5
SPIRAL_RADIUS_STEP = 2.0
SPIRAL_MAX_ATTEMPTS = 1000
RANDOM_MAX_ATTEMPTS = 100
GRID_CELL_WIDTH = 100.0
GRID_CELL_HEIGHT = 50.0
GRID_TOP_OFFSET = 20.0
CIRCULAR_RADIUS_RATIO = 0.35

# scatter
DEFAULT_CLUSTER_THRESHOLD = 10_000
DEFAULT_CLUSTER_GRID_SIZE = 20

# statistics
DEFAULT_MODE_PRECISION = 2
DEFAULT_DENSITY_POINTS = 50
SILVERMAN_FACTOR = 0.9
IQR_TO_SIGMA = 1.34
OUTLIER_FENCE = 1.5
NOTCH_FACTOR = 1.57

_OptionsT = TypeVar("_OptionsT", bound="_Options")


class _Options:
    """Shared helpers for the option dataclasses below."""

    __slots__ = ()

    @classmethod
    def from_dict(cls: Type[_OptionsT], data: Mapping[str, Any]) -> _OptionsT:
        """Build options from a mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}  # type: ignore[arg-type]
        return cls(**{key: value for key, value in data.items() if key in known})

    def as_kwargs(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}  # type: ignore[arg-type]


@dataclass(frozen=True, slots=True)
class TreemapOptions(_Options):
    max_depth: int = DEFAULT_TREEMAP_MAX_DEPTH
    spacing: float = DEFAULT_TREEMAP_SPACING
    include_internal: bool = False


@dataclass(frozen=True, slots=True)
class SankeyOptions(_Options):
    node_width: float = DEFAULT_SANKEY_NODE_WIDTH
    node_padding: float = DEFAULT_SANKEY_NODE_PADDING


@dataclass(frozen=True, slots=True)
class WordCloudOptions(_Options):
    layout: str = "spiral"
    padding: float = DEFAULT_WORD_PADDING
    min_font_size: float = DEFAULT_MIN_FONT_SIZE
    max_font_size: float = DEFAULT_MAX_FONT_SIZE
    rotation_angles: Sequence[float] = DEFAULT_ROTATION_ANGLES
    use_rotations: bool = True
    max_attempts: int | None = None
    seed: int = 0


@dataclass(frozen=True, slots=True)
class ClusterOptions(_Options):
    threshold: int = DEFAULT_CLUSTER_THRESHOLD
    grid_size: int = DEFAULT_CLUSTER_GRID_SIZE
