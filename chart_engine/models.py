"""Plain geometry and data records shared across the engine."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Tuple

from .errors import InvalidFlowError


@dataclass(frozen=True, slots=True)
class DataPoint:
    value: float
    label: str | None = None
    color: str | None = None


@dataclass(frozen=True, slots=True)
class Rect:
    x: float
    y: float
    width: float
    height: float

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)

    def inset(self, dx: float, dy: float) -> Rect:
        """Shrink the rect on every side, never below zero size."""
        width = max(self.width - 2 * dx, 0.0)
        height = max(self.height - 2 * dy, 0.0)
        return Rect(self.x + (self.width - width) / 2, self.y + (self.height - height) / 2, width, height)

    def intersects(self, other: Rect) -> bool:
        """True when the interiors overlap; shared edges do not count."""
        return (
            self.x < other.max_x
            and other.x < self.max_x
            and self.y < other.max_y
            and other.y < self.max_y
        )

    def contains(self, other: Rect, tolerance: float = 1e-9) -> bool:
        return (
            other.x >= self.x - tolerance
            and other.y >= self.y - tolerance
            and other.max_x <= self.max_x + tolerance
            and other.max_y <= self.max_y + tolerance
        )


@dataclass(frozen=True, slots=True)
class FlowConnection:
    """Directed weighted edge between two nodes identified by key."""

    source: str
    target: str
    value: float

    def __post_init__(self) -> None:
        if not math.isfinite(self.value) or self.value < 0:
            raise InvalidFlowError(
                f"Flow {self.source!r} -> {self.target!r} has invalid value {self.value!r}; "
                "values must be finite and non-negative"
            )


@dataclass(frozen=True, slots=True)
class LayoutRect:
    node: Any
    rect: Rect
    depth: int


@dataclass(frozen=True, slots=True)
class AngularSegment:
    entity: Any
    start_angle: float
    end_angle: float
    depth: int = 0

    @property
    def span(self) -> float:
        return self.end_angle - self.start_angle

    @property
    def mid_angle(self) -> float:
        return (self.start_angle + self.end_angle) / 2


@dataclass(frozen=True, slots=True)
class ChordRibbon:
    source: int
    target: int
    value: float
    source_start: float
    source_end: float
    target_start: float
    target_end: float


@dataclass(frozen=True, slots=True)
class ChordLayout:
    groups: Tuple[AngularSegment, ...]
    ribbons: Tuple[ChordRibbon, ...]


@dataclass(frozen=True, slots=True)
class GaugeBand:
    """Fractional range ``[lower, upper]`` of a gauge dial."""

    lower: float
    upper: float
    label: str | None = None

    def contains(self, fraction: float) -> bool:
        return self.lower <= fraction <= self.upper


@dataclass(frozen=True, slots=True)
class SankeyNodeLayout:
    name: str
    column: int
    x: float
    y: float
    height: float
    value: float


@dataclass(frozen=True, slots=True)
class SankeyFlowLayout:
    connection: FlowConnection
    source_y: float
    target_y: float
    thickness: float


@dataclass(frozen=True, slots=True)
class SankeyLayout:
    nodes: Tuple[SankeyNodeLayout, ...]
    flows: Tuple[SankeyFlowLayout, ...]
    columns: Tuple[Tuple[str, ...], ...]

    def node(self, name: str) -> SankeyNodeLayout:
        for node in self.nodes:
            if node.name == name:
                return node
        raise KeyError(name)


@dataclass(frozen=True, slots=True)
class DensityPoint:
    value: float
    density: float


@dataclass(frozen=True, slots=True)
class HistogramBin:
    lower: float
    upper: float
    count: int


@dataclass(frozen=True, slots=True)
class WordCloudItem:
    text: str
    weight: float
    color: str | None = None


@dataclass(frozen=True, slots=True)
class PlacedWord:
    """A word positioned by its centre; ``placed`` is False for fallback positions."""

    item: WordCloudItem
    x: float
    y: float
    width: float
    height: float
    font_size: float
    rotation: float
    placed: bool = True

    @property
    def bounds(self) -> Rect:
        return Rect(self.x - self.width / 2, self.y - self.height / 2, self.width, self.height)


@dataclass(frozen=True, slots=True)
class ClusterPoint:
    x: float
    y: float
    weight: int
