"""Collision-avoiding placement of weighted words."""

from __future__ import annotations

import logging
import math
import zlib
from enum import Enum
from typing import Iterable, List, Sequence, Tuple

import numpy as np

from ..analytics.scales import normalize
from ..config import (
    CHARACTER_WIDTH_RATIO,
    CIRCULAR_RADIUS_RATIO,
    DEFAULT_MAX_FONT_SIZE,
    DEFAULT_MIN_FONT_SIZE,
    DEFAULT_ROTATION_ANGLES,
    DEFAULT_WORD_PADDING,
    GRID_CELL_HEIGHT,
    GRID_CELL_WIDTH,
    GRID_TOP_OFFSET,
    LINE_HEIGHT_RATIO,
    RANDOM_MAX_ATTEMPTS,
    SPIRAL_ANGLE_STEP,
    SPIRAL_MAX_ATTEMPTS,
    SPIRAL_RADIUS_STEP,
)
from ..models import PlacedWord, Rect, WordCloudItem

logger = logging.getLogger(__name__)


class WordCloudLayout(str, Enum):
    SPIRAL = "spiral"
    RANDOM = "random"
    CIRCULAR = "circular"
    GRID = "grid"


def font_sizes(
    weights: Sequence[float],
    *,
    min_font_size: float = DEFAULT_MIN_FONT_SIZE,
    max_font_size: float = DEFAULT_MAX_FONT_SIZE,
) -> List[float]:
    """Linear interpolation of weights into the font range; the midpoint when all weights match."""
    return normalize(weights, (min_font_size, max_font_size))


def word_rotation(text: str, rotation_angles: Sequence[float] = DEFAULT_ROTATION_ANGLES) -> float:
    """Stable rotation picked from ``rotation_angles`` by a checksum of the text."""
    if not rotation_angles:
        return 0.0
    return float(rotation_angles[zlib.crc32(text.encode("utf-8")) % len(rotation_angles)])


def estimate_word_size(text: str, font_size: float, rotation: float = 0.0) -> Tuple[float, float]:
    width = len(text) * font_size * CHARACTER_WIDTH_RATIO
    height = font_size * LINE_HEIGHT_RATIO
    if abs(rotation) == 90:
        return height, width
    return width, height


def pack_words(
    items: Iterable[WordCloudItem],
    width: float,
    height: float,
    *,
    layout: WordCloudLayout | str = WordCloudLayout.SPIRAL,
    padding: float = DEFAULT_WORD_PADDING,
    min_font_size: float = DEFAULT_MIN_FONT_SIZE,
    max_font_size: float = DEFAULT_MAX_FONT_SIZE,
    rotation_angles: Sequence[float] = DEFAULT_ROTATION_ANGLES,
    use_rotations: bool = True,
    max_attempts: int | None = None,
    seed: int = 0,
) -> List[PlacedWord]:
    """
    Position words on a ``width`` x ``height`` canvas, heaviest first.

    ``spiral`` walks an Archimedean spiral out from the centre and ``random`` draws
    seeded candidate positions; both accept the first candidate whose padded box lies
    on the canvas without overlapping an earlier word, and fall back to the canvas
    centre with ``placed=False`` once ``max_attempts`` candidates are exhausted.
    ``circular`` and ``grid`` compute positions directly and report ``placed=False``
    when the box does not fit the canvas.

    Returns
    -------
    list[PlacedWord]
        One entry per item, in descending weight order.
    """
    layout = WordCloudLayout(layout)
    ordered = sorted(items, key=lambda item: item.weight, reverse=True)
    if not ordered:
        return []

    sizes = font_sizes([item.weight for item in ordered], min_font_size=min_font_size, max_font_size=max_font_size)
    canvas = Rect(0.0, 0.0, width, height)
    center = (width / 2, height / 2)
    occupied: List[Rect] = []
    rng = np.random.default_rng(seed)
    results: List[PlacedWord] = []

    for index, (item, font_size) in enumerate(zip(ordered, sizes)):
        rotation = word_rotation(item.text, rotation_angles) if use_rotations else 0.0
        word_width, word_height = estimate_word_size(item.text, font_size, rotation)

        if layout is WordCloudLayout.SPIRAL:
            position = _spiral_position(
                word_width, word_height, padding, canvas, occupied, max_attempts or SPIRAL_MAX_ATTEMPTS
            )
        elif layout is WordCloudLayout.RANDOM:
            position = _random_position(
                word_width, word_height, padding, canvas, occupied, rng, max_attempts or RANDOM_MAX_ATTEMPTS
            )
        elif layout is WordCloudLayout.CIRCULAR:
            position = _circular_position(index, len(ordered), center, min(width, height) * CIRCULAR_RADIUS_RATIO)
        else:
            position = _grid_position(index, width)

        placed = position is not None
        if layout in (WordCloudLayout.CIRCULAR, WordCloudLayout.GRID):
            placed = canvas.contains(_box(position, word_width, word_height, padding))
        elif position is None:
            logger.warning(f"No free position for word {item.text!r}; placing it at the canvas centre")
            position = center

        occupied.append(_box(position, word_width, word_height, 0.0))
        results.append(
            PlacedWord(
                item=item,
                x=position[0],
                y=position[1],
                width=word_width,
                height=word_height,
                font_size=font_size,
                rotation=rotation,
                placed=placed,
            )
        )

    return results


def _box(position: Tuple[float, float], width: float, height: float, padding: float) -> Rect:
    x, y = position
    return Rect(x - width / 2 - padding, y - height / 2 - padding, width + 2 * padding, height + 2 * padding)


def _fits(candidate: Rect, canvas: Rect, occupied: Sequence[Rect]) -> bool:
    return canvas.contains(candidate) and not any(candidate.intersects(rect) for rect in occupied)


def _spiral_position(
    width: float,
    height: float,
    padding: float,
    canvas: Rect,
    occupied: Sequence[Rect],
    max_attempts: int,
) -> Tuple[float, float] | None:
    cx, cy = canvas.center
    angle = 0.0
    radius = 0.0
    for _ in range(max_attempts):
        position = (cx + radius * math.cos(angle), cy + radius * math.sin(angle))
        if _fits(_box(position, width, height, padding), canvas, occupied):
            return position
        angle += SPIRAL_ANGLE_STEP
        radius += SPIRAL_RADIUS_STEP / (2 * math.pi)
    return None


def _random_position(
    width: float,
    height: float,
    padding: float,
    canvas: Rect,
    occupied: Sequence[Rect],
    rng: np.random.Generator,
    max_attempts: int,
) -> Tuple[float, float] | None:
    half_w = width / 2 + padding
    half_h = height / 2 + padding
    if 2 * half_w > canvas.width or 2 * half_h > canvas.height:
        return None
    for _ in range(max_attempts):
        position = (
            float(rng.uniform(half_w, canvas.width - half_w)),
            float(rng.uniform(half_h, canvas.height - half_h)),
        )
        if _fits(_box(position, width, height, padding), canvas, occupied):
            return position
    return None


def _circular_position(index: int, total: int, center: Tuple[float, float], radius: float) -> Tuple[float, float]:
    angle = index / total * 2 * math.pi - math.pi / 2
    r = radius * (0.5 + 0.5 * (total - index) / total)
    return (center[0] + math.cos(angle) * r, center[1] + math.sin(angle) * r)


def _grid_position(index: int, width: float) -> Tuple[float, float]:
    columns = max(int(width // GRID_CELL_WIDTH), 1)
    row, col = divmod(index, columns)
    cell_width = width / columns
    return (cell_width * (col + 0.5), GRID_CELL_HEIGHT * (row + 0.5) + GRID_TOP_OFFSET)
