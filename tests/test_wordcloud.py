from __future__ import annotations

import itertools
import logging
import math

import pytest

from chart_engine.layout.wordcloud import estimate_word_size, font_sizes, pack_words, word_rotation
from chart_engine.models import Rect, WordCloudItem


def _items() -> list[WordCloudItem]:
    words = ["python", "chart", "layout", "sankey", "treemap", "pie", "cloud", "scatter", "gauge", "chord"]
    return [WordCloudItem(text, weight) for weight, text in enumerate(words, start=1)]


def test_font_sizes_interpolate_weights():
    assert font_sizes([1, 2, 3]) == pytest.approx([12, 30, 48])
    assert font_sizes([5, 5]) == pytest.approx([30, 30])


def test_word_rotation_is_stable():
    angles = (0.0, -90.0, 90.0)
    assert word_rotation("python", angles) == word_rotation("python", angles)
    assert word_rotation("python", angles) in angles
    assert word_rotation("python", ()) == 0.0


def test_estimate_word_size_swaps_for_vertical_words():
    assert estimate_word_size("abc", 10) == pytest.approx((18, 12))
    assert estimate_word_size("abc", 10, 90) == pytest.approx((12, 18))


def test_spiral_layout_places_words_without_overlap():
    canvas = Rect(0, 0, 600, 400)
    words = pack_words(_items(), 600, 400)

    assert [w.item.text for w in words][0] == "chord"
    assert all(word.placed for word in words)
    for word in words:
        assert canvas.contains(word.bounds, tolerance=1e-6)
    for a, b in itertools.combinations(words, 2):
        assert not a.bounds.intersects(b.bounds)


def test_random_layout_is_reproducible_and_non_overlapping():
    first = pack_words(_items(), 600, 400, layout="random", seed=7)
    second = pack_words(_items(), 600, 400, layout="random", seed=7)
    assert [(w.x, w.y) for w in first] == [(w.x, w.y) for w in second]

    placed = [word for word in first if word.placed]
    for a, b in itertools.combinations(placed, 2):
        assert not a.bounds.intersects(b.bounds)


def test_grid_and_circular_layouts():
    grid = pack_words(_items(), 400, 300, layout="grid", use_rotations=False)
    assert (grid[0].x, grid[0].y) == pytest.approx((50, 45))
    assert (grid[4].x, grid[4].y) == pytest.approx((50, 95))

    circular = pack_words(_items(), 400, 300, layout="circular")
    for word in circular:
        assert math.hypot(word.x - 200, word.y - 150) <= 300 * 0.35 + 1e-9


def test_unplaceable_word_falls_back_to_centre(caplog):
    huge = WordCloudItem("x" * 100, 1)
    with caplog.at_level(logging.WARNING, logger="chart_engine.layout.wordcloud"):
        (word,) = pack_words([huge], 400, 300, use_rotations=False)
    assert word.placed is False
    assert (word.x, word.y) == (200, 150)
    assert "No free position" in caplog.text


def test_empty_input_and_unknown_layout():
    assert pack_words([], 400, 300) == []
    with pytest.raises(ValueError):
        pack_words(_items(), 400, 300, layout="hexagonal")
