from __future__ import annotations

import pytest

from chart_engine.analytics.timeseries import build_trend, exponential_moving_average, simple_moving_average


def test_simple_moving_average_full_windows():
    assert simple_moving_average([1, 2, 3, 4, 5], 2) == pytest.approx([1.5, 2.5, 3.5, 4.5])
    assert simple_moving_average([1, 2, 3], 3) == pytest.approx([2.0])


def test_simple_moving_average_invalid_window_returns_input():
    assert simple_moving_average([1, 2, 3], 0) == [1.0, 2.0, 3.0]
    assert simple_moving_average([1, 2, 3], 4) == [1.0, 2.0, 3.0]


def test_exponential_moving_average():
    assert exponential_moving_average([1, 2, 3], 0.5) == pytest.approx([1.0, 1.5, 2.25])
    assert exponential_moving_average([], 0.5) == []
    with pytest.raises(ValueError):
        exponential_moving_average([1, 2], 1.5)
    with pytest.raises(ValueError):
        exponential_moving_average([1, 2], -0.1)


def test_exponential_moving_average_zero_alpha_holds_first_value():
    assert exponential_moving_average([1, 2, 3], 0.0) == [1.0, 1.0, 1.0]


def test_build_trend_fits_slope():
    result = build_trend([1, 2, 3, 4, 5, 6], window=2)
    assert {"index", "value", "sma", "ema", "trend"}.issubset(result.frame.columns)
    assert result.slope == pytest.approx(1.0)
    assert result.model_summary is not None
    assert result.frame["trend"].tolist() == pytest.approx([1, 2, 3, 4, 5, 6])


def test_build_trend_short_and_empty_series():
    short = build_trend([1.0, 2.0])
    assert short.slope is None
    assert short.frame["trend"].isna().all()

    empty = build_trend([])
    assert empty.frame.empty
    assert empty.slope is None
