from __future__ import annotations

import pytest

from chart_engine.analytics import statistics as stats


def _sample() -> list[float]:
    return [2, 4, 4, 4, 5, 5, 7, 9]


def test_mean_variance_and_standard_deviation():
    values = _sample()
    assert stats.mean(values) == pytest.approx(5.0)
    assert stats.variance(values) == pytest.approx(32 / 7)
    assert stats.standard_deviation(values) == pytest.approx(2.138, abs=1e-3)
    assert stats.variance(values, population=True) == pytest.approx(4.0)
    assert stats.standard_deviation(values, population=True) == pytest.approx(2.0)


def test_degenerate_inputs_return_neutral_values():
    assert stats.mean([]) == 0.0
    assert stats.median([]) == 0.0
    assert stats.mode([]) is None
    assert stats.variance([3.0]) == 0.0
    assert stats.skewness([1.0, 2.0]) == 0.0
    assert stats.kurtosis([1.0, 2.0, 3.0]) == 0.0
    assert stats.coefficient_of_variation([-1.0, 1.0]) == 0.0


def test_median_handles_odd_and_even_counts():
    assert stats.median([3, 1, 2]) == 2.0
    assert stats.median([4, 1, 3, 2]) == 2.5


def test_mode_rounds_and_prefers_first_seen_on_ties():
    assert stats.mode([1, 2, 2, 3]) == 2
    assert stats.mode([3, 1, 1, 3]) == 3
    assert stats.mode([1.001, 1.004, 2.0]) == pytest.approx(1.0)


def test_percentile_and_quartiles_interpolate_linearly():
    values = list(range(1, 11))
    assert stats.quartiles(values) == pytest.approx((3.25, 5.5, 7.75))
    assert stats.interquartile_range(values) == pytest.approx(4.5)
    assert stats.percentile(values, 0) == 1.0
    assert stats.percentile(values, 100) == 10.0


def test_percentile_outside_range_or_empty_is_zero():
    assert stats.percentile([1, 2, 3], -1) == 0.0
    assert stats.percentile([1, 2, 3], 101) == 0.0
    assert stats.percentile([], 50) == 0.0


def test_percentile_is_bounded_and_monotonic():
    values = [9.0, -3.0, 4.5, 12.0, 0.0, 7.25, 3.0]
    results = [stats.percentile(values, p) for p in range(0, 101, 5)]
    assert all(min(values) <= value <= max(values) for value in results)
    assert results == sorted(results)


def test_correlation_signs_and_degenerate_cases():
    assert stats.correlation([1, 2, 3], [2, 4, 6]) == pytest.approx(1.0)
    assert stats.correlation([1, 2, 3], [6, 4, 2]) == pytest.approx(-1.0)
    assert stats.correlation([1, 1, 1], [1, 2, 3]) == 0.0
    assert stats.correlation([1, 2], [1, 2, 3]) == 0.0


def test_linear_regression_recovers_exact_line():
    result = stats.linear_regression([1, 2, 3, 4, 5], [2, 4, 6, 8, 10])
    assert result.slope == pytest.approx(2.0)
    assert result.intercept == pytest.approx(0.0, abs=1e-9)
    assert result.r_squared == pytest.approx(1.0)
    assert result.predict(6) == pytest.approx(12.0)
    assert stats.predict(6, result.slope, result.intercept) == pytest.approx(12.0)


def test_linear_regression_degenerate_input():
    assert stats.linear_regression([1, 1, 1], [1, 2, 3]) == stats.RegressionResult(0.0, 0.0, 0.0)
    assert stats.linear_regression([1], [1]) == stats.RegressionResult(0.0, 0.0, 0.0)
    assert stats.linear_regression([1, 2], [1]) == stats.RegressionResult(0.0, 0.0, 0.0)


def test_skewness_sign_follows_the_tail():
    assert stats.skewness([1, 2, 3, 4, 5]) == pytest.approx(0.0, abs=1e-12)
    assert stats.skewness([1, 1, 1, 2, 10]) > 0
    assert stats.skewness([-10, -2, -1, -1, -1]) < 0


def test_box_plot_statistics_flags_outliers():
    box = stats.box_plot_statistics([1, 2, 3, 4, 5, 6, 7, 8, 9, 100])
    assert box.q1 == pytest.approx(3.25)
    assert box.q3 == pytest.approx(7.75)
    assert box.outliers == (100.0,)
    assert box.minimum == 1.0
    assert box.maximum == 9.0
    assert box.notch_extent > 0


def test_box_plot_statistics_empty():
    box = stats.box_plot_statistics([])
    assert box.outliers == ()
    assert box.median == 0.0


def test_mode_rounds_halves_away_from_zero():
    assert stats.mode([0.5, 1.0], precision=0) == 1.0
    assert stats.mode([0.125, 0.13]) == pytest.approx(0.13)
    assert stats.mode([-0.5, -1.0], precision=0) == -1.0
