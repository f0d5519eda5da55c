"""Statistics, scales, densities and trends for chart data."""

from .density import kernel_density_estimate, silverman_bandwidth
from .scales import (
    histogram,
    nice_step,
    nice_tick_values,
    normalize,
    optimal_bin_count,
    optimal_bin_width,
    z_score_normalize,
)
from .statistics import (
    BoxPlotStatistics,
    RegressionResult,
    box_plot_statistics,
    coefficient_of_variation,
    correlation,
    interquartile_range,
    kurtosis,
    linear_regression,
    mean,
    median,
    mode,
    percentile,
    predict,
    quartiles,
    skewness,
    standard_deviation,
    variance,
)
from .summaries import DescriptiveSummary, build_summary, summary_to_frame
from .timeseries import TrendResult, build_trend, exponential_moving_average, simple_moving_average

__all__ = [
    "kernel_density_estimate",
    "silverman_bandwidth",
    "histogram",
    "nice_step",
    "nice_tick_values",
    "normalize",
    "optimal_bin_count",
    "optimal_bin_width",
    "z_score_normalize",
    "BoxPlotStatistics",
    "RegressionResult",
    "box_plot_statistics",
    "coefficient_of_variation",
    "correlation",
    "interquartile_range",
    "kurtosis",
    "linear_regression",
    "mean",
    "median",
    "mode",
    "percentile",
    "predict",
    "quartiles",
    "skewness",
    "standard_deviation",
    "variance",
    "DescriptiveSummary",
    "build_summary",
    "summary_to_frame",
    "TrendResult",
    "build_trend",
    "exponential_moving_average",
    "simple_moving_average",
]
