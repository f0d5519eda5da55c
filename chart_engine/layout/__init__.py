"""Geometric layouts: treemap, radial, Sankey, word cloud and scatter."""

from .radial import (
    chord_layout,
    gauge_angle,
    gauge_band,
    gauge_band_segments,
    gauge_fraction,
    partition,
    pie_segments,
    sunburst_segments,
)
from .sampling import (
    LargestTriangleSampling,
    MinMaxSampling,
    NoSampling,
    SamplingStrategy,
    UniformSampling,
    downsample,
)
from .sankey import assign_columns, compute_sankey
from .scatter import cluster_points
from .treemap import compute_treemap, squarify
from .wordcloud import WordCloudLayout, estimate_word_size, font_sizes, pack_words, word_rotation

__all__ = [
    "chord_layout",
    "gauge_angle",
    "gauge_band",
    "gauge_band_segments",
    "gauge_fraction",
    "partition",
    "pie_segments",
    "sunburst_segments",
    "LargestTriangleSampling",
    "MinMaxSampling",
    "NoSampling",
    "SamplingStrategy",
    "UniformSampling",
    "downsample",
    "assign_columns",
    "compute_sankey",
    "cluster_points",
    "compute_treemap",
    "squarify",
    "WordCloudLayout",
    "estimate_word_size",
    "font_sizes",
    "pack_words",
    "word_rotation",
]
