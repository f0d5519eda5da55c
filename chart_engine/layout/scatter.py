"""Grid-based aggregation of large scatter point sets."""

from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

import numpy as np
import pandas as pd

from ..config import DEFAULT_CLUSTER_GRID_SIZE, DEFAULT_CLUSTER_THRESHOLD
from ..models import ClusterPoint

logger = logging.getLogger(__name__)


def cluster_points(
    points: Sequence[Tuple[float, float]],
    *,
    threshold: int = DEFAULT_CLUSTER_THRESHOLD,
    grid_size: int = DEFAULT_CLUSTER_GRID_SIZE,
) -> List[ClusterPoint]:
    """
    Collapse points into one centroid per occupied cell of a ``grid_size`` square grid.

    The grid spans the points' bounding box; points on the maximum edge fall into the
    last cell. Sets of at most ``threshold`` points are returned as weight-1 clusters.
    Clusters come out in the order their cells were first occupied, and their weights
    always sum to the number of input points.
    """
    if grid_size < 1:
        raise ValueError(f"grid_size must be at least 1, got {grid_size}")

    data = np.asarray(points, dtype=float).reshape(-1, 2)
    if data.shape[0] == 0:
        return []
    if data.shape[0] <= threshold:
        return [ClusterPoint(x=float(x), y=float(y), weight=1) for x, y in data]

    frame = pd.DataFrame(data, columns=["x", "y"])
    frame["cell_x"] = _cell_index(frame["x"].to_numpy(), grid_size)
    frame["cell_y"] = _cell_index(frame["y"].to_numpy(), grid_size)

    grouped = (
        frame.groupby(["cell_x", "cell_y"], sort=False)
        .agg(x=("x", "mean"), y=("y", "mean"), weight=("x", "size"))
        .reset_index(drop=True)
    )
    logger.debug(f"Clustered {len(frame)} points into {len(grouped)} cells")
    return [
        ClusterPoint(x=float(row.x), y=float(row.y), weight=int(row.weight))
        for row in grouped.itertuples(index=False)
    ]


def _cell_index(values: np.ndarray, grid_size: int) -> np.ndarray:
    low = values.min()
    value_range = values.max() - low
    if value_range <= 0:
        return np.zeros(values.shape, dtype=int)
    cells = ((values - low) / value_range * grid_size).astype(int)
    return np.clip(cells, 0, grid_size - 1)
