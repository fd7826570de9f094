"""
Grid to world coordinate transform for clusters.

Grid y is a row index pointing downwards from the top left corner, while world
y points upwards from the bottom left corner. Velocities are therefore negated
in y, positions are negated and translated by the grid size. x is only scaled.
"""

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from ..data.dataset import GridSample


@dataclass(frozen=True)
class Centroid:
    """World-frame position and velocity summarizing one cluster."""
    x: float
    y: float
    v_x: float
    v_y: float


def compute_cluster_centroid(
    cluster: Sequence[GridSample],
    resolution: float,
    grid_size: float
) -> Centroid:
    """
    Compute the world-frame centroid of a cluster.

    Args:
        cluster: Non-empty list of grid samples
        resolution: World units per grid cell
        grid_size: Extent of the grid in world units

    Returns:
        Centroid with mean position and velocity in world coordinates

    Raises:
        ValueError: If the cluster is empty
    """
    if len(cluster) == 0:
        raise ValueError("Cannot compute the centroid of an empty cluster")

    values = np.array(
        [[s.x, s.y, s.mean_x_vel, s.mean_y_vel] for s in cluster],
        dtype=np.float32
    )
    x, y, v_x, v_y = values.mean(axis=0, dtype=np.float32) * np.float32(resolution)

    return Centroid(
        x=float(x),
        y=float(np.float32(grid_size) - y),
        v_x=float(v_x),
        v_y=float(-v_y)
    )
