"""
Association of cluster centroids with ground-truth vehicles.

Two policies are available:
- greedy: every centroid takes its nearest vehicle inside the acceptance
  radius. A vehicle may be matched by several centroids of the same step.
- one_to_one: optimal bipartite assignment minimizing the summed distance,
  each vehicle is used at most once per step.
"""

import logging
from typing import List, Optional, Sequence

import numpy as np
from scipy.optimize import linear_sum_assignment

from ..data.dataset import Vehicle
from .metrics import ErrorVector
from .transforms import Centroid


logger = logging.getLogger(__name__)


def _distances(centroid: Centroid, vehicles: Sequence[Vehicle]) -> np.ndarray:
    positions = np.array([v.pos for v in vehicles], dtype=np.float32).reshape(-1, 2)
    return np.hypot(positions[:, 0] - centroid.x, positions[:, 1] - centroid.y)


def find_closest_vehicle(
    centroid: Centroid,
    vehicles: Sequence[Vehicle],
    max_distance: float = 5.0
) -> Optional[Vehicle]:
    """
    Find the nearest vehicle strictly closer than ``max_distance``.

    Ties are resolved in favor of the vehicle listed first.

    Args:
        centroid: Cluster centroid in world coordinates
        vehicles: Ground-truth vehicles of the current step
        max_distance: Acceptance radius in world units

    Returns:
        The matched vehicle, or None if no vehicle is close enough
    """
    if len(vehicles) == 0:
        return None

    distances = _distances(centroid, vehicles)
    candidates = np.flatnonzero(distances < max_distance)
    if len(candidates) == 0:
        return None

    order = np.argsort(distances[candidates], kind='stable')
    return vehicles[candidates[order[0]]]


def assign_one_to_one(
    centroids: Sequence[Centroid],
    vehicles: Sequence[Vehicle],
    max_distance: float = 5.0
) -> List[Optional[Vehicle]]:
    """
    Assign centroids to vehicles with the Hungarian algorithm.

    Pairs at a distance of ``max_distance`` or more are never assigned.

    Args:
        centroids: Cluster centroids of one step
        vehicles: Ground-truth vehicles of the same step
        max_distance: Acceptance radius in world units

    Returns:
        One entry per centroid: its assigned vehicle, or None
    """
    assignment: List[Optional[Vehicle]] = [None] * len(centroids)
    if len(centroids) == 0 or len(vehicles) == 0:
        return assignment

    cost = np.stack([_distances(c, vehicles) for c in centroids]).astype(np.float64)
    gated = cost >= max_distance
    # Large enough that avoiding a gated pair always beats any valid total.
    cost[gated] = max_distance * (min(cost.shape) + 1)

    rows, cols = linear_sum_assignment(cost)
    for row, col in zip(rows, cols):
        if not gated[row, col]:
            assignment[row] = vehicles[col]

    logger.debug(
        f"One-to-one assignment matched {sum(v is not None for v in assignment)} "
        f"of {len(centroids)} centroids"
    )
    return assignment


def compute_error(centroid: Centroid, vehicle: Vehicle) -> ErrorVector:
    """Signed error of a centroid against its matched vehicle."""
    diff = (
        np.array([centroid.x, centroid.y, centroid.v_x, centroid.v_y], dtype=np.float32)
        - np.array([*vehicle.pos, *vehicle.vel], dtype=np.float32)
    )
    return ErrorVector(*(float(d) for d in diff))
