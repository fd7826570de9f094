"""
Density-based clustering of grid samples.

The evaluator only depends on the ``ClusteringAdapter`` contract: clusters are
non-empty, noise samples are dropped, and the output is deterministic for a
fixed input order. ``DBSCANClusterer`` fulfils it with scikit-learn.
"""

import logging
from abc import ABC, abstractmethod
from typing import List, Sequence

import numpy as np
from sklearn.cluster import DBSCAN

from ..data.dataset import GridSample


logger = logging.getLogger(__name__)

Cluster = List[GridSample]

NOISE_LABEL = -1


class ClusteringAdapter(ABC):
    """Groups the grid samples of one step into dense clusters."""

    @abstractmethod
    def cluster(self, samples: Sequence[GridSample]) -> List[Cluster]:
        """
        Cluster grid samples.

        Args:
            samples: Grid samples of one simulation step

        Returns:
            List of non-empty clusters. Samples outside any dense neighborhood
            are omitted.
        """
        raise NotImplementedError


class DBSCANClusterer(ClusteringAdapter):
    """DBSCAN over the grid positions of the samples."""

    def __init__(self, max_neighbor_distance: float = 3.0, min_neighbors: int = 5):
        if max_neighbor_distance <= 0:
            raise ValueError(f"max_neighbor_distance must be positive, got {max_neighbor_distance}")
        if min_neighbors < 1:
            raise ValueError(f"min_neighbors must be at least 1, got {min_neighbors}")
        self.max_neighbor_distance = max_neighbor_distance
        self.min_neighbors = min_neighbors

    def cluster(self, samples: Sequence[GridSample]) -> List[Cluster]:
        if len(samples) == 0:
            return []

        positions = np.array([[s.x, s.y] for s in samples], dtype=np.float32)
        labels = DBSCAN(
            eps=self.max_neighbor_distance,
            min_samples=self.min_neighbors
        ).fit_predict(positions)

        # Labels are assigned in order of discovery, so grouping by ascending
        # label keeps the output stable for a fixed input order.
        clusters = []
        for label in np.unique(labels):
            if label == NOISE_LABEL:
                continue
            members = np.flatnonzero(labels == label)
            clusters.append([samples[i] for i in members])

        num_noise = int(np.count_nonzero(labels == NOISE_LABEL))
        logger.debug(f"DBSCAN found {len(clusters)} clusters, {num_noise} noise samples")
        return clusters
