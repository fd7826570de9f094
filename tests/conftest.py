"""Shared fixtures for the precision evaluation tests."""

from typing import List, Optional, Sequence

import pytest

from dogm_eval.clustering import ClusteringAdapter
from dogm_eval.data import GridSample, SimulationDataset, Vehicle


class FixedClusterer(ClusteringAdapter):
    """Test double returning predetermined clusters.

    Without predetermined clusters, every non-empty input becomes one cluster.
    """

    def __init__(self, clusters: Optional[List[List[GridSample]]] = None):
        self.clusters = clusters
        self.calls = 0

    def cluster(self, samples: Sequence[GridSample]) -> List[List[GridSample]]:
        self.calls += 1
        if self.clusters is None:
            return [list(samples)] if samples else []
        return [list(c) for c in self.clusters]


def make_blob(x0: int, y0: int, size: int = 3, vel=(0.0, 0.0)) -> List[GridSample]:
    """Square block of grid samples sharing one velocity."""
    return [
        GridSample(x=float(x0 + i), y=float(y0 + j), mean_x_vel=vel[0], mean_y_vel=vel[1])
        for j in range(size)
        for i in range(size)
    ]


@pytest.fixture
def sample():
    """Single grid sample at (10, 10) moving in +x."""
    return GridSample(x=10.0, y=10.0, mean_x_vel=1.0, mean_y_vel=0.0)


@pytest.fixture
def vehicle():
    """Vehicle two units right of the sample's world position."""
    return Vehicle(pos=(12.0, 90.0), vel=(1.0, 0.0))


@pytest.fixture
def dataset(vehicle):
    """Two steps with the same single vehicle."""
    return SimulationDataset.from_records([[vehicle], [vehicle]])
