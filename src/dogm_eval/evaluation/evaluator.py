"""
Precision evaluation of clustered grid detections against simulated ground truth.

Per simulation step the grid samples are clustered, every cluster is reduced
to a world-frame centroid, matched to a ground-truth vehicle and its absolute
error is accumulated. ``summarize`` reports the mean absolute errors of the
whole session.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..clustering.dbscan import ClusteringAdapter, DBSCANClusterer
from ..common.config import EvaluatorConfig
from ..data.dataset import GridSample, Vehicle
from .matching import assign_one_to_one, compute_error, find_closest_vehicle
from .metrics import ErrorVector, PrecisionSummary, SessionState, compute_precision_summary
from .reporting import format_cluster_diagnostic, format_summary
from .transforms import Centroid, compute_cluster_centroid


logger = logging.getLogger(__name__)


@dataclass
class ClusterEvaluation:
    """Outcome for one cluster of a step. vehicle and error are None if unassigned."""
    centroid: Centroid
    vehicle: Optional[Vehicle] = None
    error: Optional[ErrorVector] = None

    @property
    def matched(self) -> bool:
        return self.vehicle is not None


class PrecisionEvaluator:
    """Accumulates detection errors over the steps of one simulation run."""

    def __init__(
        self,
        sim_data: Sequence,
        resolution: float,
        grid_size: float,
        config: Optional[EvaluatorConfig] = None,
        clusterer: Optional[ClusteringAdapter] = None,
        state: Optional[SessionState] = None
    ):
        """
        Initialize the evaluator.

        Args:
            sim_data: Ground truth, indexable by step; each step exposes ``vehicles``
            resolution: World units per grid cell
            grid_size: Extent of the grid in world units
            config: Evaluator thresholds (defaults to EvaluatorConfig())
            clusterer: Clustering adapter (defaults to DBSCAN with the config thresholds)
            state: Session state to accumulate into (defaults to a fresh one)

        Raises:
            ValueError: If resolution, grid_size or the config are invalid
        """
        if resolution <= 0:
            raise ValueError(f"resolution must be positive, got {resolution}")
        if grid_size <= 0:
            raise ValueError(f"grid_size must be positive, got {grid_size}")

        self.config = config or EvaluatorConfig()
        self.config.validate()

        self.sim_data = sim_data
        self.resolution = resolution
        self.grid_size = grid_size
        self.clusterer = clusterer or DBSCANClusterer(
            max_neighbor_distance=self.config.max_neighbor_distance,
            min_neighbors=self.config.min_neighbors
        )
        self.state = state if state is not None else SessionState()

    def evaluate_step(
        self,
        step_index: int,
        samples: Sequence[GridSample],
        verbose: bool = False
    ) -> List[ClusterEvaluation]:
        """
        Evaluate the detections of one simulation step and accumulate their errors.

        Steps without samples or without ground-truth vehicles are skipped.

        Args:
            step_index: Index of the step in the simulation data
            samples: Grid samples with velocity estimates for this step
            verbose: Log the error of every matched cluster

        Returns:
            One ClusterEvaluation per cluster, in clustering order

        Raises:
            IndexError: If step_index is outside the simulation data
        """
        if step_index < 0 or step_index >= len(self.sim_data):
            raise IndexError(f"Step {step_index} out of range for {len(self.sim_data)} steps")

        vehicles = self.sim_data[step_index].vehicles
        if len(samples) == 0 or len(vehicles) == 0:
            logger.debug(
                f"Skipping step {step_index}: {len(samples)} samples, {len(vehicles)} vehicles"
            )
            return []

        clusters = self.clusterer.cluster(samples)
        centroids = [
            compute_cluster_centroid(cluster, self.resolution, self.grid_size)
            for cluster in clusters
        ]

        if self.config.matching == "one_to_one":
            matches = assign_one_to_one(centroids, vehicles, self.config.max_assignment_distance)
        else:
            matches = [
                find_closest_vehicle(centroid, vehicles, self.config.max_assignment_distance)
                for centroid in centroids
            ]

        results = []
        cluster_id = 0
        for centroid, vehicle in zip(centroids, matches):
            if vehicle is None:
                self.state.record_unassigned()
                results.append(ClusterEvaluation(centroid=centroid))
                continue

            error = compute_error(centroid, vehicle)
            self.state.accumulate(error)
            results.append(ClusterEvaluation(centroid=centroid, vehicle=vehicle, error=error))

            if verbose:
                logger.info(format_cluster_diagnostic(cluster_id, error))
            cluster_id += 1

        return results

    def max_possible_detections(self) -> int:
        """Vehicles of the first step times the number of steps."""
        if len(self.sim_data) == 0:
            return 0
        return len(self.sim_data[0].vehicles) * len(self.sim_data)

    def summarize(self) -> PrecisionSummary:
        """
        Compute the mean absolute errors of the session.

        Does not modify the session state. If no detection was matched, the
        mean errors are None.
        """
        summary = compute_precision_summary(self.state, self.max_possible_detections())
        logger.info("\n" + format_summary(summary))
        return summary

    def print_summary(self) -> PrecisionSummary:
        """Print the summary to stdout and return it."""
        summary = compute_precision_summary(self.state, self.max_possible_detections())
        print(format_summary(summary))
        return summary

    def reset(self) -> None:
        """Start a new session on the same simulation data."""
        self.state.reset()
