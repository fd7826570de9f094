"""
End-to-end evaluation pipeline over a simulation run.
"""

import logging
from typing import List, Optional, Sequence

from ..clustering.dbscan import ClusteringAdapter
from ..common.config import EvaluatorConfig, load_evaluator_config
from ..common.utils import setup_logging, load_config
from ..data.dataset import GridSample, SimulationDataset
from ..evaluation.evaluator import PrecisionEvaluator
from ..evaluation.metrics import PrecisionSummary


class EvaluationPipeline:
    """Feeds the grid samples of every simulation step to a precision evaluator."""

    def __init__(
        self,
        dataset: SimulationDataset,
        resolution: float,
        grid_size: float,
        config: Optional[EvaluatorConfig] = None,
        clusterer: Optional[ClusteringAdapter] = None,
        log_level: Optional[str] = None
    ):
        """
        Initialize the pipeline.

        Args:
            dataset: Simulated ground truth
            resolution: World units per grid cell
            grid_size: Extent of the grid in world units
            config: Evaluator thresholds
            clusterer: Optional clustering adapter replacing DBSCAN
            log_level: If given, configure logging at this level
        """
        if log_level:
            setup_logging(log_level)
        self.logger = logging.getLogger(__name__)
        self.dataset = dataset
        self.evaluator = PrecisionEvaluator(
            dataset,
            resolution=resolution,
            grid_size=grid_size,
            config=config,
            clusterer=clusterer
        )
        self.logger.info(
            f"Initialized precision evaluation over {len(dataset)} steps "
            f"(resolution={resolution}, grid_size={grid_size}, matching={self.evaluator.config.matching})"
        )

    @classmethod
    def from_config_file(
        cls,
        config_path: str,
        dataset: SimulationDataset,
        overrides: Optional[List[str]] = None,
        clusterer: Optional[ClusteringAdapter] = None
    ) -> "EvaluationPipeline":
        """
        Create a pipeline from a YAML file.

        The file provides ``resolution`` and ``grid_size`` at top level, an
        optional ``evaluator`` section for the thresholds, and an optional
        ``log_level``.

        Raises:
            KeyError: If resolution or grid_size is missing
        """
        raw = load_config(config_path)
        for key in ('resolution', 'grid_size'):
            if key not in raw:
                raise KeyError(f"'{key}' missing in config file: {config_path}")

        config = load_evaluator_config(
            config_path if 'evaluator' in raw else None,
            overrides
        )
        return cls(
            dataset,
            resolution=float(raw['resolution']),
            grid_size=float(raw['grid_size']),
            config=config,
            clusterer=clusterer,
            log_level=raw.get('log_level')
        )

    def run(
        self,
        samples_per_step: Sequence[Sequence[GridSample]],
        verbose: bool = False
    ) -> PrecisionSummary:
        """
        Evaluate a full run and return its summary.

        The session state is reset first, so repeated runs do not accumulate.

        Args:
            samples_per_step: Grid samples for each step, in step order
            verbose: Log per-cluster errors

        Returns:
            PrecisionSummary of the run

        Raises:
            IndexError: If more steps are given than the dataset contains
        """
        if len(samples_per_step) > len(self.dataset):
            raise IndexError(
                f"Got samples for {len(samples_per_step)} steps, dataset has {len(self.dataset)}"
            )

        self.evaluator.reset()
        for step_index, samples in enumerate(samples_per_step):
            if verbose:
                self.logger.info(f"Evaluating step {step_index}")
            self.evaluator.evaluate_step(step_index, samples, verbose=verbose)

        return self.evaluator.summarize()
