"""
Precision evaluation for dynamic occupancy grid detections.
"""

from .common.config import EvaluatorConfig, load_evaluator_config
from .clustering.dbscan import ClusteringAdapter, DBSCANClusterer
from .data.dataset import GridSample, Vehicle, SimulationStep, SimulationDataset
from .evaluation.evaluator import ClusterEvaluation, PrecisionEvaluator
from .evaluation.metrics import ErrorVector, PrecisionSummary, SessionState
from .evaluation.transforms import Centroid
from .pipelines.pipeline import EvaluationPipeline

__version__ = "0.1.0"

__all__ = [
    'EvaluatorConfig',
    'load_evaluator_config',
    'ClusteringAdapter',
    'DBSCANClusterer',
    'GridSample',
    'Vehicle',
    'SimulationStep',
    'SimulationDataset',
    'ClusterEvaluation',
    'PrecisionEvaluator',
    'ErrorVector',
    'PrecisionSummary',
    'SessionState',
    'Centroid',
    'EvaluationPipeline'
]
