"""
Precision evaluation of grid detections against simulated ground truth.
"""

from .evaluator import ClusterEvaluation, PrecisionEvaluator
from .matching import assign_one_to_one, compute_error, find_closest_vehicle
from .metrics import (
    ErrorVector,
    PrecisionSummary,
    SessionState,
    compute_precision_summary
)
from .reporting import format_cluster_diagnostic, format_summary
from .transforms import Centroid, compute_cluster_centroid

__all__ = [
    'ClusterEvaluation',
    'PrecisionEvaluator',
    'assign_one_to_one',
    'compute_error',
    'find_closest_vehicle',
    'ErrorVector',
    'PrecisionSummary',
    'SessionState',
    'compute_precision_summary',
    'format_cluster_diagnostic',
    'format_summary',
    'Centroid',
    'compute_cluster_centroid'
]
