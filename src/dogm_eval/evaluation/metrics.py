"""
Error metrics for detection precision.

- ErrorVector: signed per-axis error of one matched detection
- SessionState: running absolute-error sums and detection counts
- PrecisionSummary: mean absolute errors at the end of a run
"""

import logging
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional, Tuple

import numpy as np


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ErrorVector:
    """Signed difference between a centroid and its matched vehicle."""
    x: float
    y: float
    v_x: float
    v_y: float


@dataclass
class SessionState:
    """Cumulative absolute errors over an evaluation session."""
    x: float = 0.0
    y: float = 0.0
    v_x: float = 0.0
    v_y: float = 0.0
    num_detections: int = 0
    num_unassigned_detections: int = 0

    def accumulate(self, error: ErrorVector) -> None:
        """Add the absolute error of one matched detection."""
        sums = np.array([self.x, self.y, self.v_x, self.v_y], dtype=np.float32)
        sums += np.abs(np.array([error.x, error.y, error.v_x, error.v_y], dtype=np.float32))
        self.x, self.y, self.v_x, self.v_y = (float(s) for s in sums)
        self.num_detections += 1

    def record_unassigned(self) -> None:
        """Count a detection without a ground-truth vehicle in range."""
        self.num_unassigned_detections += 1

    def reset(self) -> None:
        """Clear all sums and counters."""
        self.x = 0.0
        self.y = 0.0
        self.v_x = 0.0
        self.v_y = 0.0
        self.num_detections = 0
        self.num_unassigned_detections = 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)


@dataclass
class PrecisionSummary:
    """Container for end-of-run precision metrics.

    The mean errors are None when no detection was matched.
    """
    mean_position_error: Optional[Tuple[float, float]] = None
    mean_velocity_error: Optional[Tuple[float, float]] = None
    num_detections: int = 0
    num_unassigned_detections: int = 0
    max_possible_detections: int = 0

    @property
    def has_detections(self) -> bool:
        return self.num_detections > 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'mean_position_error': list(self.mean_position_error) if self.mean_position_error else None,
            'mean_velocity_error': list(self.mean_velocity_error) if self.mean_velocity_error else None,
            'num_detections': self.num_detections,
            'num_unassigned_detections': self.num_unassigned_detections,
            'max_possible_detections': self.max_possible_detections
        }


def compute_precision_summary(
    state: SessionState,
    max_possible_detections: int = 0
) -> PrecisionSummary:
    """
    Compute mean absolute errors from the accumulated session state.

    Args:
        state: Accumulated session state
        max_possible_detections: Reference upper bound on detections

    Returns:
        PrecisionSummary object
    """
    summary = PrecisionSummary(
        num_detections=state.num_detections,
        num_unassigned_detections=state.num_unassigned_detections,
        max_possible_detections=max_possible_detections
    )

    if state.num_detections == 0:
        logger.warning("No matched detections, mean errors are undefined")
        return summary

    # Sums are single precision, so are the means
    means = np.array([state.x, state.y, state.v_x, state.v_y], dtype=np.float32) / np.float32(state.num_detections)
    summary.mean_position_error = (float(means[0]), float(means[1]))
    summary.mean_velocity_error = (float(means[2]), float(means[3]))
    return summary
