"""
Text reports for precision evaluation runs.
"""

from .metrics import ErrorVector, PrecisionSummary


NO_DETECTIONS_MESSAGE = "No matched detections, mean absolute errors are undefined"


def format_cluster_diagnostic(cluster_id: int, error: ErrorVector) -> str:
    """Format the error of one matched cluster with two decimals."""
    return (
        f"Cluster ID={cluster_id}\n"
        f"Vel. Err.: {error.v_x:.2f} {error.v_y:.2f}, "
        f"Pos. Err.: {error.x:.2f} {error.y:.2f}"
    )


def format_summary(summary: PrecisionSummary) -> str:
    """Format the end-of-run summary."""
    lines = []
    if summary.has_detections:
        pos_x, pos_y = summary.mean_position_error
        vel_x, vel_y = summary.mean_velocity_error
        lines.extend([
            "Mean absolute errors (x,y):",
            f"Position: {pos_x:.4f} {pos_y:.4f}",
            f"Velocity: {vel_x:.4f} {vel_y:.4f}",
        ])
    else:
        lines.append(NO_DETECTIONS_MESSAGE)

    lines.extend([
        "",
        f"Detections unassigned by evaluator: {summary.num_unassigned_detections}",
        f"Maximum possible detections: {summary.max_possible_detections}",
    ])
    return "\n".join(lines)
