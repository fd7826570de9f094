"""Common utilities for dogm_eval."""

from .config import EvaluatorConfig, load_evaluator_config
from .utils import setup_logging, load_config

__all__ = [
    "EvaluatorConfig",
    "load_evaluator_config",
    "setup_logging",
    "load_config",
]
