"""Evaluation pipelines."""

from .pipeline import EvaluationPipeline

__all__ = ["EvaluationPipeline"]
