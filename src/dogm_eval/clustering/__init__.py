"""Clustering adapters for grid samples."""

from .dbscan import Cluster, ClusteringAdapter, DBSCANClusterer

__all__ = [
    "Cluster",
    "ClusteringAdapter",
    "DBSCANClusterer",
]
