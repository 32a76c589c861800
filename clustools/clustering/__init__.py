"""Clustering algorithms and cluster statistics."""

from .base import Clusterer
from .hierarchical import HierarchicalClusterer, LINKAGE_RULES
from .spicker import SpickerClusterer
from .kmeans import KMeansClusterer
from .metrics import (
    ClusterStats,
    ClusteringSummary,
    find_centroid,
    find_mean,
    max_pairwise_distance,
    cluster_cohesion,
    cluster_separation,
    silhouette_values,
    compute_cluster_stats,
    summarize_clustering,
    evaluate_clustering
)

__all__ = [
    'Clusterer',
    'HierarchicalClusterer',
    'LINKAGE_RULES',
    'SpickerClusterer',
    'KMeansClusterer',
    'ClusterStats',
    'ClusteringSummary',
    'find_centroid',
    'find_mean',
    'max_pairwise_distance',
    'cluster_cohesion',
    'cluster_separation',
    'silhouette_values',
    'compute_cluster_stats',
    'summarize_clustering',
    'evaluate_clustering'
]
