"""Cluster statistics and clustering diagnostics."""

from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Tuple

import numpy as np
from sklearn.metrics import silhouette_samples

from ..core.forest import ClusterForest
from ..core.models import Cluster
from ..utils.logging import get_logger
from ..utils.numpy_helpers import submatrix

logger = get_logger(__name__)


def find_centroid(scores: np.ndarray, members: Sequence[int]) -> Tuple[int, float]:
    """
    Find the clustroid of a cluster.
    
    The clustroid is the member whose largest distance to any other
    member is smallest. Ties go to the earliest member.
    
    Args:
        scores: Normalized distance matrix
        members: Element ids of the cluster
        
    Returns:
        Tuple of (clustroid id, radius)
    """
    if len(members) == 0:
        raise ValueError("Cannot compute the centroid of an empty cluster")
    
    worst = submatrix(scores, members, members).max(axis=1)
    best = int(np.argmin(worst))
    return int(members[best]), float(worst[best])


def find_mean(scores: np.ndarray, members: Sequence[int]) -> Tuple[int, float]:
    """
    Find the mean element of a cluster.
    
    The mean element minimizes the sum of distances to the other members.
    Ties go to the earliest member.
    
    Args:
        scores: Normalized distance matrix
        members: Element ids of the cluster
        
    Returns:
        Tuple of (mean element id, its distance sum)
    """
    if len(members) == 0:
        raise ValueError("Cannot compute the mean of an empty cluster")
    
    # Diagonal is zero, so the row sum only counts the other members
    totals = submatrix(scores, members, members).sum(axis=1)
    best = int(np.argmin(totals))
    return int(members[best]), float(totals[best])


def max_pairwise_distance(scores: np.ndarray, members: Sequence[int]) -> float:
    """Largest distance between two members (0 for singletons)."""
    if len(members) == 0:
        return 0.0
    return max(0.0, float(submatrix(scores, members, members).max()))


def cluster_cohesion(scores: np.ndarray, members: Sequence[int]) -> Tuple[float, float]:
    """
    Sum and average of intra-cluster distances over ordered pairs.
    
    Args:
        scores: Normalized distance matrix
        members: Element ids of the cluster
        
    Returns:
        Tuple of (sum, average); the average is 0 for singletons
    """
    n_pairs = len(members) * (len(members) - 1)
    if n_pairs == 0:
        return 0.0, 0.0
    
    total = float(submatrix(scores, members, members).sum())
    return total, total / n_pairs


def cluster_separation(scores: np.ndarray,
                       members_a: Sequence[int],
                       members_b: Sequence[int]) -> float:
    """
    Average distance between the members of two clusters.
    
    Args:
        scores: Normalized distance matrix
        members_a: Element ids of the first cluster
        members_b: Element ids of the second cluster
        
    Returns:
        Mean cross distance (inf if either cluster is empty)
    """
    if len(members_a) == 0 or len(members_b) == 0:
        return float('inf')
    return float(submatrix(scores, members_a, members_b).mean())


def silhouette_values(scores: np.ndarray, labels: np.ndarray) -> np.ndarray:
    """
    Silhouette score of every element over a precomputed matrix.
    
    For element i with average distance ``a`` to its own cluster and
    smallest average distance ``b`` to another cluster the score is
    ``(b - a) / max(a, b)``. Members of singleton clusters score 0, and so
    does everyone when there is only one cluster or only singletons. Scores
    with negative entries have no silhouette; everyone scores 0 with a
    warning.
    
    Args:
        scores: Normalized distance matrix
        labels: Cluster id of every element
        
    Returns:
        Array of scores in [-1, 1]
    """
    n_labels = len(np.unique(labels))
    if n_labels < 2 or n_labels > len(labels) - 1:
        return np.zeros(len(labels))
    if np.min(scores) < 0:
        logger.warning("Score matrix has negative distances; silhouette set to 0")
        return np.zeros(len(labels))
    return silhouette_samples(scores, labels, metric='precomputed')


@dataclass
class ClusterStats:
    """Descriptive statistics of one active cluster."""
    cluster_id: int
    members: List[int]
    centroid: int
    mean: int
    radius: float
    max_distance: float
    distance_sum: float
    average_distance: float
    
    @property
    def size(self) -> int:
        return len(self.members)
    
    @property
    def pair_count(self) -> int:
        return self.size * (self.size - 1)
    
    def to_dict(self) -> Dict[str, object]:
        return {
            'cluster_id': self.cluster_id,
            'centroid': self.centroid,
            'mean': self.mean,
            'size': self.size,
            'members': list(self.members),
            'radius': self.radius,
            'max_distance': self.max_distance,
            'distance_sum': self.distance_sum,
            'average_distance': self.average_distance,
            'pair_count': self.pair_count
        }


@dataclass
class ClusteringSummary:
    """Statistics of every reported cluster plus aggregate diagnostics."""
    clusters: List[ClusterStats]
    silhouette: np.ndarray = field(default_factory=lambda: np.zeros(0))
    
    @property
    def n_clusters(self) -> int:
        return len(self.clusters)
    
    @property
    def n_orphans(self) -> int:
        return sum(1 for stats in self.clusters if stats.size == 1)
    
    @property
    def total_average_distance(self) -> float:
        return float(sum(stats.average_distance for stats in self.clusters))
    
    @property
    def average_silhouette(self) -> float:
        if len(self.silhouette) == 0:
            return 0.0
        return float(np.mean(self.silhouette))


def compute_cluster_stats(cluster: Cluster, scores: np.ndarray) -> ClusterStats:
    """
    Compute statistics of a cluster and store them on it.
    
    Sets ``centroid``, ``radius``, ``mean`` and ``max_distance`` on the
    cluster; the max distance is recomputed from the full matrix and
    replaces whatever was recorded while merging.
    
    Args:
        cluster: Non-empty cluster
        scores: Normalized distance matrix
        
    Returns:
        ClusterStats for the cluster
    """
    members = cluster.members
    cluster.centroid, cluster.radius = find_centroid(scores, members)
    cluster.mean, _ = find_mean(scores, members)
    cluster.max_distance = max_pairwise_distance(scores, members)
    distance_sum, average_distance = cluster_cohesion(scores, members)
    
    return ClusterStats(
        cluster_id=cluster.id,
        members=list(members),
        centroid=cluster.centroid,
        mean=cluster.mean,
        radius=cluster.radius,
        max_distance=cluster.max_distance,
        distance_sum=distance_sum,
        average_distance=average_distance
    )


def summarize_clustering(forest: ClusterForest, scores: np.ndarray) -> ClusteringSummary:
    """
    Compute statistics for every active cluster of a finished clustering.
    
    Empty clusters (possible with K-Means) are left out of the report.
    
    Args:
        forest: Cluster history
        scores: Normalized distance matrix
        
    Returns:
        ClusteringSummary
    """
    stats = []
    for cluster in forest.active_clusters():
        if not cluster.members:
            logger.warning(f"Cluster {cluster.id} is empty and will not be reported")
            continue
        stats.append(compute_cluster_stats(cluster, scores))
    
    return ClusteringSummary(
        clusters=stats,
        silhouette=silhouette_values(scores, forest.labels())
    )


def evaluate_clustering(forest: ClusterForest, scores: np.ndarray) -> Dict[str, float]:
    """
    Aggregate diagnostics of a clustering.
    
    Args:
        forest: Cluster history
        scores: Normalized distance matrix
        
    Returns:
        Dictionary of metric values
    """
    summary = summarize_clustering(forest, scores)
    return {
        'n_clusters': summary.n_clusters,
        'n_orphans': summary.n_orphans,
        'total_average_distance': summary.total_average_distance,
        'silhouette': summary.average_silhouette
    }
