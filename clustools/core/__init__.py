"""Score normalization and the node/cluster/link data model."""

from .normalization import normalize_scores, similarity_to_distance, infer_node_count
from .models import ClusterState, Node, Link, Cluster
from .links import LinkQueue
from .forest import ClusterForest

__all__ = [
    'normalize_scores',
    'similarity_to_distance',
    'infer_node_count',
    'ClusterState',
    'Node',
    'Link',
    'Cluster',
    'LinkQueue',
    'ClusterForest'
]
