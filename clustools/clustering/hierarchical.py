"""Hierarchical clustering with a distance cutoff."""

import math
from typing import Any, Callable, Dict, Literal, Optional, Sequence

import numpy as np

from ..core.forest import ClusterForest
from ..core.links import LinkQueue
from ..utils.logging import get_logger
from ..utils.numpy_helpers import submatrix
from .base import Clusterer
from .metrics import cluster_separation

logger = get_logger(__name__)

AdmissionRule = Callable[[np.ndarray, Sequence[int], Sequence[int], float], bool]


def admit_single(scores: np.ndarray,
                 members_a: Sequence[int],
                 members_b: Sequence[int],
                 cutoff: float) -> bool:
    """Single linkage: the link below the cutoff is enough."""
    return True


def admit_complete(scores: np.ndarray,
                   members_a: Sequence[int],
                   members_b: Sequence[int],
                   cutoff: float) -> bool:
    """Complete linkage: every cross pair must be below the cutoff."""
    return bool(np.all(submatrix(scores, members_a, members_b) < cutoff))


def admit_average(scores: np.ndarray,
                  members_a: Sequence[int],
                  members_b: Sequence[int],
                  cutoff: float) -> bool:
    """Average linkage (UPGMA): the mean cross distance must be below the cutoff."""
    return cluster_separation(scores, members_a, members_b) < cutoff


LINKAGE_RULES: Dict[str, AdmissionRule] = {
    'single': admit_single,
    'complete': admit_complete,
    'average': admit_average
}


class HierarchicalClusterer(Clusterer):
    """
    Agglomerative clustering driven by a queue of links.
    
    Links are consumed shortest first. A link joining two different
    clusters merges them when the linkage rule admits it; the first link
    at or above the cutoff ends the run. The three linkages share this
    loop and differ only in the admission rule.
    """
    
    def __init__(self,
                 cutoff: Optional[float] = None,
                 linkage: Literal['single', 'complete', 'average'] = 'single'):
        """
        Initialize Hierarchical clusterer.
        
        Args:
            cutoff: Distance limit; None consumes every link
            linkage: Merge admission rule
        """
        if linkage not in LINKAGE_RULES:
            raise ValueError(
                f"Unknown linkage: {linkage}. Available: {list(LINKAGE_RULES.keys())}"
            )
        self.cutoff = cutoff
        self.linkage = linkage
        
        self.n_clusters_: Optional[int] = None
        self.n_merges_: Optional[int] = None
        self.n_rejected_: Optional[int] = None
    
    def cluster(self,
                scores: np.ndarray,
                forest: Optional[ClusterForest] = None,
                **kwargs) -> ClusterForest:
        """
        Perform hierarchical clustering.
        
        Args:
            scores: Normalized distance matrix (n_nodes, n_nodes)
            forest: Existing cluster history (fresh singletons if None)
            **kwargs: Additional parameters
            
        Returns:
            Cluster history with merged clusters appended
        """
        scores, forest = self.prepare_input(scores, forest)
        cutoff = math.inf if self.cutoff is None else self.cutoff
        admit = LINKAGE_RULES[self.linkage]
        
        queue = LinkQueue.from_scores(scores)
        logger.info(f"{self.linkage.capitalize()} linkage over {len(queue)} links, cutoff={self.cutoff}")
        
        merges = 0
        rejected = 0
        while queue:
            link = queue.pop()
            if link.distance >= cutoff:
                break
            
            cluster_a = forest.cluster_of(link.node_a)
            cluster_b = forest.cluster_of(link.node_b)
            
            if cluster_a.id == cluster_b.id:
                cluster_a.record_distance(link.distance)
                continue
            
            if admit(scores, cluster_a.members, cluster_b.members, cutoff):
                forest.merge(cluster_a.id, cluster_b.id, link.distance)
                merges += 1
            else:
                rejected += 1
        
        self.n_merges_ = merges
        self.n_rejected_ = rejected
        self.n_clusters_ = len(forest.active_clusters())
        logger.info(f"Hierarchical clustering finished: {self.n_clusters_} clusters "
                    f"after {merges} merges ({rejected} rejected)")
        return forest
    
    def get_params(self) -> Dict[str, Any]:
        """Get clustering parameters."""
        return {
            'algorithm': 'hierarchical',
            'linkage': self.linkage,
            'cutoff': self.cutoff,
            'n_clusters': self.n_clusters_,
            'n_merges': self.n_merges_,
            'n_rejected': self.n_rejected_
        }
