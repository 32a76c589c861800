"""SPICKER clustering.

Greedy density-based clustering after Yang & Skolnick,
J Comput Chem. 2004;25(6):865-71: repeatedly pick the element with the
most unassigned neighbours within the cutoff and make a cluster of them.
"""

from typing import Any, Dict, List, Optional

import numpy as np

from ..core.forest import ClusterForest
from ..utils.logging import get_logger
from .base import Clusterer
from .metrics import max_pairwise_distance

logger = get_logger(__name__)

# Marks a column whose element already belongs to a cluster
ASSIGNED = -1.0


class SpickerClusterer(Clusterer):
    """SPICKER clustering with a distance cutoff."""
    
    def __init__(self, cutoff: float):
        """
        Initialize SPICKER clusterer.
        
        Args:
            cutoff: Elements closer than this are neighbours
        """
        self.cutoff = cutoff
        
        self.n_clusters_: Optional[int] = None
        self.seeds_: List[int] = []
    
    def cluster(self,
                scores: np.ndarray,
                forest: Optional[ClusterForest] = None,
                **kwargs) -> ClusterForest:
        """
        Perform SPICKER clustering.
        
        Args:
            scores: Normalized distance matrix (n_nodes, n_nodes)
            forest: Existing cluster history (fresh singletons if None)
            **kwargs: Additional parameters
            
        Returns:
            Cluster history with one new cluster per iteration
        """
        scores, forest = self.prepare_input(scores, forest)
        n_nodes = scores.shape[0]
        
        working = scores.copy()
        unassigned = np.ones(n_nodes, dtype=bool)
        orphans = n_nodes
        self.seeds_ = []
        
        while orphans > 0:
            neighbours = (working >= 0) & (working < self.cutoff)
            counts = neighbours.sum(axis=1)
            
            # argmax keeps the first row among equal counts
            seed = int(np.argmax(counts))
            if counts[seed] > 0:
                members = np.flatnonzero(neighbours[seed])
            else:
                # Nothing is below the cutoff; the next orphan stands alone
                seed = int(np.flatnonzero(unassigned)[0])
                members = np.array([seed])
                logger.warning(f"No element has neighbours below cutoff {self.cutoff}; "
                               f"element {seed} forms a singleton")
            
            working[:, members] = ASSIGNED
            unassigned[members] = False
            orphans -= len(members)
            
            cluster = forest.regroup(members, max_pairwise_distance(scores, members))
            self.seeds_.append(seed)
            logger.debug(f"Seed {seed} formed cluster {cluster.id} with {len(members)} members, "
                         f"{orphans} orphans left")
        
        self.n_clusters_ = len(self.seeds_)
        logger.info(f"SPICKER finished: {self.n_clusters_} clusters, cutoff={self.cutoff}")
        return forest
    
    def get_params(self) -> Dict[str, Any]:
        """Get clustering parameters."""
        return {
            'algorithm': 'spicker',
            'cutoff': self.cutoff,
            'n_clusters': self.n_clusters_,
            'seeds': list(self.seeds_)
        }
