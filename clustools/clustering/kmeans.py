"""K-Means clustering over a precomputed distance matrix."""

from typing import Any, Dict, List, Optional, Sequence, Union

import numpy as np
from sklearn.utils import check_random_state

from ..config.constants import DEFAULT_MAX_ITER
from ..core.forest import ClusterForest
from ..core.models import Cluster
from ..utils.logging import get_logger
from .base import Clusterer
from .metrics import find_mean

logger = get_logger(__name__)


class KMeansClusterer(Clusterer):
    """
    K-Means clustering algorithm.
    
    Without coordinates there is no centroid to average, so each cluster is
    represented by its mean element: the member with the smallest sum of
    distances to the other members. Unlike the other algorithms, the k
    clusters are updated in place between iterations.
    """
    
    def __init__(self,
                 n_clusters: int,
                 random_state: Union[None, int, np.random.RandomState] = None,
                 max_iter: int = DEFAULT_MAX_ITER,
                 initial_means: Optional[Sequence[int]] = None):
        """
        Initialize K-Means clusterer.
        
        Args:
            n_clusters: Number of clusters k
            random_state: Seed or RandomState used to draw the initial means
            max_iter: Maximum update/assignment iterations
            initial_means: Explicit initial means (skips the random draw)
        """
        self.n_clusters = n_clusters
        self.random_state = random_state
        self.max_iter = max_iter
        self.initial_means = initial_means
        
        self.n_iter_: Optional[int] = None
        self.converged_: Optional[bool] = None
        self.means_: Optional[List[int]] = None
    
    def cluster(self,
                scores: np.ndarray,
                forest: Optional[ClusterForest] = None,
                **kwargs) -> ClusterForest:
        """
        Perform K-Means clustering.
        
        Args:
            scores: Normalized distance matrix (n_nodes, n_nodes)
            forest: Existing cluster history (fresh singletons if None)
            **kwargs: Additional parameters
            
        Returns:
            Cluster history whose k newest clusters are the result
        """
        scores, forest = self.prepare_input(scores, forest)
        n_nodes = scores.shape[0]
        k = int(self.n_clusters)
        if k < 1 or k > n_nodes:
            raise ValueError(f"n_clusters must be between 1 and {n_nodes}, got {self.n_clusters}")
        
        means = self._initial_means(n_nodes, k)
        logger.info(f"K-Means with k={k} over {n_nodes} elements, initial means {means}")
        
        forest.retire_active()
        clusters = []
        for position, mean in enumerate(means):
            cluster = forest.new_cluster([mean], position=position)
            cluster.mean = mean
            clusters.append(cluster)
        
        memberships = self._assign(scores, forest, clusters)
        
        self.converged_ = False
        iteration = 0
        while iteration < self.max_iter:
            iteration += 1
            means_changed = self._update_means(scores, clusters)
            previous = memberships
            memberships = self._assign(scores, forest, clusters)
            logger.debug(f"Iteration {iteration}: means {[c.mean for c in clusters]}")
            
            # Unchanged memberships would reproduce the same means next round
            if not means_changed or memberships == previous:
                self.converged_ = True
                break
        
        if not self.converged_:
            logger.warning(f"K-Means did not converge after {self.max_iter} iterations")
        
        self.n_iter_ = iteration
        self.means_ = [cluster.mean for cluster in clusters]
        logger.info(f"K-Means finished after {iteration} iterations, means {self.means_}")
        return forest
    
    def _initial_means(self, n_nodes: int, k: int) -> List[int]:
        """
        Draw k distinct elements as initial means.
        
        Duplicate draws are rejected and drawn again.
        """
        if self.initial_means is not None:
            means = [int(mean) for mean in self.initial_means]
            if len(means) != k or len(set(means)) != k:
                raise ValueError(f"initial_means must hold {k} distinct elements, got {means}")
            if min(means) < 0 or max(means) >= n_nodes:
                raise ValueError(f"initial_means must be element ids below {n_nodes}, got {means}")
            return means
        
        rng = check_random_state(self.random_state)
        means: List[int] = []
        while len(means) < k:
            candidate = int(rng.randint(n_nodes))
            if candidate not in means:
                means.append(candidate)
        return means
    
    def _assign(self,
                scores: np.ndarray,
                forest: ClusterForest,
                clusters: List[Cluster]) -> List[List[int]]:
        """
        Move every element to the cluster with the closest mean.
        
        Ties go to the earliest cluster.
        
        Returns:
            Member lists, one per cluster
        """
        means = [cluster.mean for cluster in clusters]
        nearest = np.argmin(scores[:, means], axis=1)
        
        memberships = []
        for index, cluster in enumerate(clusters):
            members = np.flatnonzero(nearest == index).tolist()
            forest.set_members(cluster.id, members)
            memberships.append(members)
        return memberships
    
    def _update_means(self, scores: np.ndarray, clusters: List[Cluster]) -> bool:
        """
        Recompute the mean element of every cluster.
        
        Returns:
            True if any mean changed
        """
        changed = False
        for cluster in clusters:
            if not cluster.members:
                logger.warning(f"Cluster {cluster.id} is empty; keeping mean {cluster.mean}")
                continue
            mean, _ = find_mean(scores, cluster.members)
            if mean != cluster.mean:
                changed = True
                cluster.mean = mean
        return changed
    
    def get_params(self) -> Dict[str, Any]:
        """Get clustering parameters."""
        return {
            'algorithm': 'kmeans',
            'n_clusters': self.n_clusters,
            'max_iter': self.max_iter,
            'random_state': self.random_state if isinstance(self.random_state, (int, type(None))) else 'custom',
            'n_iter': self.n_iter_,
            'converged': self.converged_,
            'means': self.means_
        }
