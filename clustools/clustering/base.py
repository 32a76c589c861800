"""Base interface for clustering algorithms."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple

import numpy as np

from ..core.forest import ClusterForest
from ..utils.validation import validate_score_matrix


class Clusterer(ABC):
    """Abstract base class for clustering algorithms."""
    
    @abstractmethod
    def cluster(self,
                scores: np.ndarray,
                forest: Optional[ClusterForest] = None,
                **kwargs) -> ClusterForest:
        """
        Perform clustering on a normalized score matrix.
        
        Args:
            scores: Symmetric distance matrix (n_nodes, n_nodes)
            forest: Existing cluster history to extend (fresh singletons if None)
            **kwargs: Algorithm-specific parameters
            
        Returns:
            Cluster history whose active clusters form the partition
        """
        pass
    
    @abstractmethod
    def get_params(self) -> Dict[str, Any]:
        """Get clustering parameters."""
        pass
    
    def prepare_input(self,
                      scores: np.ndarray,
                      forest: Optional[ClusterForest] = None) -> Tuple[np.ndarray, ClusterForest]:
        """
        Validate the score matrix and set up the cluster history.
        
        Args:
            scores: Candidate distance matrix
            forest: Optional existing history
            
        Returns:
            Tuple of (validated scores, forest)
            
        Raises:
            ValueError: If the matrix is invalid or does not match the forest
        """
        scores = validate_score_matrix(scores)
        if forest is None:
            forest = ClusterForest(scores.shape[0])
        elif forest.n_nodes != scores.shape[0]:
            raise ValueError(
                f"Score matrix has {scores.shape[0]} elements but forest has {forest.n_nodes}"
            )
        return scores, forest
    
    def prepare_clusters(self, forest: ClusterForest) -> Dict[int, List[int]]:
        """
        Convert the active clusters to dictionary format.
        
        Args:
            forest: Cluster history
            
        Returns:
            Dict mapping cluster IDs to lists of element ids
        """
        return forest.to_dict()
