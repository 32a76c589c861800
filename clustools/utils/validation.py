"""Input validation utilities."""

from pathlib import Path
from typing import Union

import numpy as np
from scipy.spatial.distance import is_valid_dm
from sklearn.utils import check_array

# Absolute tolerance when checking a score matrix for symmetry
SYMMETRY_TOLERANCE = 1e-9


def validate_file_exists(path: Union[str, Path]) -> Path:
    """
    Validate that file exists.
    
    Args:
        path: File path
        
    Returns:
        Path object
        
    Raises:
        FileNotFoundError: If file doesn't exist
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    return path


def validate_node_count(n_nodes: int) -> int:
    """
    Validate the number of elements to cluster.
    
    Raises:
        ValueError: If there is not at least one element
    """
    if n_nodes < 1:
        raise ValueError(f"At least one element is required, got {n_nodes}")
    return n_nodes


def validate_score_matrix(scores) -> np.ndarray:
    """
    Validate a normalized score matrix.
    
    The matrix must be finite, square, symmetric and have a zero diagonal.
    
    Args:
        scores: Candidate matrix (n_nodes, n_nodes)
        
    Returns:
        The matrix as a float64 array
        
    Raises:
        ValueError: If any of the conditions does not hold
    """
    scores = check_array(scores, dtype=np.float64)
    is_valid_dm(scores, tol=SYMMETRY_TOLERANCE, throw=True, name='scores')
    return scores
