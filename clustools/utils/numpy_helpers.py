"""NumPy array utilities."""

import numpy as np
from typing import List, Sequence, Tuple


def submatrix(scores: np.ndarray,
              rows: Sequence[int],
              cols: Sequence[int]) -> np.ndarray:
    """
    Extract the block of distances between two sets of elements.
    
    Args:
        scores: Full score matrix
        rows: Element ids for rows
        cols: Element ids for columns
        
    Returns:
        Matrix (len(rows), len(cols))
    """
    return scores[np.ix_(list(rows), list(cols))]


def upper_triangle_pairs(n: int) -> List[Tuple[int, int]]:
    """
    Enumerate unordered pairs (i, j) with i < j in row-major order.
    
    Args:
        n: Number of elements
        
    Returns:
        List of index pairs
    """
    rows, cols = np.triu_indices(n, k=1)
    return list(zip(rows.tolist(), cols.tolist()))
