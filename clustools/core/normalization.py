"""Score normalization: raw asymmetric measurements to a symmetric matrix."""

import math
from typing import Optional, Sequence, Union

import numpy as np

from ..config.constants import (
    DEFAULT_MISSING_POLICY,
    MISSING_MEAN,
    MISSING_ZERO,
    SUPPORTED_MISSING_POLICIES
)
from ..utils.logging import get_logger
from ..utils.validation import validate_node_count

logger = get_logger(__name__)


def infer_node_count(n_records: int) -> int:
    """
    Number of elements encoded by a flat list of pairwise records.
    
    Counts that are not perfect squares are truncated by integer square
    root; the trailing records are ignored.
    
    Args:
        n_records: Length of the raw score list
        
    Returns:
        Number of elements N
    """
    n_nodes = math.isqrt(n_records)
    if n_nodes * n_nodes != n_records:
        logger.warning(
            f"{n_records} records is not a perfect square; using {n_nodes} elements "
            f"and ignoring {n_records - n_nodes * n_nodes} trailing records"
        )
    return n_nodes


def similarity_to_distance(values: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
    """Convert similarities in [0, 1] to distances (``1 - similarity``)."""
    return 1 - values


def normalize_scores(raw_scores: Union[Sequence[float], np.ndarray],
                     n_nodes: Optional[int] = None,
                     missing_policy: str = DEFAULT_MISSING_POLICY) -> np.ndarray:
    """
    Reconcile raw pairwise distances into a symmetric score matrix.
    
    ``raw_scores`` is row-major over ordered pairs, so ``raw[i*N + j]`` is
    the distance measured from i to j. For each pair:
    
    * both directions 0: score 0
    * exactly one direction 0: arithmetic mean of the two (``missing_policy``
      'mean') or 0 (``missing_policy`` 'zero')
    * otherwise: harmonic mean ``2ab / (a + b)``
    
    The diagonal is always 0.
    
    Args:
        raw_scores: Flat list of N*N raw distances
        n_nodes: Number of elements (inferred from the length when None)
        missing_policy: How to treat a pair with one missing direction
        
    Returns:
        Normalized distance matrix (n_nodes, n_nodes)
        
    Raises:
        ValueError: If there are no elements, too few records or an
            unknown policy
    """
    if missing_policy not in SUPPORTED_MISSING_POLICIES:
        raise ValueError(
            f"Unknown missing policy: {missing_policy}. "
            f"Available: {SUPPORTED_MISSING_POLICIES}"
        )
    
    raw = np.asarray(raw_scores, dtype=np.float64).ravel()
    if n_nodes is None:
        n_nodes = infer_node_count(raw.size)
    validate_node_count(n_nodes)
    if raw.size < n_nodes * n_nodes:
        raise ValueError(
            f"Expected {n_nodes * n_nodes} raw scores for {n_nodes} elements, got {raw.size}"
        )
    
    forward = raw[:n_nodes * n_nodes].reshape(n_nodes, n_nodes)
    backward = forward.T
    
    forward_zero = forward == 0
    backward_zero = backward == 0
    one_missing = forward_zero ^ backward_zero
    
    total = forward + backward
    # Reciprocal values summing to 0 would divide by zero
    safe_total = np.where(total != 0, total, 1.0)
    harmonic = np.where(total != 0, 2 * forward * backward / safe_total, 0.0)
    
    scores = harmonic
    if missing_policy == MISSING_MEAN:
        scores = np.where(one_missing, total / 2, scores)
    elif missing_policy == MISSING_ZERO:
        scores = np.where(one_missing, 0.0, scores)
    scores = np.where(forward_zero & backward_zero, 0.0, scores)
    np.fill_diagonal(scores, 0.0)
    
    logger.debug(f"Normalized {n_nodes}x{n_nodes} score matrix ({missing_policy} policy, "
                 f"{int(np.count_nonzero(np.triu(one_missing, k=1)))} one-sided pairs)")
    return scores
