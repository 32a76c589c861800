"""Priority queue of links, ascending by distance."""

import heapq
from typing import Iterable, List

import numpy as np

from .models import Link
from ..utils.numpy_helpers import upper_triangle_pairs


class LinkQueue:
    """Binary min-heap over links keyed by distance."""
    
    def __init__(self, links: Iterable[Link] = ()):
        self._heap: List[Link] = list(links)
        heapq.heapify(self._heap)
    
    @classmethod
    def from_scores(cls, scores: np.ndarray) -> 'LinkQueue':
        """
        Build the queue over the complete graph of a score matrix.
        
        Every unordered pair (i, j), i < j, yields exactly one link.
        
        Args:
            scores: Symmetric distance matrix (n_nodes, n_nodes)
            
        Returns:
            Queue holding n*(n-1)/2 links
        """
        return cls(
            Link(float(scores[i, j]), i, j)
            for i, j in upper_triangle_pairs(scores.shape[0])
        )
    
    def push(self, link: Link) -> None:
        heapq.heappush(self._heap, link)
    
    def peek(self) -> Link:
        """Return the shortest link without removing it."""
        if not self._heap:
            raise IndexError("peek from an empty LinkQueue")
        return self._heap[0]
    
    def pop(self) -> Link:
        """Remove and return the shortest link."""
        if not self._heap:
            raise IndexError("pop from an empty LinkQueue")
        return heapq.heappop(self._heap)
    
    def empty(self) -> bool:
        return not self._heap
    
    def __len__(self) -> int:
        return len(self._heap)
    
    def __bool__(self) -> bool:
        return bool(self._heap)
