"""Entities shared by every clustering algorithm."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class ClusterState(Enum):
    """Lifecycle of a cluster record."""
    ACTIVE = 'active'
    # Absorbed into a newer cluster by a merge
    MERGED = 'merged'
    # Discarded when K-Means reseeds the partition
    RETIRED = 'retired'


@dataclass
class Node:
    """An element being clustered, addressed by a stable integer id."""
    id: int
    cluster_id: int


@dataclass(frozen=True, order=True)
class Link:
    """
    Unordered pair of elements and the normalized distance between them.
    
    Links order by distance, then by element ids, which makes the
    queue order deterministic for equal distances.
    """
    distance: float
    node_a: int
    node_b: int


@dataclass
class Cluster:
    """
    A group of elements.
    
    Clusters are never deleted: merged or retired records stay in the
    history with their state recording what happened to them.
    """
    id: int
    members: List[int]
    max_distance: float = 0.0
    state: ClusterState = ClusterState.ACTIVE
    merged_into: Optional[int] = None
    centroid: Optional[int] = None
    mean: Optional[int] = None
    radius: Optional[float] = None
    
    @property
    def active(self) -> bool:
        return self.state is ClusterState.ACTIVE
    
    @property
    def size(self) -> int:
        return len(self.members)
    
    def record_distance(self, distance: float) -> None:
        """Account for a distance observed between two members."""
        if distance > self.max_distance:
            self.max_distance = distance
    
    def mark_merged(self, into: int) -> None:
        """
        Record that this cluster was absorbed by cluster ``into``.
        
        Raises:
            ValueError: If the cluster is no longer active
        """
        self._leave_active(ClusterState.MERGED)
        self.merged_into = into
    
    def retire(self) -> None:
        """Drop this cluster from the current partition without a successor."""
        self._leave_active(ClusterState.RETIRED)
    
    def _leave_active(self, state: ClusterState) -> None:
        if not self.active:
            raise ValueError(
                f"Cluster {self.id} is already {self.state.value}, cannot mark it {state.value}"
            )
        self.state = state
