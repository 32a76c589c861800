"""Node arena and append-only cluster history."""

from typing import Dict, Iterable, List, Optional

import numpy as np

from .models import Cluster, Node
from ..utils.logging import get_logger
from ..utils.validation import validate_node_count

logger = get_logger(__name__)


class ClusterForest:
    """
    Elements and every cluster ever formed over them.
    
    Each element starts in its own singleton cluster. Algorithms build new
    clusters instead of editing old ones (K-Means being the exception), so
    the history forms a forest of merges. At any time, the active clusters
    partition the elements: every node maps to exactly one active cluster.
    """
    
    def __init__(self, n_nodes: int):
        validate_node_count(n_nodes)
        self.nodes: List[Node] = []
        self.clusters: List[Cluster] = []
        self._by_id: Dict[int, Cluster] = {}
        self._next_id = 0
        
        for node_id in range(n_nodes):
            self.nodes.append(Node(node_id, node_id))
            self.new_cluster([node_id])
    
    @property
    def n_nodes(self) -> int:
        return len(self.nodes)
    
    @property
    def next_cluster_id(self) -> int:
        return self._next_id
    
    def get(self, cluster_id: int) -> Cluster:
        return self._by_id[cluster_id]
    
    def cluster_of(self, node_id: int) -> Cluster:
        """Cluster currently owning a node."""
        return self._by_id[self.nodes[node_id].cluster_id]
    
    def new_cluster(self,
                    members: Iterable[int],
                    max_distance: float = 0.0,
                    position: Optional[int] = None) -> Cluster:
        """
        Create a cluster with a fresh id and move its members into it.
        
        The caller is responsible for retiring or merging whatever
        clusters the members came from.
        
        Args:
            members: Element ids
            max_distance: Initial maximum intra-cluster distance
            position: Insert at this index of the history (append if None)
            
        Returns:
            The new cluster
        """
        cluster = Cluster(self._next_id, [int(m) for m in members], max_distance)
        self._next_id += 1
        
        if position is None:
            self.clusters.append(cluster)
        else:
            self.clusters.insert(position, cluster)
        self._by_id[cluster.id] = cluster
        
        for node_id in cluster.members:
            self.nodes[node_id].cluster_id = cluster.id
        return cluster
    
    def regroup(self, members: Iterable[int], max_distance: float = 0.0) -> Cluster:
        """
        Form a new cluster absorbing the current clusters of ``members``.
        
        Every distinct active source cluster is marked as merged into the
        new one, and all members are reassigned in the same step. Source
        clusters must be moved whole for the partition to stay valid.
        """
        members = [int(m) for m in members]
        sources: Dict[int, Cluster] = {}
        for node_id in members:
            source = self.cluster_of(node_id)
            if source.active:
                sources.setdefault(source.id, source)

        cluster = self.new_cluster(members, max_distance)
        for source in sources.values():
            source.mark_merged(cluster.id)
        return cluster
    
    def merge(self, cluster_a: int, cluster_b: int, distance: float) -> Cluster:
        """
        Merge two active clusters into a new one.
        
        Args:
            cluster_a: Id of the first cluster
            cluster_b: Id of the second cluster
            distance: Distance of the link that triggered the merge
            
        Returns:
            The merged cluster
            
        Raises:
            ValueError: If the ids are equal or either cluster is inactive
        """
        if cluster_a == cluster_b:
            raise ValueError(f"Cannot merge cluster {cluster_a} with itself")
        first = self.get(cluster_a)
        second = self.get(cluster_b)
        for cluster in (first, second):
            if not cluster.active:
                raise ValueError(f"Cannot merge inactive cluster {cluster.id}")
        
        merged = self.regroup(first.members + second.members, distance)
        logger.debug(f"Merged clusters {first.id} and {second.id} into {merged.id} at {distance:.4f}")
        return merged
    
    def set_members(self, cluster_id: int, members: Iterable[int]) -> None:
        """Replace the membership of an active cluster in place."""
        cluster = self.get(cluster_id)
        if not cluster.active:
            raise ValueError(f"Cannot reassign members of inactive cluster {cluster_id}")
        cluster.members = [int(m) for m in members]
        for node_id in cluster.members:
            self.nodes[node_id].cluster_id = cluster.id
    
    def retire_active(self) -> None:
        """Retire every active cluster, leaving no current partition."""
        for cluster in self.active_clusters():
            cluster.retire()
    
    def active_clusters(self) -> List[Cluster]:
        """Active clusters in history order."""
        return [cluster for cluster in self.clusters if cluster.active]
    
    def labels(self) -> np.ndarray:
        """Active cluster id of every node."""
        return np.array([node.cluster_id for node in self.nodes], dtype=int)
    
    def to_dict(self) -> Dict[int, List[int]]:
        """Map active cluster ids to their members."""
        return {cluster.id: list(cluster.members) for cluster in self.active_clusters()}
    
    def check_partition(self) -> None:
        """
        Verify that active clusters partition the nodes.
        
        Raises:
            ValueError: If a node is missing, duplicated or points to a
                cluster that does not hold it
        """
        seen = {}
        for cluster in self.active_clusters():
            for node_id in cluster.members:
                if node_id in seen:
                    raise ValueError(
                        f"Node {node_id} is in active clusters {seen[node_id]} and {cluster.id}"
                    )
                seen[node_id] = cluster.id
        
        for node in self.nodes:
            if node.id not in seen:
                raise ValueError(f"Node {node.id} is not in any active cluster")
            if node.cluster_id != seen[node.id]:
                raise ValueError(
                    f"Node {node.id} points to cluster {node.cluster_id} "
                    f"but is held by cluster {seen[node.id]}"
                )
