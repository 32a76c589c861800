"""Unit tests for SPICKER clustering."""

import pytest
import numpy as np
from scipy.spatial.distance import pdist, squareform
from clustools.clustering.spicker import SpickerClusterer


def close_pairs_matrix(n_nodes, pairs, near=1.0, far=9.0):
    """Matrix where the listed pairs are near and everything else far."""
    scores = np.full((n_nodes, n_nodes), far)
    for a, b in pairs:
        scores[a, b] = scores[b, a] = near
    np.fill_diagonal(scores, 0.0)
    return scores


class TestSpickerClusterer:
    """Test cases for SpickerClusterer."""
    
    def test_two_groups(self):
        """Test densest group is taken first."""
        scores = close_pairs_matrix(5, [(0, 1), (0, 2), (1, 2), (3, 4)])
        
        clusterer = SpickerClusterer(cutoff=2.0)
        forest = clusterer.cluster(scores)
        
        assert forest.to_dict() == {5: [0, 1, 2], 6: [3, 4]}
        assert clusterer.seeds_ == [0, 3]
        assert clusterer.n_clusters_ == 2
        assert forest.get(5).max_distance == pytest.approx(1.0)
        forest.check_partition()
    
    def test_first_seed_wins_ties(self):
        """Test equal neighbour counts pick the earliest element."""
        scores = close_pairs_matrix(4, [(0, 1), (2, 3)])
        
        clusterer = SpickerClusterer(cutoff=2.0)
        clusterer.cluster(scores)
        
        assert clusterer.seeds_ == [0, 2]
    
    def test_assigned_element_can_seed_again(self):
        """Test a clustered element still counts its unassigned neighbours."""
        scores = close_pairs_matrix(6, [(0, 1), (0, 2), (0, 3), (1, 4), (1, 5)])
        
        clusterer = SpickerClusterer(cutoff=2.0)
        forest = clusterer.cluster(scores)
        
        assert clusterer.seeds_ == [0, 1]
        assert forest.to_dict() == {6: [0, 1, 2, 3], 7: [4, 5]}
        # Spread comes from the full matrix, not from the seed's row
        assert forest.get(7).max_distance == pytest.approx(9.0)
    
    def test_zero_cutoff_gives_singletons(self):
        """Test that nothing is a neighbour at cutoff 0."""
        scores = close_pairs_matrix(3, [(0, 1)])
        
        clusterer = SpickerClusterer(cutoff=0.0)
        forest = clusterer.cluster(scores)
        
        assert clusterer.seeds_ == [0, 1, 2]
        assert sorted(forest.to_dict().values()) == [[0], [1], [2]]
        forest.check_partition()
    
    def test_negative_distance_is_not_a_neighbour(self):
        """Test negative entries are excluded from neighbour counts."""
        scores = close_pairs_matrix(3, [(0, 1)], near=-1.0, far=5.0)
        
        clusterer = SpickerClusterer(cutoff=2.0)
        forest = clusterer.cluster(scores)
        
        assert clusterer.seeds_ == [0, 1, 2]
        assert sorted(forest.to_dict().values()) == [[0], [1], [2]]
        assert all(c.max_distance == 0.0 for c in forest.active_clusters())
        forest.check_partition()
    
    def test_large_cutoff_gives_one_cluster(self):
        """Test everything is a neighbour of everything."""
        scores = close_pairs_matrix(4, [(0, 1)])
        
        forest = SpickerClusterer(cutoff=100.0).cluster(scores)
        
        assert list(forest.to_dict().values()) == [[0, 1, 2, 3]]
    
    @pytest.mark.parametrize('cutoff', [0.05, 0.2, 0.4, 0.8])
    def test_random_matrix_partition(self, cutoff):
        """Test termination and partition on random input."""
        points = np.random.RandomState(3).rand(20, 3)
        scores = squareform(pdist(points))
        
        clusterer = SpickerClusterer(cutoff=cutoff)
        forest = clusterer.cluster(scores)
        
        forest.check_partition()
        assert len(forest.active_clusters()) == clusterer.n_clusters_
        assert sum(len(c.members) for c in forest.active_clusters()) == 20
    
    def test_get_params(self):
        """Test parameter reporting."""
        clusterer = SpickerClusterer(cutoff=2.0)
        clusterer.cluster(close_pairs_matrix(4, [(0, 1), (2, 3)]))
        
        params = clusterer.get_params()
        assert params['algorithm'] == 'spicker'
        assert params['seeds'] == [0, 2]


if __name__ == '__main__':
    pytest.main([__file__])
