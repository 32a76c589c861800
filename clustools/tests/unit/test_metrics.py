"""Unit tests for cluster statistics."""

import pytest
import numpy as np
from clustools.clustering.metrics import (
    cluster_cohesion,
    cluster_separation,
    compute_cluster_stats,
    evaluate_clustering,
    find_centroid,
    find_mean,
    max_pairwise_distance,
    silhouette_values,
    summarize_clustering
)
from clustools.core.forest import ClusterForest


class TestRepresentatives:
    """Test cases for centroid and mean element selection."""
    
    def setup_method(self):
        """Set up test fixtures."""
        # Element 0 is never far from anyone, element 1 is closest on average
        self.star = np.array([
            [0.0, 3.0, 3.0, 3.0],
            [3.0, 0.0, 1.0, 4.0],
            [3.0, 1.0, 0.0, 4.5],
            [3.0, 4.0, 4.5, 0.0]
        ])
        self.path = np.array([
            [0.0, 1.0, 2.0],
            [1.0, 0.0, 1.0],
            [2.0, 1.0, 0.0]
        ])
    
    def test_centroid_minimizes_worst_distance(self):
        """Test clustroid and radius."""
        centroid, radius = find_centroid(self.star, [0, 1, 2, 3])
        
        assert centroid == 0
        assert radius == pytest.approx(3.0)
    
    def test_mean_minimizes_distance_sum(self):
        """Test mean element and its distance sum."""
        mean, total = find_mean(self.star, [0, 1, 2, 3])
        
        assert mean == 1
        assert total == pytest.approx(8.0)
    
    def test_path_middle_is_both(self):
        """Test the middle of a path is clustroid and mean."""
        assert find_centroid(self.path, [0, 1, 2]) == (1, 1.0)
        assert find_mean(self.path, [0, 1, 2])[0] == 1
    
    def test_ties_go_to_first_member(self):
        """Test the earliest listed member wins ties."""
        assert find_centroid(self.path, [2, 0])[0] == 2
        assert find_mean(self.path, [2, 0])[0] == 2
    
    def test_singleton(self):
        """Test a singleton is its own representative."""
        assert find_centroid(self.star, [3]) == (3, 0.0)
        assert find_mean(self.star, [3]) == (3, 0.0)
    
    def test_empty_cluster(self):
        """Test empty clusters have no representative."""
        with pytest.raises(ValueError):
            find_centroid(self.star, [])
        with pytest.raises(ValueError):
            find_mean(self.star, [])


class TestDistances:
    """Test cases for distance aggregates."""
    
    def setup_method(self):
        """Set up test fixtures."""
        self.path = np.array([
            [0.0, 1.0, 2.0],
            [1.0, 0.0, 1.0],
            [2.0, 1.0, 0.0]
        ])
    
    def test_max_pairwise_distance(self):
        """Test spread of a cluster."""
        assert max_pairwise_distance(self.path, [0, 1, 2]) == 2.0
        assert max_pairwise_distance(self.path, [1]) == 0.0
        assert max_pairwise_distance(self.path, []) == 0.0
    
    def test_cohesion_counts_ordered_pairs(self):
        """Test sum and average over ordered pairs."""
        total, average = cluster_cohesion(self.path, [0, 1, 2])
        
        assert total == pytest.approx(8.0)
        assert average == pytest.approx(8.0 / 6)
    
    def test_cohesion_of_singleton(self):
        """Test a singleton has no pairs."""
        assert cluster_cohesion(self.path, [0]) == (0.0, 0.0)
    
    def test_separation(self):
        """Test mean cross distance."""
        assert cluster_separation(self.path, [0, 1], [2]) == pytest.approx(1.5)
        assert cluster_separation(self.path, [0], []) == float('inf')


class TestSummaries:
    """Test cases for clustering summaries and silhouettes."""
    
    def setup_method(self):
        """Set up test fixtures."""
        # Pairs {0, 1} and {2, 3} at distance 1, everything else at 4
        self.scores = np.full((4, 4), 4.0)
        self.scores[0, 1] = self.scores[1, 0] = 1.0
        self.scores[2, 3] = self.scores[3, 2] = 1.0
        np.fill_diagonal(self.scores, 0.0)
    
    def test_silhouette_of_two_pairs(self):
        """Test silhouette against the closed form."""
        labels = np.array([0, 0, 1, 1])
        
        values = silhouette_values(self.scores, labels)
        
        assert np.allclose(values, 0.75)
    
    def test_silhouette_degenerate_labelings(self):
        """Test one cluster, or only singletons, scores zero."""
        assert np.all(silhouette_values(self.scores, np.zeros(4, dtype=int)) == 0)
        assert np.all(silhouette_values(self.scores, np.arange(4)) == 0)
    
    def test_silhouette_with_negative_distances(self):
        """Test matrices with negative entries score zero instead of failing."""
        scores = self.scores.copy()
        scores[0, 1] = scores[1, 0] = -0.5
        
        values = silhouette_values(scores, np.array([0, 0, 1, 1]))
        
        assert np.all(values == 0)
    
    def test_silhouette_of_singleton_member(self):
        """Test singleton members score zero."""
        values = silhouette_values(self.scores[:3, :3], np.array([0, 0, 1]))
        
        assert values[2] == 0.0
        assert values[0] == pytest.approx(0.75)
    
    def test_compute_cluster_stats_updates_cluster(self):
        """Test stats are stored on the cluster."""
        forest = ClusterForest(4)
        cluster = forest.merge(0, 1, 0.5)
        
        stats = compute_cluster_stats(cluster, self.scores)
        
        assert stats.size == 2
        assert stats.pair_count == 2
        assert stats.distance_sum == pytest.approx(2.0)
        assert cluster.centroid == 0
        assert cluster.mean == 0
        assert cluster.radius == pytest.approx(1.0)
        assert cluster.max_distance == pytest.approx(1.0)
        assert stats.to_dict()['members'] == [0, 1]
    
    def test_summarize_clustering(self):
        """Test aggregate statistics."""
        forest = ClusterForest(4)
        forest.merge(0, 1, 1.0)
        
        summary = summarize_clustering(forest, self.scores)
        
        assert summary.n_clusters == 3
        assert summary.n_orphans == 2
        assert summary.total_average_distance == pytest.approx(1.0)
        assert [stats.cluster_id for stats in summary.clusters] == [2, 3, 4]
    
    def test_summarize_skips_empty_clusters(self):
        """Test empty clusters are not reported."""
        forest = ClusterForest(4)
        forest.retire_active()
        full = forest.new_cluster([0, 1, 2, 3])
        forest.new_cluster([])
        
        summary = summarize_clustering(forest, self.scores)
        
        assert [stats.cluster_id for stats in summary.clusters] == [full.id]
    
    def test_evaluate_clustering(self):
        """Test the metric dictionary."""
        forest = ClusterForest(4)
        forest.merge(0, 1, 1.0)
        forest.merge(2, 3, 1.0)
        
        metrics = evaluate_clustering(forest, self.scores)
        
        assert metrics['n_clusters'] == 2
        assert metrics['n_orphans'] == 0
        assert metrics['total_average_distance'] == pytest.approx(2.0)
        assert metrics['silhouette'] == pytest.approx(0.75)


if __name__ == '__main__':
    pytest.main([__file__])
