"""Unit tests for score normalization."""

import pytest
import numpy as np
from clustools.core.normalization import (
    infer_node_count,
    normalize_scores,
    similarity_to_distance
)


class TestNormalizeScores:
    """Test cases for normalize_scores."""
    
    def test_equal_reciprocal_values(self):
        """Test harmonic mean of equal values is the value itself."""
        scores = normalize_scores([0, 4, 4, 0])
        
        assert scores[0, 1] == pytest.approx(4.0)
        assert scores[1, 0] == pytest.approx(4.0)
    
    def test_harmonic_mean(self):
        """Test harmonic mean of different reciprocal values."""
        scores = normalize_scores([0, 2, 6, 0])
        
        assert scores[0, 1] == pytest.approx(3.0)
    
    def test_symmetric_with_zero_diagonal(self):
        """Test the result is symmetric and the diagonal is forced to 0."""
        rng = np.random.RandomState(42)
        raw = rng.uniform(0.1, 5.0, size=(6, 6))
        
        scores = normalize_scores(raw.ravel())
        
        assert scores.shape == (6, 6)
        assert np.array_equal(scores, scores.T)
        assert np.all(np.diag(scores) == 0)
    
    def test_both_directions_zero(self):
        """Test pairs with no measurement at all score 0."""
        scores = normalize_scores([0, 0, 0, 0])
        
        assert scores[0, 1] == 0.0
    
    def test_one_direction_missing_uses_mean(self):
        """Test the arithmetic mean fallback for one-sided pairs."""
        scores = normalize_scores([0, 0, 6, 0], missing_policy='mean')
        
        assert scores[0, 1] == pytest.approx(3.0)
        assert scores[1, 0] == pytest.approx(3.0)
    
    def test_one_direction_missing_zero_policy(self):
        """Test the zero policy for one-sided pairs."""
        scores = normalize_scores([0, 0, 6, 0], missing_policy='zero')
        
        assert scores[0, 1] == 0.0
    
    def test_unknown_missing_policy(self):
        """Test rejection of unknown policies."""
        with pytest.raises(ValueError):
            normalize_scores([0, 1, 1, 0], missing_policy='median')
    
    def test_non_square_count_is_truncated(self):
        """Test trailing records are dropped when the count is not square."""
        scores = normalize_scores([0, 2, 6, 0, 99])
        
        assert scores.shape == (2, 2)
        assert scores[0, 1] == pytest.approx(3.0)
    
    def test_empty_input(self):
        """Test that no elements is an error."""
        with pytest.raises(ValueError):
            normalize_scores([])
    
    def test_explicit_node_count_needs_enough_records(self):
        """Test explicit node count larger than the input."""
        with pytest.raises(ValueError):
            normalize_scores([0, 1, 1, 0], n_nodes=3)
    
    def test_single_element(self):
        """Test a single element gives a 1x1 zero matrix."""
        scores = normalize_scores([0.7])
        
        assert scores.shape == (1, 1)
        assert scores[0, 0] == 0.0
    
    def test_opposite_values_do_not_divide_by_zero(self):
        """Test reciprocal values summing to 0."""
        scores = normalize_scores([0, 2, -2, 0])
        
        assert np.isfinite(scores).all()


class TestHelpers:
    """Test cases for normalization helpers."""
    
    def test_infer_node_count(self):
        """Test integer square root of the record count."""
        assert infer_node_count(9) == 3
        assert infer_node_count(10) == 3
        assert infer_node_count(0) == 0
    
    def test_similarity_to_distance(self):
        """Test similarity conversion."""
        distances = similarity_to_distance(np.array([1.0, 0.25, 0.0]))
        
        assert np.allclose(distances, [0.0, 0.75, 1.0])


if __name__ == '__main__':
    pytest.main([__file__])
