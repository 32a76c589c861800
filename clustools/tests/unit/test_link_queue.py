"""Unit tests for the link priority queue."""

import pytest
import numpy as np
from clustools.core.links import LinkQueue
from clustools.core.models import Link


class TestLinkQueue:
    """Test cases for LinkQueue."""
    
    def setup_method(self):
        """Set up test fixtures."""
        self.scores = np.array([
            [0.0, 3.0, 1.0, 4.0],
            [3.0, 0.0, 2.0, 5.0],
            [1.0, 2.0, 0.0, 6.0],
            [4.0, 5.0, 6.0, 0.0]
        ])
    
    def test_one_link_per_pair(self):
        """Test the queue holds every unordered pair once."""
        queue = LinkQueue.from_scores(self.scores)
        
        assert len(queue) == 6
        pairs = set()
        while queue:
            link = queue.pop()
            assert link.node_a < link.node_b
            pairs.add((link.node_a, link.node_b))
        assert len(pairs) == 6
    
    def test_ascending_order(self):
        """Test links come out shortest first."""
        queue = LinkQueue.from_scores(self.scores)
        
        distances = []
        while not queue.empty():
            distances.append(queue.pop().distance)
        
        assert distances == [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]
    
    def test_peek_does_not_remove(self):
        """Test peek returns the minimum and keeps it."""
        queue = LinkQueue.from_scores(self.scores)
        
        assert queue.peek() == Link(1.0, 0, 2)
        assert len(queue) == 6
    
    def test_push(self):
        """Test pushing a new minimum."""
        queue = LinkQueue.from_scores(self.scores)
        queue.push(Link(0.5, 1, 3))
        
        assert queue.pop().distance == 0.5
    
    def test_pop_empty(self):
        """Test popping an empty queue."""
        queue = LinkQueue()
        
        with pytest.raises(IndexError):
            queue.pop()
        with pytest.raises(IndexError):
            queue.peek()
    
    def test_single_element_has_no_links(self):
        """Test a 1x1 matrix yields an empty queue."""
        queue = LinkQueue.from_scores(np.zeros((1, 1)))
        
        assert queue.empty()
        assert not queue


if __name__ == '__main__':
    pytest.main([__file__])
