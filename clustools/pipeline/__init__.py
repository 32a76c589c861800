"""Pipeline components for clustering pairwise measurements."""

from .orchestrator import ClusteringPipeline
from .results import ResultManager

__all__ = [
    'ClusteringPipeline',
    'ResultManager'
]
