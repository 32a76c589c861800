"""Pipeline orchestrator: raw measurements to cluster report."""

from pathlib import Path
from typing import Any, Dict, Optional, Sequence, Union

import numpy as np

from ..clustering.metrics import summarize_clustering
from ..config import ClusterConfig, MEASURE_SIMILARITY
from ..core.normalization import normalize_scores, similarity_to_distance
from ..factories import clusterer_from_settings
from ..io import read_pairwise_file
from ..utils.logging import get_logger
from .results import ResultManager

logger = get_logger(__name__)


class ClusteringPipeline:
    """Main pipeline: read, normalize, cluster and summarize."""
    
    def __init__(self, config: ClusterConfig = None):
        """Initialize clustering pipeline."""
        self.config = config or ClusterConfig.default()
        self.config.validate()
        self.result_manager = ResultManager()
    
    def run(self,
            source: Union[str, Path, Sequence[float], np.ndarray],
            labels: Optional[Sequence[str]] = None) -> Dict[str, Any]:
        """
        Run the complete clustering pipeline.
        
        Args:
            source: Path to a pairwise measurement file, or the flat list of
                raw values (row-major, N*N values, in the configured measure)
            labels: Element names for in-memory input
            
        Returns:
            Dictionary with the cluster history, summary and parameters
        """
        if isinstance(source, (str, Path)):
            data = read_pairwise_file(source, self.config.input.measure_type)
            raw_scores, labels = data.raw_scores, data.labels
        else:
            raw_scores = np.asarray(source, dtype=np.float64)
            if self.config.input.measure_type == MEASURE_SIMILARITY:
                raw_scores = similarity_to_distance(raw_scores)
        
        logger.info("Normalizing scores...")
        scores = normalize_scores(
            raw_scores,
            missing_policy=self.config.normalization.missing_policy
        )
        n_nodes = scores.shape[0]
        
        cutoff = self.config.effective_cutoff()
        clusterer = clusterer_from_settings(self.config.clustering, cutoff)
        
        logger.info(f"Clustering {n_nodes} elements with {self.config.clustering.algorithm}...")
        forest = clusterer.cluster(scores)
        
        logger.info("Computing cluster statistics...")
        summary = summarize_clustering(forest, scores)
        
        results = {
            'algorithm': self.config.clustering.algorithm,
            'measure_type': self.config.input.measure_type,
            'n_nodes': n_nodes,
            'cutoff': cutoff,
            'scores': scores,
            'forest': forest,
            'summary': summary,
            'labels': list(labels) if labels is not None else [],
            'clustering_params': clusterer.get_params()
        }
        self.result_manager.set_results(results)
        logger.info(f"Found {summary.n_clusters} clusters ({summary.n_orphans} orphans)")
        return results
    
    def get_report(self) -> str:
        """Text report of the last run."""
        return self.result_manager.render(show_labels=self.config.report.show_labels)
    
    def save_results(self, output: Union[str, Path]) -> Path:
        """Save the text report of the last run."""
        return self.result_manager.save(output, show_labels=self.config.report.show_labels)
