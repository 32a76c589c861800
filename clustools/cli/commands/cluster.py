"""Cluster command implementation."""

from ...pipeline import ClusteringPipeline
from ..base import BaseCommand


class ClusterCommand(BaseCommand):
    """Command to cluster a pairwise measurement file."""
    
    def execute(self) -> None:
        """Execute clustering pipeline."""
        config = self.load_config()
        pipeline = ClusteringPipeline(config)
        
        self.logger.info(f"Running clustering with {config.clustering.algorithm} algorithm")
        results = pipeline.run(self.args.input)
        
        self.emit(pipeline.get_report(), self.args.output)
        
        # Log summary
        summary = results['summary']
        self.logger.info(f"Total elements: {results['n_nodes']}")
        self.logger.info(f"Clusters found: {summary.n_clusters}")
        self.logger.info(f"Average silhouette: {summary.average_silhouette:.3f}")
