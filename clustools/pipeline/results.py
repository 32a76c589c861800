"""Result management for the pipeline."""

from pathlib import Path
from typing import Any, Dict, Union

from ..io import format_report, write_report
from ..utils.logging import get_logger

logger = get_logger(__name__)


class ResultManager:
    """Holds pipeline results and renders the report."""
    
    def __init__(self):
        self.results: Dict[str, Any] = {}
    
    def set_results(self, results: Dict[str, Any]) -> None:
        """Set pipeline results."""
        self.results = results
    
    def _require_results(self) -> None:
        if 'summary' not in self.results:
            raise ValueError("No results available; run the pipeline first")
    
    def render(self, show_labels: bool = False) -> str:
        """Render the report text."""
        self._require_results()
        return format_report(
            self.results['summary'],
            self.results.get('measure_type'),
            self.results.get('labels') if show_labels else None
        )
    
    def save(self, output: Union[str, Path], show_labels: bool = False) -> Path:
        """
        Save the report to a file.
        
        Args:
            output: Report file path
            show_labels: Whether to print element names under member ids
            
        Returns:
            Path of the written report
        """
        self._require_results()
        logger.info(f"Saving report to {output}")
        return write_report(
            self.results['summary'],
            output,
            self.results.get('measure_type'),
            self.results.get('labels') if show_labels else None
        )
    
    def get_summary(self) -> Dict[str, Any]:
        """Get results summary."""
        summary = self.results.get('summary')
        return {
            'algorithm': self.results.get('algorithm', 'unknown'),
            'n_nodes': self.results.get('n_nodes', 0),
            'n_clusters': summary.n_clusters if summary else 0,
            'n_orphans': summary.n_orphans if summary else 0,
            'total_average_distance': summary.total_average_distance if summary else 0.0,
            'silhouette': summary.average_silhouette if summary else 0.0
        }
