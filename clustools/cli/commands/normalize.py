"""Normalize command implementation."""

from ...core.normalization import normalize_scores
from ...io import read_pairwise_file
from ..base import BaseCommand


class NormalizeCommand(BaseCommand):
    """Command to write the symmetric normalized matrix of a measurement file."""
    
    def execute(self) -> None:
        """Execute normalization."""
        config = self.load_config()
        data = read_pairwise_file(self.args.input, config.input.measure_type)
        
        scores = normalize_scores(
            data.raw_scores,
            n_nodes=data.n_nodes,
            missing_policy=config.normalization.missing_policy
        )
        
        labels = data.labels or [str(i) for i in range(data.n_nodes)]
        lines = [
            f"{labels[i]}\t{labels[j]}\t{scores[i, j]:f}"
            for i in range(data.n_nodes)
            for j in range(data.n_nodes)
        ]
        self.emit('\n'.join(lines) + '\n', self.args.output)
        
        self.logger.info(f"Normalized {data.n_nodes} elements (distance units)")
