"""Flat text cluster reports."""

from pathlib import Path
from typing import List, Optional, Sequence, Union

from ..clustering.metrics import ClusterStats, ClusteringSummary
from ..config.constants import DEFAULT_MEASURE, MEASURE_SIMILARITY
from ..utils.io import write_text


def _format_cluster(stats: ClusterStats,
                    measure_type: str,
                    labels: Optional[Sequence[str]] = None) -> List[str]:
    """Lines describing one cluster."""
    if measure_type == MEASURE_SIMILARITY:
        # Report back in the units the measurements came in
        spread = (
            f"radius {1 - stats.radius:f} members {stats.size}, "
            f"minSimilarity {1 - stats.max_distance:f}"
        )
    else:
        spread = (
            f"radius {stats.radius:f} members {stats.size}, "
            f"maxDistance {stats.max_distance:f}"
        )
    
    lines = [
        f"Cluster {stats.cluster_id} : clustroid {stats.centroid}, mean {stats.mean}, {spread}",
        f"Intra-cluster distance: sum {stats.distance_sum:f}, "
        f"average {stats.average_distance:f}, pairs {stats.pair_count}",
        "List of members:",
        ' '.join(str(member) for member in stats.members)
    ]
    if labels:
        lines.append(' '.join(labels[member] for member in stats.members))
    return lines


def format_report(summary: ClusteringSummary,
                  measure_type: str = DEFAULT_MEASURE,
                  labels: Optional[Sequence[str]] = None) -> str:
    """
    Render a clustering summary as a text report.
    
    Args:
        summary: Statistics of the active clusters
        measure_type: Units of the input ('distance' or 'similarity')
        labels: Element names to print under the member ids
        
    Returns:
        Report text
    """
    lines = []
    for stats in summary.clusters:
        lines.extend(_format_cluster(stats, measure_type, labels))
    
    lines.extend([
        f"Total number of clusters: {summary.n_clusters}",
        f"Orphan clusters: {summary.n_orphans}",
        f"Total average intra-cluster distance: {summary.total_average_distance:f}",
        f"Average silhouette: {summary.average_silhouette:f}"
    ])
    return '\n'.join(lines) + '\n'


def write_report(summary: ClusteringSummary,
                 filepath: Union[str, Path],
                 measure_type: str = DEFAULT_MEASURE,
                 labels: Optional[Sequence[str]] = None) -> Path:
    """
    Write a text report to a file.
    
    Args:
        summary: Statistics of the active clusters
        filepath: Output path
        measure_type: Units of the input
        labels: Element names to print under the member ids
        
    Returns:
        Path of the written report
    """
    return write_text(format_report(summary, measure_type, labels), filepath)
