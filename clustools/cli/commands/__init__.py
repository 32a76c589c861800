"""CLI command modules."""

from .cluster import ClusterCommand
from .normalize import NormalizeCommand

__all__ = [
    'ClusterCommand',
    'NormalizeCommand'
]
