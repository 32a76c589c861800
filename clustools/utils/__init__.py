"""Utility modules for the clustering tools."""

from .io import read_json, write_text
from .numpy_helpers import submatrix, upper_triangle_pairs
from .validation import (
    validate_file_exists,
    validate_node_count,
    validate_score_matrix
)

__all__ = [
    'read_json',
    'write_text',
    'submatrix',
    'upper_triangle_pairs',
    'validate_file_exists',
    'validate_node_count',
    'validate_score_matrix'
]
