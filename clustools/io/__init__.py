"""I/O utilities: pairwise measurement input and text reports."""

from .pairwise_reader import PairwiseData, parse_line, read_pairwise_file
from .report_writer import format_report, write_report

__all__ = [
    'PairwiseData',
    'parse_line',
    'read_pairwise_file',
    'format_report',
    'write_report'
]
