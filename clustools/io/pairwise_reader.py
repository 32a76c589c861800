"""Reader for pairwise measurement files."""

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Union

import numpy as np

from ..config.constants import DEFAULT_MEASURE, FIELD_DELIMITERS, MEASURE_SIMILARITY
from ..config.settings import parse_measure
from ..core.normalization import infer_node_count, similarity_to_distance
from ..utils.logging import get_logger
from ..utils.validation import validate_file_exists

logger = get_logger(__name__)

_SPLITTER = re.compile(FIELD_DELIMITERS)


@dataclass
class PairwiseData:
    """Raw measurements in row-major order, ready for normalization."""
    raw_scores: np.ndarray
    n_nodes: int
    labels: List[str] = field(default_factory=list)


def parse_line(line: str, line_number: int = 0) -> List[str]:
    """
    Split a measurement line into its fields.
    
    Fields are separated by runs of tabs, spaces or '+' signs.
    
    Raises:
        ValueError: If the line has fewer than three fields
    """
    fields = [part for part in _SPLITTER.split(line.strip()) if part]
    if len(fields) < 3:
        raise ValueError(f"Line {line_number}: expected 'ElementX ElementY Value', got {line.strip()!r}")
    return fields


def read_pairwise_file(path: Union[str, Path],
                       measure_type: str = DEFAULT_MEASURE) -> PairwiseData:
    """
    Read pairwise measurements from a text file.
    
    Each line holds ``ElementX ElementY Value``, one line per ordered pair,
    row-major (all pairs of the first element first). Similarities are
    turned into distances on the way in.
    
    Args:
        path: Input file
        measure_type: 'distance' or 'similarity'
        
    Returns:
        PairwiseData with the raw distances and element labels
        
    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If a line is malformed
    """
    path = validate_file_exists(path)
    measure_type = parse_measure(measure_type)
    
    values = []
    targets = []
    with open(path, 'r', encoding='utf-8') as f:
        for line_number, line in enumerate(f, start=1):
            if not line.strip():
                continue
            fields = parse_line(line, line_number)
            try:
                values.append(float(fields[2]))
            except ValueError:
                raise ValueError(f"Line {line_number}: invalid value {fields[2]!r}") from None
            targets.append(fields[1])
    
    raw_scores = np.array(values, dtype=np.float64)
    if measure_type == MEASURE_SIMILARITY:
        raw_scores = similarity_to_distance(raw_scores)
    
    n_nodes = infer_node_count(len(values))
    logger.info(f"Read {len(values)} {measure_type} records for {n_nodes} elements from {path}")
    
    return PairwiseData(
        raw_scores=raw_scores,
        n_nodes=n_nodes,
        labels=targets[:n_nodes]
    )
