"""Configuration module for the clustering tools."""

from .settings import (
    InputSettings,
    NormalizationSettings,
    ClusteringSettings,
    ReportSettings,
    ClusterConfig,
    parse_algorithm,
    parse_measure
)

from .constants import (
    # Algorithms
    ALGORITHM_SINGLE,
    ALGORITHM_SPICKER,
    ALGORITHM_KMEANS,
    ALGORITHM_COMPLETE,
    ALGORITHM_UPGMA,
    SUPPORTED_ALGORITHMS,
    # Measures
    MEASURE_DISTANCE,
    MEASURE_SIMILARITY,
    SUPPORTED_MEASURES,
    # Missing reciprocal policies
    MISSING_MEAN,
    MISSING_ZERO,
    SUPPORTED_MISSING_POLICIES,
    # Other constants
    DEFAULT_CUTOFF,
    DEFAULT_N_CLUSTERS,
    DEFAULT_MAX_ITER,
    LOG_LEVELS
)

__all__ = [
    # Settings
    'InputSettings',
    'NormalizationSettings',
    'ClusteringSettings',
    'ReportSettings',
    'ClusterConfig',
    'parse_algorithm',
    'parse_measure',
    # Constants
    'ALGORITHM_SINGLE',
    'ALGORITHM_SPICKER',
    'ALGORITHM_KMEANS',
    'ALGORITHM_COMPLETE',
    'ALGORITHM_UPGMA',
    'SUPPORTED_ALGORITHMS',
    'MEASURE_DISTANCE',
    'MEASURE_SIMILARITY',
    'SUPPORTED_MEASURES',
    'MISSING_MEAN',
    'MISSING_ZERO',
    'SUPPORTED_MISSING_POLICIES',
    'DEFAULT_CUTOFF',
    'DEFAULT_N_CLUSTERS',
    'DEFAULT_MAX_ITER',
    'LOG_LEVELS'
]
