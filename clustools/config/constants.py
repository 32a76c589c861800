"""Shared constants for the clustering tools."""

# Clustering algorithms
ALGORITHM_SINGLE = 'single'
ALGORITHM_SPICKER = 'spicker'
ALGORITHM_KMEANS = 'kmeans'
ALGORITHM_COMPLETE = 'complete'
ALGORITHM_UPGMA = 'upgma'

SUPPORTED_ALGORITHMS = [
    ALGORITHM_SINGLE,
    ALGORITHM_SPICKER,
    ALGORITHM_KMEANS,
    ALGORITHM_COMPLETE,
    ALGORITHM_UPGMA
]

# Numeric selectors accepted by the legacy command line (-s 0..4)
ALGORITHM_CODES = {str(code): name for code, name in enumerate(SUPPORTED_ALGORITHMS)}

# Measure types
MEASURE_DISTANCE = 'distance'
MEASURE_SIMILARITY = 'similarity'

SUPPORTED_MEASURES = [
    MEASURE_DISTANCE,
    MEASURE_SIMILARITY
]

MEASURE_CODES = {str(code): name for code, name in enumerate(SUPPORTED_MEASURES)}

# Policy for pairs where only one direction was measured
MISSING_MEAN = 'mean'
MISSING_ZERO = 'zero'

SUPPORTED_MISSING_POLICIES = [
    MISSING_MEAN,
    MISSING_ZERO
]

# Default parameters
DEFAULT_CUTOFF = 0.5908
DEFAULT_N_CLUSTERS = 2
DEFAULT_MAX_ITER = 300
DEFAULT_ALGORITHM = ALGORITHM_SPICKER
DEFAULT_MEASURE = MEASURE_SIMILARITY
DEFAULT_MISSING_POLICY = MISSING_MEAN

# Input parsing
FIELD_DELIMITERS = r'[\t+ ]+'

# Logging levels
LOG_DEBUG = 'DEBUG'
LOG_INFO = 'INFO'
LOG_WARNING = 'WARNING'
LOG_ERROR = 'ERROR'

LOG_LEVELS = [LOG_DEBUG, LOG_INFO, LOG_WARNING, LOG_ERROR]
