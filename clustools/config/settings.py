"""Configuration for normalization, clustering and reporting."""

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, Optional

from .constants import (
    ALGORITHM_CODES,
    ALGORITHM_KMEANS,
    DEFAULT_ALGORITHM,
    DEFAULT_CUTOFF,
    DEFAULT_MAX_ITER,
    DEFAULT_MEASURE,
    DEFAULT_MISSING_POLICY,
    DEFAULT_N_CLUSTERS,
    MEASURE_CODES,
    MEASURE_SIMILARITY,
    SUPPORTED_ALGORITHMS,
    SUPPORTED_MEASURES,
    SUPPORTED_MISSING_POLICIES
)


def parse_algorithm(value: str) -> str:
    """
    Resolve an algorithm name or legacy numeric selector.
    
    Args:
        value: Algorithm name ('single', 'upgma', ...) or code ('0'..'4')
        
    Returns:
        Canonical algorithm name
        
    Raises:
        ValueError: If the value names no known algorithm
    """
    value = str(value).strip().lower()
    value = ALGORITHM_CODES.get(value, value)
    if value not in SUPPORTED_ALGORITHMS:
        raise ValueError(
            f"Unknown clustering algorithm: {value}. "
            f"Available: {SUPPORTED_ALGORITHMS}"
        )
    return value


def parse_measure(value: str) -> str:
    """Resolve a measure type name or legacy numeric code."""
    value = str(value).strip().lower()
    value = MEASURE_CODES.get(value, value)
    if value not in SUPPORTED_MEASURES:
        raise ValueError(
            f"Unknown measure type: {value}. "
            f"Available: {SUPPORTED_MEASURES}"
        )
    return value


@dataclass
class InputSettings:
    """How raw pairwise values are interpreted."""
    measure_type: str = DEFAULT_MEASURE


@dataclass
class NormalizationSettings:
    """Settings for turning raw measurements into a symmetric matrix."""
    missing_policy: str = DEFAULT_MISSING_POLICY


@dataclass
class ClusteringSettings:
    """Algorithm selection and its parameters."""
    algorithm: str = DEFAULT_ALGORITHM
    
    # Distance (or similarity) cutoff for linkage and SPICKER
    cutoff: Optional[float] = DEFAULT_CUTOFF
    
    # K-Means
    n_clusters: int = DEFAULT_N_CLUSTERS
    random_state: Optional[int] = None
    max_iter: int = DEFAULT_MAX_ITER


@dataclass
class ReportSettings:
    """Report formatting options."""
    show_labels: bool = False


@dataclass
class ClusterConfig:
    """Complete configuration."""
    input: InputSettings = field(default_factory=InputSettings)
    normalization: NormalizationSettings = field(default_factory=NormalizationSettings)
    clustering: ClusteringSettings = field(default_factory=ClusteringSettings)
    report: ReportSettings = field(default_factory=ReportSettings)
    
    @classmethod
    def default(cls) -> 'ClusterConfig':
        """Create default configuration."""
        return cls()
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ClusterConfig':
        """Create configuration from a nested dictionary."""
        config = cls.default()
        config.update(data)
        return config
    
    def update(self, data: Dict[str, Any]) -> None:
        """
        Update settings in place from a nested dictionary.
        
        Unknown sections and keys are ignored, matching how JSON config
        files are layered over command line defaults.
        
        Args:
            data: Mapping of section name to {setting: value}
        """
        for section_name, values in data.items():
            section = getattr(self, section_name, None)
            if section is None or not isinstance(values, dict):
                continue
            for key, value in values.items():
                if hasattr(section, key):
                    setattr(section, key, value)
        self.validate()
    
    def validate(self) -> None:
        """Normalize names and reject unsupported choices."""
        self.clustering.algorithm = parse_algorithm(self.clustering.algorithm)
        self.input.measure_type = parse_measure(self.input.measure_type)
        if self.normalization.missing_policy not in SUPPORTED_MISSING_POLICIES:
            raise ValueError(
                f"Unknown missing policy: {self.normalization.missing_policy}. "
                f"Available: {SUPPORTED_MISSING_POLICIES}"
            )
        if self.clustering.max_iter < 1:
            raise ValueError(f"max_iter must be positive, got {self.clustering.max_iter}")
    
    def effective_cutoff(self) -> Optional[float]:
        """
        Cutoff in distance units as seen by the engines.
        
        Similarity cutoffs are converted to ``1 - cutoff``. K-Means takes
        an element count instead, so it never gets a converted value.
        """
        cutoff = self.clustering.cutoff
        if cutoff is None or self.clustering.algorithm == ALGORITHM_KMEANS:
            return cutoff
        if self.input.measure_type == MEASURE_SIMILARITY:
            return 1.0 - cutoff
        return cutoff
    
    def to_dict(self) -> dict:
        """Convert configuration to dictionary."""
        return asdict(self)
