"""Factory functions for creating clustering components."""

from typing import Any, Dict, Optional, Tuple

from .clustering import (
    Clusterer,
    HierarchicalClusterer,
    KMeansClusterer,
    SpickerClusterer
)

from .config import (
    ALGORITHM_COMPLETE,
    ALGORITHM_KMEANS,
    ALGORITHM_SINGLE,
    ALGORITHM_SPICKER,
    ALGORITHM_UPGMA,
    ClusteringSettings
)


# Registry of available components: name -> (class, default kwargs)
CLUSTERERS: Dict[str, Tuple[type, Dict[str, Any]]] = {
    ALGORITHM_SINGLE: (HierarchicalClusterer, {'linkage': 'single'}),
    ALGORITHM_SPICKER: (SpickerClusterer, {}),
    ALGORITHM_KMEANS: (KMeansClusterer, {}),
    ALGORITHM_COMPLETE: (HierarchicalClusterer, {'linkage': 'complete'}),
    ALGORITHM_UPGMA: (HierarchicalClusterer, {'linkage': 'average'})
}


def get_clusterer(name: str, **kwargs) -> Clusterer:
    """
    Create clustering algorithm instance.
    
    Args:
        name: Algorithm name
        **kwargs: Algorithm-specific parameters
        
    Returns:
        Clusterer instance
        
    Raises:
        ValueError: If algorithm name is not recognized
    """
    if name not in CLUSTERERS:
        raise ValueError(
            f"Unknown clustering algorithm: {name}. "
            f"Available: {list(CLUSTERERS.keys())}"
        )
    
    clusterer_class, defaults = CLUSTERERS[name]
    return clusterer_class(**{**defaults, **kwargs})


def clusterer_from_settings(settings: ClusteringSettings,
                            cutoff: Optional[float] = None) -> Clusterer:
    """
    Create the clusterer selected by the clustering settings.
    
    The cutoff and the cluster count travel separately: cutoff-based
    algorithms get ``cutoff`` (already in distance units), K-Means gets
    ``settings.n_clusters``.
    
    Args:
        settings: Clustering settings
        cutoff: Distance cutoff for the linkage and SPICKER algorithms
        
    Returns:
        Clusterer instance
    """
    if settings.algorithm == ALGORITHM_KMEANS:
        return get_clusterer(
            ALGORITHM_KMEANS,
            n_clusters=settings.n_clusters,
            random_state=settings.random_state,
            max_iter=settings.max_iter
        )
    if settings.algorithm == ALGORITHM_SPICKER and cutoff is None:
        raise ValueError("SPICKER clustering requires a cutoff")
    return get_clusterer(settings.algorithm, cutoff=cutoff)


def register_clusterer(name: str, clusterer_class: type, **defaults) -> None:
    """Register new clustering algorithm."""
    if not issubclass(clusterer_class, Clusterer):
        raise TypeError(f"{clusterer_class} must inherit from Clusterer")
    CLUSTERERS[name] = (clusterer_class, defaults)
