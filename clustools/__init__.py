"""Clustering of elements from pairwise, possibly asymmetric, measurements."""

__version__ = '0.3.0'
