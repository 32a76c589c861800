"""Main CLI entry point."""

import argparse
import sys
import logging
from typing import List, Optional

from ..config import SUPPORTED_ALGORITHMS
from ..utils.logging import configure_logging
from .base import add_common_arguments, add_input_arguments
from .commands import (
    ClusterCommand,
    NormalizeCommand
)


def create_parser():
    """Create argument parser for CLI."""
    parser = argparse.ArgumentParser(
        description='Cluster elements from pairwise, possibly asymmetric, measurements'
    )
    
    add_common_arguments(parser)
    
    subparsers = parser.add_subparsers(
        dest='command',
        help='Available commands'
    )
    
    # Cluster command
    cluster_parser = subparsers.add_parser(
        'cluster',
        help='Cluster the elements of a measurement file'
    )
    add_input_arguments(cluster_parser)
    cluster_parser.add_argument(
        '--algorithm', '-a', '-s',
        help=f"Clustering algorithm, by name or number 0-4 ({', '.join(SUPPORTED_ALGORITHMS)})"
    )
    cluster_parser.add_argument(
        '--cutoff', '-d',
        type=float,
        help='Distance (or similarity) cutoff for linkage and SPICKER clustering'
    )
    cluster_parser.add_argument(
        '--n-clusters', '-k',
        type=int,
        help='Number of clusters for K-Means'
    )
    cluster_parser.add_argument(
        '--seed',
        type=int,
        help='Random seed for the K-Means initial means'
    )
    cluster_parser.add_argument(
        '--max-iter',
        type=int,
        help='Maximum K-Means iterations'
    )
    cluster_parser.add_argument(
        '--labels',
        action='store_true',
        default=None,
        help='Print element names under the member ids'
    )
    
    # Normalize command
    normalize_parser = subparsers.add_parser(
        'normalize',
        help='Write the symmetric normalized distances of a measurement file'
    )
    add_input_arguments(normalize_parser)
    
    return parser


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    
    # Configure logging
    if not args.quiet:
        configure_logging(args.log_level)
    
    # Execute command
    if args.command == 'cluster':
        command = ClusterCommand(args)
    elif args.command == 'normalize':
        command = NormalizeCommand(args)
    else:
        parser.print_help()
        sys.exit(1)
    
    try:
        command.execute()
    except Exception as e:
        logging.error(f"Command failed: {e}", exc_info=True)
        sys.exit(1)


if __name__ == '__main__':
    main()
