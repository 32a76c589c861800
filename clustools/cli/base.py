"""Base classes and utilities for CLI commands."""

import argparse
from abc import ABC, abstractmethod
from typing import Any

from ..config import ClusterConfig, LOG_LEVELS
from ..utils.io import read_json, write_text
from ..utils.logging import get_logger


class BaseCommand(ABC):
    """Base class for CLI commands."""
    
    def __init__(self, args: argparse.Namespace):
        self.args = args
        self.logger = get_logger(self.__class__.__name__)
    
    @abstractmethod
    def execute(self) -> None:
        """Execute the command."""
        pass
    
    def load_config(self) -> ClusterConfig:
        """
        Build the configuration for this run.
        
        Defaults are overlaid with the JSON config file (if any) and then
        with the options given on the command line.
        """
        config = ClusterConfig.default()
        
        config_file = getattr(self.args, 'config_file', None)
        if config_file:
            self.logger.info(f"Loading configuration from {config_file}")
            config.update(read_json(config_file))
        
        config.update(self._overrides())
        return config
    
    def _overrides(self) -> dict:
        """Command line options that were actually given, by config section."""
        options = {
            'input': {'measure_type': 'measure'},
            'normalization': {'missing_policy': 'missing'},
            'clustering': {
                'algorithm': 'algorithm',
                'cutoff': 'cutoff',
                'n_clusters': 'n_clusters',
                'random_state': 'seed',
                'max_iter': 'max_iter'
            },
            'report': {'show_labels': 'labels'}
        }
        overrides = {}
        for section, keys in options.items():
            for key, option in keys.items():
                value = getattr(self.args, option, None)
                if value is not None:
                    overrides.setdefault(section, {})[key] = value
        return overrides
    
    def emit(self, text: str, output: Any = None) -> None:
        """Write text to a file, or to stdout when no output is given."""
        if output:
            path = write_text(text, output)
            self.logger.info(f"Output written to {path}")
        else:
            print(text, end='')


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    """Add common arguments to parser."""
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=LOG_LEVELS,
        help='Logging level'
    )
    parser.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Suppress log output'
    )


def add_input_arguments(parser: argparse.ArgumentParser) -> None:
    """Add arguments describing the measurement file."""
    parser.add_argument(
        '--input', '-i', '-f',
        required=True,
        help='File with one "ElementX ElementY Value" line per ordered pair'
    )
    parser.add_argument(
        '--measure', '-m',
        help='Input values are distances or similarities (distance|similarity or 0|1)'
    )
    parser.add_argument(
        '--missing',
        help='Treatment of pairs measured in one direction only (mean|zero)'
    )
    parser.add_argument(
        '--config-file',
        help='JSON file with configuration sections'
    )
    parser.add_argument(
        '--output', '-o',
        help='Output file (stdout if omitted)'
    )
