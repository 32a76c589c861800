"""Logging configuration."""

import logging
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Get a module logger.
    
    Handlers are left to the application (see ``configure_logging``) so
    library use does not print anything below WARNING.
    
    Args:
        name: Logger name
        level: Log level; leaves the current level untouched when None
        
    Returns:
        Logger
    """
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(getattr(logging, level.upper()))
    return logger


def configure_logging(level: str = 'INFO') -> None:
    """
    Send log records to stderr, keeping stdout free for reports.
    
    Args:
        level: Root log level
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        stream=sys.stderr
    )
