"""Utility modules for the documentation scraper."""

from .logger import get_logger, Logger
from .file_utils import write_file
from .config_loader import ConfigLoader
from .error_handler import (
    ScrapeDocsError,
    FrontmatterError,
    ConfigurationError,
    RunCancelledError,
    GracefulErrorHandler,
    graceful_error,
)

__all__ = [
    'get_logger',
    'Logger',
    'write_file',
    'ConfigLoader',
    'ScrapeDocsError',
    'FrontmatterError',
    'ConfigurationError',
    'RunCancelledError',
    'GracefulErrorHandler',
    'graceful_error',
]
