"""Error types and user guidance for the scraper."""

import logging
import traceback
from typing import Optional
from functools import wraps

logger = logging.getLogger(__name__)


class ScrapeDocsError(Exception):
    """Base error carrying a message and optional suggestions for the user."""

    def __init__(self, message: str, suggestions: Optional[list] = None, error_code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.suggestions = suggestions or []
        self.error_code = error_code


class FrontmatterError(ScrapeDocsError):
    """The document does not start with a frontmatter delimiter."""

    def __init__(self, expected: str, actual: Optional[str]):
        super().__init__(
            f'Expected: "{expected}" but read: "{actual}".',
            error_code="frontmatter",
        )
        self.expected = expected
        self.actual = actual


class ConfigurationError(ScrapeDocsError):
    """The configuration file is missing or unusable."""


class RunCancelledError(ScrapeDocsError):
    """The run was cancelled before the manifest could be written."""

    def __init__(self, message: str = "Run cancelled before completion"):
        super().__init__(message, error_code="cancelled")


class GracefulErrorHandler:
    """Prints guidance for failures the user can fix."""

    @staticmethod
    def handle_missing_content_root(content_root: str):
        """Explain that the documentation root could not be found."""
        print(f"""
Documentation root not found: {content_root}

Suggestions:
1. Check that the path points at the directory holding the markdown files
2. Clone or sync the documentation repository first
""")

    @staticmethod
    def handle_configuration_error(config_file: str, error: ScrapeDocsError):
        """Explain a configuration problem."""
        print(f"""
Configuration problem: {config_file}
  {error.message}

Suggestions:
1. Check that the configuration file exists
2. Validate the YAML syntax
""")
        for suggestion in error.suggestions:
            print(f"   - {suggestion}")


def graceful_error(func):
    """Log unexpected failures of ``func`` before re-raising them."""
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except ScrapeDocsError:
            raise
        except Exception as e:
            logger.error(f"{func.__name__} failed: {e}")
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(traceback.format_exc())
            raise
    return wrapper
