"""Configuration loader for scraper settings from a YAML file."""

import yaml
from pathlib import Path
from typing import Dict, Any, Optional

from ..config.constants import DEFAULTS
from .error_handler import ConfigurationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigLoader:
    """Load and manage configuration from YAML file.

    Without a path every getter returns the built-in defaults.
    """

    def __init__(self, config_path: Optional[str] = None):
        """Initialize config loader.

        Args:
            config_path: Path to YAML configuration file, or None for defaults
        """
        self.config_path = Path(config_path) if config_path else None
        self.config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file.

        Returns:
            Configuration dictionary

        Raises:
            ConfigurationError: If the file is missing, unreadable or not a mapping
        """
        if self.config_path is None:
            return {}

        if not self.config_path.exists():
            raise ConfigurationError(f"Config file not found: {self.config_path}")

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in {self.config_path}: {e}",
                suggestions=["Check indentation and quoting"],
            ) from e

        if config is None:
            return {}
        if not isinstance(config, dict):
            raise ConfigurationError(f"Config file must contain a mapping: {self.config_path}")
        return config

    def _get_section(self, name: str) -> Dict[str, Any]:
        section = self.config.get(name)
        if section is None:
            return {}
        if not isinstance(section, dict):
            raise ConfigurationError(f"Config section '{name}' must be a mapping")
        return section

    def get_scraper_config(self) -> Dict[str, Any]:
        """Get scraper configuration."""
        return self._get_section('scraper')

    def get_logging_config(self) -> Dict[str, Any]:
        """Get logging configuration."""
        return self._get_section('logging')

    def get_help_base_url(self) -> str:
        """Get the URL prefix for help links.

        Returns:
            Base URL, always ending with a slash
        """
        url = str(self.get_scraper_config().get('help_base_url', DEFAULTS.HELP_BASE_URL))
        return url if url.endswith('/') else url + '/'

    def get_file_pattern(self) -> str:
        """Get the glob used to discover documentation files."""
        return str(self.get_scraper_config().get('file_pattern', DEFAULTS.FILE_PATTERN))

    def get_max_workers(self) -> Optional[int]:
        """Get the size of the parse worker pool.

        Returns:
            Worker count, or None for the executor default
        """
        workers = self.get_scraper_config().get('max_workers', DEFAULTS.MAX_WORKERS)
        if workers is None:
            return None
        if not isinstance(workers, int) or isinstance(workers, bool) or workers < 1:
            raise ConfigurationError("scraper.max_workers must be an integer of at least 1")
        return workers

    def get_log_level(self) -> str:
        """Get the log level name.

        Raises:
            ConfigurationError: If the level is not one of LOG_LEVELS
        """
        level = str(self.get_logging_config().get('level', DEFAULTS.LOG_LEVEL)).upper()
        if level not in LOG_LEVELS:
            raise ConfigurationError(
                f"Unknown logging.level '{level}'",
                suggestions=[f"Use one of: {', '.join(LOG_LEVELS)}"],
            )
        return level

    def get_log_to_file(self) -> bool:
        return bool(self.get_logging_config().get('log_to_file', DEFAULTS.LOG_TO_FILE))

    def get_log_dir(self) -> str:
        return str(self.get_logging_config().get('log_dir', DEFAULTS.LOG_DIR))
