"""Logging utility for the documentation scraper."""

import logging
import sys
from pathlib import Path
from datetime import datetime
from typing import Optional


ROOT_LOGGER_NAME = "scrape_docs"


class Logger:
    """Centralized logging utility."""

    _instance: Optional[logging.Logger] = None

    @classmethod
    def get_logger(cls, name: str = ROOT_LOGGER_NAME,
                   level: str = "INFO",
                   log_to_file: bool = False,
                   log_dir: str = "logs") -> logging.Logger:
        """Get or create the package logger.

        Module loggers created with ``logging.getLogger(__name__)`` propagate
        to this one, so configuring it once covers the whole package.

        Args:
            name: Logger name
            level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_to_file: Whether to log to file
            log_dir: Directory for log files

        Returns:
            Configured logger instance
        """
        if cls._instance is not None:
            return cls._instance

        logger = logging.getLogger(name)
        logger.setLevel(getattr(logging, level.upper()))

        # Clear existing handlers
        logger.handlers.clear()

        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(getattr(logging, level.upper()))
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        if log_to_file:
            log_path = Path(log_dir)
            log_path.mkdir(parents=True, exist_ok=True)

            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            log_file = log_path / f"scrape_docs_{timestamp}.log"

            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

            logger.info(f"Logging to file: {log_file}")

        cls._instance = logger
        return logger

    @classmethod
    def reset(cls):
        """Reset the logger instance and detach its handlers."""
        if cls._instance is not None:
            for handler in list(cls._instance.handlers):
                cls._instance.removeHandler(handler)
                handler.close()
            cls._instance.setLevel(logging.NOTSET)
        cls._instance = None

    @classmethod
    def format_api_doc(cls, doc, max_length: int = 80) -> str:
        """Format a parsed document for debug logging."""
        if doc is None:
            return "<none>"
        parts = [doc.api_name]
        if doc.parameters:
            parts.append(f"params={len(doc.parameters)}")
        if doc.fields:
            parts.append(f"fields={len(doc.fields)}")
        if doc.return_value is not None:
            parts.append("returns")
        if doc.description:
            short_text = doc.description.replace("\n", " ")
            if len(short_text) > max_length:
                short_text = short_text[:max_length] + "..."
            parts.append(f"desc={short_text}")
        return " | ".join(parts)


def get_logger(name: str = ROOT_LOGGER_NAME, **kwargs) -> logging.Logger:
    """Convenience function to get logger.

    Args:
        name: Logger name
        **kwargs: Additional arguments for Logger.get_logger()

    Returns:
        Logger instance
    """
    return Logger.get_logger(name, **kwargs)
