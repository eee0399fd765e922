"""Command line argument parsing."""

import argparse
import sys
from typing import List, Optional

from .constants import APP


class _UsageArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors with the tool's exit code."""

    def error(self, message: str) -> None:
        self.print_usage(sys.stderr)
        self.exit(APP.EXIT_USAGE, f"{self.prog}: error: {message}\n")


class ArgumentParserBuilder:
    """Builder for creating argument parser with fluent interface."""

    def __init__(self):
        self.parser = _UsageArgumentParser(
            prog="scrape-docs",
            description="Scrape API documentation from markdown files into a YAML manifest",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog=self._get_usage_examples()
        )
        self._add_core_arguments()
        self._add_optional_arguments()

    def _add_core_arguments(self) -> None:
        """Add the two required positional arguments."""
        self.parser.add_argument(
            'docs_path',
            metavar='path-to-docs',
            help='Root directory of the markdown documentation tree'
        )

        self.parser.add_argument(
            'output_path',
            metavar='path-to-output-yml',
            help='Manifest file to write'
        )

    def _add_optional_arguments(self) -> None:
        """Add optional configuration arguments."""
        self.parser.add_argument(
            '--config', '-c',
            type=str,
            default=None,
            help='Optional YAML configuration file'
        )

        self.parser.add_argument(
            '--workers', '-w',
            type=int,
            default=None,
            help='Number of parallel parse workers (default: executor default, 1 disables parallelism)'
        )

        self.parser.add_argument(
            '--log-level',
            type=str,
            choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
            default=None,
            help='Logging level (default: INFO)'
        )

        self.parser.add_argument(
            '--report-duplicates',
            action='store_true',
            help='Log a warning for every API name declared by more than one file'
        )

        self.parser.add_argument(
            '--quiet', '-q',
            action='store_true',
            help='Only log errors'
        )

        self.parser.add_argument(
            '--version', '-V',
            action='version',
            version=APP.VERSION
        )

    def _get_usage_examples(self) -> str:
        """Get formatted usage examples."""
        return """
Examples:
  # Scrape the win32 docs tree into a manifest
  scrape-docs sdk-api/sdk-api-src/content ApiDocs.yml

  # Debug a single worker run
  scrape-docs docs out/ApiDocs.yml --workers 1 --log-level DEBUG
        """

    def build(self) -> argparse.ArgumentParser:
        """Build and return the configured parser."""
        return self.parser


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments using builder pattern."""
    parser = ArgumentParserBuilder().build()
    return parser.parse_args(argv)
