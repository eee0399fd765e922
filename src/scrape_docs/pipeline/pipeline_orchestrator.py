"""Pipeline orchestrator: discover, parse, aggregate, write."""

import threading
from pathlib import Path
from typing import Optional

from ..config.constants import APP
from ..data_models import RunSummary
from ..extractors import DocumentParser
from ..utils import ConfigLoader, RunCancelledError, get_logger
from .aggregator import Aggregator
from .discovery import discover_documents
from .manifest_writer import write_manifest


class PipelineOrchestrator:
    """Orchestrates the pipeline execution steps."""

    def __init__(self, config: ConfigLoader,
                 max_workers: Optional[int] = None,
                 report_duplicates: bool = False,
                 cancel_event: Optional[threading.Event] = None):
        self.config = config
        self.max_workers = max_workers if max_workers is not None else config.get_max_workers()
        self.report_duplicates = report_duplicates
        self.cancel_event = cancel_event or threading.Event()
        self.logger = get_logger()
        self.last_summary: Optional[RunSummary] = None

    def execute_pipeline(self, content_root: Path, output_path: Path) -> int:
        """Execute the complete pipeline.

        Returns:
            Process exit code
        """
        parser = DocumentParser(content_root, help_base_url=self.config.get_help_base_url())
        aggregator = Aggregator(
            parser,
            max_workers=self.max_workers,
            cancel_event=self.cancel_event,
            report_duplicates=self.report_duplicates,
        )

        try:
            self.logger.info("Enumerating documents to be parsed...")
            paths = [
                path for path in discover_documents(content_root, self.config.get_file_pattern())
                if parser.can_parse(path)
            ]

            self.logger.info("Parsing documents...")
            manifest = aggregator.run(paths)
            self.last_summary = aggregator.last_summary

            # the write phase must not start once cancellation is observed
            if self.cancel_event.is_set():
                raise RunCancelledError()
        except RunCancelledError:
            self.last_summary = aggregator.last_summary
            self.logger.warning("Run cancelled; no manifest was written")
            return APP.EXIT_CANCELLED

        if not write_manifest(manifest, output_path):
            self.logger.error(f"Failed to write manifest to {output_path}")
            return APP.EXIT_FAILURE

        self.logger.info(f"Wrote {len(manifest)} API entries")
        return APP.EXIT_SUCCESS
