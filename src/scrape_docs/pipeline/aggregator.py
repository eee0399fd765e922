"""Parallel parsing of documentation files into a single manifest."""

import threading
import time
from concurrent.futures import FIRST_COMPLETED, Future, ThreadPoolExecutor, wait
from typing import Dict, Iterator, List, Optional, Sequence, Tuple, Union
from pathlib import Path
import logging

from ..data_models import ApiDoc, DuplicateEntry, RunSummary
from ..extractors.document_parser import DocumentParser
from ..utils.error_handler import RunCancelledError

logger = logging.getLogger(__name__)


class Manifest:
    """Thread-safe mapping from API name to ApiDoc.

    The first record added under a name is kept; later ones are rejected.
    """

    def __init__(self):
        self._entries: Dict[str, ApiDoc] = {}
        self._lock = threading.Lock()

    def try_add(self, doc: ApiDoc) -> bool:
        """Add ``doc`` unless its name is already present.

        Returns:
            True if the record was stored
        """
        with self._lock:
            if doc.api_name in self._entries:
                return False
            self._entries[doc.api_name] = doc
            return True

    def get(self, api_name: str) -> Optional[ApiDoc]:
        with self._lock:
            return self._entries.get(api_name)

    def items(self) -> List[Tuple[str, ApiDoc]]:
        """Snapshot of the entries sorted by API name."""
        with self._lock:
            return sorted(self._entries.items())

    def to_mapping(self) -> Dict[str, dict]:
        """Manifest contents as plain data, ready for serialization."""
        return {name: doc.to_manifest_entry() for name, doc in self.items()}

    def __contains__(self, api_name: object) -> bool:
        with self._lock:
            return api_name in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter([name for name, _ in self.items()])


class Aggregator:
    """Runs a DocumentParser over many files and merges the results.

    Files are parsed on a thread pool; the calling thread collects finished
    parses and is the only writer to the manifest, so the first parse to
    finish for a given API name wins. Setting ``cancel_event`` makes ``run``
    raise RunCancelledError instead of returning a partial manifest.
    """

    def __init__(self, parser: DocumentParser,
                 max_workers: Optional[int] = None,
                 cancel_event: Optional[threading.Event] = None,
                 report_duplicates: bool = False,
                 poll_interval: float = 0.1):
        """Initialize the aggregator.

        Args:
            parser: Parser applied to every file
            max_workers: Worker pool size; 1 parses sequentially, None uses the executor default
            cancel_event: Event that requests cancellation when set
            report_duplicates: Log duplicate API names as warnings instead of debug messages
            poll_interval: Seconds between cancellation checks while waiting on workers
        """
        self.parser = parser
        self.max_workers = max_workers
        self.cancel_event = cancel_event or threading.Event()
        self.report_duplicates = report_duplicates
        self.poll_interval = poll_interval
        self.last_summary = RunSummary()

    def cancel(self) -> None:
        """Request cancellation of the current run."""
        self.cancel_event.set()

    def run(self, paths: Sequence[Union[str, Path]]) -> Manifest:
        """Parse every path and aggregate the successful results.

        Args:
            paths: Documentation files to parse

        Returns:
            Manifest of all parsed documents

        Raises:
            RunCancelledError: If cancellation was requested before completion
        """
        manifest = Manifest()
        summary = RunSummary(discovered=len(paths))
        self.last_summary = summary
        start_time = time.time()

        if self.max_workers == 1 or len(paths) <= 1:
            self._run_sequential(paths, manifest, summary)
        else:
            self._run_parallel(paths, manifest, summary)

        self._check_cancelled()

        summary.elapsed_seconds = time.time() - start_time
        logger.info(f"Parsed {summary.discovered} documents in {summary.elapsed_seconds:.2f}s "
                    f"({summary.seconds_per_document * 1000:.2f}ms per document)")
        if summary.skipped:
            logger.info(f"Skipped {summary.skipped} documents")
        if summary.duplicates:
            logger.info(f"Ignored {len(summary.duplicates)} documents with an already-claimed API name")
        return manifest

    def _run_sequential(self, paths, manifest: Manifest, summary: RunSummary) -> None:
        logger.debug(f"Parsing {len(paths)} documents sequentially")
        for path in paths:
            self._check_cancelled()
            self._record(path, self.parser.parse(path), manifest, summary)

    def _run_parallel(self, paths, manifest: Manifest, summary: RunSummary) -> None:
        logger.debug(f"Parsing {len(paths)} documents with max_workers={self.max_workers}")

        executor = ThreadPoolExecutor(max_workers=self.max_workers)
        try:
            future_to_path: Dict[Future, Union[str, Path]] = {
                executor.submit(self.parser.parse, path): path
                for path in paths
            }
            pending = set(future_to_path)
            while pending:
                self._check_cancelled()
                done, pending = wait(pending, timeout=self.poll_interval,
                                     return_when=FIRST_COMPLETED)
                for future in done:
                    path = future_to_path[future]
                    try:
                        doc = future.result()
                    except Exception as e:
                        logger.error(f"Parsing failed for {path}: {e}")
                        doc = None
                    self._record(path, doc, manifest, summary)
        finally:
            executor.shutdown(wait=True, cancel_futures=True)

    def _record(self, path, doc: Optional[ApiDoc], manifest: Manifest, summary: RunSummary) -> None:
        if doc is None:
            summary.skipped += 1
            return

        summary.parsed += 1
        if manifest.try_add(doc):
            return

        kept = manifest.get(doc.api_name)
        duplicate = DuplicateEntry(
            api_name=doc.api_name,
            kept_path=kept.source_path if kept else "",
            dropped_path=str(path),
        )
        summary.duplicates.append(duplicate)
        message = (f"Duplicate API name {duplicate.api_name}: keeping {duplicate.kept_path}, "
                   f"ignoring {duplicate.dropped_path}")
        if self.report_duplicates:
            logger.warning(message)
        else:
            logger.debug(message)

    def _check_cancelled(self) -> None:
        if self.cancel_event.is_set():
            raise RunCancelledError()
