"""Command-line interface for the scrape-docs tool."""

import signal
import sys
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import List, Optional

from .config import APP, parse_arguments
from .pipeline import PipelineOrchestrator
from .utils import (
    ConfigLoader,
    ConfigurationError,
    GracefulErrorHandler,
    get_logger,
    graceful_error,
)


@contextmanager
def cancel_on_interrupt(cancel_event: threading.Event):
    """Turn Ctrl+C into a cancellation request while the block runs.

    Signal handlers can only be installed from the main thread; elsewhere
    the block runs without one.
    """
    if threading.current_thread() is not threading.main_thread():
        yield
        return

    def handler(signum, frame):
        print("Canceling...")
        cancel_event.set()

    previous_handler = signal.signal(signal.SIGINT, handler)
    try:
        yield
    finally:
        signal.signal(signal.SIGINT, previous_handler)


@graceful_error
def main(argv: Optional[List[str]] = None) -> int:
    """Run the CLI tool."""
    args = parse_arguments(argv)

    try:
        config = ConfigLoader(args.config)
        max_workers = args.workers if args.workers is not None else config.get_max_workers()
        config_log_level = config.get_log_level()
        log_to_file = config.get_log_to_file()
        log_dir = config.get_log_dir()
        # --workers skips get_max_workers, so check the section shape here too
        config.get_scraper_config()
    except ConfigurationError as e:
        GracefulErrorHandler.handle_configuration_error(args.config, e)
        return APP.EXIT_FAILURE

    if max_workers is not None and max_workers < 1:
        print(f"{APP.NAME}: error: --workers must be at least 1", file=sys.stderr)
        return APP.EXIT_USAGE

    if args.quiet:
        log_level = 'ERROR'
    else:
        log_level = args.log_level or config_log_level

    logger = get_logger(
        level=log_level,
        log_to_file=log_to_file,
        log_dir=log_dir,
    )

    content_root = Path(args.docs_path)
    if not content_root.is_dir():
        logger.error(f"Documentation root not found: {content_root}")
        GracefulErrorHandler.handle_missing_content_root(str(content_root))
        return APP.EXIT_FAILURE

    cancel_event = threading.Event()
    orchestrator = PipelineOrchestrator(
        config,
        max_workers=max_workers,
        report_duplicates=args.report_duplicates,
        cancel_event=cancel_event,
    )

    with cancel_on_interrupt(cancel_event):
        return orchestrator.execute_pipeline(content_root, Path(args.output_path))


if __name__ == "__main__":
    sys.exit(main())
