"""Find documentation files under a content root."""

from pathlib import Path
from typing import List, Union
import logging

from ..config.constants import DEFAULTS

logger = logging.getLogger(__name__)


def discover_documents(content_root: Union[str, Path],
                       pattern: str = DEFAULTS.FILE_PATTERN) -> List[Path]:
    """Recursively list files under ``content_root`` matching ``pattern``.

    Returns:
        Matching file paths in sorted order
    """
    root = Path(content_root)
    paths = sorted(p for p in root.rglob(pattern) if p.is_file())
    logger.debug(f"Found {len(paths)} files matching {pattern} under {root}")
    return paths
