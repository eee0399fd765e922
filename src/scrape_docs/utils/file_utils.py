"""File system helpers with error handling."""

import os
import tempfile
from pathlib import Path
import logging

logger = logging.getLogger(__name__)


def write_file(file_path: str, content: str, encoding: str = 'utf-8') -> bool:
    """Write content to file with error handling.

    The content goes to a temporary file in the same directory which then
    replaces the target, so a failed write never leaves a truncated file.

    Args:
        file_path: Path to the file
        content: Content to write
        encoding: File encoding (default: utf-8)

    Returns:
        True if successful, False otherwise
    """
    path = Path(file_path)
    temp_path = None
    try:
        # Create parent directories if needed
        path.parent.mkdir(parents=True, exist_ok=True)

        fd, temp_path = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        with open(fd, 'w', encoding=encoding, newline='\n') as f:
            f.write(content)
        os.replace(temp_path, path)
        temp_path = None

        logger.debug(f"Successfully wrote {len(content)} characters to {file_path}")
        return True

    except PermissionError as e:
        logger.error(f"Permission denied writing {file_path}: {e}")
        return False
    except OSError as e:
        logger.error(f"Unexpected error writing {file_path}: {e}")
        return False
    finally:
        if temp_path is not None and os.path.exists(temp_path):
            os.remove(temp_path)
