"""YAML frontmatter extraction.

A document opens with a ``---`` line, followed by YAML, followed by a closing
``---`` line. The splitter reads the block through a shared LineCursor and
leaves the cursor on the closing delimiter so the body scan can continue
from the next line.
"""

from typing import Iterator, List, Optional

import yaml

from ..config.constants import PATTERNS
from ..data_models import Frontmatter
from ..utils.error_handler import FrontmatterError, ScrapeDocsError


class MetadataError(ScrapeDocsError):
    """The frontmatter parsed as YAML but lacks the expected structure."""


def split_frontmatter(cursor) -> Iterator[str]:
    """Yield the lines between the opening and closing delimiters.

    The first line must be the opening delimiter. The closing delimiter is
    consumed but not yielded; if the input ends first, the block simply ends.

    Raises:
        FrontmatterError: If the first line is not the opening delimiter
    """
    first_line = cursor.advance()
    if first_line != PATTERNS.FRONTMATTER_DELIMITER:
        raise FrontmatterError(PATTERNS.FRONTMATTER_DELIMITER, first_line)

    while True:
        line = cursor.advance()
        if line is None or line == PATTERNS.FRONTMATTER_DELIMITER:
            return
        yield line


def read_frontmatter(cursor) -> str:
    """Collect the frontmatter block as a single YAML document string."""
    return "".join(line + "\n" for line in split_frontmatter(cursor))


def parse_frontmatter(text: str) -> Frontmatter:
    """Parse frontmatter YAML into a Frontmatter record.

    Scalars are loaded as plain strings, so names such as ``NO`` or ``1.0``
    keep their declared spelling.

    Raises:
        yaml.YAMLError: If the text is not valid YAML
        MetadataError: If ``api_name`` is missing or not a sequence
    """
    root = yaml.load(text, Loader=yaml.BaseLoader)
    if not isinstance(root, dict):
        raise MetadataError("Frontmatter is not a YAML mapping")

    declared = root.get('api_name')
    if not isinstance(declared, list):
        raise MetadataError("Frontmatter has no api_name sequence")

    api_names: List[str] = [name for name in declared if isinstance(name, str)]

    description: Optional[str] = root.get('description')
    if not isinstance(description, str):
        description = None

    return Frontmatter(api_names=api_names, description=description)
