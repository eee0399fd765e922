"""Parse one markdown documentation file into an ApiDoc record."""

from pathlib import Path
from typing import Optional, Union
from urllib.parse import quote
import logging

import yaml

from ..config.constants import DEFAULTS, PATTERNS
from ..data_models import ApiDoc
from ..utils.error_handler import FrontmatterError
from ..utils.logger import Logger
from .frontmatter import MetadataError, parse_frontmatter, read_frontmatter
from .line_cursor import LineCursor
from .name_resolver import resolve_api_name
from .section_scanner import SectionScanner

logger = logging.getLogger(__name__)


class DocumentParser:
    """Extracts API documentation from markdown files under a content root.

    Files that cannot be used (bad delimiter, invalid YAML, no matching API
    name, unreadable) are logged and skipped; ``parse`` never raises for
    per-file problems.
    """

    def __init__(self, content_root: Union[str, Path],
                 help_base_url: str = DEFAULTS.HELP_BASE_URL,
                 encoding: str = DEFAULTS.ENCODING):
        """Initialize the parser.

        Args:
            content_root: Directory that help links are made relative to
            help_base_url: URL prefix for help links
            encoding: Text encoding of the markdown files
        """
        self.content_root = Path(content_root)
        self.help_base_url = help_base_url if help_base_url.endswith('/') else help_base_url + '/'
        self.encoding = encoding

    def can_parse(self, file_path: Union[str, Path]) -> bool:
        """Check whether a path looks like an API documentation file."""
        path = Path(file_path)
        return path.suffix.lower() == '.md' and PATTERNS.FILE_NAME.match(path.stem) is not None

    def build_help_link(self, file_path: Union[str, Path]) -> str:
        """Build the published URL for a file.

        Raises:
            ValueError: If the file is not under the content root
        """
        relative = Path(file_path).relative_to(self.content_root).with_suffix('')
        return self.help_base_url + quote(relative.as_posix())

    def parse(self, file_path: Union[str, Path]) -> Optional[ApiDoc]:
        """Parse a documentation file.

        Args:
            file_path: Path to the markdown file

        Returns:
            ApiDoc for the file, or None if the file was skipped
        """
        path = Path(file_path)
        try:
            return self._parse_file(path)
        except FrontmatterError as e:
            logger.warning(f"Malformed frontmatter in \"{path}\": {e.message}")
        except yaml.YAMLError as e:
            logger.warning(f"YAML parsing error in \"{path}\": {e}")
        except MetadataError as e:
            logger.warning(f"Unusable frontmatter in \"{path}\": {e.message}")
        except UnicodeDecodeError as e:
            logger.warning(f"Encoding error reading \"{path}\": {e}")
        except OSError as e:
            logger.warning(f"Could not read \"{path}\": {e}")
        except ValueError as e:
            logger.warning(f"Cannot build help link for \"{path}\": {e}")
        return None

    def _parse_file(self, path: Path) -> Optional[ApiDoc]:
        help_link = self.build_help_link(path)

        with open(path, 'r', encoding=self.encoding) as md_file:
            cursor = LineCursor(md_file)
            frontmatter = parse_frontmatter(read_frontmatter(cursor))

            api_name = resolve_api_name(path.stem, frontmatter.api_names)
            if api_name is None:
                logger.warning(f"Could not find proper API name in: {path}")
                return None

            sections = SectionScanner(cursor).scan()

        doc = ApiDoc(
            api_name=api_name,
            help_link=help_link,
            description=frontmatter.description,
            parameters=sections.parameters,
            fields=sections.fields,
            return_value=sections.return_value,
            source_path=str(path),
        )
        logger.debug(f"Parsed {path}: {Logger.format_api_doc(doc)}")
        return doc
