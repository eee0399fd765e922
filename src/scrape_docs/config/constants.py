"""Constants shared across the scraper."""

import re
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ApplicationDefaults:
    """Default configuration values."""
    HELP_BASE_URL: str = "https://docs.microsoft.com/en-us/windows/win32/api/"
    FILE_PATTERN: str = "??-*-*.md"
    MAX_WORKERS: Optional[int] = None
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"
    LOG_TO_FILE: bool = False
    ENCODING: str = "utf-8-sig"


@dataclass(frozen=True)
class ApplicationMetadata:
    """Application metadata and system constants."""
    NAME: str = "scrape_docs"
    VERSION: str = "scrape_docs v1.0.0"
    EXIT_SUCCESS: int = 0
    EXIT_FAILURE: int = 1
    EXIT_USAGE: int = 1
    EXIT_CANCELLED: int = 2

    @property
    def generated_header(self) -> str:
        """Comment line written at the top of every manifest."""
        return f"# This file was generated by the {self.NAME} tool in this repo."


@dataclass(frozen=True)
class DocumentPatterns:
    """Compiled patterns for file names and markdown section headers."""
    FRONTMATTER_DELIMITER: str = "---"
    FILE_NAME: re.Pattern = re.compile(r"^\w\w-\w+-([\w\-]+)$")
    PARAMETER_HEADER: re.Pattern = re.compile(r"^### -param (\w+)")
    FIELD_HEADER: re.Pattern = re.compile(r"^### -field (\w+)")
    RETURN_HEADER: re.Pattern = re.compile(r"^###? -returns")
    SECTION_BREAK: str = "#"


DEFAULTS = ApplicationDefaults()
APP = ApplicationMetadata()
PATTERNS = DocumentPatterns()
