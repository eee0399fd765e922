"""Extraction of API documentation from markdown files.

The pieces compose in a fixed order over a single LineCursor: the
frontmatter splitter reads the YAML block, the name resolver picks the
file's API name, and the section scanner reads the rest of the body.
"""

from .line_cursor import LineCursor
from .frontmatter import MetadataError, split_frontmatter, read_frontmatter, parse_frontmatter
from .name_resolver import presumed_api_name, resolve_api_name
from .section_scanner import ScannedSections, SectionScanner, scan_sections
from .document_parser import DocumentParser

__all__ = [
    'LineCursor',
    'MetadataError',
    'split_frontmatter',
    'read_frontmatter',
    'parse_frontmatter',
    'presumed_api_name',
    'resolve_api_name',
    'ScannedSections',
    'SectionScanner',
    'scan_sections',
    'DocumentParser',
]
