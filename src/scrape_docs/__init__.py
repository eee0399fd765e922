"""Scrape structured API documentation out of markdown doc trees.

The package reads markdown files that carry a YAML frontmatter block and
``### -param`` / ``### -field`` / ``## -returns`` sections, and aggregates
them into a single YAML manifest keyed by API name.
"""

from .data_models import ApiDoc, Frontmatter, RunSummary
from .extractors import DocumentParser
from .pipeline import Aggregator, Manifest, write_manifest

__version__ = "1.0.0"

__all__ = [
    'ApiDoc',
    'Frontmatter',
    'RunSummary',
    'DocumentParser',
    'Aggregator',
    'Manifest',
    'write_manifest',
]
