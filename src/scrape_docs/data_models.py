"""Data models for the documentation scraper."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class Frontmatter:
    """Metadata declared in a document's YAML frontmatter block.

    Attributes:
        api_names: Declared names, in document order, for the API the file documents
        description: Optional one-line description of the API
    """
    api_names: List[str]
    description: Optional[str] = None


@dataclass(frozen=True)
class ApiDoc:
    """Documentation extracted from one markdown file.

    Attributes:
        api_name: Canonical API name resolved from the frontmatter
        help_link: URL of the published page for this API
        description: Description from the frontmatter, if any
        parameters: Parameter name to trimmed section text
        fields: Struct field name to trimmed section text
        return_value: Trimmed text of the return value section, if any
        source_path: File the record was parsed from
    """
    api_name: str
    help_link: str
    description: Optional[str] = None
    parameters: Dict[str, str] = field(default_factory=dict)
    fields: Dict[str, str] = field(default_factory=dict)
    return_value: Optional[str] = None
    source_path: str = field(default="", compare=False)

    def to_manifest_entry(self) -> Dict[str, Any]:
        """Render the record as a manifest value.

        Empty parameter and field maps and an absent return value are left out.
        """
        entry: Dict[str, Any] = {'HelpLink': self.help_link}
        if self.description is not None:
            entry['Description'] = self.description
        if self.parameters:
            entry['Parameters'] = dict(self.parameters)
        if self.fields:
            entry['Fields'] = dict(self.fields)
        if self.return_value is not None:
            entry['ReturnValue'] = self.return_value
        return entry


@dataclass(frozen=True)
class DuplicateEntry:
    """An API name claimed by a file after another file already claimed it."""
    api_name: str
    kept_path: str
    dropped_path: str


@dataclass
class RunSummary:
    """Counters describing one aggregation run."""
    discovered: int = 0
    parsed: int = 0
    skipped: int = 0
    duplicates: List[DuplicateEntry] = field(default_factory=list)
    elapsed_seconds: float = 0.0

    @property
    def seconds_per_document(self) -> float:
        return self.elapsed_seconds / self.discovered if self.discovered else 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'discovered': self.discovered,
            'parsed': self.parsed,
            'skipped': self.skipped,
            'duplicates': len(self.duplicates),
            'elapsed_seconds': self.elapsed_seconds,
        }
