"""Two-phase scanner for parameter, field and return value sections.

Phase 1 walks the body looking for ``### -param <name>`` and
``### -field <name>`` headers and stops, without consuming it, at the first
``## -returns`` header it meets between sections. Phase 2 continues from
that exact position and captures the first return section. Neither phase
rewinds, so any section that follows the return block is never read.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional
import logging

from ..config.constants import PATTERNS
from .line_cursor import LineCursor

logger = logging.getLogger(__name__)


@dataclass
class ScannedSections:
    """Sections captured from a document body."""
    parameters: Dict[str, str] = field(default_factory=dict)
    fields: Dict[str, str] = field(default_factory=dict)
    return_value: Optional[str] = None


class SectionScanner:
    """Extracts named sections from the body lines behind a LineCursor.

    The cursor must be positioned just before the first body line, i.e. on
    the closing frontmatter delimiter.
    """

    def __init__(self, cursor: LineCursor):
        self.cursor = cursor

    def scan(self) -> ScannedSections:
        """Run both phases over the remaining body."""
        sections = ScannedSections()
        self.cursor.advance()
        self.scan_named_sections(sections)
        sections.return_value = self.scan_return_section()
        return sections

    def read_section_body(self) -> str:
        """Accumulate lines up to the next ``#`` line or end of input.

        The terminating header line stays current on the cursor so the
        caller can examine it.
        """
        buffer = []
        while self.cursor.advance() is not None:
            if self.cursor.current.startswith(PATTERNS.SECTION_BREAK):
                break
            buffer.append(self.cursor.current)
        return "\n".join(buffer).strip()

    def scan_named_sections(self, sections: ScannedSections) -> None:
        """Phase 1: capture parameter and field sections."""
        line = self.cursor.current
        while line is not None:
            parameter_match = PATTERNS.PARAMETER_HEADER.match(line)
            if parameter_match:
                self._store(sections.parameters, parameter_match.group(1), self.read_section_body())
                line = self.cursor.current
                continue

            field_match = PATTERNS.FIELD_HEADER.match(line)
            if field_match:
                self._store(sections.fields, field_match.group(1), self.read_section_body())
                line = self.cursor.current
                continue

            if PATTERNS.RETURN_HEADER.match(line):
                break

            line = self.cursor.advance()

    def scan_return_section(self) -> Optional[str]:
        """Phase 2: capture the first return section from the current position."""
        line = self.cursor.current
        while line is not None:
            if PATTERNS.RETURN_HEADER.match(line):
                return self.read_section_body()
            line = self.cursor.advance()
        return None

    def _store(self, receiving_map: Dict[str, str], name: str, text: str) -> None:
        # first occurrence wins
        if name in receiving_map:
            logger.debug(f"Ignoring repeated section '{name}' at line {self.cursor.line_number}")
            return
        receiving_map[name] = text


def scan_sections(cursor: LineCursor) -> ScannedSections:
    """Convenience wrapper around SectionScanner.scan()."""
    return SectionScanner(cursor).scan()
