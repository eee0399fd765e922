"""Single-pass line cursor shared by the frontmatter and section scanners."""

from typing import Iterable, Iterator, Optional


class LineCursor:
    """Pull-based reader over a sequence of text lines.

    ``current`` holds the most recently read line with its line terminator
    removed, or None once the input is exhausted. Every consumer advances the
    same cursor, so a scan picks up exactly where the previous one stopped.
    """

    def __init__(self, lines: Iterable[str]):
        self._lines: Iterator[str] = iter(lines)
        self.current: Optional[str] = None
        self.line_number = 0
        self._exhausted = False

    def advance(self) -> Optional[str]:
        """Read the next line and make it current.

        Returns:
            The new current line, or None at end of input
        """
        if self._exhausted:
            return None

        raw = next(self._lines, None)
        if raw is None:
            self._exhausted = True
            self.current = None
            return None

        self.line_number += 1
        self.current = raw.rstrip('\r\n')
        return self.current

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def __repr__(self) -> str:
        return f"LineCursor(line={self.line_number}, current={self.current!r})"
