"""Resolve which declared API name a documentation file describes."""

from typing import Iterable, Optional

from ..config.constants import PATTERNS


def presumed_api_name(file_stem: str) -> Optional[str]:
    """Derive the API name implied by a file name.

    Files are named ``<2 chars>-<segment>-<remainder>``; the remainder is
    the presumed name. Returns None when the stem does not fit that shape.
    """
    match = PATTERNS.FILE_NAME.match(file_stem)
    if match is None:
        return None
    return match.group(1)


def normalize_api_name(name: str) -> str:
    return name.replace('.', '-').lower()


def resolve_api_name(file_stem: str, api_names: Iterable[str]) -> Optional[str]:
    """Pick the declared name that matches the file name.

    Declared names are compared case-insensitively with dots treated as
    dashes, so ``Foo.Bar`` matches a file ending in ``foo-bar``.

    Args:
        file_stem: File name without directory or extension
        api_names: Names declared in the frontmatter, in document order

    Returns:
        The first matching declared name in its original casing, or None
    """
    presumed = presumed_api_name(file_stem)
    if presumed is None:
        return None

    target = presumed.lower()
    for name in api_names:
        if normalize_api_name(name) == target:
            return name
    return None
