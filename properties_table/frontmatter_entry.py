"""Data model for a single frontmatter property."""

from typing import Any, NamedTuple


class FrontmatterEntry(NamedTuple):
    """One key/value pair, in frontmatter declaration order."""

    key: str
    value: Any  # str, list, number, bool, date, mapping or None
