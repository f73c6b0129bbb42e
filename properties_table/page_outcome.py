"""Outcome of processing a single exported page."""

from enum import Enum


class PageOutcome(Enum):
    """How processing of one page ended."""

    NO_FRONTMATTER = "no frontmatter"
    NO_ENTRIES = "no entries"
    NO_HEADING = "no heading"
    MUTATED = "mutated"
    DRY_RUN = "dry run"

    @property
    def changed(self) -> bool:
        """Whether a properties table was built for the page."""
        return self in (PageOutcome.MUTATED, PageOutcome.DRY_RUN)
