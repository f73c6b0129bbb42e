"""Utility for creating anchor elements."""

from bs4 import BeautifulSoup, Tag


def create_link(
    soup: BeautifulSoup, target: str, text: str, *, new_window: bool = False
) -> Tag:
    """Create an <a> element; new-window links get no opener and no referrer."""
    a = soup.new_tag("a", href=target)
    a.string = text
    if new_window:
        a["target"] = "_blank"
        a["rel"] = "noopener noreferrer"
    return a
