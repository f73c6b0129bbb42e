"""Rendering of single frontmatter values into DOM fragments.

Rules are applied in order, first match wins:

1. lists are rendered item by item into a wrapping flex container
2. non-string values become text via :func:`as_text`
3. values of the tags key become tag chips matching the exporter's own
4. ``http(s)://`` values become external links opening in a new tab
5. ``[[wiki links]]`` become internal links when the target is known
6. everything else is plain text

Unresolved wiki links stay as their original bracketed text.
"""

import re
from collections.abc import Mapping
from typing import Any

from bs4 import BeautifulSoup, NavigableString, Tag

from properties_table.as_text import as_text
from properties_table.create_link import create_link
from properties_table.inline_style import format_style
from properties_table.load_config import DEFAULT_CONFIG

EXTERNAL_LINK_RE = re.compile(r"^https?://")
# [[Target]] or [[Target|Label]]
WIKI_LINK_RE = re.compile(r"\[\[(?P<target>.+?)(?:\|(?P<label>[^\]]+))?\]\]")

DEFAULT_LIST_STYLE: Mapping[str, str] = DEFAULT_CONFIG["styles"]["list"]


def render_value(
    soup: BeautifulSoup,
    key: str,
    value: Any,
    link_targets: Mapping[str, str],
    *,
    tags_key: str = "tags",
    list_style: Mapping[str, str] = DEFAULT_LIST_STYLE,
) -> Tag | NavigableString:
    """Create the DOM fragment for one frontmatter value."""
    if isinstance(value, (list, tuple)):
        div = soup.new_tag("div", style=format_style(list_style))
        for item in value:
            div.append(
                render_value(
                    soup,
                    key,
                    item,
                    link_targets,
                    tags_key=tags_key,
                    list_style=list_style,
                )
            )
        return div

    if not isinstance(value, str):
        return NavigableString(as_text(value))

    if key == tags_key:
        # Same markup obsidian-webpage-export uses for its own tags
        tag = create_link(soup, f"?query=tag:{value}", f"#{value}")
        tag["class"] = ["tag", "is-unresolved"]
        return tag

    if EXTERNAL_LINK_RE.match(value):
        return create_link(soup, value, value, new_window=True)

    wiki = WIKI_LINK_RE.fullmatch(value)
    if wiki:
        target = link_targets.get(wiki["target"])
        if target:
            return create_link(soup, target, wiki["label"] or wiki["target"])

    return NavigableString(value)
