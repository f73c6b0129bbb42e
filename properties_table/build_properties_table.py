"""Logic for assembling the properties table of a page."""

from collections.abc import Iterable, Mapping
from typing import Any

from bs4 import BeautifulSoup, Tag

from properties_table.as_text import as_text
from properties_table.frontmatter_entry import FrontmatterEntry
from properties_table.inline_style import format_style
from properties_table.render_value import render_value
from properties_table.set_page_title import set_page_title


def is_empty_value(value: Any) -> bool:
    """Empty strings and nulls never produce a row."""
    return value is None or value == ""


def build_properties_table(
    soup: BeautifulSoup,
    heading: Tag,
    entries: Iterable[FrontmatterEntry],
    link_targets: Mapping[str, str],
    config: dict[str, Any],
) -> Tag:
    """Build a <table> with one row per non-empty entry.

    Entries whose key is one of the configured title synonyms also replace the
    page title; every matching entry is applied in turn, so the last one wins.
    """
    styles = config["styles"]
    title_keys = frozenset(config["title_keys"])

    table = soup.new_tag("table", style=format_style(styles["table"]))
    for key, value in entries:
        if is_empty_value(value):
            continue
        if key in title_keys:
            set_page_title(soup, heading, as_text(value))

        tr = soup.new_tag("tr")
        td_key = soup.new_tag("td", style=format_style(styles["key_cell"]))
        td_key.string = key
        td_value = soup.new_tag("td", style=format_style(styles["value_cell"]))
        td_value.append(
            render_value(
                soup,
                key,
                value,
                link_targets,
                tags_key=config["tags_key"],
                list_style=styles["list"],
            )
        )
        tr.append(td_key)
        tr.append(td_value)
        table.append(tr)
    return table
