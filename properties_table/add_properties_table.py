"""Logic for adding a properties table to a single exported page."""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from bs4 import BeautifulSoup

from properties_table.build_properties_table import build_properties_table
from properties_table.frontmatter_entry import FrontmatterEntry
from properties_table.inline_style import set_style_property
from properties_table.page_outcome import PageOutcome
from properties_table.parse_frontmatter import find_frontmatter, parse_frontmatter

logger = logging.getLogger(__name__)


def add_properties_table(
    file: Path,
    link_targets: Mapping[str, str],
    config: dict[str, Any],
    *,
    dry_run: bool = False,
) -> PageOutcome:
    """Add a properties table below the page heading, based on its frontmatter.

    Pages without frontmatter, without usable entries or without a heading
    are left untouched. Otherwise the table is inserted after the heading,
    the title is updated from the frontmatter, the exporter's data bar is
    hidden and the page is overwritten.

    Running this twice on the same page inserts a second table.
    """
    selectors = config["selectors"]
    html = file.read_text(encoding="utf-8")
    soup = BeautifulSoup(html, "html.parser")

    pre = find_frontmatter(soup, selectors["frontmatter"])
    if pre is None:
        return PageOutcome.NO_FRONTMATTER

    entries = parse_frontmatter(pre)
    if not entries:
        logger.debug("No frontmatter entries in %s", file)
        return PageOutcome.NO_ENTRIES
    stem = file.name.removesuffix(config["page_extension"])
    entries.insert(0, FrontmatterEntry(config["id_key"], stem))

    heading = soup.select_one(selectors["heading"])
    if heading is None:
        logger.warning("No heading found in %s, skipping", file)
        return PageOutcome.NO_HEADING

    table = build_properties_table(soup, heading, entries, link_targets, config)
    heading.insert_after(table)

    # The exporter already lists tags in its data bar; the table covers them now.
    data_bar = soup.select_one(selectors["data_bar"])
    if data_bar is not None:
        set_style_property(data_bar, "visibility", "hidden")

    if dry_run:
        return PageOutcome.DRY_RUN
    file.write_text(str(soup), encoding="utf-8")
    return PageOutcome.MUTATED
