"""Logic for locating and decoding the frontmatter block of an exported page."""

import logging

import yaml
from bs4 import BeautifulSoup, Tag

from properties_table.as_text import as_text
from properties_table.frontmatter_entry import FrontmatterEntry

logger = logging.getLogger(__name__)


def key_text(key: object) -> str:
    """Return the label of a frontmatter key; a null key reads `null`."""
    return "null" if key is None else as_text(key)


def find_frontmatter(
    soup: BeautifulSoup, selector: str = "pre.frontmatter"
) -> Tag | None:
    """Return the element holding the raw frontmatter, if the page has one."""
    return soup.select_one(selector)


def parse_frontmatter(pre: Tag) -> list[FrontmatterEntry]:
    """Parse YAML frontmatter from a <pre> element into ordered entries.

    The mapping is walked node by node instead of through ``safe_load`` so
    that repeated keys survive as separate entries. Malformed YAML is logged
    and yields no entries, as do values PyYAML cannot build.
    """
    text = pre.get_text()
    loader = yaml.SafeLoader(text)
    try:
        node = loader.get_single_node()
        if node is None:
            return []
        if not isinstance(node, yaml.MappingNode):
            logger.warning("Frontmatter is not a mapping (got %s), ignoring", node.tag)
            return []
        loader.flatten_mapping(node)
        return [
            FrontmatterEntry(
                key_text(loader.construct_object(key_node, deep=True)),
                loader.construct_object(value_node, deep=True),
            )
            for key_node, value_node in node.value
        ]
    # Impossible timestamps such as 2024-02-30 fail with a plain ValueError
    except (yaml.YAMLError, ValueError) as e:
        logger.error("YAML parse error: %s", e)
        return []
    finally:
        loader.dispose()
