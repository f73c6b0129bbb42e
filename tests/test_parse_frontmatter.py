"""Tests for locating and decoding frontmatter blocks."""

import datetime
import logging

import pytest
from bs4 import BeautifulSoup, Tag

from properties_table.frontmatter_entry import FrontmatterEntry
from properties_table.parse_frontmatter import find_frontmatter, parse_frontmatter


def pre_for(text: str) -> Tag:
    """Wrap YAML text in a frontmatter block and return that element."""
    soup = BeautifulSoup("<body><h1>Page</h1></body>", "html.parser")
    pre = soup.new_tag("pre", attrs={"class": "frontmatter"})
    pre.string = text
    soup.body.append(pre)
    return pre


def test_find_frontmatter() -> None:
    """Test that only the marked <pre> counts as frontmatter."""
    soup = BeautifulSoup(
        "<pre>code</pre><pre class='frontmatter language-yaml'>a: 1</pre>",
        "html.parser",
    )
    pre = find_frontmatter(soup)
    assert pre is not None
    assert pre.get_text() == "a: 1"

    assert find_frontmatter(BeautifulSoup("<pre>a: 1</pre>", "html.parser")) is None


def test_parse_frontmatter_preserves_order() -> None:
    """Test that entries come back in declaration order."""
    entries = parse_frontmatter(pre_for("zeta: 1\nalpha: two\nmid: [a, b]\n"))
    assert entries == [
        FrontmatterEntry("zeta", 1),
        FrontmatterEntry("alpha", "two"),
        FrontmatterEntry("mid", ["a", "b"]),
    ]


def test_parse_frontmatter_value_types() -> None:
    """Test scalar, nested mapping and null decoding."""
    entries = parse_frontmatter(
        pre_for(
            "draft: true\n"
            "created: 2024-01-02\n"
            "rating: 4.5\n"
            "empty:\n"
            "author:\n"
            "  name: Ada\n"
        )
    )
    assert dict(entries) == {
        "draft": True,
        "created": datetime.date(2024, 1, 2),
        "rating": 4.5,
        "empty": None,
        "author": {"name": "Ada"},
    }


def test_parse_frontmatter_keeps_duplicate_keys() -> None:
    """Test that repeated keys are kept as separate entries."""
    entries = parse_frontmatter(pre_for("tags: a\ntags: b\n"))
    assert entries == [FrontmatterEntry("tags", "a"), FrontmatterEntry("tags", "b")]


def test_parse_frontmatter_merge_keys() -> None:
    """Test that YAML merge keys are flattened into plain entries."""
    entries = parse_frontmatter(
        pre_for("base: &base\n  x: 1\nother:\n  <<: *base\n  y: 2\n")
    )
    assert entries[1] == FrontmatterEntry("other", {"x": 1, "y": 2})


def test_parse_frontmatter_non_string_keys() -> None:
    """Test that keys are always strings."""
    entries = parse_frontmatter(pre_for("2024: year\ntrue: yes\n"))
    assert [e.key for e in entries] == ["2024", "true"]


def test_parse_frontmatter_empty() -> None:
    """Test that an empty block yields no entries."""
    assert parse_frontmatter(pre_for("")) == []
    assert parse_frontmatter(pre_for("# only a comment\n")) == []


def test_parse_frontmatter_not_a_mapping(caplog: pytest.LogCaptureFixture) -> None:
    """Test that a list or scalar document yields no entries."""
    with caplog.at_level(logging.WARNING):
        assert parse_frontmatter(pre_for("- a\n- b\n")) == []
        assert parse_frontmatter(pre_for("just text")) == []
    assert "not a mapping" in caplog.text


def test_parse_frontmatter_invalid_yaml(caplog: pytest.LogCaptureFixture) -> None:
    """Test that malformed YAML is logged and treated as empty."""
    with caplog.at_level(logging.ERROR):
        assert parse_frontmatter(pre_for("title: [unclosed\n")) == []
    assert "YAML parse error" in caplog.text


def test_parse_frontmatter_rejects_unsafe_tags(
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Test that python-specific tags are refused by the safe loader."""
    with caplog.at_level(logging.ERROR):
        text = "cmd: !!python/object/apply:os.system ['true']\n"
        assert parse_frontmatter(pre_for(text)) == []
    assert "YAML parse error" in caplog.text


def test_parse_frontmatter_impossible_date(caplog: pytest.LogCaptureFixture) -> None:
    """Test that a date PyYAML cannot build is logged and treated as empty."""
    with caplog.at_level(logging.ERROR):
        assert parse_frontmatter(pre_for("title: x\ndate: 2024-02-30\n")) == []
    assert "YAML parse error" in caplog.text


def test_parse_frontmatter_null_key() -> None:
    """Test that a null key is labelled with its YAML spelling."""
    entries = parse_frontmatter(pre_for("~: a\nnull: b\n"))
    assert [e.key for e in entries] == ["null", "null"]
