"""Helpers for reading and writing inline ``style`` attributes."""

from collections.abc import Mapping

from bs4 import Tag


def format_style(declarations: Mapping[str, str]) -> str:
    """Serialize CSS declarations the way browsers write them back."""
    return " ".join(f"{prop}: {value};" for prop, value in declarations.items())


def parse_style(style: str) -> dict[str, str]:
    """Split an inline style attribute into ordered declarations."""
    declarations: dict[str, str] = {}
    for part in style.split(";"):
        prop, sep, value = part.partition(":")
        if sep and prop.strip():
            declarations[prop.strip().lower()] = value.strip()
    return declarations


def set_style_property(tag: Tag, prop: str, value: str) -> None:
    """Set one CSS property on an element, keeping its other declarations."""
    raw = tag.get("style") or ""
    declarations = parse_style(raw if isinstance(raw, str) else " ".join(raw))
    declarations[prop] = value
    tag["style"] = format_style(declarations)
