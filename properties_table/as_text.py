"""Logic for converting frontmatter values to their plain text representation."""

import datetime

import yaml


def as_text(v: object) -> str:
    """Convert a value to display text, handling lists, mappings and None."""
    if v is None:
        return ""
    if isinstance(v, str):
        return v
    # YAML spelling, not Python's True/False
    if isinstance(v, bool):
        return "true" if v else "false"
    if isinstance(v, (datetime.date, datetime.datetime)):
        return v.isoformat()
    if isinstance(v, (list, tuple)):
        return ", ".join(as_text(x) for x in v if as_text(x))
    if isinstance(v, dict):
        return yaml.safe_dump(
            v, default_flow_style=True, allow_unicode=True, sort_keys=False, width=2**16
        ).strip()
    return str(v)
