"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from properties_table.deep_merge import deep_merge

DEFAULT_CONFIG: dict[str, Any] = {
    "metadata_path": "site-lib/metadata.json",
    "source_extension": ".md",
    "page_extension": ".html",
    "selectors": {
        "frontmatter": "pre.frontmatter",
        "heading": "h1",
        "data_bar": "div.data-bar",
    },
    "tags_key": "tags",
    "id_key": "ID",
    "title_keys": ["title", "Title", "Titel"],
    "styles": {
        "table": {
            "background-color": "var(--background-secondary-alt)",
            "border-radius": "4px",
            "margin": "2em auto",
            "width": "90%",
            "overflow": "hidden",
        },
        "key_cell": {
            "font-weight": "lighter",
            "white-space": "nowrap",
            "font-size": "0.9rem",
        },
        "value_cell": {
            "font-size": "0.9rem",
        },
        "list": {
            "display": "flex",
            "flex-wrap": "wrap",
            "gap": "0.5em",
        },
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if not p.is_file():
            msg = f"Config file not found: {path}"
            raise SystemExit(msg)
        try:
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as e:
            msg = f"Could not parse config file {path}: {e}"
            raise SystemExit(msg) from e
        if not isinstance(user_config, dict):
            msg = f"Config file must contain a mapping: {path}"
            raise SystemExit(msg)
        config = deep_merge(config, user_config)
    return config
