"""Logic for mapping exported source documents to their published URLs."""

import json
import logging
from pathlib import Path
from typing import Any

from properties_table.source_base_name import source_base_name

logger = logging.getLogger(__name__)


def load_link_targets(root: Path, config: dict[str, Any]) -> dict[str, str]:
    """Build a map of source base names to target URLs from the export index.

    A missing or unparsable index aborts the run. When two sources share a
    base name, the later one wins.
    """
    metadata_path = root / config["metadata_path"]
    if not metadata_path.is_file():
        msg = f"{config['metadata_path']} not found."
        raise SystemExit(msg)

    try:
        metadata = json.loads(metadata_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        msg = f"Could not parse {metadata_path.name}"
        raise SystemExit(msg) from e

    source_to_target = (
        metadata.get("sourceToTarget") or {} if isinstance(metadata, dict) else None
    )
    if not isinstance(source_to_target, dict):
        msg = f"Could not parse {metadata_path.name}"
        raise SystemExit(msg)

    targets: dict[str, str] = {}
    for source, target in source_to_target.items():
        base = source_base_name(root, source, config["source_extension"])
        if not isinstance(target, str) or not target:
            logger.debug("Skipping %s: no usable target (%r)", source, target)
            continue
        if base in targets and targets[base] != target:
            logger.debug(
                "Link target %r overridden: %s -> %s", base, targets[base], target
            )
        targets[base] = target
    logger.debug("Loaded %d link targets from %s", len(targets), metadata_path)
    return targets
