"""Utility for deriving the lookup key of an exported source document."""

import os
from pathlib import Path


def source_base_name(root: Path, source: str, source_extension: str = ".md") -> str:
    """Return the final path segment of a source path, without its extension.

    The source is normalized relative to the export root first, so
    ``notes/../Daily/2024.md`` and ``Daily/2024.md`` share the key ``2024``.
    """
    name = Path(os.path.normpath(root / source)).name
    if source_extension and name.endswith(source_extension):
        name = name[: -len(source_extension)]
    return name
