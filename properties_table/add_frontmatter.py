"""Add frontmatter properties tables to pages exported by obsidian-webpage-export.

Every ``*.html`` page below the export root that carries a ``pre.frontmatter``
block gets a table of its properties inserted below the page heading. Wiki
links in property values are resolved through ``site-lib/metadata.json``.
Pages are rewritten in place.
"""

import argparse
import logging
from pathlib import Path

from properties_table.run_batch import run_batch


def main(argv: list[str] | None = None) -> int:
    """Run the properties table pass over an exported site."""
    ap = argparse.ArgumentParser(
        description=(
            "Insert a properties table built from each page's frontmatter into "
            "an exported Obsidian site."
        ),
    )
    ap.add_argument(
        "folder",
        nargs="?",
        type=Path,
        help="Root folder of the exported site (contains site-lib/metadata.json)",
    )
    ap.add_argument(
        "--config",
        help="Path to a YAML configuration file overriding the defaults",
    )
    ap.add_argument(
        "--dry-run",
        action="store_true",
        help="Process pages without writing them back",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log per-page details",
    )
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    run_batch(args)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
