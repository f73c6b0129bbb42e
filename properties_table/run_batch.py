"""Orchestration logic for adding properties tables to an exported site."""

import argparse
import logging
from collections import Counter
from pathlib import Path

from properties_table.add_properties_table import add_properties_table
from properties_table.collect_html_files import collect_html_files
from properties_table.load_config import load_config
from properties_table.load_link_targets import load_link_targets
from properties_table.page_outcome import PageOutcome

logger = logging.getLogger(__name__)


def validate_folder(folder: Path | None) -> Path:
    """Check the export root argument, aborting on anything unusable."""
    if folder is None:
        msg = "No folder parameter provided."
        raise SystemExit(msg)
    if not folder.exists():
        msg = "Folder does not exist."
        raise SystemExit(msg)
    if not folder.is_dir():
        msg = "Parameter is not a folder."
        raise SystemExit(msg)
    return folder


def run_batch(args: argparse.Namespace) -> Counter[PageOutcome]:
    """Process every page of the export, one at a time, in discovery order."""
    folder = validate_folder(args.folder)
    config = load_config(args.config)

    # Needed to resolve [[links]] in the frontmatter
    link_targets = load_link_targets(folder, config)
    html_files = collect_html_files(folder, config["page_extension"])

    outcomes: Counter[PageOutcome] = Counter()
    for file in html_files:
        print(f"    Processing: {file}")
        try:
            outcome = add_properties_table(
                file, link_targets, config, dry_run=args.dry_run
            )
        except (OSError, UnicodeError) as e:
            msg = f"Could not process {file}: {e}"
            raise SystemExit(msg) from e
        logger.debug("%s: %s", file, outcome.value)
        outcomes[outcome] += 1

    changed = sum(n for outcome, n in outcomes.items() if outcome.changed)
    verb = "Would add" if args.dry_run else "Added"
    print(f"{verb} properties tables to {changed} of {len(html_files)} pages.")
    return outcomes
