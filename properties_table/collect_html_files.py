"""Utility for discovering exported pages below the export root."""

from pathlib import Path


def collect_html_files(root: Path, page_extension: str = ".html") -> list[Path]:
    """Recursively collect all page files below a directory.

    Entries are visited in name order; subdirectories are expanded in place,
    so the result is a stable depth-first listing.
    """
    files: list[Path] = []
    for entry in sorted(root.iterdir(), key=lambda p: p.name):
        if entry.is_dir():
            files.extend(collect_html_files(entry, page_extension))
        elif entry.name.endswith(page_extension):
            files.append(entry)
    return files
