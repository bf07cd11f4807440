"""Enumerate the text files of the starter kit that may contain tokens."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

from . import starter

__all__ = ["BINARY_EXTENSIONS", "SKIPPED_DIRECTORIES", "SKIPPED_FILES", "walk"]


BINARY_EXTENSIONS = frozenset(
    {
        ".png",
        ".jpg",
        ".jpeg",
        ".gif",
        ".webp",
        ".ico",
        ".svg",
        ".woff",
        ".woff2",
        ".eot",
        ".ttf",
        ".otf",
        ".zip",
        ".gz",
        ".tar",
        ".bz2",
        ".mp4",
        ".mp3",
        ".mov",
        ".avi",
        ".pdf",
        ".doc",
        ".docx",
        ".lock",
    }
)

# "plugins" is the staging area for third party plugins, not starter code.
SKIPPED_DIRECTORIES = frozenset({"node_modules", "vendor", ".git", "plugins"})
SKIPPED_FILES = frozenset({starter.PACKAGE_LOCKFILE})


def _is_candidate(path: Path) -> bool:
    if path.name in SKIPPED_FILES:
        return False
    return path.suffix.lower() not in BINARY_EXTENSIONS


def walk(root: str | Path) -> Iterator[Path]:
    """Yield every eligible regular file below ``root``, depth first.

    Entries are visited in name order. Symbolic links are never followed.
    Each call walks the directory afresh.
    """

    for entry in sorted(Path(root).iterdir(), key=lambda path: path.name):
        if entry.is_symlink():
            continue
        if entry.is_dir():
            if entry.name in SKIPPED_DIRECTORIES:
                continue
            yield from walk(entry)
        elif entry.is_file() and _is_candidate(entry):
            yield entry
