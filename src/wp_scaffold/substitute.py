"""Apply a replacement plan to files in place."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Collection, Iterable, Sequence

from .plan import ReplacementPair

__all__ = ["SubstitutionReport", "apply_plan", "apply_replacements", "read_text", "write_text"]


LOGGER = logging.getLogger(__name__)


def read_text(path: Path) -> str:
    """Read ``path`` as UTF-8 with its line endings untouched."""

    with open(path, encoding="utf-8", newline="") as handle:
        return handle.read()


def write_text(path: Path, text: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as handle:
        handle.write(text)


def apply_replacements(text: str, plan: Sequence[ReplacementPair]) -> str:
    """Replace every occurrence of each search string, in plan order."""

    for search, replace in plan:
        if search in text:
            text = text.replace(search, replace)
    return text


@dataclass(slots=True)
class SubstitutionReport:
    """Outcome of one substitution pass."""

    changed: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.changed)


def apply_plan(
    paths: Iterable[Path],
    plan: Sequence[ReplacementPair],
    *,
    skip: Collection[Path] = (),
) -> SubstitutionReport:
    """Rewrite each of ``paths`` with ``plan``.

    Files that cannot be read as UTF-8 text are left alone and listed in
    :attr:`SubstitutionReport.skipped`. A file is only written when its content
    actually changed. Write errors propagate.
    """

    report = SubstitutionReport()
    excluded = {Path(path).resolve() for path in skip}

    for path in paths:
        if path.resolve() in excluded:
            continue

        try:
            original = read_text(path)
        except (UnicodeDecodeError, OSError) as exc:
            LOGGER.debug("Skipping unreadable file %s: %s", path, exc)
            report.skipped.append(path)
            continue

        updated = apply_replacements(original, plan)
        if updated != original:
            write_text(path, updated)
            LOGGER.debug("Updated %s", path)
            report.changed.append(path)

    return report
