"""Run the rename pipeline over a starter kit checkout."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from . import starter
from .config import ScaffoldConfig
from .finalize import finalize_project
from .mutate import StructuralMutator
from .plan import ReplacementPair, build_plan
from .substitute import SubstitutionReport, apply_plan
from .walker import walk

__all__ = ["ProjectScaffolder", "ScaffoldReport"]


LOGGER = logging.getLogger(__name__)

PACKAGE_DIR = Path(__file__).resolve().parent


@dataclass(slots=True)
class ScaffoldReport:
    """What a run changed on disk."""

    plan: tuple[ReplacementPair, ...]
    substitution: SubstitutionReport
    deleted: list[Path] = field(default_factory=list)
    moved: list[Path] = field(default_factory=list)
    renamed: list[Path] = field(default_factory=list)
    patched: list[Path] = field(default_factory=list)
    removed: list[Path] = field(default_factory=list)

    @property
    def files_changed(self) -> int:
        return self.substitution.count


class ProjectScaffolder:
    """Turn the starter kit found at ``root`` into a named project."""

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root).expanduser().resolve()

    def excluded_paths(self) -> list[Path]:
        """Files never rewritten: the starter's own script and this package."""

        excluded = [self.root / starter.SCAFFOLD_SCRIPT]
        if PACKAGE_DIR.is_relative_to(self.root):
            excluded.extend(path for path in PACKAGE_DIR.rglob("*") if path.is_file())
        return excluded

    def apply(self, config: ScaffoldConfig) -> ScaffoldReport:
        """Apply ``config`` to the tree. The tree is modified in place.

        Steps run in a fixed order: structural pre-steps, the substitution
        pass, config patches, renames, fixups and cleanup. A failing step
        leaves the earlier ones applied.
        """

        mutator = StructuralMutator(self.root, config)

        deleted = mutator.remove_unused_theme()
        moved = mutator.relocate_plugin()

        plan = build_plan(config)
        LOGGER.debug("Replacement plan has %d pairs", len(plan))
        substitution = apply_plan(walk(self.root), plan, skip=self.excluded_paths())
        LOGGER.info("Updated strings in %d files", substitution.count)

        report = ScaffoldReport(plan=plan, substitution=substitution, moved=moved)
        if deleted is not None:
            report.deleted.append(deleted)

        if mutator.prune_static_analysis_constants():
            report.patched.append(self.root / starter.STATIC_ANALYSIS_CONSTANTS)
        report.patched.extend(mutator.fix_stale_theme_references())
        report.renamed.extend(mutator.rename_units())
        # Path entries are checked against the renamed directories.
        if mutator.prune_static_analysis_paths():
            report.patched.append(self.root / starter.STATIC_ANALYSIS_PATHS)
        report.patched.extend(mutator.apply_post_rename_fixups())

        report.removed.extend(finalize_project(self.root, config))
        return report
