"""Filesystem moves, renames and config patches around the substitution pass."""

from __future__ import annotations

import logging
import re
import shutil
from pathlib import Path, PurePosixPath

from . import starter
from .config import ScaffoldConfig, ThemeFlavor
from .plan import ReplacementPair
from .substitute import apply_replacements, read_text, write_text

__all__ = [
    "STALE_THEME_REFERENCES",
    "STALE_THEME_REFERENCE_FILES",
    "StructuralMutator",
    "UNUSED_THEME_CONSTANTS",
]


LOGGER = logging.getLogger(__name__)

# Constants of the deleted theme keep their starter prefix because that
# flavor's tokens are never part of the plan.
UNUSED_THEME_CONSTANTS = {
    ThemeFlavor.BLOCK: "TENUP_THEME_",
    ThemeFlavor.CLASSIC: "TENUP_BLOCK_THEME_",
}

# Classic theme slugs still referenced by shared files after a block theme
# run, mapped to the IdentifierSet attribute that replaces them.
STALE_THEME_REFERENCES: tuple[tuple[str, str], ...] = (
    (starter.CLASSIC_THEME_DIR, "slug"),
    ("firefly-theme", "package_name"),
)
STALE_THEME_REFERENCE_FILES: tuple[PurePosixPath, ...] = (
    starter.PHP_WORKFLOW,
    PurePosixPath(starter.PACKAGE_MANIFEST),
)

_BLANK_LINE_RUNS = re.compile(r"\n{3,}")


class StructuralMutator:
    """Apply the structural steps of a scaffold run below ``root``.

    Every step checks the filesystem first and does nothing when the tree no
    longer looks like the starter kit, so repeating a step is harmless.
    Filesystem errors propagate and nothing is rolled back.
    """

    def __init__(self, root: str | Path, config: ScaffoldConfig) -> None:
        self.root = Path(root)
        self.config = config

    @property
    def mount_path(self) -> Path:
        return self.root / self.config.mount_dir

    @property
    def themes_path(self) -> Path:
        return self.root / starter.THEMES_DIR

    @property
    def plugin_path(self) -> Path:
        """Plugin directory once renamed."""

        return self.mount_path / self.config.plugin.slug

    @property
    def theme_path(self) -> Path:
        """Theme directory once renamed."""

        return self.themes_path / self.config.theme.slug

    @property
    def loader_path(self) -> Path:
        return self.mount_path / f"{self.config.plugin.slug}-loader.php"

    def _relative(self, path: Path) -> str:
        return path.relative_to(self.root).as_posix()

    def _rename(self, source: Path, target: Path) -> bool:
        if not source.exists() or source == target:
            return False
        source.rename(target)
        LOGGER.info("Renamed %s -> %s", self._relative(source), self._relative(target))
        return True

    def _rewrite(self, path: Path, pairs: list[ReplacementPair]) -> bool:
        if not path.is_file():
            return False
        original = read_text(path)
        updated = apply_replacements(original, pairs)
        if updated == original:
            return False
        write_text(path, updated)
        return True

    def remove_unused_theme(self) -> Path | None:
        """Delete the starter theme of the flavor that was not chosen."""

        unused = self.themes_path / self.config.theme_flavor.unused_theme_dir
        if not unused.exists():
            return None
        shutil.rmtree(unused)
        LOGGER.info("Deleted %s/", self._relative(unused))
        return unused

    def relocate_plugin(self) -> list[Path]:
        """Move the plugin and its loader under the VIP mount point."""

        if not self.config.is_vip:
            return []

        standard = self.root / starter.STANDARD_MOUNT_DIR
        self.mount_path.mkdir(parents=True, exist_ok=True)

        moved: list[Path] = []
        for name in (starter.PLUGIN_DIR, starter.PLUGIN_LOADER):
            source = standard / name
            if not source.exists():
                continue
            target = self.mount_path / name
            source.rename(target)
            LOGGER.info("Moved %s -> %s", self._relative(source), self._relative(target))
            moved.append(target)

        if standard.is_dir() and not any(standard.iterdir()):
            standard.rmdir()
            LOGGER.info("Removed empty %s/", starter.STANDARD_MOUNT_DIR)
        return moved

    def prune_static_analysis_constants(self) -> bool:
        """Drop the deleted theme's constants from the PHPStan stub file."""

        path = self.root / starter.STATIC_ANALYSIS_CONSTANTS
        if not path.is_file():
            return False

        prefix = UNUSED_THEME_CONSTANTS[self.config.theme_flavor]
        original = read_text(path)
        kept = [line for line in original.split("\n") if prefix not in line]
        updated = _BLANK_LINE_RUNS.sub("\n\n", "\n".join(kept))
        if updated != original:
            write_text(path, updated)
        LOGGER.info("Cleaned %s", starter.STATIC_ANALYSIS_CONSTANTS)
        return updated != original

    def prune_static_analysis_paths(self) -> bool:
        """Drop ``- path`` entries of ``phpstan.neon`` that no longer exist."""

        path = self.root / starter.STATIC_ANALYSIS_PATHS
        if not path.is_file():
            return False

        original = read_text(path)
        kept = []
        for line in original.split("\n"):
            entry = line.strip()
            if entry.startswith("- ") and not (self.root / entry[2:].strip()).exists():
                LOGGER.debug("Dropping missing path %s from %s", entry[2:].strip(), path.name)
                continue
            kept.append(line)

        updated = "\n".join(kept)
        if updated != original:
            write_text(path, updated)
        LOGGER.info("Cleaned %s paths", starter.STATIC_ANALYSIS_PATHS)
        return updated != original

    def fix_stale_theme_references(self) -> list[Path]:
        """Point leftover classic theme slugs at the block theme that was kept."""

        if not self.config.is_block_theme:
            return []

        pairs = [
            ReplacementPair(token, getattr(self.config.theme, attribute))
            for token, attribute in STALE_THEME_REFERENCES
        ]
        fixed = []
        for relative in STALE_THEME_REFERENCE_FILES:
            path = self.root / relative
            if self._rewrite(path, pairs):
                fixed.append(path)
        if fixed:
            LOGGER.info("Fixed remaining classic theme references for block theme selection")
        return fixed

    def rename_units(self) -> list[Path]:
        """Rename plugin, theme, loader and translation catalogs to their new names."""

        config = self.config
        renamed = []
        candidates = [
            (self.mount_path / starter.PLUGIN_DIR, self.plugin_path),
            (self.themes_path / config.theme_flavor.theme_dir, self.theme_path),
            (self.mount_path / starter.PLUGIN_LOADER, self.loader_path),
            (
                self.plugin_path / starter.LANGUAGES_DIR / starter.PLUGIN_POT,
                self.plugin_path / starter.LANGUAGES_DIR / f"{config.plugin.namespace}.pot",
            ),
        ]
        if config.theme_flavor is ThemeFlavor.CLASSIC:
            candidates.append(
                (
                    self.theme_path / starter.LANGUAGES_DIR / starter.CLASSIC_THEME_POT,
                    self.theme_path / starter.LANGUAGES_DIR / f"{config.theme.namespace}.pot",
                )
            )

        for source, target in candidates:
            if self._rename(source, target):
                renamed.append(target)
        return renamed

    def apply_post_rename_fixups(self) -> list[Path]:
        """Re-point stale directory names inside the renamed plugin files."""

        theme_slug = self.config.theme.slug
        manifest_pairs = [ReplacementPair(starter.CLASSIC_THEME_DIR, theme_slug)]
        if self.config.is_block_theme:
            manifest_pairs.append(ReplacementPair(starter.BLOCK_THEME_DIR, theme_slug))

        fixed = []
        if self._rewrite(self.plugin_path / starter.PACKAGE_MANIFEST, manifest_pairs):
            fixed.append(self.plugin_path / starter.PACKAGE_MANIFEST)
        loader_pairs = [ReplacementPair(starter.PLUGIN_DIR, self.config.plugin.slug)]
        if self._rewrite(self.loader_path, loader_pairs):
            fixed.append(self.loader_path)
        return fixed
