"""Remove scaffold-only artifacts once a run has been applied."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from . import starter
from .config import ScaffoldConfig
from .substitute import read_text, write_text

__all__ = ["finalize_project", "remove_lockfiles", "remove_scaffold_wiring"]


LOGGER = logging.getLogger(__name__)

LOCKFILES = (starter.PACKAGE_LOCKFILE, starter.COMPOSER_LOCKFILE)


def remove_lockfiles(root: Path, config: ScaffoldConfig) -> list[Path]:
    """Delete lockfiles of the root project, the plugin and the theme."""

    directories = [
        root,
        root / config.mount_dir / config.plugin.slug,
        root / starter.THEMES_DIR / config.theme.slug,
    ]
    removed = []
    for directory in directories:
        for name in LOCKFILES:
            lockfile = directory / name
            if lockfile.is_file():
                lockfile.unlink()
                LOGGER.info("Deleted %s", lockfile.relative_to(root).as_posix())
                removed.append(lockfile)
    return removed


def remove_scaffold_wiring(root: Path) -> bool:
    """Drop the scaffold npm script and its prompt library from ``package.json``.

    The manifest is always rewritten with two space indentation and a trailing
    newline. Returns ``True`` when an entry was removed.
    """

    manifest_path = root / starter.PACKAGE_MANIFEST
    if not manifest_path.is_file():
        return False

    manifest = json.loads(read_text(manifest_path))
    removed = False
    scripts = manifest.get("scripts")
    if isinstance(scripts, dict) and starter.SCAFFOLD_NPM_SCRIPT in scripts:
        del scripts[starter.SCAFFOLD_NPM_SCRIPT]
        removed = True
    dev_dependencies = manifest.get("devDependencies")
    if isinstance(dev_dependencies, dict) and starter.SCAFFOLD_NPM_DEPENDENCY in dev_dependencies:
        del dev_dependencies[starter.SCAFFOLD_NPM_DEPENDENCY]
        removed = True

    write_text(manifest_path, json.dumps(manifest, indent=2, ensure_ascii=False) + "\n")
    if removed:
        LOGGER.info(
            "Removed %s script and %s from %s",
            starter.SCAFFOLD_NPM_SCRIPT,
            starter.SCAFFOLD_NPM_DEPENDENCY,
            starter.PACKAGE_MANIFEST,
        )
    return removed


def finalize_project(root: str | Path, config: ScaffoldConfig) -> list[Path]:
    """Run the cleanup steps and return the files that were deleted."""

    root = Path(root)
    removed = remove_lockfiles(root, config)
    remove_scaffold_wiring(root)
    return removed
