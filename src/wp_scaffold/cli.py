"""Command line interface for the WordPress starter kit scaffolder."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from .config import ScaffoldConfig
from .errors import ScaffoldAborted
from .git import probe_repository
from .prompts import Prompter, QuestionaryPrompter, ask_configuration, describe_changes, echo_lines
from .scaffold import ProjectScaffolder

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wp-scaffold",
        description="Rename the WordPress starter kit for a new project",
    )
    parser.add_argument(
        "-d",
        "--directory",
        type=Path,
        default=Path.cwd(),
        help="Root of the starter kit checkout (defaults to the current directory)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every file that is read, skipped or rewritten",
    )
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="  %(message)s",
        stream=sys.stdout,
    )


def _next_steps(config: ScaffoldConfig) -> list[str]:
    return [
        "Done! Your project has been scaffolded.",
        "",
        "Next steps:",
        "",
        "  1. Run npm install",
        f"  2. Run composer install in the root, {config.mount_dir}/{config.plugin.slug},"
        f" and themes/{config.theme.slug}",
        "  3. Run npm run build",
    ]


def _run(root: Path, prompter: Prompter) -> int:
    config = ask_configuration(prompter, probe_repository(root))
    echo_lines(print, describe_changes(config))

    if not prompter.confirm("Apply these changes?", default=True):
        print("\n  Aborted. No changes were made.\n")
        return 0

    print("\n  Applying changes...\n")
    ProjectScaffolder(root).apply(config)
    echo_lines(print, _next_steps(config))
    return 0


def main(argv: Sequence[str] | None = None, *, prompter: Prompter | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    root = args.directory.expanduser().resolve()
    if not root.is_dir():
        parser.error(f"{root} is not a directory")

    print("\n  WordPress Project Scaffold\n")
    try:
        return _run(root, prompter or QuestionaryPrompter())
    except ScaffoldAborted:
        print("\n  Aborted.\n")
        return 0
    except Exception as exc:  # noqa: BLE001 - reported as the process exit status
        LOGGER.debug("Scaffold failed", exc_info=True)
        print(f"\n  Error: {exc}\n", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
