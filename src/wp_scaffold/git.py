"""Best effort inspection of the surrounding git checkout."""

from __future__ import annotations

import logging
import re
import subprocess
from dataclasses import dataclass
from pathlib import Path

__all__ = [
    "RepositoryContext",
    "extract_org",
    "normalize_remote_url",
    "probe_remote_url",
    "probe_repository",
]


LOGGER = logging.getLogger(__name__)

_SSH_REMOTE = re.compile(r"^git@([^:]+):")
_GIT_SUFFIX = re.compile(r"\.git$")
_GITHUB_ORG = re.compile(r"github\.com/([^/]+)")


@dataclass(frozen=True, slots=True)
class RepositoryContext:
    """Values pre-filled from the ``origin`` remote, empty when unavailable."""

    url: str = ""
    org: str = ""


def normalize_remote_url(url: str) -> str:
    """Rewrite ``git@host:org/repo.git`` remotes as ``https://host/org/repo``."""

    url = url.strip()
    if url.startswith("git@"):
        url = _SSH_REMOTE.sub(r"https://\1/", url)
    return _GIT_SUFFIX.sub("", url)


def extract_org(url: str) -> str:
    """Return the lowercase GitHub organisation or user from ``url``."""

    match = _GITHUB_ORG.search(url)
    return match.group(1).lower() if match else ""


def probe_remote_url(root: str | Path) -> str:
    """Return the normalised ``origin`` URL of the checkout at ``root``.

    Any failure (not a repository, no ``origin`` remote, git not installed)
    yields an empty string.
    """

    try:
        result = subprocess.run(
            ["git", "remote", "get-url", "origin"],
            cwd=root,
            capture_output=True,
            check=True,
            text=True,
        )
    except (subprocess.CalledProcessError, OSError) as exc:
        LOGGER.debug("No git remote available in %s: %s", root, exc)
        return ""
    return normalize_remote_url(result.stdout)


def probe_repository(root: str | Path) -> RepositoryContext:
    url = probe_remote_url(root)
    return RepositoryContext(url=url, org=extract_org(url))
