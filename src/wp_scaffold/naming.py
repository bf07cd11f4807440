"""Identifier derivation used to rename the starter kit.

Every identifier in a scaffolded project comes from a single slug. The slug is
derived once from the human readable project name and the other casings are
plain projections of it, so the same slug always yields the same identifiers.
"""

from __future__ import annotations

import re

__all__ = ["to_constant", "to_pascal", "to_slug", "to_snake", "to_title"]


_CASE_BOUNDARY = re.compile(r"([a-z])([A-Z])")
_SEPARATORS = re.compile(r"[\s_]+")
_INVALID_SLUG_CHARACTERS = re.compile(r"[^A-Za-z0-9-]")


def _capitalize_words(slug: str) -> list[str]:
    return [word[:1].upper() + word[1:] for word in slug.split("-")]


def to_slug(name: str) -> str:
    """Convert ``name`` into a lowercase, hyphen separated slug.

    ``"Acme Corp"`` and ``"AcmeCorp"`` both become ``"acme-corp"``. Characters
    outside ``[A-Za-z0-9-]`` are dropped, so a name made only of symbols
    produces an empty slug.
    """

    text = _CASE_BOUNDARY.sub(r"\1-\2", name)
    text = _SEPARATORS.sub("-", text)
    text = _INVALID_SLUG_CHARACTERS.sub("", text)
    return text.lower()


def to_pascal(slug: str) -> str:
    """Return ``"AcmeCorp"`` for ``"acme-corp"``."""

    return "".join(_capitalize_words(slug))


def to_constant(slug: str) -> str:
    """Return ``"ACME_CORP"`` for ``"acme-corp"``."""

    return slug.replace("-", "_").upper()


def to_snake(slug: str) -> str:
    """Return ``"acme_corp"`` for ``"acme-corp"``."""

    return slug.replace("-", "_")


def to_title(slug: str) -> str:
    """Return ``"Acme Corp"`` for ``"acme-corp"``."""

    return " ".join(_capitalize_words(slug))
