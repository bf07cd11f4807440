"""Turn the WordPress starter kit into a named project.

The package derives identifier variants from a single project name, builds an
ordered plan of literal replacements, rewrites the starter tree with it and
renames the plugin and theme directories to match. It can be driven
programmatically through :class:`ProjectScaffolder` or interactively through
the ``wp-scaffold`` command.
"""

from __future__ import annotations

from .config import (
    ConfigBuilder,
    HostingChoice,
    IdentifierSet,
    ProjectMetadata,
    ScaffoldConfig,
    ThemeFlavor,
    derive_identifiers,
)
from .errors import ScaffoldAborted
from .naming import to_constant, to_pascal, to_slug, to_snake, to_title
from .plan import ReplacementPair, build_plan
from .scaffold import ProjectScaffolder, ScaffoldReport

__all__ = [
    "ConfigBuilder",
    "HostingChoice",
    "IdentifierSet",
    "ProjectMetadata",
    "ProjectScaffolder",
    "ReplacementPair",
    "ScaffoldAborted",
    "ScaffoldConfig",
    "ScaffoldReport",
    "ThemeFlavor",
    "build_plan",
    "derive_identifiers",
    "to_constant",
    "to_pascal",
    "to_slug",
    "to_snake",
    "to_title",
]

__version__ = "0.1.0"
