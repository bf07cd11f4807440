"""Configuration records shared by the planner, the mutator and the CLI."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from . import starter
from .git import RepositoryContext
from .naming import to_constant, to_pascal, to_slug, to_snake, to_title

__all__ = [
    "ConfigBuilder",
    "HostingChoice",
    "IdentifierSet",
    "ProjectMetadata",
    "ScaffoldConfig",
    "ThemeFlavor",
    "derive_identifiers",
]


class HostingChoice(str, Enum):
    """Where the project is hosted, which decides the plugin mount point."""

    STANDARD = "standard"
    VIP = "vip"

    @property
    def label(self) -> str:
        return "WordPress VIP" if self is HostingChoice.VIP else "Standard WordPress"

    @property
    def mount_dir(self) -> str:
        if self is HostingChoice.VIP:
            return starter.VIP_MOUNT_DIR
        return starter.STANDARD_MOUNT_DIR


class ThemeFlavor(str, Enum):
    """Which of the two starter themes is kept."""

    BLOCK = "block"
    CLASSIC = "classic"

    @property
    def label(self) -> str:
        return "Block Theme" if self is ThemeFlavor.BLOCK else "Classic Theme"

    @property
    def theme_dir(self) -> str:
        """Starter directory of the theme that is kept."""

        if self is ThemeFlavor.BLOCK:
            return starter.BLOCK_THEME_DIR
        return starter.CLASSIC_THEME_DIR

    @property
    def unused_theme_dir(self) -> str:
        """Starter directory of the theme that is deleted."""

        if self is ThemeFlavor.BLOCK:
            return starter.CLASSIC_THEME_DIR
        return starter.BLOCK_THEME_DIR


class IdentifierSet(BaseModel):
    """Identifiers of one scaffolded unit (the plugin or the theme)."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    slug: str = Field(..., description="Directory name and default text domain, e.g. 'acme-plugin'.")
    namespace: str = Field(..., description="PHP namespace, e.g. 'AcmePlugin'.")
    constant_prefix: str = Field(..., description="Prefix of PHP constants, e.g. 'ACME_PLUGIN'.")
    text_domain: str = Field(..., description="Translation text domain.")
    hook_prefix: str = Field(..., description="Prefix of hooks and functions, e.g. 'acme_plugin'.")
    human_name: str = Field(..., description="Display name used in file headers.")
    package_name: str = Field(..., description="npm package name.")


class ProjectMetadata(BaseModel):
    """Optional project metadata. Empty values leave the starter text alone."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    author_name: str = ""
    author_email: str = ""
    author_uri: str = ""
    description: str = ""
    composer_vendor: str = ""
    homepage_url: str = ""
    repository_url: str = ""


class ScaffoldConfig(BaseModel):
    """Everything a scaffold run needs, resolved before any file is touched."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    project_name: str = Field(..., description="Human readable project name as entered.")
    project_slug: str = Field(..., description="Slug derived from the project name.")
    hosting: HostingChoice = HostingChoice.STANDARD
    theme_flavor: ThemeFlavor = ThemeFlavor.BLOCK
    plugin: IdentifierSet
    theme: IdentifierSet
    metadata: ProjectMetadata = Field(default_factory=ProjectMetadata)

    @property
    def mount_dir(self) -> str:
        return self.hosting.mount_dir

    @property
    def is_vip(self) -> bool:
        return self.hosting is HostingChoice.VIP

    @property
    def is_block_theme(self) -> bool:
        return self.theme_flavor is ThemeFlavor.BLOCK


def derive_identifiers(slug: str, unit: str) -> IdentifierSet:
    """Derive the default identifiers of ``unit`` ("plugin" or "theme") from ``slug``."""

    unit_slug = f"{slug}-{unit}"
    return IdentifierSet(
        slug=unit_slug,
        namespace=to_pascal(unit_slug),
        constant_prefix=to_constant(unit_slug),
        text_domain=unit_slug,
        hook_prefix=to_snake(unit_slug),
        human_name=to_title(unit_slug),
        package_name=unit_slug,
    )


@dataclass(slots=True)
class ConfigBuilder:
    """Accumulate prompt answers into a :class:`ScaffoldConfig`.

    Attributes
    ----------
    project_name:
        The name entered by the user. Surrounding whitespace is ignored and an
        empty name is rejected.
    hosting, theme_flavor:
        The two structural choices of the run.
    context:
        Values probed from the git checkout. The probed organisation becomes
        the default composer vendor (falling back to the slug) and the probed
        URL the default repository URL.
    plugin, theme, metadata:
        Field values keyed by model attribute name. They start out as the
        derived defaults and may be edited freely before :meth:`build`.
    """

    project_name: str
    hosting: HostingChoice = HostingChoice.STANDARD
    theme_flavor: ThemeFlavor = ThemeFlavor.BLOCK
    context: RepositoryContext = field(default_factory=RepositoryContext)
    slug: str = field(init=False)
    plugin: dict[str, str] = field(init=False)
    theme: dict[str, str] = field(init=False)
    metadata: dict[str, str] = field(init=False)

    def __post_init__(self) -> None:
        self.project_name = self.project_name.strip()
        if not self.project_name:
            raise ValueError("project name must not be empty")

        self.hosting = HostingChoice(self.hosting)
        self.theme_flavor = ThemeFlavor(self.theme_flavor)
        self.slug = to_slug(self.project_name)
        self.plugin = derive_identifiers(self.slug, "plugin").model_dump()
        self.theme = derive_identifiers(self.slug, "theme").model_dump()
        self.metadata = ProjectMetadata(
            composer_vendor=self.context.org or self.slug,
            repository_url=self.context.url,
        ).model_dump()

    def build(self) -> ScaffoldConfig:
        """Freeze the accumulated answers."""

        return ScaffoldConfig(
            project_name=self.project_name,
            project_slug=self.slug,
            hosting=self.hosting,
            theme_flavor=self.theme_flavor,
            plugin=IdentifierSet(**self.plugin),
            theme=IdentifierSet(**self.theme),
            metadata=ProjectMetadata(**self.metadata),
        )
