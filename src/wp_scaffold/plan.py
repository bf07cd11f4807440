"""Build the ordered list of literal replacements applied to the starter kit."""

from __future__ import annotations

from typing import Iterable, NamedTuple

from . import starter
from .config import IdentifierSet, ScaffoldConfig, ThemeFlavor

__all__ = [
    "BLOCK_THEME_TOKENS",
    "CLASSIC_THEME_TOKENS",
    "DESCRIPTION_PLACEHOLDERS",
    "PLUGIN_TOKENS",
    "ReplacementPair",
    "build_plan",
]


class ReplacementPair(NamedTuple):
    search: str
    replace: str


# (starter literal, IdentifierSet attribute)
BLOCK_THEME_TOKENS: tuple[tuple[str, str], ...] = (
    ("TenupBlockTheme", "namespace"),
    ("TENUP_BLOCK_THEME", "constant_prefix"),
    ("tenup-block-theme", "text_domain"),
    ("tenup_block_theme", "hook_prefix"),
    ("10up-block-theme", "slug"),
    ("10up Block Theme", "human_name"),
)

# The classic theme has been published under two slugs.
CLASSIC_THEME_TOKENS: tuple[tuple[str, str], ...] = (
    ("TenUpTheme", "namespace"),
    ("TENUP_THEME", "constant_prefix"),
    ("firefly-theme", "slug"),
    ("tenup_theme", "hook_prefix"),
    ("10up-theme", "slug"),
    ("10up Theme", "human_name"),
)

PLUGIN_TOKENS: tuple[tuple[str, str], ...] = (
    ("TenUpPlugin", "namespace"),
    ("TENUP_PLUGIN", "constant_prefix"),
    ("tenup-plugin", "text_domain"),
    ("tenup_plugin", "hook_prefix"),
    ("10up-plugin", "slug"),
    ("10up Plugin Scaffold", "human_name"),
)

PLUGIN_PACKAGE_NAME = "tenup-plugin"
THEME_PACKAGE_NAMES = {
    ThemeFlavor.BLOCK: "tenup-block-theme",
    ThemeFlavor.CLASSIC: "firefly-theme",
}
ROOT_PACKAGE_NAME = "tenup-wp-scaffold"

COMPOSER_ROOT_PACKAGE = "10up/wp-scaffold"
COMPOSER_PLUGIN_PACKAGE = "10up/wp-plugin"
COMPOSER_THEME_PACKAGES = ("10up/wp-theme", "10up/firefly-theme")

AUTHOR_EMAIL_PLACEHOLDER = "info@10up.com"
AUTHOR_URI_PLACEHOLDER = "https://10up.com"
HOMEPAGE_PLACEHOLDER = "https://project-domain.tld"
REPOSITORY_PLACEHOLDERS = (
    "https://github.com/10up/wp-scaffold",
    "https://project-git-repo.tld",
)

# Plugin and theme headers each carry their own wording.
DESCRIPTION_PLACEHOLDERS = (
    "The starting point for all 10up WordPress projects.",
    "The starting point for all 10up WordPress themes.",
    "The starting point for all 10up WordPress plugins.",
    "A brief description of the plugin.",
    "Project description.",
    "Project Description",
)

AUTHOR_NAME = "10up"
# Exact author fields only; a bare "10up" also occurs in names such as
# "10up-toolkit" that must survive.
AUTHOR_NAME_FIELDS = (
    '"name": "{}"',
    "Author:            {}",
    "Author:      {}",
    "Author:        {}",
)


def _manifest_name(name: str) -> str:
    return f'"name": "{name}"'


def _token_pairs(
    tokens: Iterable[tuple[str, str]], identifiers: IdentifierSet
) -> list[ReplacementPair]:
    return [ReplacementPair(literal, getattr(identifiers, attribute)) for literal, attribute in tokens]


def _identifier_pairs(config: ScaffoldConfig) -> list[ReplacementPair]:
    theme_tokens = BLOCK_THEME_TOKENS if config.is_block_theme else CLASSIC_THEME_TOKENS
    pairs = _token_pairs(theme_tokens, config.theme)
    pairs.extend(_token_pairs(PLUGIN_TOKENS, config.plugin))
    return pairs


def _vip_pairs(config: ScaffoldConfig) -> list[ReplacementPair]:
    if not config.is_vip:
        return []

    # Targeted patterns only; generic WordPress "mu-plugins" mentions stay.
    plugin_path = f"{starter.STANDARD_MOUNT_DIR}/{starter.PLUGIN_DIR}"
    return [
        ReplacementPair(plugin_path, f"{starter.VIP_MOUNT_DIR}/{starter.PLUGIN_DIR}"),
        ReplacementPair(
            f"<file>{starter.STANDARD_MOUNT_DIR}</file>",
            f"<file>{starter.VIP_MOUNT_DIR}</file>",
        ),
    ]


def _package_pairs(config: ScaffoldConfig) -> list[ReplacementPair]:
    vendor = config.metadata.composer_vendor
    pairs = [
        ReplacementPair(COMPOSER_ROOT_PACKAGE, f"{vendor}/{config.project_slug}"),
        ReplacementPair(COMPOSER_PLUGIN_PACKAGE, f"{vendor}/{config.plugin.slug}"),
    ]
    pairs.extend(
        ReplacementPair(package, f"{vendor}/{config.theme.slug}") for package in COMPOSER_THEME_PACKAGES
    )
    pairs.extend(
        [
            ReplacementPair(ROOT_PACKAGE_NAME, config.project_slug),
            ReplacementPair(
                _manifest_name(PLUGIN_PACKAGE_NAME), _manifest_name(config.plugin.package_name)
            ),
            ReplacementPair(
                _manifest_name(THEME_PACKAGE_NAMES[config.theme_flavor]),
                _manifest_name(config.theme.package_name),
            ),
        ]
    )
    return pairs


def _metadata_pairs(config: ScaffoldConfig) -> list[ReplacementPair]:
    metadata = config.metadata
    pairs: list[ReplacementPair] = []

    if metadata.author_email:
        pairs.append(ReplacementPair(AUTHOR_EMAIL_PLACEHOLDER, metadata.author_email))
    if metadata.author_uri:
        pairs.append(ReplacementPair(AUTHOR_URI_PLACEHOLDER, metadata.author_uri))
    if metadata.description:
        pairs.extend(
            ReplacementPair(placeholder, metadata.description) for placeholder in DESCRIPTION_PLACEHOLDERS
        )
    if metadata.repository_url:
        pairs.extend(
            ReplacementPair(placeholder, metadata.repository_url) for placeholder in REPOSITORY_PLACEHOLDERS
        )
    if metadata.homepage_url:
        pairs.append(ReplacementPair(HOMEPAGE_PLACEHOLDER, metadata.homepage_url))
    if metadata.author_name:
        pairs.extend(
            ReplacementPair(field.format(AUTHOR_NAME), field.format(metadata.author_name))
            for field in AUTHOR_NAME_FIELDS
        )
    return pairs


def build_plan(config: ScaffoldConfig) -> tuple[ReplacementPair, ...]:
    """Return the replacement plan for ``config``, longest search string first.

    When one starter token is a substring of another, the longer token is
    replaced first so the shorter one cannot match inside it afterwards. The
    sort is stable, pairs of equal length keep their construction order.
    """

    pairs = _identifier_pairs(config)
    pairs.extend(_vip_pairs(config))
    pairs.extend(_package_pairs(config))
    pairs.extend(_metadata_pairs(config))
    return tuple(sorted(pairs, key=lambda pair: len(pair.search), reverse=True))
