from __future__ import annotations

import pytest
from pydantic import ValidationError

from wp_scaffold.config import (
    ConfigBuilder,
    HostingChoice,
    IdentifierSet,
    ThemeFlavor,
    derive_identifiers,
)
from wp_scaffold.git import RepositoryContext


def test_derive_identifiers_for_plugin():
    assert derive_identifiers("acme-corp", "plugin") == IdentifierSet(
        slug="acme-corp-plugin",
        namespace="AcmeCorpPlugin",
        constant_prefix="ACME_CORP_PLUGIN",
        text_domain="acme-corp-plugin",
        hook_prefix="acme_corp_plugin",
        human_name="Acme Corp Plugin",
        package_name="acme-corp-plugin",
    )


def test_derive_identifiers_for_theme():
    theme = derive_identifiers("acme-corp", "theme")
    assert theme.namespace == "AcmeCorpTheme"
    assert theme.constant_prefix == "ACME_CORP_THEME"
    assert theme.human_name == "Acme Corp Theme"


def test_builder_derives_defaults():
    config = ConfigBuilder("  Acme Corp ").build()

    assert config.project_name == "Acme Corp"
    assert config.project_slug == "acme-corp"
    assert config.hosting is HostingChoice.STANDARD
    assert config.theme_flavor is ThemeFlavor.BLOCK
    assert config.plugin.slug == "acme-corp-plugin"
    assert config.theme.slug == "acme-corp-theme"
    assert config.metadata.composer_vendor == "acme-corp"
    assert config.metadata.repository_url == ""
    assert config.metadata.author_name == ""


def test_builder_prefers_probed_repository_values():
    context = RepositoryContext(url="https://github.com/acme/site", org="acme")
    config = ConfigBuilder("Acme Corp", context=context).build()

    assert config.metadata.composer_vendor == "acme"
    assert config.metadata.repository_url == "https://github.com/acme/site"


def test_builder_accepts_overrides():
    builder = ConfigBuilder("Acme Corp", hosting="vip", theme_flavor="classic")
    builder.plugin["namespace"] = "Acme\\Core"
    builder.theme["slug"] = "storefront"
    builder.metadata["description"] = ""
    config = builder.build()

    assert config.is_vip
    assert not config.is_block_theme
    assert config.mount_dir == "client-mu-plugins"
    assert config.plugin.namespace == "Acme\\Core"
    # Overriding one field leaves the other derived fields alone.
    assert config.plugin.slug == "acme-corp-plugin"
    assert config.theme.slug == "storefront"
    assert config.theme.namespace == "AcmeCorpTheme"


@pytest.mark.parametrize("name", ["", "   ", "\t\n"])
def test_builder_rejects_empty_name(name):
    with pytest.raises(ValueError):
        ConfigBuilder(name)


def test_config_is_frozen():
    config = ConfigBuilder("Acme Corp").build()

    with pytest.raises(ValidationError):
        config.project_slug = "other"
    with pytest.raises(ValidationError):
        config.plugin.slug = "other"


def test_config_rejects_unknown_fields():
    config = ConfigBuilder("Acme Corp").build()
    data = config.model_dump()
    data["unexpected"] = True

    with pytest.raises(ValidationError):
        type(config)(**data)


def test_enum_layout_properties():
    assert HostingChoice.STANDARD.mount_dir == "mu-plugins"
    assert HostingChoice.VIP.mount_dir == "client-mu-plugins"
    assert ThemeFlavor.BLOCK.theme_dir == "10up-block-theme"
    assert ThemeFlavor.BLOCK.unused_theme_dir == "10up-theme"
    assert ThemeFlavor.CLASSIC.theme_dir == "10up-theme"
    assert ThemeFlavor.CLASSIC.unused_theme_dir == "10up-block-theme"
