from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
for entry in (SRC, ROOT):
    if str(entry) not in sys.path:
        sys.path.insert(0, str(entry))

from tests.fixtures.starter_kit import build_starter_kit  # noqa: E402 (import after sys.path setup)
from wp_scaffold.config import ConfigBuilder, ScaffoldConfig  # noqa: E402


@pytest.fixture()
def starter_root(tmp_path: Path) -> Path:
    """A fresh copy of the starter kit."""

    return build_starter_kit(tmp_path / "site")


@pytest.fixture()
def make_config() -> Callable[..., ScaffoldConfig]:
    """Build a :class:`ScaffoldConfig` with optional metadata overrides."""

    def factory(
        name: str = "Acme Corp",
        *,
        hosting: str = "standard",
        theme_flavor: str = "block",
        **metadata: str,
    ) -> ScaffoldConfig:
        builder = ConfigBuilder(name, hosting=hosting, theme_flavor=theme_flavor)
        builder.metadata.update(metadata)
        return builder.build()

    return factory
