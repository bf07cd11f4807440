"""Interactive questions that resolve a :class:`ScaffoldConfig`."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional, Sequence

import questionary

from .config import ConfigBuilder, HostingChoice, ScaffoldConfig, ThemeFlavor
from .errors import ScaffoldAborted
from .git import RepositoryContext

__all__ = [
    "IDENTIFIER_PROMPTS",
    "METADATA_PROMPTS",
    "Prompter",
    "QuestionaryPrompter",
    "ask_configuration",
    "describe_changes",
    "describe_defaults",
    "echo_lines",
]


Validator = Callable[[str], bool | str]

HOSTING_CHOICES = (
    ("Standard WordPress", HostingChoice.STANDARD.value),
    ("WordPress VIP", HostingChoice.VIP.value),
)
THEME_CHOICES = (
    ("Block Theme (Recommended)", ThemeFlavor.BLOCK.value),
    ("Classic Theme", ThemeFlavor.CLASSIC.value),
)
MODE_ACCEPT = "accept"
MODE_CUSTOMIZE = "customize"
MODE_CHOICES = (
    ("Accept all derived values and continue to metadata", MODE_ACCEPT),
    ("Customize each value individually", MODE_CUSTOMIZE),
)

# (IdentifierSet attribute, prompt label)
IDENTIFIER_PROMPTS = (
    ("slug", "slug / directory"),
    ("namespace", "PHP namespace"),
    ("constant_prefix", "constant prefix"),
    ("text_domain", "text domain"),
    ("hook_prefix", "hook prefix"),
    ("human_name", "human name"),
    ("package_name", "npm package name"),
)

# (ProjectMetadata attribute, prompt label)
METADATA_PROMPTS = (
    ("author_name", "Author name"),
    ("author_email", "Author email"),
    ("author_uri", "Author URI"),
    ("description", "Project description"),
    ("composer_vendor", "Composer vendor slug"),
    ("homepage_url", "Homepage URL"),
    ("repository_url", "Repository URL"),
)


class Prompter(ABC):
    """Source of answers for the interactive questions."""

    @abstractmethod
    def select(self, message: str, choices: Sequence[tuple[str, str]]) -> str:
        """Return the value of the chosen ``(title, value)`` pair."""

    @abstractmethod
    def text(self, message: str, default: str = "", validate: Optional[Validator] = None) -> str:
        """Return free text, re-asking until ``validate`` accepts it."""

    @abstractmethod
    def confirm(self, message: str, default: bool = True) -> bool:
        """Return a yes/no answer."""


class QuestionaryPrompter(Prompter):
    """Ask questions on the terminal with :mod:`questionary`.

    questionary answers ``None`` when a prompt is interrupted; that is
    reported as :class:`ScaffoldAborted`.
    """

    @staticmethod
    def _answer(question: questionary.Question) -> Any:
        answer = question.ask()
        if answer is None:
            raise ScaffoldAborted()
        return answer

    def select(self, message: str, choices: Sequence[tuple[str, str]]) -> str:
        options = [questionary.Choice(title=title, value=value) for title, value in choices]
        return self._answer(questionary.select(message, choices=options))

    def text(self, message: str, default: str = "", validate: Optional[Validator] = None) -> str:
        if validate is None:
            return self._answer(questionary.text(message, default=default))
        return self._answer(questionary.text(message, default=default, validate=validate))

    def confirm(self, message: str, default: bool = True) -> bool:
        return self._answer(questionary.confirm(message, default=default))


def _require_project_name(value: str) -> bool | str:
    return True if value.strip() else "Project name is required."


def describe_defaults(builder: ConfigBuilder) -> list[str]:
    """Lines presenting the derived identifiers before the customize question."""

    lines = ["Derived values:", ""]
    for unit, values in (("Plugin", builder.plugin), ("Theme", builder.theme)):
        lines.extend(
            [
                f"{unit + ' directory:':<22}{values['slug']}",
                f"{unit + ' namespace:':<22}{values['namespace']}",
                f"{unit + ' constants:':<22}{values['constant_prefix']}_*",
                f"{unit + ' text domain:':<22}{values['text_domain']}",
                f"{unit + ' human name:':<22}{values['human_name']}",
                "",
            ]
        )
    lines.append(f"{'Composer vendor:':<22}{builder.metadata['composer_vendor']}")
    if builder.metadata["repository_url"]:
        lines.append(f"{'Repository URL:':<22}{builder.metadata['repository_url']}")
    return lines


def describe_changes(config: ScaffoldConfig) -> list[str]:
    """Lines summarising the run shown before the final confirmation."""

    lines = [
        "Summary of changes:",
        "",
        f"{'Hosting:':<22}{config.hosting.label}",
        f"{'Theme type:':<22}{config.theme_flavor.label}",
        f"{'Plugin:':<22}{config.plugin.slug} ({config.plugin.namespace})",
        f"{'Theme:':<22}{config.theme.slug} ({config.theme.namespace})",
    ]
    if config.metadata.author_name:
        lines.append(f"{'Author:':<22}{config.metadata.author_name}")
    if config.metadata.repository_url:
        lines.append(f"{'Repository:':<22}{config.metadata.repository_url}")
    return lines


def echo_lines(echo: Callable[[str], None], lines: Sequence[str]) -> None:
    echo("")
    for line in lines:
        echo(f"  {line}" if line else "")
    echo("")


def ask_configuration(
    prompter: Prompter,
    context: RepositoryContext | None = None,
    *,
    echo: Callable[[str], None] = print,
) -> ScaffoldConfig:
    """Ask every question of a scaffold run and return the frozen answers.

    Metadata is always asked for. The identifier fields are only asked for
    when the user chooses to customize them, each defaulting to its derived
    value.
    """

    hosting = prompter.select("What hosting platform will this project use?", HOSTING_CHOICES)
    theme_flavor = prompter.select("Which theme type would you like to use?", THEME_CHOICES)
    project_name = prompter.text(
        'Project name (human-readable, e.g. "Acme Corp"):',
        validate=_require_project_name,
    )

    builder = ConfigBuilder(
        project_name,
        hosting=HostingChoice(hosting),
        theme_flavor=ThemeFlavor(theme_flavor),
        context=context or RepositoryContext(),
    )
    echo_lines(echo, describe_defaults(builder))

    mode = prompter.select("How would you like to proceed?", MODE_CHOICES)
    if mode == MODE_CUSTOMIZE:
        for unit, values in (("Plugin", builder.plugin), ("Theme", builder.theme)):
            echo(f"\n  {unit} configuration:\n")
            for attribute, label in IDENTIFIER_PROMPTS:
                values[attribute] = prompter.text(f"{unit} {label}:", default=values[attribute])

    echo("\n  Project metadata:\n")
    for attribute, label in METADATA_PROMPTS:
        builder.metadata[attribute] = prompter.text(f"{label}:", default=builder.metadata[attribute])

    return builder.build()
