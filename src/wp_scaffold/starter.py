"""Fixed names of the starter kit layout the scaffolder operates on."""

from __future__ import annotations

from pathlib import PurePosixPath

STANDARD_MOUNT_DIR = "mu-plugins"
VIP_MOUNT_DIR = "client-mu-plugins"
THEMES_DIR = "themes"

PLUGIN_DIR = "10up-plugin"
PLUGIN_LOADER = "10up-plugin-loader.php"
PLUGIN_POT = "TenUpPlugin.pot"

BLOCK_THEME_DIR = "10up-block-theme"
CLASSIC_THEME_DIR = "10up-theme"
CLASSIC_THEME_POT = "TenUpTheme.pot"

LANGUAGES_DIR = "languages"
PACKAGE_MANIFEST = "package.json"
PACKAGE_LOCKFILE = "package-lock.json"
COMPOSER_LOCKFILE = "composer.lock"

STATIC_ANALYSIS_PATHS = PurePosixPath("phpstan.neon")
STATIC_ANALYSIS_CONSTANTS = PurePosixPath("phpstan/constants.php")
PHP_WORKFLOW = PurePosixPath(".github/workflows/php.yml")

# The starter's own node entry point; it is wired into package.json and is
# never rewritten.
SCAFFOLD_SCRIPT = PurePosixPath("bin/scaffold.mjs")
SCAFFOLD_NPM_SCRIPT = "scaffold"
SCAFFOLD_NPM_DEPENDENCY = "@inquirer/prompts"
