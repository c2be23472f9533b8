"""
Shared constants for Nanny.

This module provides a single source of truth for default values
that are used across multiple modules.
"""

# Package assembly defaults
DEFAULT_PACKAGE_KEYS: tuple[str, ...] = (
    "name",
    "description",
    "version",
    "author",
    "bugs",
    "engines",
    "homepage",
    "license",
    "private",
    "repository",
    "publishConfig",
    "type",
)
"""Keys preserved from the existing root package.json, in output order."""

RESERVED_PACKAGE_KEYS: tuple[str, ...] = ("notes",)
"""Keys stripped from the assembled package.json."""

DEFAULT_PACKAGE_PATH = "package.json"
"""Root manifest, relative to the working directory."""

GENERATE_FRAGMENTS_GLOB = "src/packages/**/*.jsonc"
"""Fragments merged into package.json (any depth)."""

UPDATE_FRAGMENTS_GLOB = "src/packages/*/*.jsonc"
"""Fragments whose dependency versions are synced (one level deep)."""

# Manifest sections
DEPENDENCY_SECTIONS: tuple[str, ...] = ("dependencies", "devDependencies")
"""Sections holding name -> version maps."""

SCRIPTS_SECTION = "scripts"
WIREIT_SECTION = "wireit"

# Merge safety
UNSAFE_MERGE_KEYS: frozenset[str] = frozenset({"__proto__", "constructor", "prototype"})
"""Keys never copied or recursed into by merge_deep."""

# VS Code settings defaults
DEFAULT_VSCODE_BASE = ".vscode/settings.base.jsonc"
DEFAULT_VSCODE_LOCAL = ".vscode/settings.local.jsonc"
DEFAULT_VSCODE_OUT = ".vscode/settings.json"

# Output formatting
JSON_INDENT = 2
"""Indent for every JSON file nanny writes."""

PROJECT_CONFIG_NAME = ".nanny.yaml"
"""Project-level configuration file, looked up in the project root."""
