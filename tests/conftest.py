"""
Shared pytest fixtures for Nanny tests.

This file is automatically loaded by pytest. Fixtures defined here are
available to all test files without explicit imports.
"""

import json as _json
import os as _os
import pathlib as _pathlib
import typing as _typing

import click.testing as _click_testing
import pytest as _pytest

import nanny.config as config


@_pytest.fixture(autouse=True)
def isolated_env(monkeypatch: _pytest.MonkeyPatch) -> None:
    """Clear NANNY_* variables and disable .env loading for every test."""
    for key in list(_os.environ):
        if key.startswith("NANNY_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("NANNY_VSCODE__LOAD_ENV", "false")


def write_json(path: _pathlib.Path, data: _typing.Any) -> _pathlib.Path:
    """Write data as indented JSON, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(_json.dumps(data, indent=2) + "\n", encoding="utf-8")
    return path


@_pytest.fixture
def project(tmp_path: _pathlib.Path) -> _pathlib.Path:
    """
    A small monorepo layout:

    package.json                     root manifest
    src/packages/core/package.jsonc  fragment with deps, scripts, wireit
    src/packages/docs/package.jsonc  fragment sharing a script key
    """
    write_json(
        tmp_path / "package.json",
        {
            "name": "monorepo",
            "version": "1.0.0",
            "private": True,
            "notes": "scratch",
            "scripts": {"build": "wireit", "test": "vitest", "lint": "eslint ."},
            "wireit": {"build": {"command": "tsc", "files": ["src/**/*.ts"]}},
            "dependencies": {"lib-a": "^1.1.0", "lib-unused": "^3.0.0"},
            "devDependencies": {"typescript": "^5.4.0"},
        },
    )
    (tmp_path / "src" / "packages" / "core").mkdir(parents=True)
    (tmp_path / "src" / "packages" / "core" / "package.jsonc").write_text(
        """{
  // core package
  "dependencies": {"lib-a": "^1.0.0"},
  "devDependencies": {"typescript": "^5.4.0"},
  "scripts": {"build": "wireit", "lint": "eslint src"},
  "wireit": {"build": {"files": ["src/**/*.ts"], "command": "tsc"}},
}
""",
        encoding="utf-8",
    )
    write_json(
        tmp_path / "src" / "packages" / "docs" / "package.jsonc",
        {"scripts": {"build": "wireit"}, "license": "MIT"},
    )
    return tmp_path


@_pytest.fixture
def settings(project: _pathlib.Path) -> config.Settings:
    """Settings rooted at the project fixture."""
    return config.Settings(project_root=project)


@_pytest.fixture
def runner() -> _click_testing.CliRunner:
    """Click test runner."""
    return _click_testing.CliRunner()
