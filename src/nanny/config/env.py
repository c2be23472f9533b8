"""
.env file loading as a pure function.

load_env() returns a new mapping and never touches os.environ; the CLI
decides whether to apply the result. Variables already present (in the
existing environment or from an earlier file) are never overridden.
"""

import io as _io
import logging as _logging
import pathlib as _pathlib
import typing as _typing

import dotenv as _dotenv

_logger = _logging.getLogger(__name__)


def parse_env_text(content: str) -> dict[str, str]:
    """
    Parse KEY=VALUE lines.

    Comments, blank lines, `export` prefixes and quoted values are handled
    by python-dotenv. Keys without a value are dropped.
    """
    values = _dotenv.dotenv_values(stream=_io.StringIO(content), interpolate=False)
    return {key: value for key, value in values.items() if key and value is not None}


def load_env(
    existing: _typing.Mapping[str, str],
    contents: _typing.Iterable[str],
) -> dict[str, str]:
    """
    Layer .env contents under an existing environment.

    Args:
        existing: Current environment (not modified).
        contents: .env file texts, highest precedence first.

    Returns:
        New mapping: existing plus any keys it did not already define.
    """
    updated = dict(existing)
    for content in contents:
        for key, value in parse_env_text(content).items():
            updated.setdefault(key, value)
    return updated


def read_env_files(paths: _typing.Iterable[_pathlib.Path]) -> list[tuple[_pathlib.Path, str]]:
    """Read the .env files that exist, keeping the given order."""
    found: list[tuple[_pathlib.Path, str]] = []
    for path in paths:
        if not path.is_file():
            continue
        found.append((path, path.read_text(encoding="utf-8")))
        _logger.debug("Loaded env from: %s", path)
    return found
