"""
File access for the command drivers.

Reads JSON/JSONC objects, discovers fragment files and writes output.
Parse problems surface as MalformedInputError; the core never sees a
file path.
"""

import json as _json
import logging as _logging
import math as _math
import pathlib as _pathlib
import typing as _typing

import json5 as _json5

import nanny.core.types as types
import nanny.errors as errors

_logger = _logging.getLogger(__name__)


def _read_text(path: _pathlib.Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except PermissionError as e:
        raise errors.MalformedInputError(path, f"permission denied: {e}") from e
    except OSError as e:
        raise errors.MalformedInputError(path, f"cannot read file: {e}") from e
    except UnicodeDecodeError as e:
        raise errors.MalformedInputError(path, f"invalid UTF-8: {e}") from e


def _require_object(path: _pathlib.Path, parsed: _typing.Any) -> types.JsonObject:
    if not isinstance(parsed, dict):
        type_name = type(parsed).__name__
        raise errors.MalformedInputError(path, f"JSON root must be an object, got {type_name}")
    _reject_non_finite(path, parsed)
    return parsed


def _reject_non_finite(path: _pathlib.Path, value: _typing.Any) -> None:
    """NaN and Infinity parse but cannot be written back as JSON."""
    if isinstance(value, float) and not _math.isfinite(value):
        raise errors.MalformedInputError(path, f"non-finite number {value!r} is not valid JSON")
    if isinstance(value, dict):
        for item in value.values():
            _reject_non_finite(path, item)
    elif isinstance(value, list):
        for item in value:
            _reject_non_finite(path, item)


def parse_jsonc(path: _pathlib.Path, content: str) -> types.JsonObject:
    """
    Parse JSONC text (comments and trailing commas allowed).

    Args:
        path: Origin, for error messages only.
        content: Text to parse.

    Raises:
        MalformedInputError: If the text is invalid or its root is not an object.
    """
    try:
        parsed = _json5.loads(content)
    except ValueError as e:
        raise errors.MalformedInputError(path, f"invalid JSONC: {e}") from e
    return _require_object(path, parsed)


def read_jsonc_object(path: _pathlib.Path) -> types.JsonObject:
    """Read a JSONC file whose root must be an object."""
    return parse_jsonc(path, _read_text(path))


def read_json_object(path: _pathlib.Path) -> types.JsonObject:
    """Read a strict JSON file whose root must be an object."""
    content = _read_text(path)
    try:
        parsed = _json.loads(content)
    except _json.JSONDecodeError as e:
        raise errors.MalformedInputError(path, f"invalid JSON: {e}") from e
    return _require_object(path, parsed)


def read_text_if_exists(path: _pathlib.Path) -> str | None:
    """Return file contents, or None if the file does not exist."""
    if not path.is_file():
        return None
    return _read_text(path)


def write_text(path: _pathlib.Path, content: str) -> None:
    """Write text, creating parent directories as needed."""
    if not path.parent.exists():
        _logger.debug("Creating directory: %s", path.parent)
        path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def discover_fragments(root: _pathlib.Path, pattern: str) -> list[_pathlib.Path]:
    """
    Find fragment files under root matching a glob pattern.

    Paths are sorted so merge precedence does not depend on filesystem
    enumeration order. Hidden files are skipped.

    Args:
        root: Directory the pattern is relative to.
        pattern: pathlib glob, e.g. "src/packages/**/*.jsonc".
    """
    found = [
        path
        for path in root.glob(pattern)
        if path.is_file() and not path.name.startswith(".")
    ]
    return sorted(found)


def relative_to(path: _pathlib.Path, base: _pathlib.Path) -> str:
    """Display path relative to base when possible."""
    try:
        return str(path.relative_to(base))
    except ValueError:
        return str(path)
