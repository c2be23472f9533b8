"""
Type aliases and record types for the merge and audit engine.

- JsonValue / JsonObject: parsed JSON-like data
- FileScopedMap: a section of one fragment file, labelled by origin
- ChangedEntry, DuplicateGroup, UnusedDependency: audit findings
- SectionAudit: the three findings for one section (scripts or wireit)
"""

from __future__ import annotations

import dataclasses as _dataclasses
import typing as _typing

# Recursive JSON type for type checking; plain Any at runtime
if _typing.TYPE_CHECKING:
    JsonValue: _typing.TypeAlias = (
        "None | bool | int | float | str | list[JsonValue] | dict[str, JsonValue]"
    )
else:
    JsonValue: _typing.TypeAlias = _typing.Any

JsonObject: _typing.TypeAlias = dict[str, _typing.Any]

# Dependency name -> version specifier
DependencyMap: _typing.TypeAlias = dict[str, str]


@_dataclasses.dataclass(frozen=True, slots=True)
class FileScopedMap:
    """A mapping taken from one file.

    The origin is only used for reporting, never for merge semantics.
    """

    origin: str
    mapping: JsonObject


@_dataclasses.dataclass(frozen=True, slots=True)
class ChangedEntry:
    """A key defined both at root and in a file, with differing values."""

    name: str
    origin: str
    root: _typing.Any
    found: _typing.Any


@_dataclasses.dataclass(frozen=True, slots=True)
class DuplicateGroup:
    """A key defined in two or more files."""

    name: str
    origins: tuple[str, ...]


@_dataclasses.dataclass(frozen=True, slots=True)
class UnusedDependency:
    """A root dependency that no fragment references."""

    name: str
    version: str
    section: str


@_dataclasses.dataclass(frozen=True, slots=True)
class SectionAudit:
    """Missing, changed and duplicated keys for one section."""

    missing: list[str] = _dataclasses.field(default_factory=list)
    changed: list[ChangedEntry] = _dataclasses.field(default_factory=list)
    duplicates: list[DuplicateGroup] = _dataclasses.field(default_factory=list)

    @property
    def is_clean(self) -> bool:
        """True when nothing drifted."""
        return not (self.missing or self.changed or self.duplicates)
