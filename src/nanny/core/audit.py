"""
Cross-file aggregation and drift audit.

Every function takes a root mapping and/or an ordered list of
FileScopedMaps and returns plain findings. Nothing here reads files:
callers filter out fragments whose section is not an object before
building the maps (see section_map).

Findings:
- missing: root keys no file defines (sorted)
- changed: keys defined at root and in a file with different values
  (sorted by key; scripts compare as strings, task-runner configs
  structurally)
- duplicates: keys defined in two or more files (encounter order)
- unused: root dependencies no fragment references (sorted)
"""

import json as _json
import typing as _typing

import nanny.constants as constants
import nanny.core.equality as equality
import nanny.core.types as types


def section_map(
    origin: str,
    manifest: types.JsonObject,
    section: str,
) -> types.FileScopedMap | None:
    """
    Take one section of a parsed fragment as a FileScopedMap.

    Returns:
        None when the section is absent or not an object.
    """
    value = manifest.get(section)
    if not isinstance(value, dict):
        return None
    return types.FileScopedMap(origin=origin, mapping=value)


def collect_used_keys(maps: _typing.Iterable[types.FileScopedMap]) -> set[str]:
    """Union of keys across all maps."""
    used: set[str] = set()
    for scoped in maps:
        used.update(scoped.mapping)
    return used


def find_missing(
    root: _typing.Mapping[str, _typing.Any] | None,
    maps: _typing.Sequence[types.FileScopedMap],
) -> list[str]:
    """Root keys absent from every map, sorted."""
    if not root:
        return []
    present = collect_used_keys(maps)
    return sorted(key for key in root if key not in present)


def _as_text(value: _typing.Any) -> str:
    """Script commands as text; non-strings as compact JSON."""
    if isinstance(value, str):
        return value
    return _json.dumps(value, ensure_ascii=False)


def find_changed_scripts(
    root: _typing.Mapping[str, _typing.Any] | None,
    maps: _typing.Sequence[types.FileScopedMap],
) -> list[types.ChangedEntry]:
    """
    Script commands that differ from root.

    Commands are opaque shell strings, so any textual difference counts.
    """
    root = root or {}
    changed: list[types.ChangedEntry] = []
    for scoped in maps:
        for name, command in scoped.mapping.items():
            if name not in root:
                continue
            root_text = _as_text(root[name])
            found_text = _as_text(command)
            if root_text != found_text:
                changed.append(
                    types.ChangedEntry(
                        name=name, origin=scoped.origin, root=root_text, found=found_text
                    )
                )
    return sorted(changed, key=lambda entry: entry.name)


def find_changed_configs(
    root: _typing.Mapping[str, _typing.Any] | None,
    maps: _typing.Sequence[types.FileScopedMap],
) -> list[types.ChangedEntry]:
    """
    Structured entries (task-runner configs) that differ from root.

    Key order inside a config does not matter; anything else does.
    """
    root = root or {}
    changed: list[types.ChangedEntry] = []
    for scoped in maps:
        for name, config in scoped.mapping.items():
            if name in root and not equality.structurally_equal(root[name], config):
                changed.append(
                    types.ChangedEntry(name=name, origin=scoped.origin, root=root[name], found=config)
                )
    return sorted(changed, key=lambda entry: entry.name)


def find_duplicates(maps: _typing.Sequence[types.FileScopedMap]) -> list[types.DuplicateGroup]:
    """Keys defined by two or more maps, with origins in encounter order."""
    seen: dict[str, list[str]] = {}
    for scoped in maps:
        for key in scoped.mapping:
            seen.setdefault(key, []).append(scoped.origin)
    return [
        types.DuplicateGroup(name=name, origins=tuple(origins))
        for name, origins in seen.items()
        if len(origins) > 1
    ]


def find_unused_dependencies(
    root_manifest: types.JsonObject,
    used: _typing.Container[str],
    sections: _typing.Iterable[str] = constants.DEPENDENCY_SECTIONS,
) -> list[types.UnusedDependency]:
    """Root dependencies (all sections) that no fragment references, sorted by name."""
    unused: list[types.UnusedDependency] = []
    for section in sections:
        deps = root_manifest.get(section)
        if not isinstance(deps, dict):
            continue
        for name, version in deps.items():
            if name not in used:
                unused.append(types.UnusedDependency(name=name, version=version, section=section))
    return sorted(unused, key=lambda dep: dep.name)


def audit_section(
    root: _typing.Mapping[str, _typing.Any] | None,
    maps: _typing.Sequence[types.FileScopedMap],
    *,
    structured: bool,
) -> types.SectionAudit:
    """
    Run missing, changed and duplicate detection for one section.

    Args:
        root: The root manifest's section (may be None).
        maps: Per-file sections, in file order.
        structured: Compare values structurally (task-runner configs)
            instead of as text (scripts).
    """
    find_changed = find_changed_configs if structured else find_changed_scripts
    return types.SectionAudit(
        missing=find_missing(root, maps),
        changed=find_changed(root, maps),
        duplicates=find_duplicates(maps),
    )
