"""Dependency version synchronization against a source-of-truth manifest."""

import typing as _typing

import nanny.constants as constants
import nanny.core.types as types


def sync_versions(
    target_deps: _typing.MutableMapping[str, _typing.Any],
    source_deps: _typing.Mapping[str, _typing.Any],
) -> bool:
    """
    Rewrite target versions that differ from the source.

    Only names already in target are considered; names found only in the
    source are never added. A source entry with an empty version is ignored.

    Args:
        target_deps: Dependency map to update in place.
        source_deps: Source-of-truth dependency map.

    Returns:
        True if any version was rewritten.
    """
    changed = False
    for name in list(target_deps):
        new_version = source_deps.get(name)
        if new_version and target_deps[name] != new_version:
            target_deps[name] = new_version
            changed = True
    return changed


def sync_manifest_versions(
    target: types.JsonObject,
    source: types.JsonObject,
    sections: _typing.Iterable[str] = constants.DEPENDENCY_SECTIONS,
) -> bool:
    """
    Sync every dependency section of target from source.

    A section that is missing, or not an object, on either side is skipped.

    Returns:
        True if any section changed.
    """
    changed = False
    for section in sections:
        target_deps = target.get(section)
        source_deps = source.get(section)
        if not isinstance(target_deps, dict) or not isinstance(source_deps, dict):
            continue
        # No short-circuit: every section must be synced
        changed = sync_versions(target_deps, source_deps) or changed
    return changed
