"""
Pure compositions of the merge engine used by the commands.

- assemble_manifest: package.json from a root manifest and fragments
- merge_settings: VS Code settings from base and optional local override
- render_json: the exact text nanny writes for any JSON file
"""

import json as _json
import logging as _logging
import typing as _typing

import nanny.constants as constants
import nanny.core.merge as merge
import nanny.core.types as types

_logger = _logging.getLogger(__name__)


def assemble_manifest(
    root_manifest: types.JsonObject,
    fragments: _typing.Iterable[tuple[str, types.JsonObject]],
    keys: _typing.Sequence[str] = constants.DEFAULT_PACKAGE_KEYS,
    reserved_keys: _typing.Iterable[str] = constants.RESERVED_PACKAGE_KEYS,
) -> types.JsonObject:
    """
    Build a package manifest.

    The root manifest is projected through keys, then each fragment is
    merged over the result in the given order (later fragments win), and
    reserved keys are removed.

    Args:
        root_manifest: Existing root package.json.
        fragments: (origin, object) pairs in merge order.
        keys: Protected keys kept from the root manifest, in output order.
        reserved_keys: Keys removed from the final result.

    Returns:
        The assembled manifest.
    """
    manifest = merge.project_keys(root_manifest, keys)
    for origin, fragment in fragments:
        _logger.debug("Merging values from %s", origin)
        merge.merge_deep(manifest, fragment)

    for key in merge.strip_keys(manifest, reserved_keys):
        _logger.debug('Removed "%s" from package.json structure', key)

    return manifest


def merge_settings(
    base: types.JsonObject,
    local: types.JsonObject | None = None,
) -> types.JsonObject:
    """Merge local settings over base; neither input is modified."""
    return merge.merge_copy(base, local or {})


def render_json(value: _typing.Any) -> str:
    """Pretty-print JSON with 2-space indent and a single trailing newline."""
    text = _json.dumps(
        value,
        indent=constants.JSON_INDENT,
        ensure_ascii=False,
        allow_nan=False,
    )
    return text + "\n"
