"""
Recursive deep merge and key projection for JSON-like objects.

Merge semantics (right-biased):
- Both values are objects: merge recursively
- Anything else (arrays, scalars, null, or a type change): source replaces target
- Keys in UNSAFE_MERGE_KEYS are skipped, never copied and never recursed into

Example:
    >>> target = {"editor": {"fontSize": 12, "tabSize": 2}}
    >>> merge_deep(target, {"editor": {"fontSize": 14}})
    {'editor': {'fontSize': 14, 'tabSize': 2}}
"""

import copy as _copy
import typing as _typing

import nanny.constants as constants
import nanny.core.types as types


def is_plain_object(value: _typing.Any) -> bool:
    """True for JSON objects (dicts); arrays and scalars are not objects."""
    return isinstance(value, dict)


def merge_deep(target: types.JsonObject, source: types.JsonObject) -> types.JsonObject:
    """
    Merge source into target in place.

    The source is never mutated. Objects copied from the source into a slot
    where the target has no object are rebuilt through this function, so the
    unsafe-key filter applies at every depth and later merges into the
    target cannot reach back into the source. Arrays are deep-copied.

    Args:
        target: Object to update.
        source: Object whose values win.

    Returns:
        The updated target (same object).
    """
    for key, source_value in source.items():
        if key in constants.UNSAFE_MERGE_KEYS:
            continue

        target_value = target.get(key)

        if is_plain_object(source_value) and is_plain_object(target_value):
            merge_deep(target_value, source_value)
        elif is_plain_object(source_value):
            target[key] = merge_deep({}, source_value)
        else:
            target[key] = _copy.deepcopy(source_value)

    return target


def merge_copy(base: types.JsonObject, override: types.JsonObject) -> types.JsonObject:
    """
    Merge override over a copy of base, leaving both inputs untouched.

    Args:
        base: Lower-precedence object.
        override: Higher-precedence object.

    Returns:
        New merged object.
    """
    return merge_deep(merge_deep({}, base), override)


def project_keys(
    source: types.JsonObject,
    keys: _typing.Iterable[str],
) -> types.JsonObject:
    """
    Keep only allow-listed keys, in allow-list order.

    Values are shared with the source (shallow copy). Keys missing from the
    source are omitted rather than set to None.

    Args:
        source: Object to filter.
        keys: Ordered allow-list.

    Returns:
        New object holding keys ∩ source, ordered like keys.
    """
    projected: types.JsonObject = {}
    for key in keys:
        if key in source:
            projected[key] = source[key]
    return projected


def strip_keys(obj: types.JsonObject, keys: _typing.Iterable[str]) -> list[str]:
    """
    Remove keys from obj in place.

    Returns:
        The keys that were actually present and removed.
    """
    removed: list[str] = []
    for key in keys:
        if key in obj:
            del obj[key]
            removed.append(key)
    return removed
