"""
Structural equality and canonical serialization of JSON-like values.

Two values are structurally equal when they hold the same data regardless
of object key insertion order. Array order, value type and scalar value
all matter. Booleans are never equal to numbers; integers and floats are
both JSON numbers and compare by value.

Example:
    >>> structurally_equal({"a": 1, "b": [1, 2]}, {"b": [1, 2], "a": 1})
    True
    >>> structurally_equal([1, 2], [2, 1])
    False
"""

import json as _json
import typing as _typing

import nanny.constants as constants


def _kind(value: _typing.Any) -> str:
    """Return the JSON type name of a value."""
    if value is None:
        return "null"
    # bool before int: bool is a subclass of int
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def structurally_equal(a: _typing.Any, b: _typing.Any) -> bool:
    """
    Compare two JSON-like values ignoring object key order.

    Objects are compared over the sorted union of both key sets, so a key
    present on only one side makes them unequal.

    Args:
        a: First value.
        b: Second value.

    Returns:
        True if both values hold the same data.
    """
    kind = _kind(a)
    if kind != _kind(b):
        return False

    if kind == "object":
        for key in sorted(set(a) | set(b)):
            if key not in a or key not in b:
                return False
            if not structurally_equal(a[key], b[key]):
                return False
        return True

    if kind == "array":
        if len(a) != len(b):
            return False
        return all(structurally_equal(x, y) for x, y in zip(a, b))

    return bool(a == b)


def canonical_dumps(value: _typing.Any) -> str:
    """
    Serialize a value with object keys sorted at every depth.

    Structurally equal values always produce the same text.

    Args:
        value: JSON-like value.

    Returns:
        Indented JSON text (no trailing newline).
    """
    return _json.dumps(value, sort_keys=True, indent=constants.JSON_INDENT, ensure_ascii=False)
