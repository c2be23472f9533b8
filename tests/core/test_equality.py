"""Tests for structural equality and canonical serialization."""

import pytest as _pytest

import nanny.core.equality as equality


class TestStructurallyEqual:
    """structurally_equal() behavior."""

    def test_key_order_ignored_at_every_depth(self) -> None:
        """Reordered keys at any depth compare equal."""
        a = {"a": 1, "b": {"x": [1, {"p": 1, "q": 2}], "y": None}}
        b = {"b": {"y": None, "x": [1, {"q": 2, "p": 1}]}, "a": 1}
        assert equality.structurally_equal(a, b)

    def test_reflexive_and_symmetric(self) -> None:
        """x == x, and equal(a, b) == equal(b, a)."""
        a = {"k": [1, "two", {"three": 3.0}]}
        b = {"k": [1, "two", {"three": 4}]}
        assert equality.structurally_equal(a, a)
        assert equality.structurally_equal(a, b) == equality.structurally_equal(b, a)

    def test_array_order_matters(self) -> None:
        """Arrays compare element by element."""
        assert not equality.structurally_equal([1, 2], [2, 1])

    def test_array_length_matters(self) -> None:
        """A prefix is not equal to the longer array."""
        assert not equality.structurally_equal([1, 2], [1, 2, 3])

    def test_missing_key_on_either_side(self) -> None:
        """A key present on only one side makes objects unequal."""
        assert not equality.structurally_equal({"a": 1}, {"a": 1, "b": None})
        assert not equality.structurally_equal({"a": 1, "b": None}, {"a": 1})

    @_pytest.mark.parametrize(
        ("a", "b"),
        [
            (True, 1),
            (False, 0),
            ("1", 1),
            (None, False),
            ([], {}),
            ({"a": []}, {"a": {}}),
        ],
    )
    def test_type_sensitive(self, a: object, b: object) -> None:
        """Values of different JSON types never compare equal."""
        assert not equality.structurally_equal(a, b)

    def test_int_and_float_are_both_numbers(self) -> None:
        """JSON has a single number type."""
        assert equality.structurally_equal({"n": 1}, {"n": 1.0})


class TestCanonicalDumps:
    """canonical_dumps() behavior."""

    def test_equal_values_give_identical_text(self) -> None:
        """Key order does not leak into the canonical form."""
        a = {"b": 1, "a": {"d": 2, "c": 3}}
        b = {"a": {"c": 3, "d": 2}, "b": 1}
        assert equality.canonical_dumps(a) == equality.canonical_dumps(b)

    def test_keys_sorted(self) -> None:
        """Keys appear sorted in the output."""
        text = equality.canonical_dumps({"z": 1, "a": 2})
        assert text.index('"a"') < text.index('"z"')
