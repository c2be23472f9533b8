"""Tests for manifest assembly, settings merge, rendering and the idempotency check."""

import pytest as _pytest

import nanny.core.assemble as assemble
import nanny.core.check as check


class TestAssembleManifest:
    """assemble_manifest() behavior."""

    def test_scenario_projection_then_fragment(self) -> None:
        """Scripts dropped by projection, fragment values win, notes absent."""
        root = {"name": "x", "version": "1.0.0", "notes": "tmp", "scripts": {"a": "1"}}
        result = assemble.assemble_manifest(
            root,
            [("frag.jsonc", {"version": "2.0.0", "license": "MIT"})],
            keys=["name", "version"],
        )
        assert result == {"name": "x", "version": "2.0.0", "license": "MIT"}
        assert list(result) == ["name", "version", "license"]

    def test_later_fragments_win(self) -> None:
        """Fragments apply in order."""
        result = assemble.assemble_manifest(
            {},
            [("a", {"type": "commonjs"}), ("b", {"type": "module"})],
            keys=[],
        )
        assert result == {"type": "module"}

    def test_reserved_keys_stripped_after_merge(self) -> None:
        """notes from a fragment or the key-set is removed."""
        result = assemble.assemble_manifest(
            {"name": "x", "notes": "root"},
            [("a", {"notes": "fragment"})],
            keys=["name", "notes"],
        )
        assert result == {"name": "x"}

    def test_fragment_nested_merge(self) -> None:
        """Fragments merge deeply into projected values."""
        result = assemble.assemble_manifest(
            {"engines": {"node": ">=20"}},
            [("a", {"engines": {"pnpm": ">=9"}})],
            keys=["engines"],
        )
        assert result == {"engines": {"node": ">=20", "pnpm": ">=9"}}


class TestMergeSettings:
    """merge_settings() behavior."""

    def test_scenario_font_size(self) -> None:
        base = {"editor": {"fontSize": 12, "tabSize": 2}}
        local = {"editor": {"fontSize": 14}}
        assert assemble.merge_settings(base, local) == {"editor": {"fontSize": 14, "tabSize": 2}}

    def test_no_local(self) -> None:
        base = {"files.eol": "\n"}
        assert assemble.merge_settings(base, None) == base


class TestRenderJson:
    """render_json() output format."""

    def test_two_space_indent_trailing_newline(self) -> None:
        assert assemble.render_json({"a": [1]}) == '{\n  "a": [\n    1\n  ]\n}\n'

    def test_non_ascii_kept(self) -> None:
        assert "café" in assemble.render_json({"name": "café"})

    def test_nan_not_rendered(self) -> None:
        with _pytest.raises(ValueError):
            assemble.render_json({"n": float("nan")})


class TestIsCurrent:
    """is_current() is exact string equality."""

    def test_identical_text(self) -> None:
        assert check.is_current('{"a": 1}\n', '{"a": 1}\n')

    def test_one_character_difference(self) -> None:
        """Structurally equal but textually different is drift."""
        assert not check.is_current('{"a": 1}\n', '{"a":1}\n')

    def test_missing_output(self) -> None:
        assert not check.is_current(None, "{}\n")
