"""Tests for the merge-vscode-config driver."""

import json as _json
import pathlib as _pathlib

import pytest as _pytest

import nanny.commands.merge_vscode_config as merge_vscode_config
import nanny.config as config
import nanny.errors as errors


@_pytest.fixture
def vscode_project(tmp_path: _pathlib.Path) -> _pathlib.Path:
    vscode = tmp_path / ".vscode"
    vscode.mkdir()
    (vscode / "settings.base.jsonc").write_text(
        '{\n  // shared\n  "editor": {"fontSize": 12, "tabSize": 2},\n  "files.exclude": {"dist": true},\n}\n'
    )
    (vscode / "settings.local.jsonc").write_text('{"editor": {"fontSize": 14}}\n')
    return tmp_path


class TestRun:
    """merge_vscode_config.run() modes."""

    def test_default_writes_merged(self, vscode_project: _pathlib.Path) -> None:
        settings = config.Settings(project_root=vscode_project)
        result = merge_vscode_config.run(settings)

        out = vscode_project / ".vscode" / "settings.json"
        assert result.written
        assert out.read_text() == result.text
        assert _json.loads(result.text) == {
            "editor": {"fontSize": 14, "tabSize": 2},
            "files.exclude": {"dist": True},
        }

    def test_local_optional(self, vscode_project: _pathlib.Path) -> None:
        (vscode_project / ".vscode" / "settings.local.jsonc").unlink()
        settings = config.Settings(project_root=vscode_project)
        result = merge_vscode_config.run(settings, dry_run=True)
        assert result.local_path is None
        assert _json.loads(result.text)["editor"]["fontSize"] == 12

    def test_dry_run_does_not_write(self, vscode_project: _pathlib.Path) -> None:
        settings = config.Settings(project_root=vscode_project)
        result = merge_vscode_config.run(settings, dry_run=True)
        assert not result.written
        assert not (vscode_project / ".vscode" / "settings.json").exists()

    def test_check_passes_after_write(self, vscode_project: _pathlib.Path) -> None:
        settings = config.Settings(project_root=vscode_project)
        merge_vscode_config.run(settings)
        result = merge_vscode_config.run(settings, check_only=True)
        assert not result.written

    def test_check_fails_when_missing(self, vscode_project: _pathlib.Path) -> None:
        settings = config.Settings(project_root=vscode_project)
        with _pytest.raises(errors.DriftDetectedError, match="does not exist"):
            merge_vscode_config.run(settings, check_only=True)

    def test_check_fails_on_one_character(self, vscode_project: _pathlib.Path) -> None:
        """Structurally equal but reformatted output is drift."""
        settings = config.Settings(project_root=vscode_project)
        result = merge_vscode_config.run(settings)
        result.out_path.write_text(result.text.rstrip("\n"))
        with _pytest.raises(errors.DriftDetectedError, match="out of date"):
            merge_vscode_config.run(settings, check_only=True)

    def test_missing_base(self, tmp_path: _pathlib.Path) -> None:
        settings = config.Settings(project_root=tmp_path)
        with _pytest.raises(errors.MissingResourceError) as exc_info:
            merge_vscode_config.run(settings)
        assert exc_info.value.exit_code == 2

    def test_non_object_local(self, vscode_project: _pathlib.Path) -> None:
        (vscode_project / ".vscode" / "settings.local.jsonc").write_text('"just a string"')
        settings = config.Settings(project_root=vscode_project)
        with _pytest.raises(errors.MalformedInputError):
            merge_vscode_config.run(settings)

    def test_path_overrides(self, vscode_project: _pathlib.Path) -> None:
        settings = config.Settings(project_root=vscode_project)
        result = merge_vscode_config.run(settings, out="out/merged.json", local="nope.jsonc")
        assert result.out_path == vscode_project / "out" / "merged.json"
        assert result.out_path.exists()
        assert _json.loads(result.text)["editor"]["fontSize"] == 12
