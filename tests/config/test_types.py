"""Tests for configuration type definitions.

Tests for the Pydantic models in nanny.config.types.
"""

import pathlib as _pathlib

import nanny.config as config
import nanny.config.types as types

# =============================================================================
# ConfigBase Introspection Tests
# =============================================================================


class TestConfigBaseIntrospection:
    """Tests for extra field auditing."""

    def test_get_extra_fields_empty(self) -> None:
        assert types.VscodeConfig().get_extra_fields() == {}

    def test_collect_with_prefix(self) -> None:
        section = types.VscodeConfig.model_validate({"out": "x.json", "outt": "typo"})
        assert section.collect_all_extra_fields(prefix="vscode") == {"vscode.outt": "typo"}

    def test_settings_collects_nested(self, tmp_path: _pathlib.Path) -> None:
        (tmp_path / ".nanny.yaml").write_text(
            "verbsoe: true\nupdate_package:\n  fragmnets: x\n"
        )
        settings = config.Settings(project_root=tmp_path)
        assert settings.collect_all_extra_fields() == {
            "verbsoe": True,
            "update_package.fragmnets": "x",
        }


# =============================================================================
# Section defaults
# =============================================================================


class TestSectionDefaults:
    def test_generate_package_keys_are_copies(self) -> None:
        """Each instance gets its own list."""
        a = types.GeneratePackageConfig()
        a.keys.append("extra")
        assert "extra" not in types.GeneratePackageConfig().keys

    def test_vscode_env_files(self) -> None:
        assert types.VscodeConfig().env_files == [".env", "~/.env"]
