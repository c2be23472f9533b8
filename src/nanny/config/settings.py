"""
Settings configuration using pydantic-settings.

Loads configuration from:
1. Constructor arguments (highest precedence)
2. Environment variables with NANNY_ prefix
3. Layered YAML config files merged with merge_deep:
   - Project config: .nanny.yaml in the project root (highest)
   - Built-in defaults: bundled defaults/config.yaml (lowest)

Nested config uses double underscore delimiter:
  NANNY_VSCODE__OUT=.vscode/settings.json
  NANNY_UPDATE_PACKAGE__FRAGMENTS='src/packages/*/*.jsonc'
"""

import pathlib as _pathlib
import typing as _typing

import pydantic as _pydantic
import pydantic_settings as _pydantic_settings

import nanny.config.sources as sources
import nanny.config.types as types


class Settings(_pydantic_settings.BaseSettings):
    """
    Nanny configuration settings.

    All settings can be overridden via environment variables with NANNY_ prefix.
    For nested config, use double underscore: NANNY_VSCODE__LOAD_ENV=false

    Config precedence (highest to lowest):
    1. Constructor arguments (CLI options)
    2. Environment variables (NANNY_*)
    3. Project config (.nanny.yaml)
    4. Built-in defaults
    """

    model_config = _pydantic_settings.SettingsConfigDict(
        env_prefix="NANNY_",
        env_nested_delimiter="__",
        extra="allow",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[_pydantic_settings.BaseSettings],
        init_settings: _pydantic_settings.PydanticBaseSettingsSource,
        env_settings: _pydantic_settings.PydanticBaseSettingsSource,
        dotenv_settings: _pydantic_settings.PydanticBaseSettingsSource,  # noqa: ARG003
        file_secret_settings: _pydantic_settings.PydanticBaseSettingsSource,
    ) -> tuple[_pydantic_settings.PydanticBaseSettingsSource, ...]:
        """
        Configure settings sources with precedence:
        1. init_settings (constructor args) (highest)
        2. env_settings (NANNY_* env vars)
        3. yaml_settings (.nanny.yaml over built-in defaults)
        4. (defaults via Field definitions) (lowest)

        .env files are not read here; merge-vscode-config loads them
        explicitly through nanny.config.env.
        """
        init_kwargs: dict[str, _typing.Any] = getattr(init_settings, "init_kwargs", {})
        project_root = _pathlib.Path(init_kwargs.get("project_root") or _pathlib.Path.cwd())

        return (
            init_settings,
            env_settings,
            sources.LayeredYamlSettingsSource(settings_cls, project_root),
            file_secret_settings,
        )

    # =========================================================================
    # Config version (for future migrations)
    # =========================================================================

    version: int = _pydantic.Field(default=1, description="Config schema version")

    project_root: _pathlib.Path = _pydantic.Field(
        default_factory=_pathlib.Path.cwd,
        description="Directory commands operate in (--cwd)",
    )

    verbose: bool = _pydantic.Field(default=False, description="Enable debug logging")

    # =========================================================================
    # Per-command sections
    # =========================================================================

    generate_package: types.GeneratePackageConfig = _pydantic.Field(
        default_factory=types.GeneratePackageConfig
    )
    """package.json assembly settings."""

    update_package: types.UpdatePackageConfig = _pydantic.Field(
        default_factory=types.UpdatePackageConfig
    )
    """Dependency sync and audit settings."""

    vscode: types.VscodeConfig = _pydantic.Field(default_factory=types.VscodeConfig)
    """VS Code settings merge."""

    def resolve(self, value: str | _pathlib.Path) -> _pathlib.Path:
        """Resolve a configured path against the project root."""
        path = _pathlib.Path(value).expanduser()
        return path if path.is_absolute() else self.project_root / path

    # =========================================================================
    # Introspection (config auditing)
    # =========================================================================

    def get_extra_fields(self) -> dict[str, _typing.Any]:
        """Unknown fields at the top level of Settings."""
        return dict(self.model_extra) if self.model_extra else {}

    def collect_all_extra_fields(self) -> dict[str, _typing.Any]:
        """
        Recursively collect all extra fields from Settings and its sections.

        Returns a flat dict with dotted paths as keys, e.g.:
            {"verbsoe": True, "vscode.outt": ".vscode/x.json"}
        """
        result = self.get_extra_fields()
        for field_name in ["generate_package", "update_package", "vscode"]:
            nested: types.ConfigBase = getattr(self, field_name)
            result.update(nested.collect_all_extra_fields(prefix=field_name))
        return result
