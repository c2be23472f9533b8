"""Configuration section models for Nanny settings.

Each section maps to one command:
- GeneratePackageConfig: generate-package
- UpdatePackageConfig: update-package
- VscodeConfig: merge-vscode-config

All types use `extra="allow"` so unknown keys in .nanny.yaml are kept
and can be reported instead of silently dropped.
"""

import typing as _typing

import pydantic as _pydantic

import nanny.constants as constants


class ConfigBase(_pydantic.BaseModel):
    """Base class for all config sections."""

    model_config = _pydantic.ConfigDict(extra="allow")

    def get_extra_fields(self) -> dict[str, _typing.Any]:
        """Return fields that were provided but are not in the schema."""
        return dict(self.model_extra) if self.model_extra else {}

    def collect_all_extra_fields(self, prefix: str = "") -> dict[str, _typing.Any]:
        """Extra fields keyed by dotted path, e.g. {"vscode.outt": "x"}."""
        return {
            f"{prefix}.{key}" if prefix else key: value
            for key, value in self.get_extra_fields().items()
        }


class GeneratePackageConfig(ConfigBase):
    """
    package.json assembly.

    YAML section: generate_package.*
    """

    package: str = constants.DEFAULT_PACKAGE_PATH
    """Root manifest the protected keys are read from."""

    output: str = constants.DEFAULT_PACKAGE_PATH
    """Where the assembled manifest is written."""

    fragments: str = constants.GENERATE_FRAGMENTS_GLOB
    """Glob (relative to cwd) of fragments merged into the manifest."""

    keys: list[str] = _pydantic.Field(default_factory=lambda: list(constants.DEFAULT_PACKAGE_KEYS))
    """Protected keys, in output order."""

    reserved_keys: list[str] = _pydantic.Field(
        default_factory=lambda: list(constants.RESERVED_PACKAGE_KEYS)
    )
    """Keys stripped from the result."""

    @_pydantic.field_validator("keys")
    @classmethod
    def _dedupe_keys(cls, value: list[str]) -> list[str]:
        """Drop blanks and duplicates, keeping first occurrence."""
        seen: dict[str, None] = {}
        for key in value:
            key = key.strip()
            if key:
                seen.setdefault(key, None)
        return list(seen)


class UpdatePackageConfig(ConfigBase):
    """
    Dependency sync and scripts/wireit audit.

    YAML section: update_package.*
    """

    package: str = constants.DEFAULT_PACKAGE_PATH
    """Root manifest holding the source-of-truth versions."""

    fragments: str = constants.UPDATE_FRAGMENTS_GLOB
    """Glob (relative to cwd) of fragments to sync and audit."""


class VscodeConfig(ConfigBase):
    """
    VS Code settings merge.

    YAML section: vscode.*
    """

    base: str = constants.DEFAULT_VSCODE_BASE
    local: str = constants.DEFAULT_VSCODE_LOCAL
    out: str = constants.DEFAULT_VSCODE_OUT

    load_env: bool = True
    """Load .env files before merging."""

    env_files: list[str] = _pydantic.Field(default_factory=lambda: [".env", "~/.env"])
    """Candidate .env files, earlier files win. Relative paths resolve against cwd."""
