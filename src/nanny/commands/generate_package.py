"""generate-package: assemble package.json from src/packages fragments."""

import dataclasses as _dataclasses
import logging as _logging
import pathlib as _pathlib
import typing as _typing

import nanny.config as config
import nanny.core.assemble as assemble
import nanny.errors as errors
import nanny.files as files

_logger = _logging.getLogger(__name__)


@_dataclasses.dataclass
class GenerateResult:
    """Outcome of one generate-package run."""

    output_path: _pathlib.Path
    text: str
    fragments: list[_pathlib.Path]
    written: bool


def parse_keys(value: str) -> list[str]:
    """Split a comma-separated --keys value."""
    return [key.strip() for key in value.split(",") if key.strip()]


def run(
    settings: config.Settings,
    *,
    package: str | None = None,
    keys: _typing.Sequence[str] | None = None,
    dry_run: bool = False,
) -> GenerateResult:
    """
    Assemble package.json.

    Args:
        settings: Loaded settings (generate_package section).
        package: Override for the root manifest path.
        keys: Override for the protected key set.
        dry_run: Compute the text without writing it.

    Raises:
        MissingResourceError: If the root manifest does not exist.
        MalformedInputError: If the manifest or a fragment cannot be parsed.
    """
    section = settings.generate_package
    package_path = settings.resolve(package or section.package)
    protected_keys = list(keys) if keys else section.keys

    _logger.debug("Using keys: %s", ", ".join(protected_keys))
    _logger.debug("Reading package.json from %s", package_path)

    if not package_path.is_file():
        raise errors.MissingResourceError(package_path, "Root package.json")
    root_manifest = files.read_jsonc_object(package_path)

    fragment_paths = files.discover_fragments(settings.project_root, section.fragments)
    fragments = [(str(path), files.read_jsonc_object(path)) for path in fragment_paths]

    manifest = assemble.assemble_manifest(
        root_manifest,
        fragments,
        keys=protected_keys,
        reserved_keys=section.reserved_keys,
    )
    text = assemble.render_json(manifest)
    output_path = settings.resolve(section.output)

    if not dry_run:
        files.write_text(output_path, text)

    return GenerateResult(
        output_path=output_path,
        text=text,
        fragments=fragment_paths,
        written=not dry_run,
    )
