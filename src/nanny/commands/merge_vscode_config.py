"""merge-vscode-config: merge base and local VS Code settings.

Modes:
- default: write the merged settings
- dry_run: return the text without writing
- check: fail with DriftDetectedError if the output is missing or differs
"""

import dataclasses as _dataclasses
import logging as _logging
import pathlib as _pathlib

import nanny.config as config
import nanny.core.assemble as assemble
import nanny.core.check as check
import nanny.errors as errors
import nanny.files as files

_logger = _logging.getLogger(__name__)


@_dataclasses.dataclass
class MergeResult:
    """Outcome of one merge-vscode-config run."""

    base_path: _pathlib.Path
    local_path: _pathlib.Path | None
    out_path: _pathlib.Path
    text: str
    written: bool


def run(
    settings: config.Settings,
    *,
    base: str | None = None,
    local: str | None = None,
    out: str | None = None,
    dry_run: bool = False,
    check_only: bool = False,
) -> MergeResult:
    """
    Merge settings.base.jsonc and settings.local.jsonc.

    Args:
        settings: Loaded settings (vscode section).
        base, local, out: Path overrides.
        dry_run: Return the merged text without writing.
        check_only: Compare against the existing output instead of writing.

    Raises:
        MissingResourceError: If the base file does not exist.
        MalformedInputError: If base or local is invalid or not an object.
        DriftDetectedError: In check mode, if the output is missing or stale.
    """
    section = settings.vscode
    base_path = settings.resolve(base or section.base)
    local_path = settings.resolve(local or section.local)
    out_path = settings.resolve(out or section.out)

    if not base_path.is_file():
        raise errors.MissingResourceError(base_path, "Base file")
    base_json = files.read_jsonc_object(base_path)

    local_json = None
    if local_path.is_file():
        local_json = files.read_jsonc_object(local_path)
    else:
        _logger.debug("Local file not found (ok): %s", local_path)

    text = assemble.render_json(assemble.merge_settings(base_json, local_json))
    result = MergeResult(
        base_path=base_path,
        local_path=local_path if local_json is not None else None,
        out_path=out_path,
        text=text,
        written=False,
    )

    if check_only:
        existing = files.read_text_if_exists(out_path)
        if existing is None:
            raise errors.DriftDetectedError(out_path, f"Output file does not exist: {out_path}")
        if not check.is_current(existing, text):
            raise errors.DriftDetectedError(
                out_path, f"{out_path} is out of date. Run nanny merge-vscode-config."
            )
        _logger.debug("CHECK OK: Output matches merged settings.")
        return result

    if dry_run:
        return result

    files.write_text(out_path, text)
    result.written = True
    _logger.debug("Wrote: %s", out_path)
    _logger.debug("base:  %s", base_path)
    _logger.debug("local: %s", result.local_path or "(none)")
    return result
