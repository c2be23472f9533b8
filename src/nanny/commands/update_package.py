"""update-package: sync fragment dependency versions and audit drift.

Steps:
1. Rewrite dependency versions in each fragment from the root package.json
2. Report root dependencies no fragment references
3. Audit scripts and wireit entries for missing, changed and duplicated keys

A fragment that fails to parse or cannot be rewritten is reported and
skipped; the rest of the run continues.
"""

import dataclasses as _dataclasses
import logging as _logging
import pathlib as _pathlib
import typing as _typing

import nanny.config as config
import nanny.constants as constants
import nanny.core.assemble as assemble
import nanny.core.audit as audit
import nanny.core.equality as equality
import nanny.core.types as types
import nanny.core.versions as versions
import nanny.errors as errors
import nanny.files as files

_logger = _logging.getLogger(__name__)

FileStatus = _typing.Literal["updated", "unchanged", "would-update"]


@_dataclasses.dataclass(frozen=True)
class FileFailure:
    """A fragment that could not be processed."""

    origin: str
    message: str


@_dataclasses.dataclass
class UpdateResult:
    """Everything update-package found, for reporting."""

    project_root: _pathlib.Path
    statuses: list[tuple[str, FileStatus]] = _dataclasses.field(default_factory=list)
    failures: list[FileFailure] = _dataclasses.field(default_factory=list)
    unused: list[types.UnusedDependency] = _dataclasses.field(default_factory=list)
    scripts: types.SectionAudit = _dataclasses.field(default_factory=types.SectionAudit)
    wireit: types.SectionAudit = _dataclasses.field(default_factory=types.SectionAudit)


def run(settings: config.Settings, *, dry_run: bool = False) -> UpdateResult:
    """
    Sync versions and audit fragments against the root manifest.

    Args:
        settings: Loaded settings (update_package section).
        dry_run: Report which fragments would change without writing.

    Raises:
        MissingResourceError: If the root package.json does not exist.
        MalformedInputError: If the root package.json is not a JSON object.
    """
    section = settings.update_package
    root = settings.project_root
    root_path = settings.resolve(section.package)

    if not root_path.is_file():
        raise errors.MissingResourceError(root_path, "Root package.json")
    root_manifest = files.read_json_object(root_path)

    result = UpdateResult(project_root=root)
    parsed: list[tuple[str, types.JsonObject]] = []

    for path in files.discover_fragments(root, section.fragments):
        origin = str(path)
        rel = files.relative_to(path, root)
        try:
            fragment = files.read_jsonc_object(path)
        except errors.MalformedInputError as e:
            _logger.debug("Skipping %s: %s", rel, e)
            result.failures.append(FileFailure(origin=origin, message=str(e)))
            continue

        parsed.append((origin, fragment))

        if not versions.sync_manifest_versions(fragment, root_manifest):
            result.statuses.append((rel, "unchanged"))
        elif dry_run:
            result.statuses.append((rel, "would-update"))
        else:
            try:
                files.write_text(path, assemble.render_json(fragment))
            except OSError as e:
                _logger.debug("Could not write %s: %s", rel, e)
                result.failures.append(FileFailure(origin=origin, message=str(e)))
                continue
            result.statuses.append((rel, "updated"))

    dependency_maps = [
        scoped
        for origin, fragment in parsed
        for dep_section in constants.DEPENDENCY_SECTIONS
        if (scoped := audit.section_map(origin, fragment, dep_section)) is not None
    ]
    result.unused = audit.find_unused_dependencies(
        root_manifest, audit.collect_used_keys(dependency_maps)
    )

    result.scripts = _audit(root_manifest, parsed, constants.SCRIPTS_SECTION, structured=False)
    result.wireit = _audit(root_manifest, parsed, constants.WIREIT_SECTION, structured=True)

    for entry in result.wireit.changed:
        _logger.debug(
            "wireit %s differs in %s\nroot:\n%s\nfile:\n%s",
            entry.name,
            entry.origin,
            equality.canonical_dumps(entry.root),
            equality.canonical_dumps(entry.found),
        )
    return result


def _audit(
    root_manifest: types.JsonObject,
    parsed: list[tuple[str, types.JsonObject]],
    section: str,
    *,
    structured: bool,
) -> types.SectionAudit:
    root_section = root_manifest.get(section)
    maps = [
        scoped
        for origin, fragment in parsed
        if (scoped := audit.section_map(origin, fragment, section)) is not None
    ]
    return audit.audit_section(
        root_section if isinstance(root_section, dict) else None,
        maps,
        structured=structured,
    )


# =============================================================================
# Report formatting
# =============================================================================

_STATUS_LINES: dict[str, str] = {
    "updated": "✔ Updated: {rel}",
    "unchanged": "✘ No changes: {rel}",
    "would-update": "✔ Would update: {rel}",
}


def format_statuses(result: UpdateResult) -> list[str]:
    """One line per processed fragment."""
    return [_STATUS_LINES[status].format(rel=rel) for rel, status in result.statuses]


def format_failures(result: UpdateResult) -> list[str]:
    """One line per fragment that failed (for stderr)."""
    return [
        f"✖ Failed to process {files.relative_to(_pathlib.Path(f.origin), result.project_root)}: "
        f"{f.message}"
        for f in result.failures
    ]


def _format_section(
    audit_result: types.SectionAudit,
    label: str,
    root: _pathlib.Path,
    *,
    show_values: bool,
) -> list[str]:
    lines: list[str] = []

    if audit_result.missing:
        lines.append("• Missing (in root, not listed in any src/packages/*.jsonc):")
        lines.extend(f"  - {name}" for name in audit_result.missing)
    else:
        lines.append(f"• No missing {label} entries.")

    if audit_result.changed:
        what = "command" if show_values else "config"
        lines.append(f"• Changed (defined in both, but {what} differs):")
        for entry in audit_result.changed:
            rel = files.relative_to(_pathlib.Path(entry.origin), root)
            lines.append(f"  - {entry.name} in {rel}")
            if show_values:
                lines.append(f"      root: {entry.root}")
                lines.append(f"      file: {entry.found}")
    else:
        lines.append(f"• No changed {label} entries.")

    if audit_result.duplicates:
        lines.append(f"• Duplicates (same {label} key in multiple files):")
        for group in audit_result.duplicates:
            lines.append(f"  - {group.name}")
            lines.extend(
                f"      {files.relative_to(_pathlib.Path(origin), root)}" for origin in group.origins
            )
    else:
        lines.append(f"• No duplicate {label} entries.")

    return lines


def format_report(result: UpdateResult) -> list[str]:
    """Human-readable audit report (unused deps, scripts, wireit)."""
    root = result.project_root
    lines: list[str] = [""]

    if result.unused:
        lines.append("🔍 Unused dependencies (in root, not in src/packages/*.jsonc):")
        lines.extend(f'  "{dep.name}": "{dep.version}",' for dep in result.unused)
    else:
        lines.append("✅ All dependencies are referenced in src/packages/*.jsonc.")

    lines.append("")
    lines.append("🧪 Scripts audit (root vs src/packages/*.jsonc)")
    lines.extend(_format_section(result.scripts, "script", root, show_values=True))

    lines.append("")
    lines.append("🧩 Wireit audit (root vs src/packages/*.jsonc)")
    lines.extend(_format_section(result.wireit, "wireit", root, show_values=False))

    return lines

