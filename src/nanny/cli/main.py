"""
Main CLI entry point for Nanny.

Provides the command-line interface using Click. Drivers in
nanny.commands do the work; this module parses options, prints results
and maps error kinds to exit codes.
"""

import logging as _logging
import os as _os
import pathlib as _pathlib
import sys as _sys
import typing as _typing

import click as _click
import pydantic as _pydantic

import nanny
import nanny.commands.generate_package as generate_package
import nanny.commands.merge_vscode_config as merge_vscode_config
import nanny.commands.update_package as update_package
import nanny.config as config
import nanny.config.env as config_env
import nanny.errors as errors

_logger = _logging.getLogger(__name__)

# Custom Click context settings for better help formatting
CONTEXT_SETTINGS: dict[str, _typing.Any] = {
    "help_option_names": ["-h", "--help"],
    "max_content_width": 100,
}


def _configure_logging(verbose: bool) -> None:
    """Send log records to stderr; DEBUG when verbose."""
    _logging.basicConfig(
        level=_logging.DEBUG if verbose else _logging.WARNING,
        format="[nanny] %(message)s",
        stream=_sys.stderr,
        force=True,
    )


def _fail(error: errors.NannyError) -> _typing.NoReturn:
    """Print an expected failure and exit with its code."""
    _click.echo(error.message, err=True)
    raise SystemExit(error.exit_code) from None


def _load_settings(cwd: _pathlib.Path, verbose: bool) -> config.Settings:
    overrides: dict[str, _typing.Any] = {"project_root": cwd}
    if verbose:
        overrides["verbose"] = True
    try:
        return config.Settings(**overrides)
    except errors.NannyError as e:
        _fail(e)
    except _pydantic.ValidationError as e:
        _fail(errors.MalformedInputError("settings", str(e)))


@_click.group(context_settings=CONTEXT_SETTINGS)
@_click.version_option(nanny.__version__, "-v", "--version", prog_name="nanny")
@_click.option(
    "--cwd",
    type=_click.Path(file_okay=False, path_type=_pathlib.Path),
    default=None,
    help="Working directory (default: current directory)",
)
@_click.option("--verbose", is_flag=True, help="More logs")
@_click.pass_context
def cli(ctx: _click.Context, cwd: _pathlib.Path | None, verbose: bool) -> None:
    """
    Nanny - repo maintenance CLI.

    \b
    Examples:
        nanny generate-package --dry-run     # Preview merged package.json
        nanny update-package                 # Sync versions, audit scripts/wireit
        nanny merge-vscode-config --check    # Fail if settings.json is stale
    """
    project_root = (cwd or _pathlib.Path.cwd()).resolve()
    settings = _load_settings(project_root, verbose)
    _configure_logging(settings.verbose)

    for key in sorted(settings.collect_all_extra_fields()):
        _logger.warning("Unknown config key ignored: %s", key)

    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings


@cli.command(name="generate-package")
@_click.option("--package", "package", type=str, default=None, help="Path to package.json")
@_click.option(
    "--keys",
    type=str,
    default=None,
    help="Comma-separated list of keys to preserve from package.json",
)
@_click.option("--dry-run", is_flag=True, help="Print merged JSON to stdout, do not write file")
@_click.pass_context
def generate_package_cmd(
    ctx: _click.Context,
    package: str | None,
    keys: str | None,
    dry_run: bool,
) -> None:
    """Merge src/packages/**/*.jsonc into package.json.

    \b
    Examples:
        nanny generate-package
        nanny generate-package --dry-run
        nanny generate-package --keys name,description,version
    """
    settings: config.Settings = ctx.obj["settings"]
    key_list = generate_package.parse_keys(keys) if keys is not None else None
    if keys is not None and not key_list:
        raise _click.BadParameter("expected at least one key", param_hint="--keys")

    try:
        result = generate_package.run(settings, package=package, keys=key_list, dry_run=dry_run)
    except errors.NannyError as e:
        _fail(e)

    if dry_run:
        _click.echo(result.text, nl=False)
        return
    _click.echo(f"✔ Merged values written to {result.output_path}")


@cli.command(name="update-package")
@_click.option("--dry-run", is_flag=True, help="Report fragments that would change, do not write")
@_click.pass_context
def update_package_cmd(ctx: _click.Context, dry_run: bool) -> None:
    """Sync dependency versions and audit scripts/wireit.

    \b
    What it does:
      1) Updates dependency versions in ./src/packages/*/*.jsonc from the root package.json
      2) Reports unused root dependencies
      3) Audits scripts/wireit for missing, changed, and duplicated entries
    """
    settings: config.Settings = ctx.obj["settings"]
    try:
        result = update_package.run(settings, dry_run=dry_run)
    except errors.NannyError as e:
        _fail(e)

    for line in update_package.format_statuses(result):
        _click.echo(line)
    for line in update_package.format_failures(result):
        _click.echo(line, err=True)
    for line in update_package.format_report(result):
        _click.echo(line)


def _apply_env_files(settings: config.Settings) -> None:
    """Load .env files into the process environment without overriding."""
    paths = [settings.resolve(p) for p in settings.vscode.env_files]
    loaded = config_env.read_env_files(paths)
    if not loaded:
        return
    updated = config_env.load_env(_os.environ, [content for _, content in loaded])
    for key, value in updated.items():
        if key not in _os.environ:
            _os.environ[key] = value


@cli.command(name="merge-vscode-config")
@_click.option("--base", type=str, default=None, help="Base settings JSONC")
@_click.option("--local", type=str, default=None, help="Local override JSONC, optional")
@_click.option("--out", type=str, default=None, help="Output JSON")
@_click.option("--dry-run", is_flag=True, help="Print merged JSON to stdout, do not write file")
@_click.option("--check", "check_only", is_flag=True, help="Exit non-zero if output is missing or out of date")
@_click.pass_context
def merge_vscode_config_cmd(
    ctx: _click.Context,
    base: str | None,
    local: str | None,
    out: str | None,
    dry_run: bool,
    check_only: bool,
) -> None:
    """Merge VS Code settings.base.jsonc + settings.local.jsonc.

    \b
    Examples:
        nanny merge-vscode-config --verbose
        nanny merge-vscode-config --dry-run
        nanny merge-vscode-config --check
    """
    settings: config.Settings = ctx.obj["settings"]
    if settings.vscode.load_env:
        _apply_env_files(settings)

    try:
        result = merge_vscode_config.run(
            settings,
            base=base,
            local=local,
            out=out,
            dry_run=dry_run,
            check_only=check_only,
        )
    except errors.NannyError as e:
        _fail(e)

    if dry_run and not check_only:
        _click.echo(result.text, nl=False)


def main() -> None:
    """Main entry point with correct program name."""
    cli(prog_name="nanny")


if __name__ == "__main__":
    main()
