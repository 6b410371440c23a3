#!/usr/bin/env python3
"""
rlcp.cli.cli

Typer-based CLI that converts image assets to a lighter format, keeps the
originals in a backup directory and rewrites references to them.

Examples
--------
Convert using ``rlcp.config.json`` in the current directory:

    rlcp run

Convert non-interactively, overriding the configured format:

    rlcp run --format webp --quality smallest --no-input
"""

from __future__ import annotations

import logging
import sys
import traceback
from pathlib import Path

import click
import typer

from rlcp.application.results import RunSummary
from rlcp.config import default_config_path, load_config
from rlcp.errors import ConfigError, RlcpError
from rlcp.types import QUALITY_TIERS, TARGET_FORMATS

app = typer.Typer(
    name="rlcp",
    help="Convert image assets, back up originals and rewrite references.",
    no_args_is_help=True,
)

FORMAT_PROMPT = "What format do you want to convert the images to?"
QUALITY_PROMPT = "What quality do you want the images to be reduced to? (small=80%, smallest=60%)"
WORKDIR_PROMPT = "What is the working directory for updating references?"
DEFAULT_FORMAT = "webp"
DEFAULT_QUALITY = "small"
DEFAULT_WORKDIR = "./"


def _print_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly error.

    Parameters
    ----------
    exc : Exception
        Exception raised during the run.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.secho(f"✗ {type(exc).__name__}: {exc}", fg=typer.colors.RED, err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _resolve_setting(
    explicit: str | None,
    configured: str | None,
    prompt: str,
    default: str,
    no_input: bool,
    choices: tuple[str, ...] | None = None,
) -> str:
    """Pick a setting from the flag, the config file, or an interactive prompt."""
    if explicit is not None:
        return explicit
    if configured is not None:
        return configured
    if no_input:
        return default
    prompt_type = click.Choice(list(choices)) if choices else str
    return typer.prompt(prompt, default=default, type=prompt_type)


def _print_summary(summary: RunSummary) -> None:
    if summary.discovered == 0:
        typer.secho("No images found matching the criteria.", fg=typer.colors.YELLOW)
    typer.secho(
        f"Done! Successfully processed {summary.converted} images. "
        f"Skipped: {summary.skipped}. Failed: {summary.failed}.",
        bold=True,
    )
    if summary.rewrite is not None:
        typer.secho(
            f"Updated references in {summary.updated_files} files.",
            fg=typer.colors.GREEN,
        )
    if not summary.lock_saved:
        typer.secho("Warning: lock file could not be written.", fg=typer.colors.YELLOW, err=True)


# -----------------------------
# Global options
# -----------------------------
@app.callback()
def _main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Show debug logs and full tracebacks."),
) -> None:
    """Initialize shared CLI state and logging."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )
    ctx.obj = {"debug": debug}


# -----------------------------
# Commands
# -----------------------------
@app.command("run")
def run_cmd(
    ctx: typer.Context,
    config_path: Path | None = typer.Option(
        None, "--config", "-c", help="Path to rlcp.config.json (default: ./rlcp.config.json)."
    ),
    target_format: str | None = typer.Option(
        None,
        "--format",
        "-f",
        click_type=click.Choice(TARGET_FORMATS),
        help="Target format: png, jpeg, jpg or webp.",
    ),
    quality: str | None = typer.Option(
        None,
        "--quality",
        "-q",
        click_type=click.Choice(QUALITY_TIERS),
        help="Quality tier: small (80) or smallest (60).",
    ),
    working_directory: str | None = typer.Option(
        None, "--working-directory", "-w", help="Directory whose files reference the images."
    ),
    no_input: bool = typer.Option(
        False, "--no-input", help="Never prompt; use defaults for unset values."
    ),
) -> None:
    """Convert images under the configured input directory.

    Settings are taken from command-line flags first, then the config file,
    then an interactive prompt.
    """
    debug: bool = bool(ctx.obj.get("debug", False))

    root = Path.cwd()
    try:
        config = load_config(config_path or default_config_path(root))
    except ConfigError as exc:
        raise typer.Exit(code=_print_error(exc, debug))

    try:
        resolved_format = _resolve_setting(
            target_format, config.preferred_type, FORMAT_PROMPT, DEFAULT_FORMAT, no_input, TARGET_FORMATS
        )
        resolved_quality = _resolve_setting(
            quality, config.file_size, QUALITY_PROMPT, DEFAULT_QUALITY, no_input, QUALITY_TIERS
        )
        resolved_workdir = _resolve_setting(
            working_directory, config.working_directory, WORKDIR_PROMPT, DEFAULT_WORKDIR, no_input
        )
    except typer.Abort:
        typer.secho("Operation cancelled.", fg=typer.colors.YELLOW)
        raise typer.Exit(code=0)

    typer.secho(
        f"Converting images in {config.input} to {resolved_format} "
        f"with {resolved_quality} quality...",
        fg=typer.colors.BLUE,
    )
    try:
        from rlcp.api import convert_assets

        summary = convert_assets(
            root,
            config=config,
            target_format=resolved_format,
            quality_tier=resolved_quality,
            working_directory=resolved_workdir,
        )
    except RlcpError as exc:
        raise typer.Exit(code=_print_error(exc, debug))
    except Exception as exc:
        # Unexpected crash: still show a clean message; debug prints traceback.
        raise typer.Exit(code=_print_error(exc, debug))
    _print_summary(summary)


@app.command("status")
def status_cmd(
    lock_path: Path | None = typer.Option(
        None, "--lock", help="Path to rlcp.lock (default: ./rlcp.lock)."
    ),
) -> None:
    """List recorded conversions and flag converted files that are missing."""
    from rlcp.infrastructure.lock_store import JsonLockStore

    root = Path.cwd()
    store = JsonLockStore(lock_path) if lock_path else JsonLockStore.for_root(root)
    state = store.load()
    if not state:
        typer.echo("No conversions recorded.")
        return
    missing = 0
    for original, target in sorted(state.items()):
        if (root / target).exists():
            typer.secho(f"✓ {original} -> {target}", fg=typer.colors.GREEN)
        else:
            missing += 1
            typer.secho(f"✗ {original} -> {target} (missing)", fg=typer.colors.YELLOW)
    typer.echo(f"{len(state)} conversions recorded, {missing} missing.")


@app.command("doctor")
def doctor_cmd() -> None:
    """Print installed toolchain versions and writable image formats."""
    import importlib.metadata as metadata

    typer.echo(f"Python: {sys.version.split()[0]}")
    for module in ("pillow", "typer", "pydantic"):
        try:
            typer.echo(f"{module}: {metadata.version(module)}")
        except metadata.PackageNotFoundError:
            typer.echo(f"{module}: <not installed>")

    try:
        from rlcp.adapters.codecs import writable_formats

        formats = writable_formats()
    except ImportError:
        typer.echo("formats: <unavailable>")
        return
    supported = [name for name, ok in formats.items() if ok]
    unsupported = [name for name, ok in formats.items() if not ok]
    typer.echo(f"formats: {', '.join(supported)}")
    if unsupported:
        typer.secho(
            f"Note: Pillow cannot write {', '.join(unsupported)} on this system.",
            fg=typer.colors.YELLOW,
        )


if __name__ == "__main__":
    app()
