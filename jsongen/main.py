"""
jsongen — CLI entrypoint.

Usage:
    python -m jsongen.main --help
    jsongen generate folder lib/models
    jsongen clean file lib/models/user.dart
    jsongen tool check
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from jsongen import __version__
from jsongen.core.observability.logging_config import resolve_level, setup_logging_from_env


@click.group()
@click.version_option(version=__version__, prog_name="jsongen")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to jsongen.yml (default: auto-detect).",
)
@click.option(
    "--workspace",
    "-w",
    "workspace_roots",
    multiple=True,
    type=click.Path(exists=True, file_okay=False),
    help="Workspace root (repeatable, default: current directory).",
)
@click.option(
    "--selection",
    envvar="JSONGEN_SELECTION",
    type=click.Path(),
    default=None,
    help="Active selection, used when no PATH is given.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
    workspace_roots: tuple[str, ...],
    selection: str | None,
) -> None:
    """jsongen — run dart_json_gen and clean up generated files."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug

    # ── Logging setup (once, at process start) ──────────────────
    setup_logging_from_env(resolve_level(debug=debug, verbose=verbose, quiet=quiet))

    # ── Settings ────────────────────────────────────────────────
    from jsongen.core.config.loader import ConfigError, find_settings_file, load_settings

    settings_path = Path(config_path) if config_path else find_settings_file()
    try:
        ctx.obj["settings"] = load_settings(settings_path, search=False)
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)
    ctx.obj["settings_path"] = settings_path

    # ── Workspace ───────────────────────────────────────────────
    from jsongen.core.context import Workspace

    roots = tuple(Path(r).absolute() for r in workspace_roots) or (Path.cwd(),)
    ctx.obj["workspace"] = Workspace(
        selection=Path(selection).absolute() if selection else None,
        roots=roots,
    )


# ── Register sub-command groups ────────────────────────────────────

from jsongen.ui.cli.clean import clean  # noqa: E402
from jsongen.ui.cli.config import config  # noqa: E402
from jsongen.ui.cli.generate import generate  # noqa: E402
from jsongen.ui.cli.tool import tool  # noqa: E402

cli.add_command(generate)
cli.add_command(clean)
cli.add_command(tool)
cli.add_command(config)


if __name__ == "__main__":
    cli()
