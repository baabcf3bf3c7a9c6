"""
CLI commands for inspecting configuration.
"""

from __future__ import annotations

from pathlib import Path

import click

from jsongen.ui.cli.helpers import echo_json, get_settings


@click.group()
def config() -> None:
    """Config — effective settings and naming convention."""


@config.command("show")
@click.argument("path", required=False, type=click.Path(exists=True))
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def config_show(ctx: click.Context, path: str | None, as_json: bool) -> None:
    """Show settings and the generated-file suffix that applies at PATH."""
    from jsongen.core.config.convention import resolve_naming_convention

    settings = get_settings(ctx)
    start = Path(path) if path else Path.cwd()
    suffix = resolve_naming_convention(start, settings.generator)
    settings_file = ctx.obj.get("settings_path")

    if as_json:
        echo_json({
            "path": str(start.absolute()),
            "suffix": suffix,
            "settings_file": str(settings_file) if settings_file else None,
            "settings": settings.model_dump(),
        })
        return

    click.secho("⚙️  jsongen configuration", fg="cyan", bold=True)
    click.echo(f"   Settings file: {settings_file or '(defaults)'}")
    click.echo(f"   Path:          {start.absolute()}")
    click.echo(f"   Suffix:        {suffix}")
    gen = settings.generator
    click.echo(f"   Generator:     {gen.binary}")
    click.echo(f"   Excluded dirs: {', '.join(gen.excluded_dirs)}")
