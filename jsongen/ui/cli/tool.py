"""
CLI commands for the generator tool itself.

Thin wrappers over ``jsongen.core.use_cases.tool``.
"""

from __future__ import annotations

import sys

import click

from jsongen.ui.cli.helpers import echo_json, get_settings, get_workspace


@click.group()
def tool() -> None:
    """Tool — check for and install dart_json_gen."""


@tool.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def check(ctx: click.Context, as_json: bool) -> None:
    """Show how dart_json_gen would be invoked."""
    from jsongen.core.use_cases.tool import check_tool

    result = check_tool(get_settings(ctx))

    if as_json:
        echo_json(result.to_dict())
        sys.exit(0 if result.available else 1)
        return

    if result.invocation is None:
        click.secho(f"❌ {result.error}", fg="red")
        click.echo(f"   Tried: {', '.join(result.tried)}")
        click.echo("   Run: jsongen tool install")
        sys.exit(1)

    via = "package manager" if result.invocation.via_package_manager else "PATH"
    click.secho(f"✅ {result.invocation.command}", fg="green", bold=True)
    click.echo(f"   via {via} ({result.invocation.strategy})")


@tool.command()
@click.option("--yes", "-y", is_flag=True, help="Don't ask for confirmation.")
@click.pass_context
def install(ctx: click.Context, yes: bool) -> None:
    """Install dart_json_gen with the Dart package manager."""
    from jsongen.core.use_cases.tool import install_tool

    settings = get_settings(ctx)
    command = settings.generator.install_command
    if not yes and not click.confirm(f"Run '{command}'?", default=True, err=True):
        click.echo("Cancelled.")
        return

    receipt = install_tool(get_workspace(ctx), settings)
    if receipt.ok:
        click.secho("✅ Installed", fg="green")
        if receipt.output:
            click.echo(receipt.output)
        return

    click.secho(f"❌ {receipt.error}", fg="red")
    stderr = receipt.stderr
    if stderr:
        click.echo(stderr.rstrip())
    sys.exit(1)
