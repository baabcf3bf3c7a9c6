"""
Shared CLI helpers — build engine collaborators from the click context
and render structured outcomes.
"""

from __future__ import annotations

import json
import sys

import click

from jsongen.core.context import Workspace
from jsongen.core.models.outcome import Failure, OperationOutcome
from jsongen.core.models.settings import Settings
from jsongen.core.observability.output_log import OutputLog

# Exit status per failure kind; "no_target" is informational
_EXIT_CODES = {
    "no_target": 0,
    "path_not_found": 1,
    "wrong_file_type": 1,
    "tool_unavailable": 1,
    "execution_failure": 1,
    "partial_deletion_failure": 1,
}


def get_settings(ctx: click.Context) -> Settings:
    return ctx.obj.get("settings") or Settings()


def get_workspace(ctx: click.Context) -> Workspace:
    return ctx.obj.get("workspace") or Workspace()


def is_verbose(ctx: click.Context) -> bool:
    return bool(ctx.obj.get("verbose")) or get_settings(ctx).verbose_output


def make_log(ctx: click.Context, as_json: bool = False) -> OutputLog:
    """Transcript sink that echoes to stderr unless quiet or in JSON mode."""
    if ctx.obj.get("quiet") or as_json:
        return OutputLog()
    return OutputLog(echo=lambda line: click.echo(line, err=True))


def make_progress(ctx: click.Context, as_json: bool = False):
    """Progress callback printing ``percent message`` lines when verbose."""
    if as_json or ctx.obj.get("quiet") or not is_verbose(ctx):
        return None

    def report(percent: int, message: str) -> None:
        click.secho(f"   {percent:>3}% {message}", fg="bright_black", err=True)

    return report


def exit_code(outcome: OperationOutcome) -> int:
    kind = outcome.kind
    return _EXIT_CODES.get(kind, 1) if kind else 0


def echo_json(data: dict) -> None:
    click.echo(json.dumps(data, indent=2))


def render_failure(failure: Failure) -> None:
    """Print a failure the way its kind calls for."""
    if failure.kind == "no_target":
        click.secho(f"ℹ️  {failure.message}", fg="cyan")
    elif failure.kind == "wrong_file_type":
        click.secho(f"⚠️  {failure.message}", fg="yellow")
    else:
        click.secho(f"❌ {failure.message}", fg="red")

    if failure.remediation:
        click.echo()
        click.echo("   Install it with:")
        click.secho(f"     {failure.remediation}", fg="cyan")
        click.echo("   or run: jsongen tool install")

    if failure.kind == "execution_failure":
        if failure.stdout:
            click.echo()
            click.secho("   Output:", bold=True)
            click.echo(failure.stdout.rstrip())
        if failure.stderr:
            click.echo()
            click.secho("   Error Output:", bold=True)
            click.echo(failure.stderr.rstrip())


def finish(outcome: OperationOutcome) -> None:
    """Exit with the status that matches ``outcome``."""
    code = exit_code(outcome)
    if code:
        sys.exit(code)
