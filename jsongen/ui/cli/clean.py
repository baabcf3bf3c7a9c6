"""
CLI commands for removing generated files.

Thin wrappers over ``jsongen.core.use_cases.clean``.
"""

from __future__ import annotations

import click

from jsongen.core.models.outcome import OperationOutcome, ResolutionFailure
from jsongen.core.models.target import TargetMode
from jsongen.ui.cli.helpers import (
    echo_json,
    finish,
    get_settings,
    get_workspace,
    is_verbose,
    make_log,
    make_progress,
    render_failure,
)


@click.group()
def clean() -> None:
    """Clean — delete files generated by dart_json_gen."""


def _clean(
    ctx: click.Context,
    path: str | None,
    mode: TargetMode,
    yes: bool,
    dry_run: bool,
    as_json: bool,
) -> None:
    from jsongen.core.use_cases.clean import CleanupOrchestrator

    settings = get_settings(ctx)
    orchestrator = CleanupOrchestrator(get_workspace(ctx), settings=settings)
    verbose = is_verbose(ctx)
    log = make_log(ctx, as_json)

    if dry_run:
        target = orchestrator.resolve_target(path, mode)
        if isinstance(target, ResolutionFailure):
            outcome = OperationOutcome.from_failure(target)
            if as_json:
                echo_json(outcome.to_dict())
            else:
                render_failure(target)
            finish(outcome)
            return

        artifacts = orchestrator.plan(target, mode, verbose=verbose, log=log)
        if as_json:
            echo_json({"dry_run": True, **artifacts.model_dump()})
            return
        if artifacts.is_empty:
            click.secho("ℹ️  No generated files found to clean", fg="cyan")
            return
        click.secho(
            f"🧹 Would delete {artifacts.count} file(s) ({artifacts.suffix}):",
            fg="cyan", bold=True,
        )
        for p in artifacts.paths:
            click.echo(f"   • {p}")
        return

    def confirm(message: str) -> bool:
        if yes:
            return True
        return click.confirm(message, default=False, err=True)

    outcome = orchestrator.clean(
        path,
        mode,
        confirm=confirm,
        verbose=verbose,
        log=log,
        progress=make_progress(ctx, as_json),
    )

    if as_json:
        echo_json(outcome.to_dict())
        finish(outcome)
        return

    if outcome.failure:
        render_failure(outcome.failure)
        finish(outcome)
        return

    if outcome.nothing_to_do:
        click.secho("ℹ️  No generated files found to clean", fg="cyan")
        return

    if outcome.cancelled:
        click.echo("Cancelled.")
        return

    quiet = ctx.obj.get("quiet")
    if settings.show_notifications and not quiet:
        click.secho(f"✅ Deleted {outcome.succeeded_count} generated file(s)", fg="green")

    if outcome.failed_items:
        click.secho(
            f"⚠️  {outcome.failed_count} file(s) could not be deleted:",
            fg="yellow",
        )
        for item in outcome.failed_items:
            click.echo(f"   • {item.path}: {item.reason}")
        finish(outcome)


_yes = click.option("--yes", "-y", is_flag=True, help="Don't ask for confirmation.")
_dry_run = click.option("--dry-run", is_flag=True, help="Only list the files that would be deleted.")
_json = click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")


@clean.command("file")
@click.argument("path", required=False, type=click.Path())
@_yes
@_dry_run
@_json
@click.pass_context
def clean_file(ctx: click.Context, path: str | None, yes: bool, dry_run: bool, as_json: bool) -> None:
    """Delete the generated file of a single .dart file."""
    _clean(ctx, path, "file", yes, dry_run, as_json)


@clean.command("folder")
@click.argument("path", required=False, type=click.Path())
@_yes
@_dry_run
@_json
@click.pass_context
def clean_folder(ctx: click.Context, path: str | None, yes: bool, dry_run: bool, as_json: bool) -> None:
    """Delete every generated file under a folder."""
    _clean(ctx, path, "folder", yes, dry_run, as_json)
