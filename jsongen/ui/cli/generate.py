"""
CLI commands for code generation.

Thin wrappers over ``jsongen.core.use_cases.generate``.
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
def generate() -> None:
    """Generate — run dart_json_gen on a file or folder."""


def _generate(ctx: click.Context, path: str | None, mode: TargetMode, as_json: bool) -> None:
    from jsongen.core.use_cases.generate import GenerationOrchestrator

    settings = get_settings(ctx)
    orchestrator = GenerationOrchestrator(get_workspace(ctx), settings=settings)

    target = orchestrator.resolve_target(path, mode)
    if isinstance(target, ResolutionFailure):
        outcome = OperationOutcome.from_failure(target)
        if as_json:
            echo_json(outcome.to_dict())
        else:
            render_failure(target)
        finish(outcome)
        return

    info = target.input_info(mode)
    outcome = orchestrator.run(
        target,
        mode,
        verbose=is_verbose(ctx),
        log=make_log(ctx, as_json),
        progress=make_progress(ctx, as_json),
    )

    if as_json:
        data = outcome.to_dict()
        data["input_path"] = info.input_path
        echo_json(data)
        finish(outcome)
        return

    if outcome.failure:
        render_failure(outcome.failure)
        finish(outcome)
        return

    if settings.show_notifications and not ctx.obj.get("quiet"):
        label = (
            f"Generated code for: {info.display_name}"
            if mode == "file"
            else f"Generated code for folder: {info.display_name}"
        )
        click.secho(f"✅ {label}", fg="green")


@generate.command("file")
@click.argument("path", required=False, type=click.Path())
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def generate_file(ctx: click.Context, path: str | None, as_json: bool) -> None:
    """Generate code for a single .dart file (default: the selection)."""
    _generate(ctx, path, "file", as_json)


@generate.command("folder")
@click.argument("path", required=False, type=click.Path())
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def generate_folder(ctx: click.Context, path: str | None, as_json: bool) -> None:
    """Generate code for every source file in a folder (default: workspace root)."""
    _generate(ctx, path, "folder", as_json)
