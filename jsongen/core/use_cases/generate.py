"""
Generation use case — run the generator once for a file or folder.

Ties together target resolution, tool discovery and the shell adapter.
The generator is a black box: we hand it ``-i <input>`` and judge the
run by its exit status alone. Output on stderr is kept as warnings.
"""

from __future__ import annotations

import logging
import shlex
import subprocess
import sys
from collections.abc import Callable
from pathlib import Path

from jsongen.adapters.registry import AdapterRegistry, default_registry
from jsongen.core.context import Workspace
from jsongen.core.models.action import Action
from jsongen.core.models.outcome import Failure, OperationOutcome, ResolutionFailure
from jsongen.core.models.settings import Settings
from jsongen.core.models.target import TargetMode, TargetResolution
from jsongen.core.observability.output_log import OutputLog
from jsongen.core.services.target_resolver import TargetResolver
from jsongen.core.services.tool_locator import ToolLocator, ToolUnavailableError

logger = logging.getLogger(__name__)

ProgressFn = Callable[[int, str], None]


def _noop_progress(percent: int, message: str) -> None:
    pass


def quote_path(path: str, platform: str | None = None) -> str:
    """Quote ``path`` for the platform's shell."""
    platform = platform or sys.platform
    if platform.startswith("win"):
        return subprocess.list2cmdline([path])
    return shlex.quote(path)


class GenerationOrchestrator:
    """One generator run per ``run()`` call; nothing is cached between calls."""

    def __init__(
        self,
        workspace: Workspace,
        registry: AdapterRegistry | None = None,
        settings: Settings | None = None,
        platform: str | None = None,
    ):
        self._workspace = workspace
        self._registry = registry or default_registry()
        self._settings = settings or Settings()
        self._platform = platform

    def resolve_target(
        self,
        path: str | Path | None,
        mode: TargetMode,
    ) -> TargetResolution | ResolutionFailure:
        return TargetResolver(self._workspace, self._settings.generator).resolve(path, mode)

    def locator(self) -> ToolLocator:
        return ToolLocator(
            self._registry,
            self._settings.generator,
            platform=self._platform,
        )

    def build_command(self, invocation: str, input_path: str) -> str:
        return f"{invocation} -i {quote_path(input_path, self._platform)}"

    def run(
        self,
        target: TargetResolution,
        mode: TargetMode = "folder",
        verbose: bool | None = None,
        log: OutputLog | None = None,
        progress: ProgressFn | None = None,
    ) -> OperationOutcome:
        """Generate for an already-resolved target."""
        gen = self._settings.generator
        verbose = self._settings.verbose_output if verbose is None else verbose
        log = log if log is not None else OutputLog()
        progress = progress or _noop_progress

        info = target.input_info(mode)
        if verbose:
            log.stamp("Starting generation...")
            log.append_line(f"Target: {info.input_path}")
            log.append_line(f"Type: {mode}")

        progress(0, f"Checking {gen.binary}...")
        try:
            invocation = self.locator().locate()
        except ToolUnavailableError as e:
            log.stamp("ERROR:")
            log.append_line(str(e))
            log.separator()
            return OperationOutcome.from_failure(Failure(
                kind="tool_unavailable",
                message=str(e),
                path=info.input_path,
                remediation=e.install_command,
            ))

        if verbose:
            if invocation.via_package_manager:
                log.append_line(f"✓ Using {invocation.command}")
            else:
                log.append_line(f"✓ Found {invocation.command} in PATH")

        progress(30, "Running generator...")
        command = self.build_command(invocation.command, info.input_path)
        if verbose:
            log.append_line(f"Command: {command}")

        cwd = self._workspace.execution_dir()
        receipt = self._registry.execute_action(
            Action(
                id="generate",
                name=f"Generate {info.display_name}",
                adapter="shell",
                params={
                    "command": command,
                    "cwd": cwd,
                    "max_output_bytes": gen.max_output_bytes,
                },
            ),
            project_root=cwd,
        )
        stdout = receipt.stdout
        stderr = receipt.stderr

        if receipt.failed:
            error = receipt.error or "Unknown error occurred"
            logger.warning("Generation failed for %s: %s", info.input_path, error)
            log.stamp("ERROR:")
            log.append_line(error)
            if stdout:
                log.append_line("Output:")
                log.append_line(stdout)
            if stderr:
                log.append_line("Error Output:")
                log.append_line(stderr)
            log.separator()
            return OperationOutcome.from_failure(Failure(
                kind="execution_failure",
                message=error,
                path=info.input_path,
                stdout=stdout,
                stderr=stderr,
            ))

        progress(70, "Processing output...")
        if stdout and verbose:
            log.append_line("Output:")
            log.append_line(stdout)
        if stderr:
            log.append_line("Warnings:")
            log.append_line(stderr)

        progress(100, "Complete!")
        if verbose:
            log.stamp("Generation complete!")
            log.separator()

        outcome = OperationOutcome(stdout=stdout, stderr=stderr)
        outcome.record_success()
        return outcome

    def generate(
        self,
        path: str | Path | None,
        mode: TargetMode = "folder",
        verbose: bool | None = None,
        log: OutputLog | None = None,
        progress: ProgressFn | None = None,
    ) -> OperationOutcome:
        """Resolve ``path`` and run the generator on it."""
        target = self.resolve_target(path, mode)
        if isinstance(target, ResolutionFailure):
            return OperationOutcome.from_failure(target)
        return self.run(target, mode, verbose=verbose, log=log, progress=progress)
