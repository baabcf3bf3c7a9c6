"""
Cleanup use case — find generated files for a target and delete them.

Planning and execution are separate so the caller can show the plan
and ask before anything is removed. Execution deletes one file at a
time; a file that cannot be deleted is recorded and the rest of the
batch still runs.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from pathlib import Path

from jsongen.adapters.registry import AdapterRegistry, default_registry
from jsongen.core.config.convention import resolve_naming_convention
from jsongen.core.context import Workspace
from jsongen.core.models.action import Action
from jsongen.core.models.outcome import ArtifactSet, OperationOutcome, ResolutionFailure
from jsongen.core.models.settings import Settings
from jsongen.core.models.target import TargetMode, TargetResolution
from jsongen.core.observability.output_log import OutputLog
from jsongen.core.services.artifact_scanner import ArtifactScanner
from jsongen.core.services.target_resolver import TargetResolver

logger = logging.getLogger(__name__)

ProgressFn = Callable[[int, str], None]
ConfirmFn = Callable[[str], bool]

# How many file names a confirmation prompt lists before eliding
CONFIRM_LIST_LIMIT = 5


def confirmation_message(
    artifacts: ArtifactSet,
    mode: TargetMode,
    display_name: str,
) -> str:
    """Prompt text asking whether to delete ``artifacts``."""
    names = artifacts.names
    if mode == "file" and len(names) == 1:
        return f"Delete {names[0]}?"

    shown = "\n  ".join(names[:CONFIRM_LIST_LIMIT])
    message = (
        f"Delete {artifacts.count} generated file(s) in {display_name}?\n\n"
        f"Files:\n  {shown}"
    )
    hidden = artifacts.count - CONFIRM_LIST_LIMIT
    if hidden > 0:
        message += f"\n  ... and {hidden} more"
    return message


class CleanupOrchestrator:
    """Plan and execute deletion of generated files."""

    def __init__(
        self,
        workspace: Workspace,
        registry: AdapterRegistry | None = None,
        settings: Settings | None = None,
    ):
        self._workspace = workspace
        self._registry = registry or default_registry()
        self._settings = settings or Settings()
        self._scanner = ArtifactScanner(self._settings.generator)

    def resolve_target(
        self,
        path: str | Path | None,
        mode: TargetMode,
    ) -> TargetResolution | ResolutionFailure:
        return TargetResolver(self._workspace, self._settings.generator).resolve(path, mode)

    def plan(
        self,
        target: TargetResolution,
        mode: TargetMode = "folder",
        verbose: bool | None = None,
        log: OutputLog | None = None,
    ) -> ArtifactSet:
        """Generated files that cleaning ``target`` would delete.

        The naming convention is looked up from the target path the user
        gave, not from the derived input directory.
        """
        verbose = self._settings.verbose_output if verbose is None else verbose
        suffix = resolve_naming_convention(target.target_path, self._settings.generator)
        if verbose and log is not None:
            log.append_line(f"Using extension: {suffix}")

        if mode == "file" and target.is_file:
            return self._scanner.scan_file(target.target_path, suffix)
        return self._scanner.scan(target.input_info(mode).input_path, suffix)

    def _delete(self, path: str) -> tuple[bool, str]:
        try:
            receipt = self._registry.execute_action(
                Action(
                    id=f"delete:{path}",
                    name=f"Delete {os.path.basename(path)}",
                    adapter="filesystem",
                    params={"operation": "delete", "path": path},
                ),
                project_root=self._workspace.execution_dir(),
            )
        except Exception as e:
            return False, str(e)
        return receipt.ok, receipt.error or ""

    def execute(
        self,
        artifacts: ArtifactSet,
        verbose: bool | None = None,
        log: OutputLog | None = None,
        progress: ProgressFn | None = None,
    ) -> OperationOutcome:
        """Delete every planned file, in order, one at a time."""
        verbose = self._settings.verbose_output if verbose is None else verbose
        log = log if log is not None else OutputLog()

        if artifacts.is_empty:
            return OperationOutcome(nothing_to_do=True)

        outcome = OperationOutcome()
        total = artifacts.count
        for index, path in enumerate(artifacts.paths, start=1):
            deleted, reason = self._delete(path)
            if deleted:
                outcome.record_success()
                if verbose:
                    log.append_line(f"Deleted: {os.path.basename(path)}")
            else:
                outcome.record_failure(path, reason)
                log.append_line(f"Failed to delete {path}: {reason}")
                logger.warning("Failed to delete %s: %s", path, reason)

            if progress is not None:
                progress(
                    index * 100 // total,
                    f"{outcome.succeeded_count}/{total} files deleted",
                )

        return outcome

    def clean(
        self,
        path: str | Path | None,
        mode: TargetMode = "folder",
        confirm: ConfirmFn | None = None,
        verbose: bool | None = None,
        log: OutputLog | None = None,
        progress: ProgressFn | None = None,
    ) -> OperationOutcome:
        """Resolve, plan, confirm and execute in one call.

        ``confirm`` receives the prompt text; returning False cancels.
        Without a callback the plan is executed directly.
        """
        verbose = self._settings.verbose_output if verbose is None else verbose
        log = log if log is not None else OutputLog()

        target = self.resolve_target(path, mode)
        if isinstance(target, ResolutionFailure):
            return OperationOutcome.from_failure(target)

        artifacts = self.plan(target, mode, verbose=verbose, log=log)
        if artifacts.is_empty:
            return OperationOutcome(nothing_to_do=True)

        info = target.input_info(mode)
        if confirm is not None and not confirm(confirmation_message(artifacts, mode, info.display_name)):
            return OperationOutcome(cancelled=True)

        if verbose:
            log.stamp("Cleaning generated files...")
            log.append_line(f"Target: {target.target_path}")
            log.append_line(f"Files to delete: {artifacts.count}")

        outcome = self.execute(artifacts, verbose=verbose, log=log, progress=progress)

        if verbose:
            log.stamp("Cleanup complete!")
            log.separator()
        return outcome
