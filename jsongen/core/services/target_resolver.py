"""
Target resolution — turn "what the user pointed at" into a validated path.

Priority: explicit path > active selection > first workspace root.
Failures come back as ``ResolutionFailure`` values, not exceptions.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from jsongen.core.context import Workspace
from jsongen.core.models.outcome import ResolutionFailure
from jsongen.core.models.settings import GeneratorSettings
from jsongen.core.models.target import TargetMode, TargetResolution

logger = logging.getLogger(__name__)


class TargetResolver:
    """Resolve and validate generate/clean targets."""

    def __init__(self, workspace: Workspace, settings: GeneratorSettings | None = None):
        self._workspace = workspace
        self._settings = settings or GeneratorSettings()

    def candidate(self, explicit_path: str | Path | None, mode: TargetMode) -> Path | None:
        """The unvalidated path the operation would apply to, if any."""
        if explicit_path:
            return Path(explicit_path)

        selection = self._workspace.selection
        if selection is not None:
            return selection if mode == "file" else selection.parent

        return self._workspace.first_root

    def resolve(
        self,
        explicit_path: str | Path | None = None,
        mode: TargetMode = "folder",
    ) -> TargetResolution | ResolutionFailure:
        path = self.candidate(explicit_path, mode)
        if path is None:
            return ResolutionFailure(kind="no_target", message="No workspace folder found")

        target = os.path.abspath(path)
        if not os.path.exists(target):
            return ResolutionFailure(
                kind="path_not_found",
                message=f"Path does not exist: {target}",
                path=target,
            )

        is_file = os.path.isfile(target)
        ext = self._settings.source_extension
        if mode == "file" and is_file and not target.endswith(ext):
            return ResolutionFailure(
                kind="wrong_file_type",
                message=f"Please select a {ext} file",
                path=target,
            )

        logger.debug("Resolved %s target: %s (file=%s)", mode, target, is_file)
        return TargetResolution(target_path=target, is_file=is_file)
