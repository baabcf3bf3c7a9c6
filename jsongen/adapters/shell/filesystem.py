"""
Filesystem adapter — file deletion with receipts.

Reads (existence checks, directory scans, config lookups) go straight
to ``os``/``pathlib``; only removing a generated file is an Action, so
a cleanup batch can be exercised against a ``MockAdapter``.
"""

from __future__ import annotations

import logging
from pathlib import Path

from jsongen.adapters.base import Adapter, ExecutionContext
from jsongen.core.models.action import Receipt

logger = logging.getLogger(__name__)

OPERATIONS = frozenset({"delete"})


class FilesystemAdapter(Adapter):
    """Delete single files.

    Action params:
        operation (str): ``"delete"``.
        path (str): File to remove, absolute or relative to working_dir.
    """

    @property
    def name(self) -> str:
        return "filesystem"

    def is_available(self) -> bool:
        return True

    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        params = context.action.params
        operation = params.get("operation")
        if not operation:
            return False, "Missing required param: 'operation'"
        if operation not in OPERATIONS:
            return False, f"Unknown operation '{operation}'. Valid: {', '.join(sorted(OPERATIONS))}"
        if not params.get("path"):
            return False, "Missing required param: 'path'"
        return True, ""

    def execute(self, context: ExecutionContext) -> Receipt:
        target = Path(context.working_dir) / context.action.params["path"]
        action_id = context.action.id

        if target.is_dir() and not target.is_symlink():
            return Receipt.failure(
                adapter=self.name,
                action_id=action_id,
                error=f"Refusing to delete a directory: {target}",
            )

        try:
            target.unlink()
        except OSError as e:
            return Receipt.failure(adapter=self.name, action_id=action_id, error=str(e))

        logger.debug("Deleted %s", target)
        return Receipt.success(adapter=self.name, action_id=action_id, output=f"Deleted {target}")
