"""
Outcome models — structured results of resolution, generation and cleanup.

Nothing in the engine surfaces a failure as an uncaught exception.
Every failure the user should hear about is one of the ``FailureKind``
values below, carried in a ``Failure`` and rendered by the UI layer.
"""

from __future__ import annotations

import os
from typing import Literal

from pydantic import BaseModel, Field

FailureKind = Literal[
    "no_target",                  # nothing to operate on (info)
    "path_not_found",             # stale or invalid path (error)
    "wrong_file_type",            # not a source file (warning)
    "tool_unavailable",           # generator not found (error + remediation)
    "execution_failure",          # generator exited abnormally (error + output)
    "partial_deletion_failure",   # some artifacts could not be deleted
]


class Failure(BaseModel):
    """A single structured failure."""

    kind: FailureKind
    message: str
    path: str | None = None
    remediation: str | None = None   # command the user can run to fix it
    stdout: str = ""
    stderr: str = ""


class ResolutionFailure(Failure):
    """Why a target could not be resolved."""


class FailedItem(BaseModel):
    """One item of a batch that failed."""

    path: str
    reason: str


class ArtifactSet(BaseModel):
    """Generated files found for a target, in traversal order."""

    paths: list[str] = Field(default_factory=list)
    suffix: str = ""
    root: str = ""

    @property
    def count(self) -> int:
        return len(self.paths)

    @property
    def is_empty(self) -> bool:
        return not self.paths

    @property
    def names(self) -> list[str]:
        return [os.path.basename(p) for p in self.paths]


class OperationOutcome(BaseModel):
    """Accumulated result of a generation run or a deletion batch.

    A batch never stops on a single failed item: each failure lands in
    ``failed_items`` and the remaining items are still processed.
    ``failure`` is set when the operation as a whole could not run; a
    batch with failed items reports ``partial_deletion_failure`` as its
    ``kind`` while still counting what succeeded.
    """

    succeeded_count: int = 0
    failed_items: list[FailedItem] = Field(default_factory=list)
    failure: Failure | None = None
    nothing_to_do: bool = False     # empty plan, not an error
    cancelled: bool = False         # user declined confirmation

    # Captured generator streams on success (stderr may hold warnings)
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.failure is None and not self.failed_items

    @property
    def failed_count(self) -> int:
        return len(self.failed_items)

    @property
    def kind(self) -> FailureKind | None:
        if self.failure is not None:
            return self.failure.kind
        if self.failed_items:
            return "partial_deletion_failure"
        return None

    @classmethod
    def from_failure(cls, failure: Failure) -> OperationOutcome:
        return cls(failure=failure)

    def record_success(self) -> None:
        self.succeeded_count += 1

    def record_failure(self, path: str, reason: str) -> None:
        self.failed_items.append(FailedItem(path=path, reason=reason))

    def to_dict(self) -> dict:
        result = self.model_dump()
        result["ok"] = self.ok
        result["kind"] = self.kind
        return result
