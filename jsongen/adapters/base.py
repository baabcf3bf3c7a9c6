"""
Adapter base — the protocol contract between the engine and the outside world.

The engine only performs external side effects (running processes,
deleting files) through adapters, never directly. That keeps every
orchestrator testable with a ``MockAdapter`` in place of the real one.
"""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel, Field

from jsongen.core.models.action import Action, Receipt


class ExecutionContext(BaseModel):
    """Everything an adapter needs to execute an action."""

    action: Action
    project_root: str | None = None
    params: dict[str, Any] = Field(default_factory=dict)

    @property
    def working_dir(self) -> str:
        """Resolved working directory for the action.

        An explicit ``cwd`` param wins, then the project root, then the
        process's own working directory.
        """
        cwd = self.params.get("cwd")
        if cwd:
            return str(cwd)
        if self.project_root:
            return self.project_root
        return os.getcwd()


class Adapter(ABC):
    """A facility the engine drives through Actions: the shell or the filesystem.

    ``execute`` reports every failure in the returned Receipt. The
    registry still guards against an adapter that raises.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Registry key, e.g. 'shell' or 'filesystem'."""

    @abstractmethod
    def is_available(self) -> bool:
        """Whether the facility exists on this machine. Cheap; never raises."""

    @abstractmethod
    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        """Check params before running. Returns (ok, reason); reason is empty when ok."""

    @abstractmethod
    def execute(self, context: ExecutionContext) -> Receipt:
        """Perform the action and describe the result."""

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.name}>"
