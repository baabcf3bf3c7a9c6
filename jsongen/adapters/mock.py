"""
Mock adapter — stands in for the shell or filesystem adapter in tests.

Every action succeeds unless a response was scripted for its ID. That
is how tests make a single probe miss, the generator exit non-zero, or
one deletion in a batch fail.
"""

from __future__ import annotations

from jsongen.adapters.base import Adapter, ExecutionContext
from jsongen.core.models.action import Receipt


class MockAdapter(Adapter):
    """Scriptable adapter that records every call."""

    def __init__(
        self,
        adapter_name: str = "mock",
        available: bool = True,
        default_output: str = "[mock] executed",
    ):
        self._name = adapter_name
        self._available = available
        self._default_output = default_output
        self._scripted: dict[str, Receipt] = {}
        self.call_log: list[ExecutionContext] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def call_count(self) -> int:
        return len(self.call_log)

    @property
    def called_ids(self) -> list[str]:
        """Action IDs in call order."""
        return [ctx.action.id for ctx in self.call_log]

    def is_available(self) -> bool:
        return self._available

    def set_response(self, action_id: str, receipt: Receipt) -> None:
        self._scripted[action_id] = receipt

    def set_failure(
        self,
        action_id: str,
        error: str = "Mock failure",
        stdout: str = "",
        stderr: str = "",
        return_code: int | None = 1,
    ) -> None:
        """Make ``action_id`` fail, optionally with partial process output."""
        self._scripted[action_id] = Receipt.failure(
            adapter=self._name,
            action_id=action_id,
            error=error,
            stdout=stdout,
            stderr=stderr,
            return_code=return_code,
        )

    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        return True, ""

    def execute(self, context: ExecutionContext) -> Receipt:
        self.call_log.append(context)
        scripted = self._scripted.get(context.action.id)
        if scripted is not None:
            return scripted
        return Receipt.success(
            adapter=self._name,
            action_id=context.action.id,
            output=self._default_output,
            stdout=self._default_output,
            return_code=0,
        )

    def reset(self) -> None:
        self.call_log.clear()
        self._scripted.clear()
