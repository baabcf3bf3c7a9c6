"""
Action and Receipt — what the engine asks an adapter to do, and what happened.

An Action is one side effect: a tool probe, the generator run, the
install command or a single file deletion. The adapter answers with a
Receipt and does not raise. A failed Receipt still carries whatever the
process printed before it failed.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field


class Action(BaseModel):
    """One requested side effect, routed to an adapter by name."""

    id: str                         # "probe:direct", "generate", "delete:<path>", ...
    adapter: str                    # "shell" or "filesystem"
    name: str = ""
    params: dict[str, Any] = Field(default_factory=dict)


class Receipt(BaseModel):
    """Result of one Action.

    ``stdout``, ``stderr`` and ``return_code`` are only meaningful for
    process actions; file actions leave them empty.
    """

    adapter: str
    action_id: str
    status: Literal["ok", "failed"] = "ok"

    output: str = ""
    error: str | None = None

    stdout: str = ""
    stderr: str = ""
    return_code: int | None = None

    duration_ms: int = 0
    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status == "ok"

    @property
    def failed(self) -> bool:
        return self.status == "failed"

    @classmethod
    def success(cls, adapter: str, action_id: str, output: str = "", **fields: Any) -> Receipt:
        return cls(adapter=adapter, action_id=action_id, output=output, **fields)

    @classmethod
    def failure(cls, adapter: str, action_id: str, error: str, **fields: Any) -> Receipt:
        return cls(adapter=adapter, action_id=action_id, status="failed", error=error, **fields)
