"""
Tool invocation model — how the generator is run on this machine.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ToolInvocation(BaseModel):
    """The command prefix used to run the generator.

    Only valid for the generation call that resolved it; tools can be
    installed or removed between calls.
    """

    model_config = ConfigDict(frozen=True)

    command: str
    via_package_manager: bool = False
    strategy: str = ""              # which discovery strategy produced it
