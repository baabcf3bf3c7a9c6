"""
Tool use cases — report how the generator would be run, and install it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from jsongen.adapters.registry import AdapterRegistry, default_registry
from jsongen.core.context import Workspace
from jsongen.core.models.action import Action, Receipt
from jsongen.core.models.settings import Settings
from jsongen.core.models.tool import ToolInvocation
from jsongen.core.services.tool_locator import ToolLocator, ToolUnavailableError

logger = logging.getLogger(__name__)


@dataclass
class ToolCheckResult:
    """Result of the tool check use case."""

    invocation: ToolInvocation | None = None
    tried: list[str] = field(default_factory=list)
    install_command: str = ""
    error: str | None = None

    @property
    def available(self) -> bool:
        return self.invocation is not None

    def to_dict(self) -> dict:
        result: dict = {
            "available": self.available,
            "install_command": self.install_command,
            "tried": self.tried,
        }
        if self.invocation:
            result["invocation"] = self.invocation.model_dump()
        if self.error:
            result["error"] = self.error
        return result


def check_tool(
    settings: Settings | None = None,
    registry: AdapterRegistry | None = None,
    platform: str | None = None,
) -> ToolCheckResult:
    """Run the discovery strategies and report which one won."""
    settings = settings or Settings()
    locator = ToolLocator(
        registry or default_registry(),
        settings.generator,
        platform=platform,
    )
    result = ToolCheckResult(
        tried=[s.name for s in locator.strategies],
        install_command=locator.install_command,
    )
    try:
        result.invocation = locator.locate()
    except ToolUnavailableError as e:
        result.error = str(e)
    return result


def install_tool(
    workspace: Workspace,
    settings: Settings | None = None,
    registry: AdapterRegistry | None = None,
) -> Receipt:
    """Run the generator's install command in the workspace."""
    settings = settings or Settings()
    registry = registry or default_registry()
    command = settings.generator.install_command
    logger.info("Installing generator: %s", command)
    return registry.execute_action(
        Action(
            id="install",
            name="Install generator",
            adapter="shell",
            params={"command": command, "cwd": workspace.execution_dir()},
        ),
        project_root=workspace.execution_dir(),
    )
