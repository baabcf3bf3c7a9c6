"""
Tool discovery — find a usable way to run the generator.

Strategies are tried in order and the first one whose probe succeeds
wins:

    1. direct      — the binary is on PATH (``which`` / ``where``)
    2. pub-global  — ``dart pub global run <pkg>:<binary> --help`` works

Every probe is a single shell action. A failed receipt, or anything a
probe raises, only means "not available here"; the next strategy runs.
When all of them fail, ``ToolUnavailableError`` carries the exact
install command so the UI can offer it without rebuilding it.

Probes run in the process's working directory. Whether the tool is
installed does not depend on where the workspace is.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from dataclasses import dataclass

from jsongen.adapters.registry import AdapterRegistry
from jsongen.core.models.action import Action
from jsongen.core.models.settings import GeneratorSettings
from jsongen.core.models.tool import ToolInvocation

logger = logging.getLogger(__name__)


class ToolUnavailableError(Exception):
    """No discovery strategy found the generator."""

    def __init__(self, binary: str, install_command: str, tried: list[str]):
        self.binary = binary
        self.install_command = install_command
        self.tried = tried
        super().__init__(
            f"{binary} not found. Please install it with: {install_command}"
        )


@dataclass(frozen=True)
class Strategy:
    """One way of running the generator, and how to check it works."""

    name: str
    probe_command: str
    invocation: str
    via_package_manager: bool


def presence_probe(binary: str, platform: str | None = None) -> str:
    """Command that succeeds iff ``binary`` is on PATH."""
    platform = platform or sys.platform
    if platform.startswith("win"):
        return f"where {binary}"
    return f"which {binary}"


def default_strategies(
    settings: GeneratorSettings,
    platform: str | None = None,
) -> list[Strategy]:
    return [
        Strategy(
            name="direct",
            probe_command=presence_probe(settings.binary, platform),
            invocation=settings.binary,
            via_package_manager=False,
        ),
        Strategy(
            name="pub-global",
            probe_command=f"{settings.package_runner} {settings.help_flag}",
            invocation=settings.package_runner,
            via_package_manager=True,
        ),
    ]


class ToolLocator:
    """Resolve a ``ToolInvocation`` fresh on every call."""

    def __init__(
        self,
        registry: AdapterRegistry,
        settings: GeneratorSettings | None = None,
        platform: str | None = None,
        strategies: list[Strategy] | None = None,
    ):
        self._registry = registry
        self._settings = settings or GeneratorSettings()
        self._strategies = strategies or default_strategies(self._settings, platform)

    @property
    def install_command(self) -> str:
        return self._settings.install_command

    @property
    def strategies(self) -> list[Strategy]:
        return list(self._strategies)

    def probe(self, strategy: Strategy) -> bool:
        """Run one strategy's probe. Never raises."""
        try:
            receipt = self._registry.execute_action(
                Action(
                    id=f"probe:{strategy.name}",
                    name=f"Probe {strategy.name}",
                    adapter="shell",
                    params={
                        "command": strategy.probe_command,
                        "timeout": self._settings.probe_timeout,
                    },
                ),
            )
        except Exception as e:
            logger.debug("Probe %s raised: %s", strategy.name, e)
            return False

        logger.debug(
            "Probe %s (%s): %s", strategy.name, strategy.probe_command,
            "ok" if receipt.ok else receipt.error,
        )
        return receipt.ok

    def attempts(self) -> list[Callable[[], ToolInvocation | None]]:
        """Independent attempt functions, in priority order."""

        def attempt(strategy: Strategy) -> Callable[[], ToolInvocation | None]:
            def run() -> ToolInvocation | None:
                if not self.probe(strategy):
                    return None
                return ToolInvocation(
                    command=strategy.invocation,
                    via_package_manager=strategy.via_package_manager,
                    strategy=strategy.name,
                )
            return run

        return [attempt(s) for s in self._strategies]

    def locate(self) -> ToolInvocation:
        """Return the first working invocation.

        Raises:
            ToolUnavailableError: If every strategy's probe failed.
        """
        for run in self.attempts():
            invocation = run()
            if invocation is not None:
                logger.info("Using %s (%s)", invocation.command, invocation.strategy)
                return invocation

        raise ToolUnavailableError(
            binary=self._settings.binary,
            install_command=self._settings.install_command,
            tried=[s.name for s in self._strategies],
        )
