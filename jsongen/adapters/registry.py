"""
Adapter registry — the one door through which the engine touches the world.

Orchestrators build an ``Action`` and hand it to ``execute_action``;
they never call an adapter directly. Tests register a ``MockAdapter``
under the real adapter's name to take its place.
"""

from __future__ import annotations

import logging
import time

from jsongen.adapters.base import Adapter, ExecutionContext
from jsongen.core.models.action import Action, Receipt

logger = logging.getLogger(__name__)


class AdapterRegistry:
    """Adapters by name, plus dispatch."""

    def __init__(self) -> None:
        self._adapters: dict[str, Adapter] = {}

    def register(self, adapter: Adapter) -> None:
        """Add ``adapter``; a later registration under the same name wins."""
        self._adapters[adapter.name] = adapter
        logger.debug("Registered %r", adapter)

    def get(self, name: str) -> Adapter | None:
        return self._adapters.get(name)

    def list_adapters(self) -> list[str]:
        return list(self._adapters)

    def execute_action(self, action: Action, project_root: str | None = None) -> Receipt:
        """Run ``action`` on its adapter and time it. Never raises.

        A missing, unavailable or rejecting adapter, and an adapter that
        raises anyway, all come back as failed receipts.
        """
        started = time.monotonic()
        context = ExecutionContext(action=action, project_root=project_root, params=action.params)

        receipt = self._refuse(action, context) or self._run(action, context)
        receipt.duration_ms = int((time.monotonic() - started) * 1000)
        return receipt

    def _refuse(self, action: Action, context: ExecutionContext) -> Receipt | None:
        """A failed receipt if ``action`` cannot be attempted, else None."""
        adapter = self._adapters.get(action.adapter)
        if adapter is None:
            reason = f"No adapter registered for '{action.adapter}'"
        else:
            try:
                if not adapter.is_available():
                    reason = f"Adapter '{action.adapter}' is not available"
                else:
                    valid, message = adapter.validate(context)
                    reason = "" if valid else f"Validation failed: {message}"
            except Exception as e:
                reason = f"Validation error: {e}"

        if not reason:
            return None
        logger.debug("Refused %s: %s", action.id, reason)
        return Receipt.failure(adapter=action.adapter, action_id=action.id, error=reason)

    def _run(self, action: Action, context: ExecutionContext) -> Receipt:
        try:
            return self._adapters[action.adapter].execute(context)
        except Exception as e:
            logger.error("Adapter %s raised on %s: %s", action.adapter, action.id, e)
            return Receipt.failure(
                adapter=action.adapter,
                action_id=action.id,
                error=f"Unexpected error: {e}",
            )


def default_registry() -> AdapterRegistry:
    """Registry wired to the real shell and filesystem."""
    from jsongen.adapters.shell.command import ShellCommandAdapter
    from jsongen.adapters.shell.filesystem import FilesystemAdapter

    registry = AdapterRegistry()
    registry.register(ShellCommandAdapter())
    registry.register(FilesystemAdapter())
    return registry
