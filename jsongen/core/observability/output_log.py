"""
Output log — the user-facing transcript of a generate/clean run.

An ``OutputLog`` is created by the caller and handed to each
orchestrator call; there is no process-wide output channel. Lines are
kept in memory (for tests and for "show output" in a UI), forwarded to
an optional echo callback, and mirrored to the ``jsongen.output``
logger at INFO.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

logger = logging.getLogger("jsongen.output")

SEPARATOR = "---"


class OutputLog:
    """Append-only line sink."""

    def __init__(self, echo: Callable[[str], None] | None = None) -> None:
        self._lines: list[str] = []
        self._echo = echo

    @property
    def lines(self) -> list[str]:
        return list(self._lines)

    @property
    def text(self) -> str:
        return "\n".join(self._lines)

    def append_line(self, line: str) -> None:
        self._lines.append(line)
        logger.info("%s", line)
        if self._echo is not None:
            self._echo(line)

    def stamp(self, message: str) -> None:
        """Append ``message`` prefixed with the local time."""
        self.append_line(f"[{datetime.now().strftime('%H:%M:%S')}] {message}")

    def separator(self) -> None:
        self.append_line(SEPARATOR)

    def clear(self) -> None:
        self._lines.clear()
