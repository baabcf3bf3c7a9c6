"""
Shell command adapter — run a command line and keep everything it printed.

Used for tool probes, the generator run and the install command. The
receipt always carries stdout, stderr and the exit status, on success
as well as on failure: stderr on a successful run is how the generator
reports warnings.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
import time
from pathlib import Path

from jsongen.adapters.base import Adapter, ExecutionContext
from jsongen.core.models.action import Receipt

logger = logging.getLogger(__name__)


def _text(data: str | bytes | None) -> str:
    if isinstance(data, bytes):
        return data.decode("utf-8", errors="replace")
    return data or ""


def _clip(stream: str, limit: int) -> str | None:
    """``stream`` cut to ``limit`` bytes, or None if it fits."""
    data = stream.encode("utf-8")
    if len(data) <= limit:
        return None
    return data[:limit].decode("utf-8", errors="ignore")


class ShellCommandAdapter(Adapter):
    """Run shell commands.

    Action params:
        command (str): Command line, run through the platform shell.
        cwd (str): Working directory (default: context.working_dir).
        timeout (float | None): Seconds before the process is killed.
        max_output_bytes (int | None): Limit applied to stdout and to
            stderr separately. A run where either stream is longer fails,
            keeping that stream up to the limit.
    """

    @property
    def name(self) -> str:
        return "shell"

    def is_available(self) -> bool:
        return shutil.which("sh") is not None or shutil.which("cmd") is not None

    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        if not context.action.params.get("command"):
            return False, "Missing required param: 'command'"
        if not Path(context.working_dir).is_dir():
            return False, f"Working directory does not exist: {context.working_dir}"
        return True, ""

    def execute(self, context: ExecutionContext) -> Receipt:
        params = context.action.params
        command = params["command"]
        timeout = params.get("timeout")
        limit = params.get("max_output_bytes")
        action_id = context.action.id

        logger.debug("Running %s in %s", command, context.working_dir)
        started = time.monotonic()
        try:
            proc = subprocess.run(
                command,
                shell=True,
                cwd=context.working_dir,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                timeout=timeout,
            )
        except subprocess.TimeoutExpired as e:
            return Receipt.failure(
                adapter=self.name,
                action_id=action_id,
                error=f"Command timed out after {timeout}s",
                stdout=_text(e.stdout),
                stderr=_text(e.stderr),
                metadata={"command": command},
            )
        except OSError as e:
            return Receipt.failure(
                adapter=self.name,
                action_id=action_id,
                error=f"Could not start command: {e}",
                metadata={"command": command},
            )

        fields = {
            "stdout": proc.stdout or "",
            "stderr": proc.stderr or "",
            "return_code": proc.returncode,
            "duration_ms": int((time.monotonic() - started) * 1000),
            "metadata": {"command": command},
        }

        if limit:
            clipped = {key: _clip(fields[key], limit) for key in ("stdout", "stderr")}
            over = [key for key, text in clipped.items() if text is not None]
            if over:
                for key in over:
                    fields[key] = clipped[key]
                return Receipt.failure(
                    adapter=self.name,
                    action_id=action_id,
                    error=f"Command {' and '.join(over)} exceeded {limit} bytes",
                    **fields,
                )

        if proc.returncode != 0:
            return Receipt.failure(
                adapter=self.name,
                action_id=action_id,
                error=f"Command failed (exit {proc.returncode}): {command}",
                **fields,
            )

        return Receipt.success(
            adapter=self.name,
            action_id=action_id,
            output=fields["stdout"].strip(),
            **fields,
        )
