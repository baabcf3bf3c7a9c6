"""
Workspace context — what the host (editor or CLI) knows about the user's workspace.

Passed explicitly into every resolver and orchestrator call:

    - CLI:     main.py builds it from --workspace / --selection
    - Editor:  the integration builds it from its active editor and folders
    - Tests:   Workspace(roots=[tmp_path])
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class Workspace:
    """Active selection and workspace roots."""

    selection: Path | None = None
    roots: tuple[Path, ...] = field(default_factory=tuple)

    @property
    def first_root(self) -> Path | None:
        """First workspace root, or None when there is no workspace."""
        return self.roots[0] if self.roots else None

    def execution_dir(self) -> str:
        """Directory external processes run in: first root, else cwd."""
        root = self.first_root
        return str(root) if root is not None else os.getcwd()
