"""
Shared test fixtures and configuration.
"""

from pathlib import Path

import pytest

from jsongen.adapters.mock import MockAdapter
from jsongen.adapters.registry import AdapterRegistry
from jsongen.core.context import Workspace


@pytest.fixture
def workspace(tmp_path: Path) -> Workspace:
    """A workspace rooted at the test's temp directory, nothing selected."""
    return Workspace(roots=(tmp_path,))


@pytest.fixture
def shell() -> MockAdapter:
    """Mock shell: every probe and generator run succeeds by default."""
    return MockAdapter(adapter_name="shell")


@pytest.fixture
def registry(shell: MockAdapter) -> AdapterRegistry:
    """Registry with the mock shell and the real filesystem adapter."""
    from jsongen.adapters.shell.filesystem import FilesystemAdapter

    reg = AdapterRegistry()
    reg.register(shell)
    reg.register(FilesystemAdapter())
    return reg


def make_tree(root: Path, files: dict[str, str]) -> dict[str, Path]:
    """Create ``files`` (relative path -> content) under ``root``."""
    created = {}
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        created[rel] = path
    return created
