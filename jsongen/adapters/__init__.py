"""Adapters — bindings for external processes and the filesystem.

Public re-exports for convenient access.
"""

from jsongen.adapters.base import Adapter, ExecutionContext
from jsongen.adapters.mock import MockAdapter
from jsongen.adapters.registry import AdapterRegistry, default_registry

__all__ = [
    "Adapter",
    "AdapterRegistry",
    "ExecutionContext",
    "MockAdapter",
    "default_registry",
]
