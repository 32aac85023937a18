"""Adapters — bindings to the external programs grubutils launches.

Public re-exports for convenient access.
"""

from grubutils.adapters.base import Adapter, ExecutionContext
from grubutils.adapters.mock import MockAdapter
from grubutils.adapters.shell.command import ForegroundCommandAdapter

__all__ = [
    "Adapter",
    "ExecutionContext",
    "ForegroundCommandAdapter",
    "MockAdapter",
]
