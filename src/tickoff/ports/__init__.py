"""Ports - interfaces/protocols for external dependencies."""

from .kv_store import KeyValueStore
from .task_store import TaskStore

__all__ = [
    "KeyValueStore",
    "TaskStore",
]
