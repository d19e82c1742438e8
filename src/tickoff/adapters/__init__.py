"""Adapters - I/O implementations of ports."""

from .file_kv import FileKeyValueStore
from .memory_kv import MemoryKeyValueStore
from .task_storage import KeyValueTaskStore, PersistenceReadFailure, PersistenceWriteFailure

__all__ = [
    "FileKeyValueStore",
    "MemoryKeyValueStore",
    "KeyValueTaskStore",
    "PersistenceReadFailure",
    "PersistenceWriteFailure",
]
