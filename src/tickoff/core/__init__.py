"""Functional core - pure business logic with no I/O."""

from .tasks import (
    Task,
    TaskIdGenerator,
    is_valid_text,
    find_task,
    snapshot,
    serialize_tasks,
    deserialize_tasks,
)
from .editing import EditDraft, EditorState, Editing, Idle, IDLE

__all__ = [
    # Tasks
    "Task",
    "TaskIdGenerator",
    "is_valid_text",
    "find_task",
    "snapshot",
    "serialize_tasks",
    "deserialize_tasks",
    # Editing
    "EditDraft",
    "EditorState",
    "Editing",
    "Idle",
    "IDLE",
]
