"""Pure task domain logic - no I/O dependencies."""

import time
from dataclasses import dataclass, replace


@dataclass
class Task:
    """A single to-do entry."""

    id: str
    text: str
    checked: bool = False

    def to_dict(self) -> dict:
        """Serialize to the stored record shape."""
        return {"id": self.id, "text": self.text, "checked": self.checked}

    @classmethod
    def from_dict(cls, data: dict) -> "Task":
        """
        Create Task from a stored record.

        Raises ValueError if the record does not have the expected shape.
        Unknown keys are ignored.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Task record must be an object, got {type(data).__name__}")
        task_id = data.get("id")
        text = data.get("text")
        checked = data.get("checked")
        if not isinstance(task_id, str) or not task_id:
            raise ValueError(f"Task record has invalid id: {task_id!r}")
        if not isinstance(text, str):
            raise ValueError(f"Task record {task_id} has invalid text: {text!r}")
        if not isinstance(checked, bool):
            raise ValueError(f"Task record {task_id} has invalid checked flag: {checked!r}")
        return cls(id=task_id, text=text, checked=checked)


class TaskIdGenerator:
    """
    Millisecond-timestamp ids that never repeat.

    Each id is max(now_ms, last + 1), so two tasks created in the same
    millisecond still get distinct ids, and an id freed by a delete is
    never handed out again.
    """

    def __init__(self, clock=None, last_issued: int = 0):
        self._clock = clock or (lambda: time.time_ns() // 1_000_000)
        self.last_issued = last_issued

    @classmethod
    def seeded_from(cls, tasks: list[Task], clock=None) -> "TaskIdGenerator":
        """Start above the largest numeric id already in the collection."""
        numeric = [int(t.id) for t in tasks if t.id.isascii() and t.id.isdigit()]
        return cls(clock=clock, last_issued=max(numeric, default=0))

    def next_id(self) -> str:
        self.last_issued = max(int(self._clock()), self.last_issued + 1)
        return str(self.last_issued)


def is_valid_text(text: str) -> bool:
    """New tasks need something other than whitespace."""
    return bool(text and text.strip())


def find_index(tasks: list[Task], task_id: str) -> int | None:
    """Position of the task with this id, or None."""
    for i, t in enumerate(tasks):
        if t.id == task_id:
            return i
    return None


def find_task(tasks: list[Task], task_id: str) -> Task | None:
    index = find_index(tasks, task_id)
    return tasks[index] if index is not None else None


def snapshot(tasks: list[Task]) -> list[Task]:
    """Detached copy of the collection; callers may mutate it freely."""
    return [replace(t) for t in tasks]


def serialize_tasks(tasks: list[Task]) -> list[dict]:
    """Collection -> list of stored records, in display order."""
    return [t.to_dict() for t in tasks]


def deserialize_tasks(data: object) -> list[Task]:
    """
    Stored records -> collection.

    Raises ValueError on any shape mismatch, including duplicate ids.
    Pure function - no I/O.
    """
    if not isinstance(data, list):
        raise ValueError(f"Task collection must be a list, got {type(data).__name__}")
    tasks = [Task.from_dict(item) for item in data]
    seen: set[str] = set()
    for t in tasks:
        if t.id in seen:
            raise ValueError(f"Duplicate task id: {t.id}")
        seen.add(t.id)
    return tasks
