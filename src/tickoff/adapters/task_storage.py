"""Task collection persistence over a key-value store."""

import json
import logging

from tickoff.core.tasks import Task, deserialize_tasks, serialize_tasks
from tickoff.ports.kv_store import KeyValueStore

logger = logging.getLogger(__name__)

DEFAULT_KEY = "tasks"


class PersistenceReadFailure(Exception):
    """Raised when the stored collection cannot be read or parsed."""

    pass


class PersistenceWriteFailure(Exception):
    """Raised when the collection cannot be written."""

    pass


class KeyValueTaskStore:
    """
    Stores the whole task collection as one JSON array under a single key.

    Implements TaskStore protocol. No partial writes, no versioning: every
    save replaces the previous value.
    """

    def __init__(self, kv: KeyValueStore, key: str = DEFAULT_KEY):
        self.kv = kv
        self.key = key

    def read(self) -> list[Task]:
        """Load the saved collection, raising PersistenceReadFailure on bad data."""
        try:
            raw = self.kv.get_item(self.key)
        except (OSError, ValueError) as e:
            raise PersistenceReadFailure(f"Could not read '{self.key}': {e}") from e
        if raw is None:
            return []
        try:
            return deserialize_tasks(json.loads(raw))
        except (ValueError, RecursionError) as e:  # JSONDecodeError is a ValueError
            raise PersistenceReadFailure(f"Stored '{self.key}' is not a task list: {e}") from e

    def load(self) -> list[Task]:
        """Load the saved collection. Returns [] if nothing usable is stored."""
        try:
            tasks = self.read()
        except PersistenceReadFailure as e:
            logger.warning(f"Starting with an empty task list: {e}")
            return []
        logger.debug(f"Loaded {len(tasks)} tasks from '{self.key}'")
        return tasks

    def save(self, tasks: list[Task]) -> None:
        """Replace the saved collection with tasks."""
        payload = json.dumps(serialize_tasks(tasks), ensure_ascii=False)
        try:
            self.kv.set_item(self.key, payload)
        except (OSError, ValueError) as e:
            raise PersistenceWriteFailure(f"Could not write '{self.key}': {e}") from e
        logger.debug(f"Saved {len(tasks)} tasks to '{self.key}'")
