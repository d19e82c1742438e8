"""Task collection storage interface."""

from typing import Protocol

from tickoff.core.tasks import Task


class TaskStore(Protocol):
    """Interface for loading and saving the whole task collection."""

    def load(self) -> list[Task]:
        """Load the saved collection. Returns [] if nothing usable is stored."""
        ...

    def save(self, tasks: list[Task]) -> None:
        """Replace the saved collection with tasks."""
        ...
