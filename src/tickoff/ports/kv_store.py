"""Key-value storage interface."""

from typing import Protocol


class KeyValueStore(Protocol):
    """Interface for a durable string key-value medium."""

    def get_item(self, key: str) -> str | None:
        """Read the value stored under key. Returns None if not found."""
        ...

    def set_item(self, key: str, value: str) -> None:
        """Write/overwrite the value stored under key."""
        ...

    def remove_item(self, key: str) -> None:
        """Remove key. Missing keys are ignored."""
        ...
