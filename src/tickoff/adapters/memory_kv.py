"""In-memory key-value storage adapter."""


class MemoryKeyValueStore:
    """Implements KeyValueStore protocol with a plain dict. Nothing survives the process."""

    def __init__(self, items: dict[str, str] | None = None):
        self.items: dict[str, str] = dict(items or {})

    def get_item(self, key: str) -> str | None:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.items[key] = value

    def remove_item(self, key: str) -> None:
        self.items.pop(key, None)
