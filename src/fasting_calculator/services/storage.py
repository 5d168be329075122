"""Key-value storage abstractions."""

from dataclasses import dataclass
from typing import Protocol


class KeyValueStore(Protocol):
    """Durable string storage keyed by name."""

    def get(self, key: str) -> str | None:
        """Return the stored value, or None if the key has never been set."""

    def set(self, key: str, value: str) -> None:
        """Store a value, replacing any previous one."""


@dataclass
class InMemoryKeyValueStore(KeyValueStore):
    """In-memory store, used for tests and throwaway sessions."""

    _entries: dict[str, str]

    def __init__(self) -> None:
        self._entries = {}

    def get(self, key: str) -> str | None:
        """Return the stored value if present."""
        return self._entries.get(key)

    def set(self, key: str, value: str) -> None:
        """Store a value."""
        self._entries[key] = value

    def keys(self) -> list[str]:
        """Return stored keys in insertion order."""
        return list(self._entries)
