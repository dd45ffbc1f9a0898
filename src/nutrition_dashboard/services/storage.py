"""Key-value storage abstractions."""

from dataclasses import dataclass
from typing import Protocol


class KeyValueStore(Protocol):
    """Storage interface for JSON blobs keyed by name."""

    def read(self, key: str) -> str | None:
        """Return the stored blob, or None when absent."""

    def write(self, key: str, value: str) -> None:
        """Store a blob, replacing any previous value."""


@dataclass
class InMemoryKeyValueStore(KeyValueStore):
    """In-memory store for local runs and tests."""

    _entries: dict[str, str]

    def __init__(self, entries: dict[str, str] | None = None) -> None:
        self._entries = dict(entries or {})

    def read(self, key: str) -> str | None:
        """Return the blob stored under key."""
        return self._entries.get(key)

    def write(self, key: str, value: str) -> None:
        """Store a blob under key."""
        self._entries[key] = value
