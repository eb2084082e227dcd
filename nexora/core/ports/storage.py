"""
Client storage port.

Small key-value capability standing in for browser local storage, so the
persistence backend (flet client storage, a JSON file, memory) can be swapped
without touching the state that uses it.
"""

from __future__ import annotations

from typing import Protocol


class KeyValueStorePort(Protocol):
    """
    String key-value store scoped to one client.

    Implementations:
    - InMemoryKeyValueStore: tests
    - JsonFileKeyValueStore: CLI / desktop runs
    - FletClientStorage: flet page.client_storage
    """

    def get(self, key: str) -> str | None:
        """Return the stored value or None when absent."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        ...

    def remove(self, key: str) -> None:
        """Remove key. Removing an absent key is not an error."""
        ...
