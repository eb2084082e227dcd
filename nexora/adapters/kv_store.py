"""
Client storage adapters (KeyValueStorePort implementations).

- InMemoryKeyValueStore: process-local dict, used by tests
- JsonFileKeyValueStore: one JSON object on disk, used by the CLI
- FletClientStorage: flet page.client_storage (browser localStorage on web)
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class InMemoryKeyValueStore:
    """Dict-backed store."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileKeyValueStore:
    """
    Store persisted as a single JSON object file.

    The file is re-read on every get so two processes sharing a path
    see each other's writes; writes go through a temp file and os.replace.
    """

    def __init__(self, path: str | Path, *, create_dirs: bool = True) -> None:
        self.path = Path(path)
        if create_dirs:
            self.path.parent.mkdir(parents=True, exist_ok=True)

    def _read(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError):
            logger.warning(f"Client storage {self.path} is corrupt, starting empty")
            return {}
        if not isinstance(data, dict):
            return {}
        # Only string values are stored; anything else (null, numbers) reads as absent.
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def _write(self, data: dict[str, str]) -> None:
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, sort_keys=True)
        os.replace(tmp_path, self.path)

    def get(self, key: str) -> str | None:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def remove(self, key: str) -> None:
        data = self._read()
        if data.pop(key, None) is not None:
            self._write(data)


class FletClientStorage:
    """
    Adapter over flet's `page.client_storage`.

    Values are namespaced with `prefix` because flet shares one storage
    between all apps served from the same origin.
    """

    def __init__(self, client_storage: Any, prefix: str = "nexora.") -> None:
        self._storage = client_storage
        self._prefix = prefix

    def _key(self, key: str) -> str:
        return f"{self._prefix}{key}"

    def get(self, key: str) -> str | None:
        value = self._storage.get(self._key(key))
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        self._storage.set(self._key(key), value)

    def remove(self, key: str) -> None:
        if self._storage.contains_key(self._key(key)):
            self._storage.remove(self._key(key))
