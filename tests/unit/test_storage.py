"""
Client storage adapter tests.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from nexora.adapters.kv_store import (
    FletClientStorage,
    InMemoryKeyValueStore,
    JsonFileKeyValueStore,
)
from nexora.components.api_client import ApiClient
from nexora.components.membership import MembershipState
from nexora.core.ports.storage import KeyValueStorePort


class FakeClientStorage:
    """Mimics flet's page.client_storage surface."""

    def __init__(self) -> None:
        self.data: dict[str, object] = {}

    def get(self, key: str) -> object:
        return self.data.get(key)

    def set(self, key: str, value: object) -> bool:
        self.data[key] = value
        return True

    def contains_key(self, key: str) -> bool:
        return key in self.data

    def remove(self, key: str) -> None:
        del self.data[key]


@pytest.fixture(params=["memory", "json", "flet"])
def store(request: pytest.FixtureRequest, tmp_path: Path) -> KeyValueStorePort:
    if request.param == "memory":
        return InMemoryKeyValueStore()
    if request.param == "json":
        return JsonFileKeyValueStore(tmp_path / "state" / "store.json")
    return FletClientStorage(FakeClientStorage())


class TestKeyValueContract:
    def test_missing_key(self, store: KeyValueStorePort) -> None:
        assert store.get("absent") is None

    def test_set_get_remove(self, store: KeyValueStorePort) -> None:
        store.set("k", "v")
        assert store.get("k") == "v"
        store.set("k", "w")
        assert store.get("k") == "w"
        store.remove("k")
        assert store.get("k") is None

    def test_remove_missing_is_noop(self, store: KeyValueStorePort) -> None:
        store.remove("never-set")


class TestJsonFileStore:
    def test_survives_new_instance(self, tmp_path: Path) -> None:
        path = tmp_path / "store.json"
        JsonFileKeyValueStore(path).set("membership:tier", "member")
        assert JsonFileKeyValueStore(path).get("membership:tier") == "member"
        assert json.loads(path.read_text()) == {"membership:tier": "member"}

    def test_corrupt_file_reads_empty(self, tmp_path: Path) -> None:
        path = tmp_path / "store.json"
        path.write_text("{not json")
        store = JsonFileKeyValueStore(path)
        assert store.get("anything") is None
        store.set("k", "v")
        assert store.get("k") == "v"

    def test_non_object_file_reads_empty(self, tmp_path: Path) -> None:
        path = tmp_path / "store.json"
        path.write_text("[1, 2]")
        assert JsonFileKeyValueStore(path).get("0") is None

    def test_no_temp_file_left_behind(self, tmp_path: Path) -> None:
        JsonFileKeyValueStore(tmp_path / "store.json").set("k", "v")
        assert [p.name for p in tmp_path.iterdir()] == ["store.json"]

    def test_non_utf8_file_reads_empty(self, tmp_path: Path) -> None:
        path = tmp_path / "store.json"
        path.write_bytes(b"\xff\xfe{not json")
        store = JsonFileKeyValueStore(path)
        assert store.get("membership:tier") is None
        assert MembershipState(store).tier == "free"

    def test_non_string_values_read_as_absent(self, tmp_path: Path) -> None:
        path = tmp_path / "store.json"
        path.write_text(json.dumps({"token": None, "count": 3, "membership:tier": "member"}))
        store = JsonFileKeyValueStore(path)

        assert store.get("token") is None
        assert store.get("count") is None
        assert store.get("membership:tier") == "member"

        client = ApiClient("http://api.test/api", store)
        assert not client.is_authenticated()


class TestFletClientStorage:
    def test_keys_are_prefixed(self) -> None:
        backing = FakeClientStorage()
        store = FletClientStorage(backing)
        store.set("token", "abc")
        assert backing.data == {"nexora.token": "abc"}

    def test_custom_prefix(self) -> None:
        backing = FakeClientStorage()
        FletClientStorage(backing, prefix="app/").set("k", "v")
        assert "app/k" in backing.data

    def test_non_string_value_reads_as_absent(self) -> None:
        backing = FakeClientStorage()
        backing.data["nexora.token"] = 42
        assert FletClientStorage(backing).get("token") is None
