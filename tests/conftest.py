from collections.abc import Callable
from pathlib import Path

import httpx
import pytest

from nexora.adapters.kv_store import InMemoryKeyValueStore
from nexora.components.api_client import ApiClient
from nexora.rules.loader import load_rules
from nexora.rules.models import Rules

PROJECT_ROOT = Path(__file__).parent.parent

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture(autouse=True)
def clear_endpoint_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer environment overrides out of tests."""
    for name in ("NEXORA_API_URL", "NEXORA_BILLING_URL", "NEXORA_RULES_PATH", "NEXORA_STATE_PATH"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def rules() -> Rules:
    """The REAL rules.yaml from the project root."""
    rules_path = PROJECT_ROOT / "rules.yaml"
    if not rules_path.exists():
        raise FileNotFoundError(f"Rules not found at {rules_path}")
    return load_rules(rules_path)


@pytest.fixture
def storage() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def make_client(
    rules: Rules, storage: InMemoryKeyValueStore
) -> Callable[[Handler], ApiClient]:
    """ApiClient factory answering every request with `handler`."""

    def factory(handler: Handler) -> ApiClient:
        return ApiClient.from_rules(rules.api, storage, transport=httpx.MockTransport(handler))

    return factory
