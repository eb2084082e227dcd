"""
End-to-end reader and creator journeys against a mocked backend.

Each test wires the real components together (ApiClient over
httpx.MockTransport, MembershipState, gate, editor, dashboards).
"""

from __future__ import annotations

import json
from collections.abc import Callable
from datetime import UTC, datetime
from pathlib import Path

import httpx
import pytest

from nexora.adapters.billing_http import HttpBillingAdapter
from nexora.adapters.kv_store import InMemoryKeyValueStore, JsonFileKeyValueStore
from nexora.adapters.post_publisher import ApiPostPublisher
from nexora.components.api_client import ApiClient
from nexora.components.dashboards import (
    DashboardSession,
    creator_stats,
    load_creator_dashboard,
    load_reader_dashboard,
)
from nexora.components.dataset import DatasetConfig, generate_datasets
from nexora.components.editor import DocumentEditor
from nexora.components.gate import gate_post, load_config_from_rules
from nexora.components.membership import BillingConfirmation, MembershipState
from nexora.rules.models import Rules

PREMIUM_BODY = "".join(chr(ord("a") + i % 26) for i in range(200))


class FakeBackend:
    """Minimal in-memory REST backend for MockTransport."""

    def __init__(self) -> None:
        self.posts: list[dict] = [
            {"_id": "p1", "title": "Premium", "content": PREMIUM_BODY, "isPremium": True,
             "price": 5.0, "status": "published", "views": 10, "likes": 1},
            {"_id": "p2", "title": "Free", "content": "open text", "status": "published", "views": 10},
        ]
        self.checkout_available = True
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        method = request.method

        if path == "/api/auth/login":
            return httpx.Response(200, json={"token": "jwt-1", "user": {"_id": "u1", "username": "ada"}})
        if path == "/api/private/dashboard":
            return httpx.Response(200, json={"username": "ada", "role": "creator"})
        if path == "/api/private/post" and method == "GET":
            return httpx.Response(200, json=self.posts)
        if path == "/api/private/post" and method == "POST":
            body = json.loads(request.content)
            post = {"_id": f"p{len(self.posts) + 1}", "title": body["title"],
                    "content": body["content"], "status": body["status"]}
            self.posts.append(post)
            return httpx.Response(201, json={"message": "created", "post": post})
        if path.startswith("/api/private/post/") and path.endswith("/like"):
            return httpx.Response(200, json={"message": "liked"})
        if path.startswith("/api/private/post/") and method == "DELETE":
            post_id = path.rsplit("/", 1)[-1]
            self.posts = [p for p in self.posts if p["_id"] != post_id]
            return httpx.Response(200, json={"message": "deleted"})
        if path == "/api/private/creator/subscribed":
            return httpx.Response(200, json=[{"_id": "s1", "subscriber": "u1", "creator": "c1", "price": 5}])
        if path == "/api/private/subscriber":
            return httpx.Response(200, json=[{"_id": "u2", "username": "bob"}])
        if path == "/api/private/bookmarks":
            return httpx.Response(200, json=[{"_id": "p2", "title": "Free"}])
        if path == "/api/billing/checkout":
            if not self.checkout_available:
                return httpx.Response(503, json={"message": "Billing offline"})
            return httpx.Response(200, json={"url": "https://checkout.test/session/1"})
        return httpx.Response(404, json={"message": f"No route {method} {path}"})


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def client(rules: Rules, storage: InMemoryKeyValueStore, backend: FakeBackend) -> ApiClient:
    return ApiClient.from_rules(rules.api, storage, transport=httpx.MockTransport(backend))


@pytest.mark.asyncio
async def test_reader_upgrade_unlocks_premium_post(
    rules: Rules, storage: InMemoryKeyValueStore, client: ApiClient
) -> None:
    await client.auth.login("ada@example.com", "pw")
    membership = MembershipState(storage, HttpBillingAdapter(client))
    gate = load_config_from_rules(rules.gate)

    posts = await client.posts.get_all_posts()
    premium = next(p for p in posts if p.is_premium)

    gated = gate_post(premium, membership.is_paid_member, gate)
    assert gated.text == PREMIUM_BODY[:100]
    assert gated.show_upgrade_prompt

    checkout = await membership.start_membership_checkout()
    assert checkout.url == "https://checkout.test/session/1"
    assert membership.tier == "free"

    membership.apply_billing_confirmation(
        BillingConfirmation(tier="member", status="active", reference="cs_1")
    )
    unlocked = gate_post(premium, membership.is_paid_member, gate)
    assert unlocked.text == PREMIUM_BODY
    assert not unlocked.show_upgrade_prompt


@pytest.mark.asyncio
async def test_checkout_failure_keeps_reader_free(
    storage: InMemoryKeyValueStore, client: ApiClient, backend: FakeBackend
) -> None:
    backend.checkout_available = False
    membership = MembershipState(storage, HttpBillingAdapter(client))

    result = await membership.start_membership_checkout()

    assert not result.success
    assert result.error_message == "Billing offline"
    assert membership.tier == "free"


@pytest.mark.asyncio
async def test_creator_writes_and_publishes(client: ApiClient, backend: FakeBackend) -> None:
    editor = DocumentEditor()
    first = editor.blocks[0]
    editor.update_block(first.id, content="Intro paragraph")
    heading = editor.add_block("heading1", first.id)
    editor.update_block(heading.id, content="Section")
    editor.add_block("divider", first.id)
    editor.set_title("My first post")

    assert [b.type for b in editor.blocks] == ["paragraph", "divider", "heading1"]

    class Clock:
        def now(self) -> datetime:
            return datetime(2025, 5, 5, tzinfo=UTC)

    result = await editor.publish(ApiPostPublisher(client), Clock())

    assert result.success
    assert result.post is not None
    assert backend.posts[-1]["title"] == "My first post"
    assert backend.posts[-1]["content"] == "Intro paragraph\n\nSection"


@pytest.mark.asyncio
async def test_dashboards_and_actions(client: ApiClient, backend: FakeBackend) -> None:
    reader = await load_reader_dashboard(client)
    assert reader.success
    assert reader.data is not None
    assert [b.id for b in reader.data.bookmarks] == ["p2"]

    creator = await load_creator_dashboard(client)
    assert creator.success
    assert creator.data is not None
    stats = creator_stats(creator.data.posts, creator.data.subscribers)
    assert stats.subscribers == 1
    assert str(stats.total_earnings) == "4.00"

    session = DashboardSession(client, reader.data.posts, reader.data.bookmarks)
    assert session.bookmarked == {"p2"}
    assert (await session.like_post("p2")).success
    assert session.get_post("p2").likes == 1  # type: ignore[union-attr]
    assert (await session.delete_post("p1")).success
    assert [p["_id"] for p in backend.posts] == ["p2"]


@pytest.mark.asyncio
async def test_dashboard_reports_failed_resource(
    rules: Rules, storage: InMemoryKeyValueStore, backend: FakeBackend
) -> None:
    def flaky(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/api/private/subscriber":
            return httpx.Response(500, json={"message": "db down"})
        return backend(request)

    client = ApiClient.from_rules(rules.api, storage, transport=httpx.MockTransport(flaky))
    result = await load_creator_dashboard(client)

    assert not result.success
    assert [e.resource for e in result.errors] == ["subscribers"]


def test_tier_persists_across_sessions(tmp_path: Path) -> None:
    path = tmp_path / "client.json"
    MembershipState(JsonFileKeyValueStore(path)).upgrade_to_creator()
    assert MembershipState(JsonFileKeyValueStore(path)).tier == "creator"


def test_dataset_generation(tmp_path: Path) -> None:
    result = generate_datasets(DatasetConfig(), tmp_path)
    assert result.success

    records = [
        json.loads(line)
        for line in (tmp_path / "nexora_train.jsonl").read_text(encoding="utf-8").splitlines()
    ]
    assert len(records) == 520
    assert records[0]["messages"][0]["content"] == "What is Nexora?"
    assert records[12]["messages"][0]["content"] == "How do I update my profile on Nexora?"
    assert all(r["source"] == "nexora" for r in records)


def test_dataset_text_matches_jsonl(tmp_path: Path) -> None:
    generate_datasets(DatasetConfig(), tmp_path)

    text = (tmp_path / "nexora_train.txt").read_text(encoding="utf-8")
    questions = [line for line in text.splitlines() if line.startswith("Q: ")]
    assert len(questions) == 520
    assert questions[0] == "Q: What is Nexora?"

    val_lines = (tmp_path / "nexora_val.jsonl").read_text(encoding="utf-8").splitlines()
    assert len(val_lines) == 60
