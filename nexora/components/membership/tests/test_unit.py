"""
Membership component unit tests.

Tier transitions, persistence, billing redirects and confirmations.
"""

from __future__ import annotations

import pytest

from nexora.adapters.billing_stub import BillingStubAdapter
from nexora.adapters.kv_store import InMemoryKeyValueStore
from nexora.components.membership import (
    DEFAULT_STORAGE_KEY,
    BillingConfirmation,
    MembershipState,
    is_paid,
    parse_tier,
)
from nexora.core.ports.billing import BillingUnavailableError

# --- Mock Implementations ---


class FailingBilling:
    """Billing collaborator that always fails with the given reason."""

    def __init__(self, reason: str = "http_error") -> None:
        self.reason = reason

    async def create_checkout_url(self) -> str:
        raise BillingUnavailableError("Checkout down", reason=self.reason)  # type: ignore[arg-type]

    async def create_portal_url(self) -> str:
        raise BillingUnavailableError("Portal down", reason=self.reason)  # type: ignore[arg-type]


# --- Fixtures ---


@pytest.fixture
def storage() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def membership(storage: InMemoryKeyValueStore) -> MembershipState:
    return MembershipState(storage)


# --- Tier parsing ---


class TestParseTier:
    @pytest.mark.parametrize("value", ["member", "creator", "free"])
    def test_known_values(self, value: str) -> None:
        assert parse_tier(value) == value

    @pytest.mark.parametrize("value", [None, "", "premium", "MEMBER", "admin"])
    def test_unknown_values_are_free(self, value: str | None) -> None:
        assert parse_tier(value) == "free"

    def test_is_paid(self) -> None:
        assert not is_paid("free")
        assert is_paid("member")
        assert is_paid("creator")


# --- Transitions ---


class TestTransitions:
    def test_starts_free_with_empty_storage(self, membership: MembershipState) -> None:
        assert membership.tier == "free"
        assert membership.get_tier() == "free"
        assert not membership.is_paid_member

    def test_restores_persisted_tier(self) -> None:
        storage = InMemoryKeyValueStore({DEFAULT_STORAGE_KEY: "creator"})
        assert MembershipState(storage).tier == "creator"

    def test_corrupt_persisted_value_reads_as_free(self) -> None:
        storage = InMemoryKeyValueStore({DEFAULT_STORAGE_KEY: "gold"})
        assert MembershipState(storage).tier == "free"

    def test_upgrade_to_member(
        self, membership: MembershipState, storage: InMemoryKeyValueStore
    ) -> None:
        assert membership.upgrade_to_member() == "member"
        assert membership.is_paid_member
        assert storage.get(DEFAULT_STORAGE_KEY) == "member"

    def test_upgrade_to_creator_from_member(self, membership: MembershipState) -> None:
        membership.upgrade_to_member()
        assert membership.upgrade_to_creator() == "creator"
        assert membership.is_paid_member

    def test_cancel_resets_to_free(
        self, membership: MembershipState, storage: InMemoryKeyValueStore
    ) -> None:
        membership.upgrade_to_creator()
        assert membership.cancel_membership() == "free"
        assert not membership.is_paid_member
        assert storage.get(DEFAULT_STORAGE_KEY) == "free"

    def test_upgrade_is_idempotent(self, membership: MembershipState) -> None:
        membership.upgrade_to_member()
        membership.upgrade_to_member()
        assert membership.tier == "member"

    def test_custom_storage_key(self, storage: InMemoryKeyValueStore) -> None:
        state = MembershipState(storage, storage_key="tier")
        state.upgrade_to_member()
        assert storage.get("tier") == "member"
        assert storage.get(DEFAULT_STORAGE_KEY) is None

    def test_new_session_sees_persisted_tier(self, storage: InMemoryKeyValueStore) -> None:
        MembershipState(storage).upgrade_to_member()
        assert MembershipState(storage).tier == "member"


# --- Observers ---


class TestSubscribe:
    def test_listener_notified_on_change_only(self, membership: MembershipState) -> None:
        seen: list[str] = []
        membership.subscribe(seen.append)

        membership.upgrade_to_member()
        membership.upgrade_to_member()
        membership.cancel_membership()

        assert seen == ["member", "free"]

    def test_unsubscribe(self, membership: MembershipState) -> None:
        seen: list[str] = []
        unsubscribe = membership.subscribe(seen.append)
        unsubscribe()
        unsubscribe()  # second call is harmless

        membership.upgrade_to_creator()
        assert seen == []


# --- Billing confirmations ---


class TestBillingConfirmation:
    def test_active_grants_tier(self, membership: MembershipState) -> None:
        tier = membership.apply_billing_confirmation(
            BillingConfirmation(tier="member", status="active", reference="cs_1")
        )
        assert tier == "member"
        assert membership.is_paid_member

    def test_cancellation_of_current_tier_resets(self, membership: MembershipState) -> None:
        membership.upgrade_to_member()
        membership.apply_billing_confirmation(BillingConfirmation(tier="member", status="cancelled"))
        assert membership.tier == "free"

    def test_stale_cancellation_is_ignored(self, membership: MembershipState) -> None:
        membership.upgrade_to_creator()
        membership.apply_billing_confirmation(BillingConfirmation(tier="member", status="expired"))
        assert membership.tier == "creator"


# --- Billing redirects ---


class TestCheckout:
    @pytest.mark.asyncio
    async def test_returns_checkout_url(self, storage: InMemoryKeyValueStore) -> None:
        billing = BillingStubAdapter(checkout_url="https://pay.test/c")
        membership = MembershipState(storage, billing)

        result = await membership.start_membership_checkout()

        assert result.success
        assert result.url == "https://pay.test/c"
        assert billing.checkout_calls == 1
        # A URL is not a payment
        assert membership.tier == "free"

    @pytest.mark.asyncio
    async def test_no_billing_collaborator(self, membership: MembershipState) -> None:
        result = await membership.start_membership_checkout()
        assert not result.success
        assert result.url is None
        assert result.errors[0].code == "not_configured"
        assert membership.tier == "free"

    @pytest.mark.asyncio
    async def test_failure_never_grants_tier(self, storage: InMemoryKeyValueStore) -> None:
        membership = MembershipState(storage, FailingBilling("transport_error"))

        result = await membership.start_membership_checkout()

        assert not result.success
        assert result.errors[0].code == "transport_error"
        assert result.error_message == "Checkout down"
        assert membership.tier == "free"
        assert storage.get(DEFAULT_STORAGE_KEY) is None

    @pytest.mark.asyncio
    async def test_unconfigured_stub(self, storage: InMemoryKeyValueStore) -> None:
        membership = MembershipState(storage, BillingStubAdapter())
        result = await membership.start_membership_checkout()
        assert result.errors[0].code == "not_configured"


class TestBillingPortal:
    @pytest.mark.asyncio
    async def test_returns_portal_url(self, storage: InMemoryKeyValueStore) -> None:
        membership = MembershipState(storage, BillingStubAdapter(portal_url="https://pay.test/p"))
        membership.upgrade_to_member()

        result = await membership.open_billing_portal()

        assert result.success
        assert result.url == "https://pay.test/p"
        assert membership.tier == "member"

    @pytest.mark.asyncio
    async def test_failure_leaves_tier_untouched(self, storage: InMemoryKeyValueStore) -> None:
        membership = MembershipState(storage, FailingBilling())
        membership.upgrade_to_member()

        result = await membership.open_billing_portal()

        assert not result.success
        assert result.errors[0].code == "http_error"
        assert membership.tier == "member"
