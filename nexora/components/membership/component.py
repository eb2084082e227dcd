"""
Membership component.

Holds the session's membership tier, mirrored to client storage.

The tier is an explicit object handed to whichever views need it; all
mutation goes through the operations below. The simulated upgrades flip the
tier without any payment check. Deployments with a billing collaborator
should drive paid tiers through apply_billing_confirmation instead.

Checkout and billing portal share one failure policy: a failed redirect is
reported to the caller and never grants a tier.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from nexora.core.ports.billing import BillingUnavailableError

from .models import (
    DEFAULT_STORAGE_KEY,
    MembershipError,
    MembershipTier,
    RedirectOutput,
    is_paid,
    parse_tier,
)
from .ports import BillingConfirmation, BillingPort, KeyValueStorePort

logger = logging.getLogger(__name__)

TierListener = Callable[[MembershipTier], None]


class MembershipState:
    """Tier state machine: free <-> member / creator."""

    def __init__(
        self,
        storage: KeyValueStorePort,
        billing: BillingPort | None = None,
        *,
        storage_key: str = DEFAULT_STORAGE_KEY,
    ) -> None:
        self._storage = storage
        self._billing = billing
        self._storage_key = storage_key
        self._listeners: list[TierListener] = []
        self._tier: MembershipTier = parse_tier(storage.get(storage_key))

    # --- Reads ---

    @property
    def tier(self) -> MembershipTier:
        return self._tier

    def get_tier(self) -> MembershipTier:
        return self._tier

    @property
    def is_paid_member(self) -> bool:
        return is_paid(self._tier)

    # --- Simulated transitions ---

    def upgrade_to_member(self) -> MembershipTier:
        return self._set_tier("member")

    def upgrade_to_creator(self) -> MembershipTier:
        return self._set_tier("creator")

    def cancel_membership(self) -> MembershipTier:
        return self._set_tier("free")

    # --- Confirmed transitions ---

    def apply_billing_confirmation(self, confirmation: BillingConfirmation) -> MembershipTier:
        """
        Apply a payment/cancellation confirmed by the billing collaborator.

        An active confirmation grants its tier. A cancelled or expired one
        resets to free only when it is about the tier currently held, so a
        late cancellation of an old plan cannot revoke a newer one.
        """
        if confirmation.status == "active":
            return self._set_tier(confirmation.tier)

        if confirmation.tier == self._tier:
            return self._set_tier("free")

        logger.info(
            f"Ignoring {confirmation.status} confirmation for '{confirmation.tier}' "
            f"while tier is '{self._tier}'"
        )
        return self._tier

    # --- Billing redirects ---

    async def start_membership_checkout(self) -> RedirectOutput:
        """Ask the billing collaborator for a checkout URL."""
        if self._billing is None:
            return _unavailable("not_configured", "No backend checkout configured.")
        try:
            url = await self._billing.create_checkout_url()
        except BillingUnavailableError as e:
            logger.warning(f"Membership checkout unavailable ({e.reason}): {e.message}")
            return _unavailable(e.reason, e.message)
        return RedirectOutput(success=True, url=url)

    async def open_billing_portal(self) -> RedirectOutput:
        """Ask the billing collaborator for a customer portal URL."""
        if self._billing is None:
            return _unavailable("not_configured", "Billing portal not configured.")
        try:
            url = await self._billing.create_portal_url()
        except BillingUnavailableError as e:
            logger.warning(f"Billing portal unavailable ({e.reason}): {e.message}")
            return _unavailable(e.reason, e.message)
        return RedirectOutput(success=True, url=url)

    # --- Observers ---

    def subscribe(self, listener: TierListener) -> Callable[[], None]:
        """Register a callback run after each tier change. Returns an unsubscribe."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # --- Internals ---

    def _set_tier(self, tier: MembershipTier) -> MembershipTier:
        previous = self._tier
        self._storage.set(self._storage_key, tier)
        self._tier = tier

        if previous != tier:
            logger.info(f"Membership tier changed: {previous} -> {tier}")
            for listener in list(self._listeners):
                listener(tier)
        return tier


def _unavailable(code: str, message: str) -> RedirectOutput:
    return RedirectOutput(
        success=False,
        url=None,
        errors=[MembershipError(code=code, message=message)],
    )
