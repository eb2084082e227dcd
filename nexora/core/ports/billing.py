"""
Billing port interface.

External interface for the billing collaborator (hosted checkout and
customer portal). The client never verifies payments itself: it only asks
for redirect URLs and applies confirmations the collaborator reports.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Protocol

# --- Types ---

BillingFailureReason = Literal[
    "not_configured",
    "http_error",
    "transport_error",
    "missing_url",
]
PaidTier = Literal["member", "creator"]
ConfirmationStatus = Literal["active", "cancelled", "expired"]


class BillingUnavailableError(Exception):
    """Raised by billing adapters when no redirect URL could be obtained."""

    def __init__(self, message: str, reason: BillingFailureReason = "http_error") -> None:
        super().__init__(message)
        self.message = message
        self.reason = reason


# --- Models ---


@dataclass(frozen=True)
class BillingConfirmation:
    """
    A payment or cancellation confirmed by the billing collaborator.

    Attributes:
        tier: The paid tier the confirmation is about
        status: active grants the tier, cancelled/expired revoke it
        reference: Collaborator-side identifier (checkout or subscription id)
    """

    tier: PaidTier
    status: ConfirmationStatus
    reference: str | None = None


# --- Port Interface ---


class BillingPort(Protocol):
    """
    Port for the billing collaborator.

    Implementations:
    - HttpBillingAdapter: POST /api/billing/checkout and /api/billing/portal
    - BillingStubAdapter: fixed or absent URLs (dev/tests)
    """

    async def create_checkout_url(self) -> str:
        """
        Obtain a hosted checkout URL for the monthly membership.

        Raises:
            BillingUnavailableError: on any failure, including a response
                without a URL.
        """
        ...

    async def create_portal_url(self) -> str:
        """
        Obtain a customer billing portal URL.

        Raises:
            BillingUnavailableError: on any failure.
        """
        ...
