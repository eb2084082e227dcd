"""
Billing stub adapter (dev/tests).

Stub implementation of BillingPort returning fixed redirect URLs, or failing
with "not_configured" when no URL is set. It never confirms a payment.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from nexora.core.ports.billing import BillingPort, BillingUnavailableError

logger = logging.getLogger(__name__)


@dataclass
class BillingStubAdapter:
    """
    Stub billing adapter.

    This adapter satisfies the BillingPort protocol.
    """

    checkout_url: str | None = None
    portal_url: str | None = None
    checkout_calls: int = 0
    portal_calls: int = 0

    async def create_checkout_url(self) -> str:
        self.checkout_calls += 1
        logger.debug(f"BillingStubAdapter.create_checkout_url: url={self.checkout_url}")
        if not self.checkout_url:
            raise BillingUnavailableError(
                "No backend checkout configured.", reason="not_configured"
            )
        return self.checkout_url

    async def create_portal_url(self) -> str:
        self.portal_calls += 1
        logger.debug(f"BillingStubAdapter.create_portal_url: url={self.portal_url}")
        if not self.portal_url:
            raise BillingUnavailableError(
                "Billing portal not configured.", reason="not_configured"
            )
        return self.portal_url


def _verify_protocol_compliance() -> None:
    """Verify BillingStubAdapter satisfies BillingPort protocol."""
    adapter: BillingPort = BillingStubAdapter()
    _ = adapter.create_checkout_url


_verify_protocol_compliance()
