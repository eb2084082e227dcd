"""
HTTP billing adapter.

BillingPort on top of the API client's billing routes. Every failure mode
(transport error, non-2xx, response without `url`) becomes a
BillingUnavailableError with a reason code; nothing is granted here.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from nexora.components.api_client import ApiClient, ApiError, ApiTransportError
from nexora.components.api_client.models import RedirectResponse
from nexora.core.ports.billing import BillingUnavailableError

logger = logging.getLogger(__name__)


class HttpBillingAdapter:
    def __init__(self, client: ApiClient) -> None:
        self._client = client

    async def create_checkout_url(self) -> str:
        return _require_url(await self._call(self._client.billing.create_checkout), "checkout")

    async def create_portal_url(self) -> str:
        return _require_url(await self._call(self._client.billing.create_portal), "portal")

    async def _call(
        self, fn: Callable[[], Awaitable[RedirectResponse]]
    ) -> RedirectResponse:
        try:
            response = await fn()
        except ApiTransportError as e:
            raise BillingUnavailableError(e.message, reason="transport_error") from e
        except ApiError as e:
            raise BillingUnavailableError(e.message, reason="http_error") from e
        return response


def _require_url(response: RedirectResponse, kind: str) -> str:
    if not response.url:
        logger.warning(f"Billing {kind} response did not include a URL")
        raise BillingUnavailableError(
            f"Billing {kind} response did not include a URL.", reason="missing_url"
        )
    return response.url
