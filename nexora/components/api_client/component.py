"""
API client component.

Typed async wrapper around the REST backend. One `ApiClient` per session,
grouped by resource the way the backend groups its routes:

- client.dashboard: profile, subscriptions, subscribers, bookmarks, creator upgrade
- client.posts: list / create / edit / delete / like
- client.subscriptions: subscribe to a creator
- client.auth: login / register
- client.billing: checkout and portal redirect URLs

Every private request carries `Authorization: Bearer <token>` when a token is
stored in client storage. Failures raise ApiError (logged with the endpoint).
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from nexora.core.ports.storage import KeyValueStorePort
from nexora.domain.entities import Bookmark, DashboardData, Post, Subscription, User
from nexora.rules.models import ApiRules

from .models import (
    ApiError,
    ApiTransportError,
    LoginResponse,
    MessageResponse,
    PostResponse,
    RedirectResponse,
    RegisterResponse,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_BASE_URL = "http://localhost:5001/api"


class ApiClient:
    """Session-scoped REST client."""

    def __init__(
        self,
        base_url: str,
        storage: KeyValueStorePort,
        *,
        billing_url: str | None = None,
        token_key: str = "token",
        timeout: float = 15.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.billing_url = (billing_url or self.base_url).rstrip("/")
        self._storage = storage
        self._token_key = token_key
        self._http = httpx.AsyncClient(timeout=timeout, transport=transport)

        self.dashboard = DashboardApi(self)
        self.posts = PostApi(self)
        self.subscriptions = SubscriptionApi(self)
        self.auth = AuthApi(self)
        self.billing = BillingApi(self)

    @classmethod
    def from_rules(
        cls,
        rules: ApiRules,
        storage: KeyValueStorePort,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> ApiClient:
        return cls(
            rules.base_url,
            storage,
            billing_url=rules.billing_url,
            token_key=rules.token_key,
            timeout=rules.timeout_seconds,
            transport=transport,
        )

    async def __aenter__(self) -> ApiClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def close(self) -> None:
        await self._http.aclose()

    # --- Session token ---

    def get_token(self) -> str | None:
        return self._storage.get(self._token_key) or None

    def set_token(self, token: str) -> None:
        self._storage.set(self._token_key, token)

    def is_authenticated(self) -> bool:
        return self.get_token() is not None

    def logout(self) -> None:
        self._storage.remove(self._token_key)
        logger.info("Session token cleared")

    # --- Transport ---

    def _headers(self, *, json_body: bool) -> dict[str, str]:
        headers: dict[str, str] = {}
        if json_body:
            headers["Content-Type"] = "application/json"
        token = self.get_token()
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    async def request(
        self,
        method: str,
        endpoint: str,
        *,
        json: Any = None,
        data: dict[str, str] | None = None,
        files: dict[str, Any] | None = None,
        base_url: str | None = None,
    ) -> Any:
        """
        Send a request and return the decoded JSON body (None for empty bodies).

        Raises:
            ApiTransportError: no response was received
            ApiError: non-2xx status or a body that is not JSON
        """
        url = f"{base_url or self.base_url}{endpoint}"
        # Multipart bodies set their own content type
        headers = self._headers(json_body=files is None and data is None)

        try:
            response = await self._http.request(
                method, url, json=json, data=data, files=files, headers=headers
            )
        except httpx.HTTPError as e:
            logger.error(f"API request failed for {endpoint}: {e!r}")
            raise ApiTransportError(
                str(e) or type(e).__name__, endpoint=endpoint
            ) from e

        if not response.is_success:
            message = _error_message(response)
            logger.error(
                f"API request failed for {endpoint}: {response.status_code} {message}"
            )
            raise ApiError(message, status_code=response.status_code, endpoint=endpoint)

        if response.status_code == 204 or not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"API request failed for {endpoint}: body is not JSON")
            raise ApiError(
                "Invalid JSON in response",
                status_code=response.status_code,
                endpoint=endpoint,
            ) from e

    async def fetch(
        self,
        method: str,
        endpoint: str,
        response_type: Any,
        **kwargs: Any,
    ) -> Any:
        """request() and validate the body into `response_type`."""
        body = await self.request(method, endpoint, **kwargs)
        if body is None and isinstance(response_type, type) and issubclass(
            response_type, BaseModel
        ):
            # Empty bodies (204) fall back to model defaults
            body = {}
        return _parse(response_type, body, endpoint)


def _error_message(response: httpx.Response) -> str:
    fallback = f"HTTP error! status: {response.status_code}"
    try:
        body = response.json()
    except ValueError:
        return fallback
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return fallback


def _parse(response_type: type[T] | Any, body: Any, endpoint: str) -> T:
    try:
        result: T = TypeAdapter(response_type).validate_python(body)
        return result
    except ValidationError as e:
        logger.error(f"Unexpected response shape from {endpoint}: {e}")
        raise ApiError("Unexpected response from server", endpoint=endpoint) from e


# --- Resource groups ---


class _Resource:
    def __init__(self, client: ApiClient) -> None:
        self._client = client


class DashboardApi(_Resource):
    async def get_dashboard_data(self) -> DashboardData:
        result: DashboardData = await self._client.fetch(
            "GET", "/private/dashboard", DashboardData
        )
        return result

    async def update_dashboard_data(
        self,
        fields: dict[str, str],
        profile_pic: tuple[str, bytes] | None = None,
    ) -> DashboardData:
        """PATCH profile fields as multipart form data (optional picture upload)."""
        files = {"profilePic": profile_pic} if profile_pic else None
        result: DashboardData = await self._client.fetch(
            "PATCH", "/private/dashboard", DashboardData, data=fields, files=files
        )
        return result

    async def get_subscriptions(self) -> list[Subscription]:
        result: list[Subscription] = await self._client.fetch(
            "GET", "/private/creator/subscribed", list[Subscription]
        )
        return result

    async def get_subscribers(self) -> list[User]:
        result: list[User] = await self._client.fetch(
            "GET", "/private/subscriber", list[User]
        )
        return result

    async def get_bookmarks(self) -> list[Bookmark]:
        result: list[Bookmark] = await self._client.fetch(
            "GET", "/private/bookmarks", list[Bookmark]
        )
        return result

    async def upgrade_to_creator(self) -> MessageResponse:
        result: MessageResponse = await self._client.fetch(
            "PATCH", "/private/upgrade", MessageResponse
        )
        return result


class PostApi(_Resource):
    async def get_all_posts(self, creator_id: str | None = None) -> list[Post]:
        endpoint = f"/private/post/{creator_id}" if creator_id else "/private/post"
        result: list[Post] = await self._client.fetch("GET", endpoint, list[Post])
        return result

    async def create_post(self, payload: dict[str, Any]) -> PostResponse:
        result: PostResponse = await self._client.fetch(
            "POST", "/private/post", PostResponse, json=payload
        )
        return result

    async def edit_post(self, post_id: str, payload: dict[str, Any]) -> PostResponse:
        result: PostResponse = await self._client.fetch(
            "PATCH", f"/private/post/{post_id}", PostResponse, json=payload
        )
        return result

    async def delete_post(self, post_id: str) -> MessageResponse:
        result: MessageResponse = await self._client.fetch(
            "DELETE", f"/private/post/{post_id}", MessageResponse
        )
        return result

    async def like_post(self, post_id: str) -> MessageResponse:
        result: MessageResponse = await self._client.fetch(
            "POST", f"/private/post/{post_id}/like", MessageResponse
        )
        return result


class SubscriptionApi(_Resource):
    async def subscribe_to_creator(self, creator_id: str) -> MessageResponse:
        result: MessageResponse = await self._client.fetch(
            "POST", f"/private/subscribe/{creator_id}", MessageResponse
        )
        return result


class AuthApi(_Resource):
    async def login(self, email: str, password: str) -> LoginResponse:
        """Log in and keep the issued token in client storage."""
        result: LoginResponse = await self._client.fetch(
            "POST",
            "/auth/login",
            LoginResponse,
            json={"email": email, "password": password},
        )
        self._client.set_token(result.token)
        logger.info(f"Logged in as {result.user.username}")
        return result

    async def register(self, username: str, email: str, password: str) -> RegisterResponse:
        result: RegisterResponse = await self._client.fetch(
            "POST",
            "/auth/register",
            RegisterResponse,
            json={"username": username, "email": email, "password": password},
        )
        return result


class BillingApi(_Resource):
    """Billing routes are served by the web origin, not the API base."""

    async def create_checkout(self) -> RedirectResponse:
        result: RedirectResponse = await self._client.fetch(
            "POST",
            "/api/billing/checkout",
            RedirectResponse,
            base_url=self._client.billing_url,
        )
        return result

    async def create_portal(self) -> RedirectResponse:
        result: RedirectResponse = await self._client.fetch(
            "POST",
            "/api/billing/portal",
            RedirectResponse,
            base_url=self._client.billing_url,
        )
        return result
