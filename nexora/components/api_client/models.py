"""
API client models.

Response envelopes returned by the REST backend and the client's error types.
Entities (Post, User, Subscription, ...) live in nexora.domain.entities.
"""

from __future__ import annotations

from pydantic import Field

from nexora.domain.entities import Post, User, WireModel

# --- Errors ---


class ApiError(Exception):
    """
    Non-2xx response or unusable body from the backend.

    `message` is the backend's `{message}` field when present, otherwise a
    generic HTTP status message.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        endpoint: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.endpoint = endpoint


class ApiTransportError(ApiError):
    """The request never produced a response (DNS, connect, timeout...)."""


# --- Response envelopes ---


class MessageResponse(WireModel):
    message: str = ""

class LoginResponse(WireModel):
    message: str = ""
    token: str
    user: User

class RegisterResponse(WireModel):
    message: str = ""
    user: User

class PostResponse(WireModel):
    message: str = ""
    post: Post

class RedirectResponse(WireModel):
    url: str | None = Field(default=None)
