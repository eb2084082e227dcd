"""
API client component.

Public API for the REST backend consumed by the dashboards, the editor and
the membership state.
"""

from .component import (
    DEFAULT_BASE_URL,
    ApiClient,
    AuthApi,
    BillingApi,
    DashboardApi,
    PostApi,
    SubscriptionApi,
)
from .models import (
    ApiError,
    ApiTransportError,
    LoginResponse,
    MessageResponse,
    PostResponse,
    RedirectResponse,
    RegisterResponse,
)

__all__ = [
    # Client
    "ApiClient",
    "AuthApi",
    "BillingApi",
    "DashboardApi",
    "PostApi",
    "SubscriptionApi",
    "DEFAULT_BASE_URL",
    # Errors
    "ApiError",
    "ApiTransportError",
    # Responses
    "LoginResponse",
    "MessageResponse",
    "PostResponse",
    "RedirectResponse",
    "RegisterResponse",
]
