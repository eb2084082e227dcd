"""Dashboards component port definitions - protocols for dependencies."""

from __future__ import annotations

from typing import Protocol

from nexora.components.api_client.models import MessageResponse
from nexora.domain.entities import Bookmark, DashboardData, Post, Subscription, User


class DashboardApiPort(Protocol):
    async def get_dashboard_data(self) -> DashboardData: ...

    async def get_subscriptions(self) -> list[Subscription]: ...

    async def get_subscribers(self) -> list[User]: ...

    async def get_bookmarks(self) -> list[Bookmark]: ...


class PostApiPort(Protocol):
    async def get_all_posts(self, creator_id: str | None = None) -> list[Post]: ...

    async def delete_post(self, post_id: str) -> MessageResponse: ...

    async def like_post(self, post_id: str) -> MessageResponse: ...


class DashboardClientPort(Protocol):
    """The slice of ApiClient the dashboards use."""

    @property
    def dashboard(self) -> DashboardApiPort: ...

    @property
    def posts(self) -> PostApiPort: ...
