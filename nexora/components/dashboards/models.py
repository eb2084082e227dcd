"""
Dashboards component models.

Statistics, loaded dashboard payloads and operation outputs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Generic, Literal, TypeVar

from nexora.domain.entities import Bookmark, DashboardData, Post, Subscription, User

T = TypeVar("T")

ResourceName = Literal["dashboard", "posts", "subscriptions", "bookmarks", "subscribers", "users"]

# --- Configuration ---


@dataclass(frozen=True)
class RevenueConfig:
    """Revenue split policy. Rates must sum to 1."""

    creator_rate: Decimal = Decimal("0.80")
    platform_rate: Decimal = Decimal("0.20")


@dataclass(frozen=True)
class RevenueSplit:
    price: Decimal
    creator_share: Decimal
    platform_share: Decimal


# --- Statistics ---


@dataclass(frozen=True)
class ReaderStats:
    total_posts: int
    total_reading_minutes: int
    bookmarks: int
    subscriptions: int
    active_subscriptions: int


@dataclass(frozen=True)
class CreatorStats:
    total_views: int
    total_likes: int
    total_comments: int
    total_earnings: Decimal
    subscribers: int
    engagement_rate: float  # (likes + comments) / views, percent
    published_posts: int
    draft_posts: int


@dataclass(frozen=True)
class PlatformStats:
    total_users: int
    total_posts: int
    total_subscriptions: int
    active_subscriptions: int
    platform_revenue: Decimal


# --- Loaded dashboards ---


@dataclass(frozen=True)
class ReaderDashboard:
    profile: DashboardData
    posts: list[Post]
    subscriptions: list[Subscription]
    bookmarks: list[Bookmark]


@dataclass(frozen=True)
class CreatorDashboard:
    profile: DashboardData
    posts: list[Post]
    subscribers: list[User]


@dataclass(frozen=True)
class AdminDashboard:
    profile: DashboardData
    posts: list[Post]
    subscriptions: list[Subscription]
    users: list[User]


# --- Outputs ---


@dataclass(frozen=True)
class ResourceError:
    """Which resource failed and why."""

    resource: str
    message: str
    status_code: int | None = None


@dataclass(frozen=True)
class DashboardLoadOutput(Generic[T]):
    """
    Result of loading a dashboard.

    On failure `data` is None and `errors` names every resource that failed;
    the caller retries by loading again.
    """

    success: bool
    data: T | None = None
    errors: list[ResourceError] = field(default_factory=list)

    @property
    def error_message(self) -> str | None:
        if not self.errors:
            return None
        return "; ".join(f"{e.resource}: {e.message}" for e in self.errors)


@dataclass(frozen=True)
class ActionOutput:
    """Result of a dashboard action (like, delete) on one post."""

    success: bool
    action: str
    post_id: str
    skipped: bool = False  # another action on the same post was in flight
    errors: list[ResourceError] = field(default_factory=list)
