"""
Dashboards component.

Reader, creator and admin dashboards are read-mostly: each loads its
collections concurrently, then derives every statistic client-side from
them. Nothing here is fetched per statistic.

Revenue policy: creators keep 80% of premium revenue, the platform 20%,
split with Decimal so the two shares always add back up to the price.
"""

from __future__ import annotations

import asyncio
import logging
import math
from collections.abc import Awaitable, Iterable
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from nexora.components.api_client.models import ApiError
from nexora.domain.entities import Bookmark, Post, Subscription, User
from nexora.rules.models import RevenueRules

from .models import (
    ActionOutput,
    AdminDashboard,
    CreatorDashboard,
    CreatorStats,
    DashboardLoadOutput,
    PlatformStats,
    ReaderDashboard,
    ReaderStats,
    ResourceError,
    RevenueConfig,
    RevenueSplit,
)
from .ports import DashboardClientPort

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")

# --- Revenue ---


def to_money(value: float | int | Decimal) -> Decimal:
    """Exact decimal for a wire price (floats go through str to avoid binary noise)."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def split_revenue(price: float | Decimal, config: RevenueConfig | None = None) -> RevenueSplit:
    """
    Split a price into creator and platform shares.

    The creator share is rounded to the cent; the platform share is the
    remainder, so creator_share + platform_share == price.
    """
    config = config or RevenueConfig()
    amount = to_money(price)
    creator = (amount * config.creator_rate).quantize(CENT, rounding=ROUND_HALF_UP)
    return RevenueSplit(price=amount, creator_share=creator, platform_share=amount - creator)


# --- Aggregations ---


def reading_minutes(content: str, words_per_minute: int = 200) -> int:
    words = len(content.split())
    return math.ceil(words / words_per_minute)


def reader_stats(
    posts: list[Post],
    subscriptions: list[Subscription],
    bookmarked_ids: Iterable[str] = (),
    words_per_minute: int = 200,
) -> ReaderStats:
    return ReaderStats(
        total_posts=len(posts),
        total_reading_minutes=sum(reading_minutes(p.content, words_per_minute) for p in posts),
        bookmarks=len(set(bookmarked_ids)),
        subscriptions=len(subscriptions),
        active_subscriptions=sum(1 for s in subscriptions if s.status == "active"),
    )


def creator_stats(
    posts: list[Post],
    subscribers: list[User],
    config: RevenueConfig | None = None,
) -> CreatorStats:
    total_views = sum(p.views for p in posts)
    total_likes = sum(p.likes for p in posts)
    total_comments = sum(p.comments for p in posts)

    earnings = sum(
        (split_revenue(p.price, config).creator_share for p in posts if p.is_premium and p.price),
        Decimal("0"),
    )

    engagement = 0.0
    if total_views > 0:
        engagement = round((total_likes + total_comments) / total_views * 100, 1)

    return CreatorStats(
        total_views=total_views,
        total_likes=total_likes,
        total_comments=total_comments,
        total_earnings=earnings,
        subscribers=len(subscribers),
        engagement_rate=engagement,
        published_posts=sum(1 for p in posts if p.status == "published"),
        draft_posts=sum(1 for p in posts if p.status == "draft"),
    )


def platform_stats(
    users: list[User],
    posts: list[Post],
    subscriptions: list[Subscription],
    config: RevenueConfig | None = None,
) -> PlatformStats:
    active = [s for s in subscriptions if s.status == "active"]
    revenue = sum(
        (split_revenue(s.price, config).platform_share for s in active),
        Decimal("0"),
    )
    return PlatformStats(
        total_users=len(users),
        total_posts=len(posts),
        total_subscriptions=len(subscriptions),
        active_subscriptions=len(active),
        platform_revenue=revenue,
    )


# --- Loading ---


async def _gather(calls: dict[str, Awaitable[Any]]) -> tuple[dict[str, Any], list[ResourceError]]:
    """Run named fetches concurrently; collect results and per-resource failures."""
    names = list(calls)
    outcomes = await asyncio.gather(*calls.values(), return_exceptions=True)

    results: dict[str, Any] = {}
    errors: list[ResourceError] = []
    for name, outcome in zip(names, outcomes, strict=True):
        if isinstance(outcome, ApiError):
            errors.append(
                ResourceError(resource=name, message=outcome.message, status_code=outcome.status_code)
            )
        elif isinstance(outcome, BaseException):
            raise outcome
        else:
            results[name] = outcome

    if errors:
        logger.error(
            "Dashboard load failed for: " + ", ".join(e.resource for e in errors)
        )
    return results, errors


async def load_reader_dashboard(
    client: DashboardClientPort,
) -> DashboardLoadOutput[ReaderDashboard]:
    results, errors = await _gather(
        {
            "dashboard": client.dashboard.get_dashboard_data(),
            "posts": client.posts.get_all_posts(),
            "subscriptions": client.dashboard.get_subscriptions(),
            "bookmarks": client.dashboard.get_bookmarks(),
        }
    )
    if errors:
        return DashboardLoadOutput(success=False, errors=errors)
    return DashboardLoadOutput(
        success=True,
        data=ReaderDashboard(
            profile=results["dashboard"],
            posts=results["posts"],
            subscriptions=results["subscriptions"],
            bookmarks=results["bookmarks"],
        ),
    )


async def load_creator_dashboard(
    client: DashboardClientPort,
) -> DashboardLoadOutput[CreatorDashboard]:
    results, errors = await _gather(
        {
            "dashboard": client.dashboard.get_dashboard_data(),
            "posts": client.posts.get_all_posts(),
            "subscribers": client.dashboard.get_subscribers(),
        }
    )
    if errors:
        return DashboardLoadOutput(success=False, errors=errors)
    return DashboardLoadOutput(
        success=True,
        data=CreatorDashboard(
            profile=results["dashboard"],
            posts=results["posts"],
            subscribers=results["subscribers"],
        ),
    )


async def load_admin_dashboard(
    client: DashboardClientPort,
) -> DashboardLoadOutput[AdminDashboard]:
    results, errors = await _gather(
        {
            "dashboard": client.dashboard.get_dashboard_data(),
            "posts": client.posts.get_all_posts(),
            "subscriptions": client.dashboard.get_subscriptions(),
            "users": client.dashboard.get_subscribers(),
        }
    )
    if errors:
        return DashboardLoadOutput(success=False, errors=errors)
    return DashboardLoadOutput(
        success=True,
        data=AdminDashboard(
            profile=results["dashboard"],
            posts=results["posts"],
            subscriptions=results["subscriptions"],
            users=results["users"],
        ),
    )


# --- Actions ---


class DashboardSession:
    """
    Post collection shown by a dashboard, plus the actions on it.

    One action per post at a time: a second like/delete on a post whose
    previous action has not resolved is skipped. Results merge into the
    collection as it is when the call resolves, not as it was when issued.
    """

    def __init__(
        self,
        client: DashboardClientPort,
        posts: list[Post],
        bookmarks: Iterable[Bookmark] = (),
    ) -> None:
        self._client = client
        self.posts: list[Post] = list(posts)
        self.liked: set[str] = set()
        self.bookmarked: set[str] = {b.id for b in bookmarks}
        self._in_flight: set[str] = set()

    def is_busy(self, post_id: str) -> bool:
        return post_id in self._in_flight

    def get_post(self, post_id: str) -> Post | None:
        return next((p for p in self.posts if p.id == post_id), None)

    async def like_post(self, post_id: str) -> ActionOutput:
        """Toggle the reader's like on a post."""
        if post_id in self._in_flight:
            return ActionOutput(success=False, action="like", post_id=post_id, skipped=True)

        self._in_flight.add(post_id)
        try:
            await self._client.posts.like_post(post_id)
        except ApiError as e:
            logger.error(f"Failed to like post {post_id}: {e.message}")
            return _action_error("like", post_id, e)
        finally:
            self._in_flight.discard(post_id)

        delta = -1 if post_id in self.liked else 1
        self.liked.symmetric_difference_update({post_id})
        self.posts = [
            p.model_copy(update={"likes": max(0, p.likes + delta)}) if p.id == post_id else p
            for p in self.posts
        ]
        return ActionOutput(success=True, action="like", post_id=post_id)

    async def delete_post(self, post_id: str) -> ActionOutput:
        if post_id in self._in_flight:
            return ActionOutput(success=False, action="delete", post_id=post_id, skipped=True)

        self._in_flight.add(post_id)
        try:
            await self._client.posts.delete_post(post_id)
        except ApiError as e:
            logger.error(f"Failed to delete post {post_id}: {e.message}")
            return _action_error("delete", post_id, e)
        finally:
            self._in_flight.discard(post_id)

        self.posts = [p for p in self.posts if p.id != post_id]
        self.liked.discard(post_id)
        self.bookmarked.discard(post_id)
        logger.info(f"Deleted post {post_id}")
        return ActionOutput(success=True, action="delete", post_id=post_id)

    def toggle_bookmark(self, post_id: str) -> bool:
        """Client-side bookmark toggle. Returns True when now bookmarked."""
        if post_id in self.bookmarked:
            self.bookmarked.remove(post_id)
            return False
        self.bookmarked.add(post_id)
        return True


def _action_error(action: str, post_id: str, error: ApiError) -> ActionOutput:
    return ActionOutput(
        success=False,
        action=action,
        post_id=post_id,
        errors=[
            ResourceError(
                resource=f"post:{post_id}",
                message=error.message,
                status_code=error.status_code,
            )
        ],
    )


def load_config_from_rules(rules: RevenueRules) -> RevenueConfig:
    return RevenueConfig(creator_rate=rules.creator_rate, platform_rate=rules.platform_rate)
