"""
View-model helpers for the flet views.

Pure functions only, so the formatting rules are testable without a page.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from nexora.components.dashboards import CreatorStats, PlatformStats, ReaderStats
from nexora.components.membership import MembershipTier
from nexora.domain.entities import DashboardData, Post, RoleType

TIER_LABELS: dict[str, str] = {
    "free": "Free",
    "member": "Premium member",
    "creator": "Creator",
}


@dataclass(frozen=True)
class StatTile:
    label: str
    value: str
    icon: str


def format_money(amount: Decimal | float) -> str:
    return f"${Decimal(str(amount)).quantize(Decimal('0.01')):,}"


def format_count(value: int) -> str:
    if value >= 1_000_000:
        return f"{value / 1_000_000:.1f}M"
    if value >= 1_000:
        return f"{value / 1_000:.1f}K"
    return str(value)


def tier_label(tier: MembershipTier) -> str:
    return TIER_LABELS.get(tier, "Free")


def home_route(role: RoleType | None) -> str:
    """Dashboard a user lands on after login."""
    if role == "admin":
        return "/admin"
    if role == "creator":
        return "/creator"
    return "/"


def excerpt(post: Post, limit: int = 140) -> str:
    text = " ".join(post.content.split())
    if len(text) <= limit:
        return text
    return text[:limit].rstrip() + "..."


def profile_changes(profile: DashboardData, username: str, bio: str) -> dict[str, str]:
    """
    Form fields that differ from the loaded profile, trimmed.

    Raises ValueError for a blank username; an empty bio clears it.
    """
    username = username.strip()
    if not username:
        raise ValueError("Username cannot be empty.")

    changes: dict[str, str] = {}
    if username != profile.username:
        changes["username"] = username
    bio = bio.strip()
    if bio != (profile.bio or ""):
        changes["bio"] = bio
    return changes


def reader_tiles(stats: ReaderStats) -> list[StatTile]:
    return [
        StatTile("Articles", format_count(stats.total_posts), "ARTICLE"),
        StatTile("Reading time", f"{stats.total_reading_minutes} min", "SCHEDULE"),
        StatTile("Bookmarks", format_count(stats.bookmarks), "BOOKMARK"),
        StatTile("Subscriptions", format_count(stats.active_subscriptions), "SUBSCRIPTIONS"),
    ]


def creator_tiles(stats: CreatorStats) -> list[StatTile]:
    return [
        StatTile("Views", format_count(stats.total_views), "VISIBILITY"),
        StatTile("Subscribers", format_count(stats.subscribers), "PEOPLE"),
        StatTile("Earnings", format_money(stats.total_earnings), "ATTACH_MONEY"),
        StatTile("Engagement", f"{stats.engagement_rate:.1f}%", "FAVORITE"),
    ]


def platform_tiles(stats: PlatformStats) -> list[StatTile]:
    return [
        StatTile("Users", format_count(stats.total_users), "PEOPLE"),
        StatTile("Posts", format_count(stats.total_posts), "ARTICLE"),
        StatTile("Active subscriptions", format_count(stats.active_subscriptions), "SUBSCRIPTIONS"),
        StatTile("Platform revenue", format_money(stats.platform_revenue), "ATTACH_MONEY"),
    ]
