"""
Dashboards component.

Public API for loading reader/creator/admin dashboards and deriving their
statistics.
"""

from .component import (
    DashboardSession,
    creator_stats,
    load_admin_dashboard,
    load_config_from_rules,
    load_creator_dashboard,
    load_reader_dashboard,
    platform_stats,
    reader_stats,
    reading_minutes,
    split_revenue,
    to_money,
)
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

__all__ = [
    # Functions
    "creator_stats",
    "load_admin_dashboard",
    "load_config_from_rules",
    "load_creator_dashboard",
    "load_reader_dashboard",
    "platform_stats",
    "reader_stats",
    "reading_minutes",
    "split_revenue",
    "to_money",
    # Session
    "DashboardSession",
    # Models
    "ActionOutput",
    "AdminDashboard",
    "CreatorDashboard",
    "CreatorStats",
    "DashboardLoadOutput",
    "PlatformStats",
    "ReaderDashboard",
    "ReaderStats",
    "ResourceError",
    "RevenueConfig",
    "RevenueSplit",
    # Ports
    "DashboardClientPort",
]
