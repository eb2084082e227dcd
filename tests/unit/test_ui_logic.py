from decimal import Decimal
from types import SimpleNamespace

import pytest

from nexora.adapters.kv_store import InMemoryKeyValueStore
from nexora.components.api_client import ApiClient
from nexora.components.dashboards import CreatorStats, ReaderStats
from nexora.components.membership import MembershipState
from nexora.domain.entities import DashboardData, Post, User
from nexora.ui.layout import nav_routes
from nexora.ui.presenters import (
    creator_tiles,
    excerpt,
    format_count,
    format_money,
    home_route,
    profile_changes,
    reader_tiles,
    tier_label,
)
from nexora.ui.router import Router, admin_only, creator_only
from nexora.ui.state import AppState
from nexora.ui.theme import AppTheme


def make_state(storage: InMemoryKeyValueStore | None = None) -> AppState:
    storage = storage or InMemoryKeyValueStore()
    return AppState(
        membership=MembershipState(storage),
        client=ApiClient("http://api.test/api", storage),
    )


def test_app_theme_modes() -> None:
    light = AppTheme.light_theme()
    assert light.color_scheme.primary == AppTheme.primary_light

    dark = AppTheme.dark_theme()
    assert dark.color_scheme.primary == AppTheme.primary_dark


def test_app_state_logout_clears_user_and_token() -> None:
    storage = InMemoryKeyValueStore({"token": "abc"})
    state = make_state(storage)
    state.current_user = User(id="u1", username="ada")
    assert state.is_authenticated

    state.logout()

    assert state.current_user is None
    assert storage.get("token") is None
    assert not state.is_authenticated


def test_logout_keeps_membership_tier() -> None:
    state = make_state()
    state.membership.upgrade_to_member()
    state.logout()
    assert state.membership.tier == "member"


def test_format_money() -> None:
    assert format_money(Decimal("8")) == "$8.00"
    assert format_money(1234.5) == "$1,234.50"


def test_format_count() -> None:
    assert format_count(999) == "999"
    assert format_count(1500) == "1.5K"
    assert format_count(2_000_000) == "2.0M"


def test_tier_label_and_home_route() -> None:
    assert tier_label("member") == "Premium member"
    assert home_route("admin") == "/admin"
    assert home_route("creator") == "/creator"
    assert home_route("user") == "/"
    assert home_route(None) == "/"


def test_excerpt() -> None:
    post = Post(id="p", title="t", content="word " * 100)
    text = excerpt(post, 20)
    assert text.endswith("...")
    assert len(text) <= 23


def test_stat_tiles() -> None:
    reader = reader_tiles(ReaderStats(3, 12, 1, 2, 1))
    assert [t.value for t in reader] == ["3", "12 min", "1", "1"]

    creator = creator_tiles(
        CreatorStats(1200, 10, 2, Decimal("16.00"), 5, 1.0, 2, 1)
    )
    assert [t.label for t in creator] == ["Views", "Subscribers", "Earnings", "Engagement"]
    assert creator[2].value == "$16.00"
    assert creator[3].value == "1.0%"


def test_nav_routes_follow_tier_and_role() -> None:
    membership = MembershipState(InMemoryKeyValueStore())
    assert nav_routes(membership, is_admin=False) == ["/"]

    membership.upgrade_to_creator()
    assert nav_routes(membership, is_admin=False) == ["/", "/creator", "/editor"]
    assert nav_routes(membership, is_admin=True)[-1] == "/admin"


def test_profile_changes_only_sends_edits() -> None:
    profile = DashboardData(username="ada", bio="Reader")

    assert profile_changes(profile, " ada ", "Reader") == {}
    assert profile_changes(profile, "ada_l", "Reader") == {"username": "ada_l"}
    assert profile_changes(profile, "ada", "") == {"bio": ""}

    with pytest.raises(ValueError):
        profile_changes(profile, "   ", "Reader")


def make_router(state: AppState) -> Router:
    router = Router(SimpleNamespace(route="/", views=[]), state)  # type: ignore[arg-type]
    view = SimpleNamespace()
    router.register("/login", lambda _: view, access=None)
    router.register("/", lambda _: view)
    router.register("/creator", lambda _: view, access=creator_only)
    router.register("/admin", lambda _: view, access=admin_only)
    router.register_dynamic(r"^/post/(?P<post_id>[^/]+)$", lambda _, **kw: view, access=None)
    return router


def test_router_resolves_dynamic_routes() -> None:
    router = make_router(make_state())
    config, kwargs = router.resolve("/post/abc123")
    assert config is not None
    assert kwargs == {"post_id": "abc123"}
    assert router.resolve("/nowhere") == (None, {})


def test_router_sends_visitors_to_login() -> None:
    router = make_router(make_state())
    assert router.redirect_for("/") == "/login"
    assert router.redirect_for("/creator") == "/login"
    assert router.redirect_for("/login") is None
    assert router.redirect_for("/post/p1") is None


def test_router_guards_creator_and_admin_routes() -> None:
    state = make_state()
    state.current_user = User(id="u1", username="ada")
    router = make_router(state)

    assert router.redirect_for("/") is None
    assert router.redirect_for("/creator") == "/"
    assert router.redirect_for("/admin") == "/"

    state.membership.upgrade_to_creator()
    assert router.redirect_for("/creator") is None

    state.current_user = User(id="u1", username="ada", role="admin")
    assert router.redirect_for("/admin") is None
