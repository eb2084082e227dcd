import logging
import os
from typing import Any

import flet as ft

from nexora.adapters.kv_store import FletClientStorage
from nexora.rules.loader import load_rules_or_default
from nexora.ui.context import ServiceContext
from nexora.ui.layout import MainLayout
from nexora.ui.router import Router, admin_only, creator_only
from nexora.ui.state import AppState
from nexora.ui.theme import AppTheme
from nexora.ui.views.admin import AdminDashboardView
from nexora.ui.views.creator import CreatorDashboardView
from nexora.ui.views.editor import EditorView
from nexora.ui.views.login import LoginView
from nexora.ui.views.post import PostView
from nexora.ui.views.reader import ReaderDashboardView

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

UPLOAD_DIR = os.environ.get("NEXORA_UPLOAD_DIR", "uploads")


def main(page: ft.Page) -> None:
    page.title = "Nexora"
    page.theme = AppTheme.light_theme()
    page.dark_theme = AppTheme.dark_theme()
    page.theme_mode = ft.ThemeMode.LIGHT

    rules = load_rules_or_default()
    logger.info(f"API base URL: {rules.api.base_url}")

    # One context per page session; storage is the browser's localStorage on web.
    ctx = ServiceContext.create(rules, FletClientStorage(page.client_storage), UPLOAD_DIR)
    state = AppState(membership=ctx.membership, client=ctx.client)

    router = Router(page, state)

    def make_view(route: str, content: ft.Control) -> ft.View:
        def handle_logout() -> None:
            state.logout()
            page.go("/login")

        def toggle_theme() -> None:
            if page.theme_mode == ft.ThemeMode.LIGHT:
                page.theme_mode = ft.ThemeMode.DARK
            else:
                page.theme_mode = ft.ThemeMode.LIGHT
            page.update()

        layout = MainLayout(
            page=page,
            app_state=state,
            content=content,
            on_logout=handle_logout,
            on_nav=page.go,
            toggle_theme=toggle_theme,
            current_route=route,
        )
        return ft.View(route, [layout], padding=0)

    def post_builder(_: ft.Page, **kwargs: Any) -> ft.View:
        post_id = kwargs["post_id"]
        return make_view(f"/post/{post_id}", PostView(page, ctx, state, post_id=post_id))

    router.register("/login", lambda _: make_view("/login", LoginView(page, ctx, state)), access=None)
    router.register("/", lambda _: make_view("/", ReaderDashboardView(page, ctx, state)))
    router.register(
        "/creator",
        lambda _: make_view("/creator", CreatorDashboardView(page, ctx, state)),
        access=creator_only,
    )
    router.register(
        "/editor", lambda _: make_view("/editor", EditorView(page, ctx, state)), access=creator_only
    )
    router.register(
        "/admin", lambda _: make_view("/admin", AdminDashboardView(page, ctx, state)), access=admin_only
    )
    router.register_dynamic(r"^/post/(?P<post_id>[^/]+)$", post_builder, access=None)

    # Rebuild the current view when the tier changes so the header badge,
    # rail and gates follow it.
    ctx.membership.subscribe(lambda _tier: router.refresh())

    page.on_route_change = router.handle_route_change
    page.on_view_pop = router.view_pop
    page.on_disconnect = lambda _: page.run_task(ctx.client.close)

    page.go(page.route or "/")


def run() -> None:
    ft.app(target=main)


if __name__ == "__main__":
    run()
