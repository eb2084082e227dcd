import logging
import re
from collections.abc import Callable
from typing import Any, NamedTuple

import flet as ft

from nexora.ui.state import AppState

logger = logging.getLogger(__name__)

AccessCheck = Callable[[AppState], bool]


def signed_in(state: AppState) -> bool:
    return state.is_authenticated


def creator_only(state: AppState) -> bool:
    return state.is_authenticated and state.membership.tier == "creator"


def admin_only(state: AppState) -> bool:
    return state.is_admin


class RouteConfig(NamedTuple):
    # builder accepts page and the route's named groups
    builder: Callable[..., ft.View]
    access: AccessCheck | None


class Router:
    """
    Maps page routes to view builders.

    Each route carries an optional access check. A visitor who fails it is
    sent to /login when signed out, otherwise back to the reader home.
    """

    def __init__(self, page: ft.Page, state: AppState):
        self.page = page
        self.state = state
        self.routes: dict[str, RouteConfig] = {}
        self.dynamic_routes: dict[str, RouteConfig] = {}

    def register(
        self,
        route: str,
        builder: Callable[..., ft.View],
        access: AccessCheck | None = signed_in,
    ) -> None:
        self.routes[route] = RouteConfig(builder, access)

    def register_dynamic(
        self,
        pattern: str,
        builder: Callable[..., ft.View],
        access: AccessCheck | None = signed_in,
    ) -> None:
        """Register a regex route, e.g. '^/post/(?P<post_id>[^/]+)$'."""
        self.dynamic_routes[pattern] = RouteConfig(builder, access)

    def resolve(self, route: str) -> tuple[RouteConfig | None, dict[str, Any]]:
        config = self.routes.get(route)
        if config:
            return config, {}
        for pattern, dyn_config in self.dynamic_routes.items():
            match = re.match(pattern, route)
            if match:
                return dyn_config, match.groupdict()
        return None, {}

    def redirect_for(self, route: str) -> str | None:
        """Where to send the visitor instead of `route`, or None when allowed."""
        config, _ = self.resolve(route)
        if config is None or config.access is None or config.access(self.state):
            return None
        return "/" if self.state.is_authenticated else "/login"

    def handle_route_change(self, e: ft.RouteChangeEvent) -> None:
        self.show(e.route or "/")

    def refresh(self) -> None:
        """Rebuild the view for the current route (e.g. after a tier change)."""
        self.show(self.page.route or "/")

    def show(self, route: str) -> None:
        logger.info(f"Navigate to: {route}")

        redirect = self.redirect_for(route)
        if redirect is not None:
            logger.info(f"Access denied to {route}. Redirecting to {redirect}.")
            self.page.go(redirect)
            return

        self.page.views.clear()
        config, kwargs = self.resolve(route)
        if not config:
            logger.warning(f"No route found for: {route}")
            self.page.views.append(
                ft.View(
                    "/404",
                    [ft.AppBar(title=ft.Text("Not found")), ft.Text(f"Page not found: {route}")]
                )
            )
            self.page.update()
            return

        self.page.views.append(config.builder(self.page, **kwargs))
        self.page.update()

    def view_pop(self, view: ft.View) -> None:
        self.page.views.pop()
        top_view = self.page.views[-1]
        self.page.go(top_view.route)
