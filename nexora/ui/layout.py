from collections.abc import Callable
from typing import Any

import flet as ft

from nexora.components.membership import MembershipState
from nexora.ui.presenters import tier_label
from nexora.ui.state import AppState
from nexora.ui.theme import AppTheme


def nav_routes(membership: MembershipState, is_admin: bool) -> list[str]:
    """Routes shown in the rail for the current tier and role."""
    routes = ["/"]
    if membership.tier == "creator":
        routes += ["/creator", "/editor"]
    if is_admin:
        routes.append("/admin")
    return routes


_DESTINATIONS = {
    "/": (ft.Icons.HOME_OUTLINED, ft.Icons.HOME, "Discover"),
    "/creator": (ft.Icons.DASHBOARD_OUTLINED, ft.Icons.DASHBOARD, "Creator"),
    "/editor": (ft.Icons.EDIT_OUTLINED, ft.Icons.EDIT, "Write"),
    "/admin": (ft.Icons.ADMIN_PANEL_SETTINGS_OUTLINED, ft.Icons.ADMIN_PANEL_SETTINGS, "Admin"),
}


class MainLayout(ft.Row):  # type: ignore
    """NavigationRail on the left, header with tier badge and content on the right."""

    def __init__(
        self,
        page: ft.Page,
        app_state: AppState,
        content: ft.Control,
        on_logout: Callable[[], None],
        on_nav: Callable[[str], None],
        toggle_theme: Callable[[], None],
        current_route: str = "/",
    ):
        super().__init__(expand=True, spacing=0)
        self.page = page
        self.app_state = app_state
        self.on_logout = on_logout
        self.on_nav = on_nav
        self.toggle_theme = toggle_theme

        self.routes = nav_routes(app_state.membership, app_state.is_admin)
        idx = self.routes.index(current_route) if current_route in self.routes else None

        self.rail = ft.NavigationRail(
            selected_index=idx,
            label_type=ft.NavigationRailLabelType.ALL,
            min_width=100,
            leading=ft.Container(
                content=ft.Icon(ft.Icons.AUTO_STORIES, size=32, color="primary"),
                padding=20,
            ),
            group_alignment=-0.9,
            destinations=[
                ft.NavigationRailDestination(
                    icon=_DESTINATIONS[r][0],
                    selected_icon=_DESTINATIONS[r][1],
                    label=_DESTINATIONS[r][2],
                )
                for r in self.routes
            ],
            on_change=self._rail_change,
            bgcolor="surface",
        )

        tier = app_state.membership.tier
        self.app_bar = ft.Container(
            content=ft.Row(
                [
                    ft.Text("Nexora", size=20, weight=ft.FontWeight.BOLD, color="primary"),
                    ft.Container(expand=True),
                    ft.Container(
                        content=ft.Text(tier_label(tier), size=12),
                        padding=ft.padding.symmetric(horizontal=10, vertical=4),
                        border_radius=12,
                        bgcolor=AppTheme.premium if tier != "free" else "surfaceVariant",
                    ),
                    ft.IconButton(
                        ft.Icons.DARK_MODE if page.theme_mode == ft.ThemeMode.LIGHT else ft.Icons.LIGHT_MODE,
                        on_click=lambda _: self.toggle_theme()
                    ),
                    ft.PopupMenuButton(
                        icon=ft.Icons.PERSON,
                        items=[
                            ft.PopupMenuItem(text="Logout", on_click=lambda _: self.on_logout())
                        ]
                    ) if app_state.is_authenticated else ft.FilledButton(
                        "Login",
                        icon=ft.Icons.LOGIN,
                        on_click=lambda _: self.on_nav("/login")
                    ),
                ],
                alignment=ft.MainAxisAlignment.SPACE_BETWEEN
            ),
            padding=ft.padding.symmetric(horizontal=20, vertical=10),
            bgcolor="surfaceVariant",
        )

        self.content_area = ft.Container(
            content=content,
            expand=True,
            padding=20,
            alignment=ft.alignment.top_left,
        )

        self.controls = [
            self.rail,
            ft.VerticalDivider(width=1, color="outlineVariant"),
            ft.Column([self.app_bar, self.content_area], expand=True, spacing=0),
        ]

    def _rail_change(self, e: Any) -> None:
        idx = e.control.selected_index
        if idx is not None and idx < len(self.routes):
            self.on_nav(self.routes[idx])
