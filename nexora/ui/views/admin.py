import flet as ft

from nexora.components.dashboards import load_admin_dashboard, platform_stats
from nexora.ui.components.widgets import stat_row
from nexora.ui.presenters import excerpt, format_money, platform_tiles
from nexora.ui.views.base import LoadFailed, LoadingView, section


class AdminDashboardView(LoadingView):
    """Platform-wide stats, recent posts and users."""

    async def fetch(self) -> list[ft.Control]:
        result = await load_admin_dashboard(self.state.client)
        if not result.success or result.data is None:
            raise LoadFailed(result.error_message or "Unknown error")

        data = result.data
        stats = platform_stats(data.users, data.posts, data.subscriptions, self.ctx.revenue)

        return [
            ft.Text("Admin Dashboard", size=26, weight=ft.FontWeight.BOLD),
            stat_row(platform_tiles(stats)),
            section(
                "Recent posts",
                *[
                    ft.ListTile(
                        leading=ft.Icon(
                            ft.Icons.WORKSPACE_PREMIUM if p.is_premium else ft.Icons.ARTICLE
                        ),
                        title=ft.Text(p.title),
                        subtitle=ft.Text(excerpt(p, 80)),
                        trailing=ft.Text(p.status),
                        on_click=lambda _, pid=p.id: self.page.go(f"/post/{pid}"),
                    )
                    for p in data.posts
                ],
            ),
            section(
                "Subscriptions",
                *[
                    ft.ListTile(
                        title=ft.Text(f"{s.plan} plan"),
                        subtitle=ft.Text(s.status),
                        trailing=ft.Text(format_money(s.price)),
                    )
                    for s in data.subscriptions
                ],
            ),
            section(
                "Users",
                *[
                    ft.ListTile(
                        leading=ft.Icon(ft.Icons.PERSON),
                        title=ft.Text(u.username),
                        subtitle=ft.Text(u.email),
                        trailing=ft.Text(u.role),
                    )
                    for u in data.users
                ],
            ),
        ]
