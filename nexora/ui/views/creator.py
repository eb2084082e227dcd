import logging

import flet as ft

from nexora.components.dashboards import (
    DashboardSession,
    creator_stats,
    load_creator_dashboard,
)
from nexora.domain.entities import Post
from nexora.ui.components.post_card import PostCard
from nexora.ui.components.widgets import show_snack, stat_row
from nexora.ui.presenters import creator_tiles
from nexora.ui.views.base import LoadFailed, LoadingView, section

logger = logging.getLogger(__name__)


class CreatorDashboardView(LoadingView):
    """Creator stats, own posts with delete, and subscriber list."""

    async def fetch(self) -> list[ft.Control]:
        result = await load_creator_dashboard(self.state.client)
        if not result.success or result.data is None:
            raise LoadFailed(result.error_message or "Unknown error")

        self.state.session = DashboardSession(self.state.client, result.data.posts)
        self._subscribers = result.data.subscribers
        return self._build()

    def _build(self) -> list[ft.Control]:
        session = self.state.session
        assert session is not None
        stats = creator_stats(session.posts, self._subscribers, self.ctx.revenue)

        return [
            ft.Row(
                [
                    ft.Text("Creator Dashboard", size=26, weight=ft.FontWeight.BOLD, expand=True),
                    ft.ElevatedButton(
                        "Write New Post",
                        icon=ft.Icons.EDIT,
                        on_click=lambda _: self.page.go("/editor"),
                    ),
                ]
            ),
            stat_row(creator_tiles(stats)),
            ft.Text(
                f"{stats.published_posts} published, {stats.draft_posts} drafts",
                color="onSurfaceVariant",
            ),
            section("Your posts", *[self._post_card(p) for p in session.posts]),
            section(
                "Subscribers",
                *[
                    ft.ListTile(
                        leading=ft.Icon(ft.Icons.PERSON),
                        title=ft.Text(u.username),
                        subtitle=ft.Text(u.email),
                    )
                    for u in self._subscribers
                ],
            ),
        ]

    def _post_card(self, post: Post) -> ft.Control:
        session = self.state.session
        assert session is not None
        return PostCard(
            post,
            on_open=lambda p: self.page.go(f"/post/{p.id}"),
            actions=[
                ft.IconButton(
                    ft.Icons.DELETE_OUTLINE,
                    tooltip="Delete",
                    disabled=session.is_busy(post.id),
                    on_click=lambda _, pid=post.id: self._confirm_delete(pid),
                ),
            ],
        )

    def _confirm_delete(self, post_id: str) -> None:
        async def confirm(_: ft.ControlEvent) -> None:
            self.page.close(dialog)
            await self._delete(post_id)

        dialog = ft.AlertDialog(
            title=ft.Text("Delete post?"),
            content=ft.Text("This cannot be undone."),
            actions=[
                ft.TextButton("Cancel", on_click=lambda _: self.page.close(dialog)),
                ft.ElevatedButton("Delete", on_click=confirm),
            ],
        )
        self.page.open(dialog)

    async def _delete(self, post_id: str) -> None:
        session = self.state.session
        if session is None:
            return
        result = await session.delete_post(post_id)
        if result.success:
            show_snack(self.page, "Post deleted")
        elif result.errors:
            show_snack(self.page, f"Could not delete post: {result.errors[0].message}", error=True)
        self.controls = self._build()
        self.update()
