import logging

import flet as ft

from nexora.components.dashboards import (
    DashboardSession,
    load_reader_dashboard,
    reader_stats,
)
from nexora.domain.entities import DashboardData, Post
from nexora.ui.components.post_card import PostCard
from nexora.ui.components.widgets import show_snack, stat_row
from nexora.ui.presenters import reader_tiles, tier_label
from nexora.ui.views.base import LoadFailed, LoadingView, section
from nexora.ui.views.profile_dialog import ProfileSettingsDialog

logger = logging.getLogger(__name__)


class ReaderDashboardView(LoadingView):
    """Discover feed, reader stats and membership controls."""

    async def fetch(self) -> list[ft.Control]:
        result = await load_reader_dashboard(self.state.client)
        if not result.success or result.data is None:
            raise LoadFailed(result.error_message or "Unknown error")

        data = result.data
        previous = self.state.session
        self.state.session = DashboardSession(self.state.client, data.posts, data.bookmarks)
        if previous is not None:
            self.state.session.bookmarked = set(previous.bookmarked)
            self.state.session.liked = set(previous.liked)
        self._subscriptions = data.subscriptions
        self._profile = data.profile

        return self._build()

    def _build(self) -> list[ft.Control]:
        session = self.state.session
        assert session is not None
        stats = reader_stats(
            session.posts,
            self._subscriptions,
            session.bookmarked,
            self.ctx.rules.dashboard.reading_words_per_minute,
        )
        return [
            ft.Row(
                [
                    ft.Text(
                        f"Welcome back, {self._profile.username}",
                        size=26,
                        weight=ft.FontWeight.BOLD,
                        expand=True,
                    ),
                    ft.TextButton("Profile", icon=ft.Icons.PERSON_OUTLINE, on_click=self._open_profile),
                ]
            ),
            stat_row(reader_tiles(stats)),
            self._membership_panel(),
            section("Discover", *[self._post_card(p) for p in session.posts]),
            section(
                "Bookmarks",
                *[self._post_card(p) for p in session.posts if p.id in session.bookmarked],
            ),
        ]

    def _refresh(self) -> None:
        self.controls = self._build()
        self.update()

    # --- Membership ---

    def _membership_panel(self) -> ft.Control:
        membership = self.ctx.membership
        buttons: list[ft.Control] = []
        if membership.is_paid_member:
            buttons.append(
                ft.OutlinedButton("Manage Billing", icon=ft.Icons.CREDIT_CARD, on_click=self._portal)
            )
        else:
            buttons.append(
                ft.ElevatedButton(
                    "Upgrade to Premium", icon=ft.Icons.WORKSPACE_PREMIUM, on_click=self._checkout
                )
            )
        if membership.tier != "creator":
            buttons.append(ft.TextButton("Become a Creator", on_click=self._open_creator_dialog))

        return ft.Container(
            content=ft.Row(
                [
                    ft.Column(
                        [
                            ft.Text("Membership", weight=ft.FontWeight.W_600),
                            ft.Text(tier_label(membership.tier), color="onSurfaceVariant"),
                        ],
                        expand=True,
                    ),
                    *buttons,
                ]
            ),
            padding=16,
            border=ft.border.all(1, "outlineVariant"),
            border_radius=12,
        )

    async def _checkout(self, e: ft.ControlEvent) -> None:
        result = await self.ctx.membership.start_membership_checkout()
        if result.success and result.url:
            self.page.launch_url(result.url)
            return
        if self.ctx.rules.membership.offer_demo_upgrade:
            self._offer_demo_upgrade(result.error_message or "Checkout unavailable.")
            return
        show_snack(self.page, result.error_message or "Checkout unavailable.", error=True)

    async def _portal(self, e: ft.ControlEvent) -> None:
        result = await self.ctx.membership.open_billing_portal()
        if result.success and result.url:
            self.page.launch_url(result.url)
            return
        show_snack(self.page, result.error_message or "Billing portal unavailable.", error=True)

    def _offer_demo_upgrade(self, reason: str) -> None:
        def confirm(_: ft.ControlEvent) -> None:
            self.page.close(dialog)
            self.ctx.membership.upgrade_to_member()
            self._refresh()

        dialog = ft.AlertDialog(
            title=ft.Text("Checkout unavailable"),
            content=ft.Text(f"{reason}\n\nSimulate a premium upgrade for this demo?"),
            actions=[
                ft.TextButton("Cancel", on_click=lambda _: self.page.close(dialog)),
                ft.ElevatedButton("Simulate upgrade", on_click=confirm),
            ],
        )
        self.page.open(dialog)

    def _open_profile(self, e: ft.ControlEvent) -> None:
        def saved(profile: DashboardData) -> None:
            self._profile = profile
            show_snack(self.page, "Profile updated")
            self._refresh()

        self.page.open(ProfileSettingsDialog(self.page, self.ctx, self._profile, saved))

    def _open_creator_dialog(self, e: ft.ControlEvent) -> None:
        from nexora.ui.views.upgrade_dialog import CreatorUpgradeDialog

        self.page.open(CreatorUpgradeDialog(self.page, self.ctx))

    # --- Posts ---

    def _post_card(self, post: Post) -> ft.Control:
        session = self.state.session
        assert session is not None
        return PostCard(
            post,
            on_open=lambda p: self.page.go(f"/post/{p.id}"),
            bookmarked=post.id in session.bookmarked,
            actions=[
                ft.IconButton(
                    ft.Icons.FAVORITE if post.id in session.liked else ft.Icons.FAVORITE_BORDER,
                    tooltip="Like",
                    disabled=session.is_busy(post.id),
                    on_click=lambda _, pid=post.id: self.page.run_task(self._like, pid),
                ),
                ft.IconButton(
                    ft.Icons.BOOKMARK_ADD_OUTLINED,
                    tooltip="Bookmark",
                    on_click=lambda _, pid=post.id: self._bookmark(pid),
                ),
            ],
        )

    async def _like(self, post_id: str) -> None:
        session = self.state.session
        if session is None:
            return
        result = await session.like_post(post_id)
        if result.errors:
            show_snack(self.page, f"Could not like post: {result.errors[0].message}", error=True)
        self._refresh()

    def _bookmark(self, post_id: str) -> None:
        session = self.state.session
        if session is None:
            return
        saved = session.toggle_bookmark(post_id)
        show_snack(self.page, "Saved to bookmarks" if saved else "Removed from bookmarks")
        self._refresh()
