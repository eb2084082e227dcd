import logging
import flet as ft

from nexora.components.api_client import ApiError
from nexora.components.gate import gate_post
from nexora.domain.entities import Post
from nexora.ui.components.widgets import show_snack
from nexora.ui.context import ServiceContext
from nexora.ui.state import AppState
from nexora.ui.theme import AppTheme
from nexora.ui.views.base import LoadFailed, LoadingView

logger = logging.getLogger(__name__)


class PostView(LoadingView):
    """Single post reader. Premium bodies go through the gate."""

    def __init__(
        self, page: ft.Page, ctx: ServiceContext, state: AppState, post_id: str
    ) -> None:
        super().__init__(page, ctx, state)
        self.post_id = post_id

    async def fetch(self) -> list[ft.Control]:
        session = self.state.session
        post = session.get_post(self.post_id) if session else None
        if post is None:
            try:
                posts = await self.state.client.posts.get_all_posts()
            except ApiError as e:
                raise LoadFailed(e.message) from e
            post = next((p for p in posts if p.id == self.post_id), None)
        if post is None:
            raise LoadFailed(f"Post {self.post_id} not found")

        return self._build(post)

    def _build(self, post: Post) -> list[ft.Control]:
        gated = gate_post(post, self.ctx.membership.is_paid_member, self.ctx.gate)

        body: list[ft.Control] = [
            ft.Text(post.title, size=32, weight=ft.FontWeight.BOLD),
            ft.Text(gated.text, size=16, selectable=not gated.is_preview),
        ]
        if gated.show_upgrade_prompt:
            body.append(self._gate_panel(gated.notice_text, gated.cta_text))
        return body

    def _gate_panel(self, notice: str, cta: str) -> ft.Control:
        return ft.Container(
            content=ft.Column(
                [
                    ft.Icon(ft.Icons.LOCK_OUTLINE, color=AppTheme.premium, size=32),
                    ft.Text(notice, weight=ft.FontWeight.W_600),
                    ft.ElevatedButton(cta, icon=ft.Icons.WORKSPACE_PREMIUM, on_click=self._upgrade),
                ],
                horizontal_alignment=ft.CrossAxisAlignment.CENTER,
            ),
            padding=24,
            border_radius=12,
            gradient=ft.LinearGradient(
                begin=ft.alignment.top_center,
                end=ft.alignment.bottom_center,
                colors=["#00FFFFFF", "surfaceVariant"],
            ),
            alignment=ft.alignment.center,
        )

    async def _upgrade(self, e: ft.ControlEvent) -> None:
        result = await self.ctx.membership.start_membership_checkout()
        if result.success and result.url:
            self.page.launch_url(result.url)
            return
        show_snack(self.page, result.error_message or "Checkout unavailable.", error=True)
