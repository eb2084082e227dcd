import logging

import flet as ft

from nexora.components.api_client import ApiError
from nexora.ui.context import ServiceContext
from nexora.ui.presenters import format_money

logger = logging.getLogger(__name__)


class CreatorUpgradeDialog(ft.AlertDialog):  # type: ignore
    """One-time creator activation: backend role change, then the creator tier."""

    def __init__(self, page: ft.Page, ctx: ServiceContext) -> None:
        self.host_page = page
        self.ctx = ctx
        fee = format_money(ctx.rules.revenue.creator_activation_fee)

        self.error_text = ft.Text(color="error", visible=False)
        self.confirm_button = ft.ElevatedButton(
            f"Pay {fee} & Upgrade", on_click=self._confirm
        )
        self.cancel_button = ft.TextButton("Cancel", on_click=lambda _: page.close(self))

        super().__init__(
            modal=True,
            title=ft.Row([ft.Icon(ft.Icons.WORKSPACE_PREMIUM), ft.Text("Upgrade to Creator")]),
            content=ft.Column(
                [
                    ft.Text(
                        "Publish posts, earn from readership, and access creator tools. "
                        f"One-time activation fee of {fee}, plus your monthly membership."
                    ),
                    ft.Container(
                        content=ft.Row(
                            [
                                ft.Column(
                                    [
                                        ft.Text("Creator activation", weight=ft.FontWeight.W_500),
                                        ft.Text("One-time, non-refundable", size=12),
                                    ],
                                    expand=True,
                                ),
                                ft.Text(fee, size=18, weight=ft.FontWeight.W_600),
                            ]
                        ),
                        padding=16,
                        border=ft.border.all(1, "outlineVariant"),
                        border_radius=8,
                    ),
                    self.error_text,
                ],
                tight=True,
                width=420,
            ),
            actions=[self.cancel_button, self.confirm_button],
        )

    async def _confirm(self, e: ft.ControlEvent) -> None:
        self.confirm_button.disabled = True
        self.cancel_button.disabled = True
        self.confirm_button.text = "Processing..."
        self.error_text.visible = False
        self.update()
        try:
            await self.ctx.client.dashboard.upgrade_to_creator()
        except ApiError as err:
            logger.warning(f"Creator upgrade failed: {err.message}")
            self.error_text.value = err.message
            self.error_text.visible = True
            self.confirm_button.disabled = False
            self.cancel_button.disabled = False
            self.confirm_button.text = "Try again"
            self.update()
            return

        self.ctx.membership.upgrade_to_creator()
        self.host_page.close(self)
        self.host_page.go("/creator")
