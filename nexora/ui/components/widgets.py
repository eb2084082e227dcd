from collections.abc import Awaitable, Callable
from typing import Any

import flet as ft

from nexora.ui.presenters import StatTile


def stat_row(tiles: list[StatTile]) -> ft.Row:
    return ft.Row(
        [
            ft.Container(
                content=ft.Column(
                    [
                        ft.Icon(getattr(ft.Icons, tile.icon), color="primary"),
                        ft.Text(tile.value, size=22, weight=ft.FontWeight.BOLD),
                        ft.Text(tile.label, size=12, color="onSurfaceVariant"),
                    ],
                    spacing=4,
                ),
                padding=16,
                border_radius=ft.border_radius.all(12),
                bgcolor="surfaceVariant",
                expand=True,
            )
            for tile in tiles
        ],
        spacing=12,
    )


class ErrorPanel(ft.Container):  # type: ignore
    """Load failure message with a retry button."""

    def __init__(self, message: str, on_retry: Callable[[], Awaitable[Any]]):
        self._on_retry = on_retry
        super().__init__(
            content=ft.Column(
                [
                    ft.Icon(ft.Icons.ERROR_OUTLINE, color="error", size=40),
                    ft.Text("Could not load this dashboard.", weight=ft.FontWeight.BOLD),
                    ft.Text(message, color="onSurfaceVariant", selectable=True),
                    ft.ElevatedButton("Retry", icon=ft.Icons.REFRESH, on_click=self._retry),
                ],
                horizontal_alignment=ft.CrossAxisAlignment.CENTER,
            ),
            padding=40,
            alignment=ft.alignment.center,
        )

    async def _retry(self, e: ft.ControlEvent) -> None:
        await self._on_retry()


def loading_indicator() -> ft.Control:
    return ft.Container(content=ft.ProgressRing(), alignment=ft.alignment.center, padding=40)


def show_snack(page: ft.Page, message: str, error: bool = False) -> None:
    page.open(
        ft.SnackBar(
            ft.Text(message),
            bgcolor="errorContainer" if error else None,
        )
    )
