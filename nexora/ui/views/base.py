import logging
from typing import Any

import flet as ft

from nexora.ui.components.widgets import ErrorPanel, loading_indicator
from nexora.ui.context import ServiceContext
from nexora.ui.state import AppState

logger = logging.getLogger(__name__)


class LoadingView(ft.Column):  # type: ignore
    """
    Column that fetches its data after mounting.

    Subclasses implement `fetch()` and return the controls to show, or raise
    LoadFailed to show the error panel with a retry.
    """

    def __init__(self, page: ft.Page, ctx: ServiceContext, state: AppState) -> None:
        super().__init__(expand=True, scroll=ft.ScrollMode.AUTO, spacing=16)
        self.page = page
        self.ctx = ctx
        self.state = state
        self.controls = [loading_indicator()]

    def did_mount(self) -> None:
        self.page.run_task(self.reload)

    async def reload(self) -> None:
        self.controls = [loading_indicator()]
        self.update()
        try:
            self.controls = await self.fetch()
        except LoadFailed as e:
            self.controls = [ErrorPanel(e.message, self.reload)]
        self.update()

    async def fetch(self) -> list[ft.Control]:
        raise NotImplementedError


class LoadFailed(Exception):
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


def section(title: str, *controls: Any) -> ft.Column:
    return ft.Column(
        [ft.Text(title, size=20, weight=ft.FontWeight.W_600), *controls],
        spacing=10,
    )
