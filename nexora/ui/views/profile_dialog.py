import logging
from collections.abc import Callable
from pathlib import Path

import flet as ft

from nexora.components.api_client import ApiError
from nexora.domain.entities import DashboardData
from nexora.ui.context import ServiceContext
from nexora.ui.presenters import profile_changes

logger = logging.getLogger(__name__)


class ProfileSettingsDialog(ft.AlertDialog):  # type: ignore
    """Edit username, bio and profile picture (PATCH /private/dashboard)."""

    def __init__(
        self,
        page: ft.Page,
        ctx: ServiceContext,
        profile: DashboardData,
        on_saved: Callable[[DashboardData], None],
    ) -> None:
        self.host_page = page
        self.ctx = ctx
        self.profile = profile
        self.on_saved = on_saved
        self.picture: tuple[str, bytes] | None = None

        self.username_field = ft.TextField(label="Username", value=profile.username)
        self.bio_field = ft.TextField(
            label="Bio", value=profile.bio or "", multiline=True, min_lines=2, max_lines=4
        )
        self.picture_label = ft.Text("No new picture", size=12, color="onSurfaceVariant")
        self.file_picker = ft.FilePicker(on_result=self._on_picture_picked)
        page.overlay.append(self.file_picker)

        self.error_text = ft.Text(color="error", visible=False)
        self.save_button = ft.ElevatedButton("Save changes", on_click=self._save)
        self.cancel_button = ft.TextButton("Cancel", on_click=lambda _: page.close(self))

        super().__init__(
            modal=True,
            title=ft.Text("Profile Settings"),
            content=ft.Column(
                [
                    self.username_field,
                    self.bio_field,
                    ft.Row(
                        [
                            ft.OutlinedButton(
                                "Choose picture",
                                icon=ft.Icons.IMAGE_OUTLINED,
                                on_click=lambda _: self.file_picker.pick_files(
                                    allow_multiple=False,
                                    file_type=ft.FilePickerFileType.IMAGE,
                                ),
                            ),
                            self.picture_label,
                        ]
                    ),
                    self.error_text,
                ],
                tight=True,
                width=420,
            ),
            actions=[self.cancel_button, self.save_button],
        )

    def _on_picture_picked(self, e: ft.FilePickerResultEvent) -> None:
        if not e.files or not e.files[0].path:
            return
        picked = e.files[0]
        self.picture = (picked.name, Path(picked.path).read_bytes())
        self.picture_label.value = picked.name
        self.update()

    def _show_error(self, message: str) -> None:
        self.error_text.value = message
        self.error_text.visible = True
        self.save_button.disabled = False
        self.update()

    async def _save(self, e: ft.ControlEvent) -> None:
        try:
            fields = profile_changes(
                self.profile, self.username_field.value or "", self.bio_field.value or ""
            )
        except ValueError as err:
            self._show_error(str(err))
            return

        if not fields and self.picture is None:
            self.host_page.close(self)
            return

        self.save_button.disabled = True
        self.error_text.visible = False
        self.update()
        try:
            updated = await self.ctx.client.dashboard.update_dashboard_data(
                fields, profile_pic=self.picture
            )
        except ApiError as err:
            logger.warning(f"Profile update failed: {err.message}")
            self._show_error(err.message)
            return

        self.host_page.close(self)
        self.on_saved(updated)
