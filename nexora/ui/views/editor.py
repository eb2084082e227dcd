import asyncio
import logging

import flet as ft

from nexora.components.editor import (
    BlockView,
    DocumentEditor,
    UploadFailedError,
)
from nexora.domain.blocks import BLOCK_TYPES, TEXT_BLOCK_TYPES
from nexora.ui.components.widgets import show_snack
from nexora.ui.context import ServiceContext
from nexora.ui.state import AppState

logger = logging.getLogger(__name__)

STYLE_TOGGLES = [
    ("bold", ft.Icons.FORMAT_BOLD),
    ("italic", ft.Icons.FORMAT_ITALIC),
    ("underline", ft.Icons.FORMAT_UNDERLINED),
    ("strikethrough", ft.Icons.FORMAT_STRIKETHROUGH),
    ("code", ft.Icons.CODE),
]

_TEXT_SIZES = {"heading1": 30, "heading2": 24, "heading3": 20}


class EditorView(ft.Column):  # type: ignore
    """Block editor: toolbar, settings and an editable block list or preview."""

    def __init__(self, page: ft.Page, ctx: ServiceContext, state: AppState) -> None:
        super().__init__(expand=True, scroll=ft.ScrollMode.AUTO, spacing=12)
        self.page = page
        self.ctx = ctx
        self.state = state
        self.editor = DocumentEditor(config=ctx.editor)

        self.file_picker = ft.FilePicker(on_result=self._on_file_picked)
        page.overlay.append(self.file_picker)

        self.controls = self._build()

    # --- Layout ---

    def _build(self) -> list[ft.Control]:
        view = self.editor.render()
        locked = self.editor.is_published or self.editor.is_publishing
        return [
            self._toolbar(locked),
            self._settings(view.title, view.subtitle, view.tags, view.is_premium, view.price, locked),
            ft.Divider(),
            *[self._block_control(b, view.preview or locked) for b in view.blocks],
        ]

    def _rebuild(self) -> None:
        self.controls = self._build()
        self.update()

    def _toolbar(self, locked: bool) -> ft.Control:
        add_menu = ft.PopupMenuButton(
            icon=ft.Icons.ADD,
            tooltip="Add block",
            disabled=locked,
            items=[
                ft.PopupMenuItem(text=t, on_click=lambda _, bt=t: self._add_block(bt))
                for t in BLOCK_TYPES
                if t != "image"
            ]
            + [ft.PopupMenuItem(text="image (upload)", on_click=self._pick_image)],
        )
        styles = [
            ft.IconButton(
                icon,
                tooltip=name,
                disabled=locked or self.editor.active_block_id is None,
                on_click=lambda _, n=name: self._toggle_style(n),
            )
            for name, icon in STYLE_TOGGLES
        ]
        return ft.Row(
            [
                add_menu,
                *styles,
                ft.Container(expand=True),
                ft.OutlinedButton(
                    "Edit" if self.editor.preview_mode else "Preview",
                    icon=ft.Icons.VISIBILITY,
                    on_click=self._toggle_preview,
                ),
                ft.ElevatedButton(
                    "Publishing..." if self.editor.is_publishing else ("Published" if locked else "Publish"),
                    icon=ft.Icons.PUBLISH,
                    disabled=locked,
                    on_click=self._publish,
                ),
            ]
        )

    def _settings(
        self,
        title: str,
        subtitle: str,
        tags: tuple[str, ...],
        is_premium: bool,
        price: float | None,
        locked: bool,
    ) -> ft.Control:
        tag_input = ft.TextField(
            label="Add tag",
            width=200,
            disabled=locked,
            on_submit=lambda e: self._add_tag(e.control.value),
        )
        return ft.Column(
            [
                ft.TextField(
                    label="Title",
                    value=title if title != "Untitled Post" else "",
                    text_size=24,
                    disabled=locked,
                    on_blur=lambda e: self.editor.set_title(e.control.value or ""),
                ),
                ft.TextField(
                    label="Subtitle",
                    value=subtitle,
                    disabled=locked,
                    on_blur=lambda e: self.editor.set_subtitle(e.control.value or ""),
                ),
                ft.Row(
                    [
                        tag_input,
                        *[
                            ft.Chip(
                                label=ft.Text(t),
                                on_delete=None if locked else (lambda _, tag=t: self._remove_tag(tag)),
                            )
                            for t in tags
                        ],
                    ],
                    wrap=True,
                ),
                ft.Row(
                    [
                        ft.Switch(
                            label="Premium",
                            value=is_premium,
                            disabled=locked,
                            on_change=lambda e: self._set_premium(e.control.value, price),
                        ),
                        ft.TextField(
                            label="Price",
                            value="" if price is None else str(price),
                            width=120,
                            visible=is_premium,
                            disabled=locked,
                            on_blur=lambda e: self._set_price(e.control.value),
                        ),
                    ]
                ),
            ]
        )

    def _block_control(self, block: BlockView, read_only: bool) -> ft.Control:
        if block.block_type == "divider":
            return ft.Divider()

        if block.block_type == "image":
            return ft.Column(
                [
                    ft.Image(src=block.attrs.get("src", ""), fit=ft.ImageFit.CONTAIN),
                    ft.Text(block.attrs.get("caption", ""), size=12, italic=True),
                ]
            )

        weight = ft.FontWeight.BOLD if block.style.get("fontWeight") == "bold" else None
        size = _TEXT_SIZES.get(block.block_type, 16)
        if read_only:
            return ft.Text(block.text, size=size, weight=weight, selectable=True)

        return ft.TextField(
            value="" if block.is_placeholder else block.text,
            hint_text=block.text if block.is_placeholder else None,
            multiline=True,
            border=ft.InputBorder.UNDERLINE if block.is_active else ft.InputBorder.NONE,
            text_size=size,
            text_style=ft.TextStyle(weight=weight),
            prefix_text="> " if block.block_type == "quote" else None,
            on_focus=lambda _, bid=block.block_id: self._focus(bid),
            on_blur=lambda e, bid=block.block_id: self._commit_text(bid, e.control.value or ""),
            suffix=ft.IconButton(
                ft.Icons.CLOSE,
                icon_size=16,
                tooltip="Delete block",
                on_click=lambda _, bid=block.block_id: self._delete_block(bid),
            ),
        )

    # --- Handlers ---

    def _add_block(self, block_type: str) -> None:
        self.editor.add_block(block_type, self.editor.active_block_id)  # type: ignore[arg-type]
        self._rebuild()

    def _delete_block(self, block_id: str) -> None:
        if not self.editor.delete_block(block_id):
            show_snack(self.page, "A post needs at least one block.")
        self._rebuild()

    def _focus(self, block_id: str) -> None:
        if self.editor.active_block_id != block_id:
            self.editor.focus(block_id)
            self._rebuild()

    def _toggle_style(self, name: str) -> None:
        block_id = self.editor.active_block_id
        block = next((b for b in self.editor.blocks if b.id == block_id), None)
        if block is None or block.type not in TEXT_BLOCK_TYPES:
            return
        self.editor.apply_style(name, not getattr(block.styles, name))
        self._rebuild()

    def _toggle_preview(self, e: ft.ControlEvent) -> None:
        self.editor.toggle_preview()
        self._rebuild()

    def _add_tag(self, tag: str | None) -> None:
        if tag and self.editor.add_tag(tag):
            self._rebuild()

    def _remove_tag(self, tag: str) -> None:
        self.editor.remove_tag(tag)
        self._rebuild()

    def _set_premium(self, is_premium: bool, price: float | None) -> None:
        self.editor.set_premium(is_premium, price if is_premium else None)
        self._rebuild()

    def _set_price(self, raw: str | None) -> None:
        try:
            price = float(raw) if raw else None
            self.editor.set_premium(True, price)
        except ValueError:
            show_snack(self.page, "Price must be a non-negative number.", error=True)
        self._rebuild()

    def _pick_image(self, e: ft.ControlEvent) -> None:
        self.file_picker.pick_files(
            allow_multiple=False,
            file_type=ft.FilePickerFileType.IMAGE,
        )

    def _on_file_picked(self, e: ft.FilePickerResultEvent) -> None:
        if not e.files or not e.files[0].path:
            return
        picked = e.files[0]
        self.page.run_task(self._insert_image, picked.name, picked.path)

    async def _insert_image(self, name: str, path: str) -> None:
        with open(path, "rb") as f:
            data = f.read()
        try:
            await self.editor.insert_image(
                name, data, self.ctx.uploader, self.editor.active_block_id
            )
        except UploadFailedError as err:
            show_snack(self.page, f"Upload failed: {err}", error=True)
            return
        self._rebuild()

    def _commit_text(self, block_id: str, text: str) -> None:
        # Blur also fires when the fields are disabled for a publish.
        if self.editor.is_published or self.editor.is_publishing:
            return
        self.editor.update_block(block_id, content=text)

    async def _publish(self, e: ft.ControlEvent) -> None:
        task = asyncio.create_task(self.editor.publish(self.ctx.publisher, self.ctx.clock))
        # publish() has set its in-flight flag by the time the task first yields.
        await asyncio.sleep(0)
        self._rebuild()
        result = await task
        if result.success:
            show_snack(self.page, "Post published")
        else:
            show_snack(self.page, result.errors[0].message, error=True)
        self._rebuild()
