from collections.abc import Callable
from typing import Any

import flet as ft

from nexora.domain.entities import Post
from nexora.ui.presenters import excerpt, format_count
from nexora.ui.theme import AppTheme


class PostCard(ft.Container):  # type: ignore
    """
    Post summary card with hover lift. Premium posts carry an amber badge.
    """

    def __init__(
        self,
        post: Post,
        on_open: Callable[[Post], Any] | None = None,
        actions: list[ft.Control] | None = None,
        bookmarked: bool = False,
    ):
        self.post = post
        badge = ft.Container(
            content=ft.Row(
                [
                    ft.Icon(ft.Icons.WORKSPACE_PREMIUM, size=14, color=AppTheme.premium),
                    ft.Text("Premium", size=12, color=AppTheme.premium),
                ],
                spacing=4,
            ),
            visible=post.is_premium,
        )
        super().__init__(
            content=ft.Column(
                [
                    ft.Row(
                        [
                            ft.Text(post.title, size=18, weight=ft.FontWeight.BOLD, expand=True),
                            badge,
                            ft.Icon(
                                ft.Icons.BOOKMARK if bookmarked else ft.Icons.BOOKMARK_BORDER,
                                size=18,
                            ),
                        ]
                    ),
                    ft.Text(excerpt(post), size=14, color="onSurfaceVariant"),
                    ft.Row(
                        [
                            ft.Icon(ft.Icons.FAVORITE_BORDER, size=14),
                            ft.Text(format_count(post.likes), size=12),
                            ft.Icon(ft.Icons.VISIBILITY_OUTLINED, size=14),
                            ft.Text(format_count(post.views), size=12),
                            ft.Container(expand=True),
                            *(actions or []),
                        ],
                        spacing=6,
                    ),
                ],
                spacing=8,
            ),
            padding=20,
            border_radius=ft.border_radius.all(12),
            bgcolor="surfaceVariant",
            animate=ft.animation.Animation(200, ft.AnimationCurve.EASE_OUT),
            on_hover=self._on_hover,
            on_click=(lambda _: on_open(post)) if on_open else None,
            shadow=ft.BoxShadow(
                spread_radius=0,
                blur_radius=10,
                color="#1A000000",
                offset=ft.Offset(0, 4),
            ),
        )

    def _on_hover(self, e: ft.HoverEvent) -> None:
        lifted = e.data == "true"
        self.scale = 1.01 if lifted else 1.0
        self.shadow.blur_radius = 20 if lifted else 10
        self.shadow.offset = ft.Offset(0, 8 if lifted else 4)
        self.update()
