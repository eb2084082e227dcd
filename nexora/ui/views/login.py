import flet as ft

from nexora.components.api_client import ApiError
from nexora.ui.context import ServiceContext
from nexora.ui.presenters import home_route
from nexora.ui.state import AppState


class LoginView(ft.Column):  # type: ignore
    def __init__(self, page: ft.Page, ctx: ServiceContext, state: AppState) -> None:
        super().__init__()
        self.page = page
        self.ctx = ctx
        self.state = state

        self.email = ft.TextField(label="Email", width=300)
        self.password = ft.TextField(
            label="Password", width=300, password=True, can_reveal_password=True
        )
        self.error_text = ft.Text(color="red", visible=False)
        self.login_button = ft.ElevatedButton("Login", on_click=self.login_click)

        self.alignment = ft.MainAxisAlignment.CENTER
        self.horizontal_alignment = ft.CrossAxisAlignment.CENTER
        self.controls = [
            ft.Text("Nexora", style="headlineMedium"),
            self.email,
            self.password,
            self.error_text,
            self.login_button,
        ]

    def _show_error(self, message: str) -> None:
        self.error_text.value = message
        self.error_text.visible = True
        self.update()

    async def login_click(self, e: ft.ControlEvent) -> None:
        email = self.email.value
        pwd = self.password.value

        if not email or not pwd:
            self._show_error("Please enter email and password.")
            return

        self.login_button.disabled = True
        self.update()
        try:
            result = await self.ctx.client.auth.login(email, pwd)
        except ApiError as err:
            self.login_button.disabled = False
            self._show_error(err.message)
            return

        self.state.current_user = result.user
        self.page.go(home_route(result.user.role))
