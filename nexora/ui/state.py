from __future__ import annotations

from dataclasses import dataclass, field

from nexora.components.api_client import ApiClient
from nexora.components.dashboards import DashboardSession
from nexora.components.membership import MembershipState
from nexora.domain.entities import User


@dataclass
class AppState:
    """Per-session UI state. Views receive it explicitly."""

    membership: MembershipState
    client: ApiClient
    current_user: User | None = None
    session: DashboardSession | None = field(default=None, repr=False)

    @property
    def is_authenticated(self) -> bool:
        return self.current_user is not None or self.client.is_authenticated()

    @property
    def is_admin(self) -> bool:
        return self.current_user is not None and self.current_user.role == "admin"

    def logout(self) -> None:
        self.current_user = None
        self.session = None
        self.client.logout()
