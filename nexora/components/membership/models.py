"""
Membership component models.

Tier values, redirect outputs and error records.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

# --- Tiers ---

MembershipTier = Literal["free", "member", "creator"]

PAID_TIERS: frozenset[str] = frozenset({"member", "creator"})

DEFAULT_STORAGE_KEY = "membership:tier"


def parse_tier(value: str | None) -> MembershipTier:
    """Map a persisted value to a tier; anything unrecognised is free."""
    if value == "member":
        return "member"
    if value == "creator":
        return "creator"
    return "free"


def is_paid(tier: MembershipTier) -> bool:
    """True iff the tier carries paid-content access."""
    return tier in PAID_TIERS


# --- Outputs ---


@dataclass(frozen=True)
class MembershipError:
    """Why a billing redirect could not be produced."""

    code: str
    message: str


@dataclass(frozen=True)
class RedirectOutput:
    """
    Outcome of a checkout or billing-portal request.

    On success `url` is where the client should navigate. On failure `url`
    is None and `errors` explains why; the tier is left untouched.
    """

    success: bool
    url: str | None = None
    errors: list[MembershipError] = field(default_factory=list)

    @property
    def error_message(self) -> str | None:
        return self.errors[0].message if self.errors else None
