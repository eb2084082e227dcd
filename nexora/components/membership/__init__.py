"""
Membership component.

Public API for the session's membership tier and billing redirects.
"""

from .component import MembershipState, TierListener
from .models import (
    DEFAULT_STORAGE_KEY,
    PAID_TIERS,
    MembershipError,
    MembershipTier,
    RedirectOutput,
    is_paid,
    parse_tier,
)
from .ports import BillingConfirmation, BillingPort, KeyValueStorePort

__all__ = [
    # State
    "MembershipState",
    "TierListener",
    # Models
    "DEFAULT_STORAGE_KEY",
    "PAID_TIERS",
    "MembershipError",
    "MembershipTier",
    "RedirectOutput",
    "is_paid",
    "parse_tier",
    # Ports
    "BillingConfirmation",
    "BillingPort",
    "KeyValueStorePort",
]
