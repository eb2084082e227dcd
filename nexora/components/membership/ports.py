"""Membership component port definitions."""

from __future__ import annotations

from nexora.core.ports.billing import BillingConfirmation, BillingPort
from nexora.core.ports.storage import KeyValueStorePort

__all__ = ["BillingConfirmation", "BillingPort", "KeyValueStorePort"]
