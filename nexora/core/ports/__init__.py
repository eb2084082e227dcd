"""
Core ports: protocols for the collaborators the client talks to.

- storage: client-local key-value persistence
- billing: checkout / billing portal redirects and confirmations
- time: clock
"""

from nexora.core.ports.billing import (
    BillingConfirmation,
    BillingPort,
    BillingUnavailableError,
)
from nexora.core.ports.storage import KeyValueStorePort
from nexora.core.ports.time import ClockPort

__all__ = [
    "BillingConfirmation",
    "BillingPort",
    "BillingUnavailableError",
    "ClockPort",
    "KeyValueStorePort",
]
