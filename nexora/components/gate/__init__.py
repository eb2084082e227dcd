"""
Content gate component.

Public API for premium paywall decisions.
"""

from .component import (
    gate_content,
    gate_post,
    get_paywall_info,
    load_config_from_rules,
    preview_length,
)
from .models import GateConfig, GatedContentOutput

__all__ = [
    # Functions
    "gate_content",
    "gate_post",
    "get_paywall_info",
    "load_config_from_rules",
    "preview_length",
    # Models
    "GateConfig",
    "GatedContentOutput",
]
