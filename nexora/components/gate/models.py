"""
Content gate models.

Data models for the premium paywall: what a reader is shown of a premium item.
"""

from __future__ import annotations

from dataclasses import dataclass

# --- Configuration ---


@dataclass(frozen=True)
class GateConfig:
    """Gate configuration from rules."""

    min_preview_chars: int = 80
    preview_ratio: float = 0.5
    cta_text: str = "Upgrade to premium for full access"
    notice_text: str = "You're reading a premium story."


# --- Output ---


@dataclass(frozen=True)
class GatedContentOutput:
    """
    What to render for one content item.

    `text` is the revealed part only; hidden characters are never included.
    """

    text: str
    is_preview: bool
    total_chars: int
    visible_chars: int
    hidden_chars: int
    show_upgrade_prompt: bool
    cta_text: str | None = None
    notice_text: str | None = None
