"""
Content gate component.

Pure functions deciding how much of a content item a reader sees.

Paid members see everything. Free readers of a premium item see the first
max(80, floor(len * 0.5)) characters followed by an upgrade prompt. The gate
is a property of the item: non-premium items are never gated.
"""

from __future__ import annotations

import math
from typing import Any

from nexora.domain.entities import Post
from nexora.rules.models import GateRules

from .models import GateConfig, GatedContentOutput


def preview_length(total_chars: int, config: GateConfig | None = None) -> int:
    """
    Number of characters a free reader is shown.

    Not clamped: callers slice, so a value past the end reveals the whole text.
    """
    config = config or GateConfig()
    return max(config.min_preview_chars, math.floor(total_chars * config.preview_ratio))


def gate_content(
    content: str,
    is_paid_member: bool,
    config: GateConfig | None = None,
) -> GatedContentOutput:
    """
    Gate a premium content string.

    Args:
        content: Full body text
        is_paid_member: Reader's membership state
        config: Gate configuration

    Returns:
        GatedContentOutput with the revealed text and counts
    """
    config = config or GateConfig()
    total = len(content)

    if is_paid_member:
        return GatedContentOutput(
            text=content,
            is_preview=False,
            total_chars=total,
            visible_chars=total,
            hidden_chars=0,
            show_upgrade_prompt=False,
        )

    preview = content[: preview_length(total, config)]

    # The prompt is shown even when the preview happens to cover the whole
    # (short) text: the item is still premium.
    return GatedContentOutput(
        text=preview,
        is_preview=True,
        total_chars=total,
        visible_chars=len(preview),
        hidden_chars=total - len(preview),
        show_upgrade_prompt=True,
        cta_text=config.cta_text,
        notice_text=config.notice_text,
    )


def gate_post(
    post: Post,
    is_paid_member: bool,
    config: GateConfig | None = None,
) -> GatedContentOutput:
    """Gate a post body; non-premium posts bypass the gate entirely."""
    if not post.is_premium:
        total = len(post.content)
        return GatedContentOutput(
            text=post.content,
            is_preview=False,
            total_chars=total,
            visible_chars=total,
            hidden_chars=0,
            show_upgrade_prompt=False,
        )
    return gate_content(post.content, is_paid_member, config)


def get_paywall_info(
    content: str,
    is_premium: bool,
    is_paid_member: bool,
    config: GateConfig | None = None,
) -> dict[str, Any]:
    """
    Paywall display information for the view layer.

    Does NOT include hidden content.
    """
    config = config or GateConfig()
    if is_premium:
        gated = gate_content(content, is_paid_member, config)
    else:
        gated = gate_content(content, True, config)

    return {
        "show_paywall": gated.show_upgrade_prompt,
        "is_premium": is_premium,
        "is_paid_member": is_paid_member,
        "total_chars": gated.total_chars,
        "visible_chars": gated.visible_chars,
        "hidden_chars": gated.hidden_chars,
        "cta_text": config.cta_text,
        "notice_text": config.notice_text,
    }


def load_config_from_rules(rules: GateRules) -> GateConfig:
    return GateConfig(
        min_preview_chars=rules.min_preview_chars,
        preview_ratio=rules.preview_ratio,
        cta_text=rules.cta_text,
        notice_text=rules.notice_text,
    )
