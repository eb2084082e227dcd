"""
Invariants that must hold across the client, whatever the inputs.
"""

from decimal import Decimal

import pytest

from nexora.adapters.kv_store import InMemoryKeyValueStore
from nexora.components.dashboards import split_revenue
from nexora.components.dataset import generate_pairs
from nexora.components.editor import DocumentEditor, render_html
from nexora.components.gate import GateConfig, gate_content
from nexora.components.membership import DEFAULT_STORAGE_KEY, MembershipState
from nexora.domain.blocks import Block, BlogPost


# --- Gate ---
@pytest.mark.parametrize("length", [0, 1, 79, 80, 81, 159, 160, 161, 199, 200, 1001])
def test_gate_never_reveals_more_than_preview(length: int) -> None:
    content = "x" * length
    result = gate_content(content, is_paid_member=False)
    assert result.text == content[: max(80, length // 2)]
    assert result.visible_chars + result.hidden_chars == length
    assert result.show_upgrade_prompt


@pytest.mark.parametrize("ratio", [0.0, 0.1, 0.5, 1.0])
def test_gate_ratio_bounds(ratio: float) -> None:
    config = GateConfig(min_preview_chars=0, preview_ratio=ratio)
    result = gate_content("y" * 100, is_paid_member=False, config=config)
    assert result.visible_chars == int(100 * ratio)


# --- Membership ---
def test_paid_iff_member_or_creator() -> None:
    membership = MembershipState(InMemoryKeyValueStore())
    for op, paid in [
        (membership.upgrade_to_member, True),
        (membership.cancel_membership, False),
        (membership.upgrade_to_creator, True),
        (membership.upgrade_to_member, True),
        (membership.cancel_membership, False),
    ]:
        op()
        assert membership.is_paid_member is paid


def test_storage_mirrors_tier_after_every_transition() -> None:
    storage = InMemoryKeyValueStore()
    membership = MembershipState(storage)
    for op in (membership.upgrade_to_creator, membership.cancel_membership, membership.upgrade_to_member):
        tier = op()
        assert storage.get(DEFAULT_STORAGE_KEY) == tier


# --- Editor ---
def test_editor_never_drops_below_one_block() -> None:
    editor = DocumentEditor()
    for block_type in ("quote", "divider", "heading2"):
        editor.add_block(block_type)  # type: ignore[arg-type]
    for block in editor.blocks:
        editor.delete_block(block.id)
    assert len(editor.blocks) == 1


def test_html_output_escapes_every_block() -> None:
    payload = '<img src=x onerror="alert(1)">'
    doc = BlogPost(
        title=payload,
        subtitle=payload,
        blocks=[Block(type=t, content=payload) for t in ("paragraph", "quote", "list", "heading3")],  # type: ignore[arg-type]
    )
    assert "<img src=x" not in render_html(doc)


# --- Revenue ---
@pytest.mark.parametrize("cents", [0, 1, 2, 3, 99, 101, 499, 1999, 123456])
def test_revenue_split_is_exact(cents: int) -> None:
    price = Decimal(cents) / 100
    split = split_revenue(price)
    assert split.creator_share + split.platform_share == price
    assert split.platform_share >= 0


# --- Dataset ---
def test_dataset_canonical_prefix_is_stable() -> None:
    small = generate_pairs(13)
    large = generate_pairs(520)
    assert large[:13] == small
