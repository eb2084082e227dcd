from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from nexora.domain.blocks import (
    BLOCK_TYPES,
    STYLE_ALIASES,
    TEXT_BLOCK_TYPES,
    Block,
    BlockStyles,
    BlogPost,
)
from nexora.domain.entities import Post, Subscription, User
from nexora.domain.state import can_transition, transition

NOW = datetime(2025, 1, 1, 12, 0, tzinfo=UTC)


def test_block_types() -> None:
    assert len(BLOCK_TYPES) == 9
    assert "image" not in TEXT_BLOCK_TYPES
    assert "divider" not in TEXT_BLOCK_TYPES
    assert "ordered-list" in TEXT_BLOCK_TYPES


def test_block_ids_unique() -> None:
    assert Block().id != Block().id


def test_styles_merge_accepts_aliases() -> None:
    styles = BlockStyles(bold=True).merged({"backgroundColor": "#fff", "italic": True})
    assert styles.bold and styles.italic
    assert styles.background_color == "#fff"
    assert STYLE_ALIASES["fontSize"] == "font_size"


def test_styles_reject_unknown_fields() -> None:
    with pytest.raises(ValidationError):
        BlockStyles.model_validate({"blink": True})


def test_blog_post_lookup() -> None:
    doc = BlogPost()
    block_id = doc.blocks[0].id
    assert doc.index_of(block_id) == 0
    assert doc.get_block("missing") is None


def test_transitions() -> None:
    assert can_transition("draft", "published")
    assert can_transition("draft", "draft")
    assert not can_transition("published", "draft")


def test_transition_returns_new_document() -> None:
    doc = BlogPost(title="x")
    published = transition(doc, "published", NOW)

    assert published is not doc
    assert published.status == "published"
    assert published.published_at == NOW
    assert doc.status == "draft"


def test_invalid_transition() -> None:
    doc = BlogPost(status="published")
    with pytest.raises(ValueError):
        transition(doc, "draft", NOW)


def test_wire_models_parse_backend_json() -> None:
    post = Post.model_validate(
        {"_id": "p1", "title": "T", "isPremium": True, "createdAt": "2025-01-01T00:00:00Z", "extra": 1}
    )
    assert post.id == "p1"
    assert post.is_premium
    assert post.created_at is not None

    user = User.model_validate({"_id": "u1", "username": "ada", "profilePic": "x.png", "bookMarks": ["p1"]})
    assert user.profile_pic == "x.png"
    assert user.book_marks == ["p1"]

    sub = Subscription.model_validate({"_id": "s1", "subscriber": "u1", "creator": "c1", "nextBilling": None})
    assert sub.status == "active"
