"""
Editor component models.

Configuration, render views, publish outputs and editor errors.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime

from nexora.domain.blocks import BlockType, DocumentStatus
from nexora.domain.entities import Post

# --- Configuration ---

DEFAULT_PLACEHOLDERS: Mapping[str, str] = {
    "paragraph": "Start writing...",
    "heading1": "Heading 1",
    "heading2": "Heading 2",
    "heading3": "Heading 3",
    "quote": "Quote",
    "list": "List item",
    "ordered-list": "Ordered list item",
    "image": "/placeholder.svg",
    "divider": "",
}


@dataclass(frozen=True)
class EditorConfig:
    """Editor configuration from rules."""

    # Deleting a block never takes the document below this many blocks
    min_blocks: int = 1
    placeholders: Mapping[str, str] = field(default_factory=lambda: dict(DEFAULT_PLACEHOLDERS))


# --- Errors ---


class DocumentLockedError(Exception):
    """Raised when editing a document that has already been published."""


class UnknownStyleError(ValueError):
    """Raised for a style name outside the block style set."""


class UploadFailedError(Exception):
    """Raised by asset uploaders when an upload does not complete."""


class PublishFailedError(Exception):
    """Raised by post publishers when the backend rejects or never receives a post."""


# --- Render views ---


@dataclass(frozen=True)
class BlockView:
    """
    Render description of one block.

    A pure function of (type, content, styles, focus); see render.render_block.
    """

    block_id: str
    block_type: BlockType
    tag: str
    text: str
    is_placeholder: bool
    is_active: bool
    editable: bool
    style: dict[str, str] = field(default_factory=dict)
    attrs: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class DocumentView:
    """Render description of a whole document (edit or preview mode)."""

    title: str
    subtitle: str
    cover_image: str | None
    tags: tuple[str, ...]
    blocks: tuple[BlockView, ...]
    is_premium: bool
    price: float | None
    status: DocumentStatus
    preview: bool


# --- Publish ---


@dataclass(frozen=True)
class PublishValidationError:
    """Validation error details for publish operations."""

    code: str
    message: str
    field: str


@dataclass(frozen=True)
class PublishOutput:
    """Output for a publish attempt."""

    success: bool
    errors: list[PublishValidationError] = field(default_factory=list)
    post: Post | None = None
    published_at: datetime | None = None
