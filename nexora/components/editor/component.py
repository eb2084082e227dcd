"""
Editor component.

In-memory document model for the block editor: an ordered list of typed
blocks plus post settings, with one focused block at most.

Structural edits never fail for a draft: unknown block ids are no-ops.
Only image upload and publish cross the network, and their failures are
returned or raised to the caller, never dropped.

A published document is final; further edits raise DocumentLockedError.
"""

from __future__ import annotations

import logging
from typing import Any

from nexora.domain.blocks import (
    STYLE_ALIASES,
    STYLE_NAMES,
    Block,
    BlockType,
    BlogPost,
)
from nexora.domain.state import transition
from nexora.rules.models import EditorRules

from .models import (
    DocumentLockedError,
    DocumentView,
    EditorConfig,
    PublishFailedError,
    PublishOutput,
    PublishValidationError,
    UnknownStyleError,
)
from .ports import AssetUploaderPort, ClockPort, PostPublisherPort
from .render import plain_text, render_document, render_html

logger = logging.getLogger(__name__)


class DocumentEditor:
    """Editing session for one BlogPost."""

    def __init__(
        self,
        document: BlogPost | None = None,
        *,
        config: EditorConfig | None = None,
    ) -> None:
        self._doc = document.model_copy(deep=True) if document else BlogPost()
        self._config = config or EditorConfig()
        self._active_block_id: str | None = None
        self._publish_in_flight = False
        self.preview_mode = False

    # --- Reads ---

    @property
    def document(self) -> BlogPost:
        """Snapshot of the document; mutate through the editor only."""
        return self._doc.model_copy(deep=True)

    @property
    def blocks(self) -> list[Block]:
        return [b.model_copy(deep=True) for b in self._doc.blocks]

    @property
    def active_block_id(self) -> str | None:
        return self._active_block_id

    @property
    def is_published(self) -> bool:
        return self._doc.status == "published"

    @property
    def is_publishing(self) -> bool:
        return self._publish_in_flight

    def render(self) -> DocumentView:
        return render_document(
            self._doc,
            self._active_block_id,
            preview=self.preview_mode,
            placeholders=self._config.placeholders,
        )

    # --- Block operations ---

    def add_block(self, block_type: BlockType, after_id: str | None = None) -> Block:
        """
        Insert a new empty block after `after_id` (or at the end when absent or
        unknown) and focus it.
        """
        return self._insert(Block(type=block_type), after_id)

    def update_block(
        self,
        block_id: str,
        *,
        content: str | None = None,
        styles: dict[str, Any] | None = None,
        metadata: dict[str, str] | None = None,
    ) -> Block | None:
        """
        Merge fields into a block. Styles and metadata merge key-wise.

        Returns the updated block, or None when `block_id` is unknown.
        """
        self._ensure_editable()
        idx = self._doc.index_of(block_id)
        if idx is None:
            logger.debug(f"update_block: no block {block_id}")
            return None

        block = self._doc.blocks[idx]
        updates: dict[str, Any] = {}
        if content is not None:
            updates["content"] = content
        if styles:
            _check_style_names(styles)
            updates["styles"] = block.styles.merged(styles)
        if metadata:
            updates["metadata"] = {**block.metadata, **metadata}

        updated = block.model_copy(update=updates)
        self._doc.blocks[idx] = updated
        return updated.model_copy(deep=True)

    def delete_block(self, block_id: str) -> bool:
        """
        Remove a block. Unknown ids are a no-op.

        Refused (returns False) when it would leave fewer than
        `config.min_blocks` blocks.
        """
        self._ensure_editable()
        idx = self._doc.index_of(block_id)
        if idx is None:
            logger.debug(f"delete_block: no block {block_id}")
            return False

        if len(self._doc.blocks) <= self._config.min_blocks:
            logger.debug(f"delete_block: keeping last {self._config.min_blocks} block(s)")
            return False

        del self._doc.blocks[idx]
        if self._active_block_id == block_id:
            self._active_block_id = None
        return True

    def focus(self, block_id: str) -> bool:
        if self._doc.index_of(block_id) is None:
            return False
        self._active_block_id = block_id
        return True

    def blur(self) -> None:
        self._active_block_id = None

    def apply_style(self, style: str, value: Any) -> Block | None:
        """Set one style on the focused block; no-op without focus."""
        self._ensure_editable()
        _check_style_names({style: value})
        if self._active_block_id is None:
            return None
        return self.update_block(self._active_block_id, styles={style: value})

    # --- Post settings ---

    def set_title(self, title: str) -> None:
        self._ensure_editable()
        self._doc.title = title

    def set_subtitle(self, subtitle: str) -> None:
        self._ensure_editable()
        self._doc.subtitle = subtitle

    def set_cover_image(self, url: str | None) -> None:
        self._ensure_editable()
        self._doc.cover_image = url

    def add_tag(self, tag: str) -> bool:
        """Add a trimmed tag; blank or duplicate tags are ignored."""
        self._ensure_editable()
        tag = tag.strip()
        if not tag or tag in self._doc.tags:
            return False
        self._doc.tags.append(tag)
        return True

    def remove_tag(self, tag: str) -> bool:
        self._ensure_editable()
        if tag not in self._doc.tags:
            return False
        self._doc.tags.remove(tag)
        return True

    def set_premium(self, is_premium: bool, price: float | None = None) -> None:
        self._ensure_editable()
        if price is not None and price < 0:
            raise ValueError("Price cannot be negative")
        self._doc.is_premium = is_premium
        self._doc.price = price if is_premium else None

    def toggle_preview(self) -> bool:
        self.preview_mode = not self.preview_mode
        return self.preview_mode

    # --- Network-bound operations ---

    async def insert_image(
        self,
        filename: str,
        data: bytes,
        uploader: AssetUploaderPort,
        after_id: str | None = None,
    ) -> Block:
        """
        Upload an image and insert an image block referencing it.

        Upload errors propagate; no block is inserted in that case.
        """
        self._ensure_editable()
        url = await uploader.upload(filename, data)
        # The document may have been locked while the upload was pending.
        return self._insert(
            Block(type="image", content=url, metadata={"alt": filename, "caption": ""}),
            after_id,
        )

    async def publish(self, publisher: PostPublisherPort, clock: ClockPort) -> PublishOutput:
        """
        Finalize the document and hand it to the publisher.

        The editor adopts the published state only once the publisher
        succeeds. Edits are locked while the call is in flight, so the
        published copy is the document the caller sees afterwards. A second
        call while one is in flight, or after success, is rejected.
        """
        if self.is_published:
            return _publish_error("ALREADY_PUBLISHED", "Post is already published")
        if self._publish_in_flight:
            return _publish_error("PUBLISH_IN_FLIGHT", "Post is already being published")

        self._publish_in_flight = True
        try:
            finalized = transition(self._doc, "published", clock.now())
            post = await publisher.publish(finalized)
        except PublishFailedError as e:
            logger.warning(f"Publish failed: {e}")
            return _publish_error("PUBLISH_FAILED", str(e))
        finally:
            self._publish_in_flight = False

        self._doc = finalized
        self._active_block_id = None
        logger.info(f"Published post '{finalized.title}' as {post.id}")
        return PublishOutput(
            success=True,
            post=post,
            published_at=finalized.published_at,
        )

    # --- Internals ---

    def _ensure_editable(self) -> None:
        if self.is_published:
            raise DocumentLockedError("Published posts cannot be edited in the editor")
        if self._publish_in_flight:
            raise DocumentLockedError("Post is being published; edits are locked until it finishes")

    def _insert(self, block: Block, after_id: str | None) -> Block:
        self._ensure_editable()
        idx = self._doc.index_of(after_id) if after_id else None
        if idx is None:
            self._doc.blocks.append(block)
        else:
            self._doc.blocks.insert(idx + 1, block)

        self._active_block_id = block.id
        return block.model_copy(deep=True)


def _check_style_names(styles: dict[str, Any]) -> None:
    for name in styles:
        if STYLE_ALIASES.get(name, name) not in STYLE_NAMES:
            raise UnknownStyleError(f"Unknown style '{name}'")


def _publish_error(code: str, message: str) -> PublishOutput:
    return PublishOutput(
        success=False,
        errors=[PublishValidationError(code=code, message=message, field="status")],
    )


def build_post_payload(doc: BlogPost) -> dict[str, Any]:
    """Backend payload for a document (POST /private/post)."""
    return {
        "title": doc.title,
        "subtitle": doc.subtitle,
        "content": plain_text(doc),
        "html": render_html(doc),
        "blocks": [
            block.model_dump(mode="json", by_alias=True, exclude_none=True)
            for block in doc.blocks
        ],
        "tags": list(doc.tags),
        "isPremium": doc.is_premium,
        "price": doc.price,
        "coverImage": doc.cover_image,
        "status": doc.status,
        "publishedAt": doc.published_at.isoformat() if doc.published_at else None,
    }


def load_config_from_rules(rules: EditorRules) -> EditorConfig:
    return EditorConfig(min_blocks=rules.min_blocks, placeholders=dict(rules.placeholders))
