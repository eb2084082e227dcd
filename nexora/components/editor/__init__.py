"""
Editor component.

Public API for the block-based document editor.
"""

from .component import DocumentEditor, build_post_payload, load_config_from_rules
from .models import (
    DEFAULT_PLACEHOLDERS,
    BlockView,
    DocumentLockedError,
    DocumentView,
    EditorConfig,
    PublishFailedError,
    PublishOutput,
    PublishValidationError,
    UnknownStyleError,
    UploadFailedError,
)
from .ports import AssetUploaderPort, PostPublisherPort
from .render import block_css, plain_text, render_block, render_document, render_html

__all__ = [
    # Editor
    "DocumentEditor",
    "build_post_payload",
    "load_config_from_rules",
    # Rendering
    "block_css",
    "plain_text",
    "render_block",
    "render_document",
    "render_html",
    # Models
    "DEFAULT_PLACEHOLDERS",
    "BlockView",
    "DocumentView",
    "EditorConfig",
    "PublishOutput",
    "PublishValidationError",
    # Errors
    "DocumentLockedError",
    "PublishFailedError",
    "UnknownStyleError",
    "UploadFailedError",
    # Ports
    "AssetUploaderPort",
    "PostPublisherPort",
]
