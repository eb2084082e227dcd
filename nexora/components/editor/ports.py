"""Editor component port definitions - protocols for dependencies."""

from __future__ import annotations

from typing import Protocol

from nexora.core.ports.time import ClockPort
from nexora.domain.blocks import BlogPost
from nexora.domain.entities import Post


class PostPublisherPort(Protocol):
    """Persists a finalized document."""

    async def publish(self, document: BlogPost) -> Post:
        """
        Send the finalized document to the backend.

        Raises:
            PublishFailedError: the post was not stored.
        """
        ...


class AssetUploaderPort(Protocol):
    """Stores an uploaded image and returns the URL to reference it by."""

    async def upload(self, filename: str, data: bytes) -> str:
        """
        Raises:
            UploadFailedError: the asset was not stored.
        """
        ...


__all__ = ["AssetUploaderPort", "ClockPort", "PostPublisherPort"]
