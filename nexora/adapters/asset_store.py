"""
Local image store for editor uploads (AssetUploaderPort).

Images are content-addressed: the file name is the sha256 of the bytes plus
the original extension, so re-uploading the same image is idempotent.
"""

from __future__ import annotations

import hashlib
import logging
import os
from pathlib import Path

from nexora.components.editor import UploadFailedError

logger = logging.getLogger(__name__)

ALLOWED_IMAGE_EXTENSIONS: frozenset[str] = frozenset(
    [".png", ".jpg", ".jpeg", ".gif", ".webp", ".svg"]
)


class FileAssetUploader:
    def __init__(self, base_path: str | Path, *, max_bytes: int = 10 * 1024 * 1024):
        self.base_path = Path(base_path).resolve()
        self.max_bytes = max_bytes
        if not self.base_path.exists():
            os.makedirs(self.base_path, exist_ok=True)

    async def upload(self, filename: str, data: bytes) -> str:
        """Save image bytes and return a file:// URL."""
        ext = Path(filename).suffix.lower()
        if ext not in ALLOWED_IMAGE_EXTENSIONS:
            raise UploadFailedError(f"Unsupported image type: {filename}")
        if not data:
            raise UploadFailedError(f"Empty upload: {filename}")
        if len(data) > self.max_bytes:
            raise UploadFailedError(
                f"Image too large ({len(data)} > {self.max_bytes} bytes): {filename}"
            )

        target = self.base_path / f"{hashlib.sha256(data).hexdigest()}{ext}"
        try:
            if not target.exists():
                with open(target, "wb") as f:
                    f.write(data)
        except OSError as e:
            raise UploadFailedError(f"Could not store {filename}: {e}") from e

        logger.info(f"Stored image {filename} as {target.name}")
        return target.as_uri()
