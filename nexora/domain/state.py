from datetime import datetime
from typing import Any

from nexora.domain.blocks import BlogPost, DocumentStatus


def can_transition(current: DocumentStatus, new: DocumentStatus) -> bool:
    """
    Determine if a document status transition is allowed.

    Documents only move forward: a published document is final from the
    editor's point of view.
    """
    if current == new:
        return True
    return current == "draft" and new == "published"


def transition(doc: BlogPost, new_status: DocumentStatus, now: datetime) -> BlogPost:
    """
    Return a NEW BlogPost with the updated status and timestamps.
    Raises ValueError if transition is invalid.
    """
    if doc.status == new_status:
        return doc.model_copy(deep=True)

    if not can_transition(doc.status, new_status):
        raise ValueError(f"Invalid transition from {doc.status} to {new_status}")

    updates: dict[str, Any] = {"status": new_status}
    if new_status == "published":
        updates["published_at"] = now

    return doc.model_copy(update=updates, deep=True)
