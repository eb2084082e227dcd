"""Publishes editor documents through the API client (PostPublisherPort)."""

from __future__ import annotations

from nexora.components.api_client import ApiClient, ApiError
from nexora.components.editor import PublishFailedError, build_post_payload
from nexora.domain.blocks import BlogPost
from nexora.domain.entities import Post


class ApiPostPublisher:
    def __init__(self, client: ApiClient) -> None:
        self._client = client

    async def publish(self, document: BlogPost) -> Post:
        try:
            response = await self._client.posts.create_post(build_post_payload(document))
        except ApiError as e:
            raise PublishFailedError(e.message) from e
        return response.post
