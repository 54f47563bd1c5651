"""Post lookup service."""

import logfire

from colloquy.domain.error import NotFoundError
from colloquy.domain.repository import PostDirectory
from colloquy.domain.value import PostId

from .base import Service


class PostService(Service):
    """Checks posts in the content subsystem before comments attach to them."""

    def __init__(self, post_directory: PostDirectory) -> None:
        """Initialize post service.

        Args:
            post_directory: Read-only post directory
        """
        self.post_directory = post_directory

    async def ensure_post_exists(self, post_id: PostId) -> None:
        """Fail unless the post exists.

        Args:
            post_id: Post ID

        Raises:
            NotFoundError: If the post doesn't exist
        """
        with logfire.span("post_service.ensure_post_exists", post_id=str(post_id)):
            if not await self.post_directory.exists(post_id):
                logfire.warn("Post not found", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))
            logfire.info("Post found", post_id=str(post_id))
