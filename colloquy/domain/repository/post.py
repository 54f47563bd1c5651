"""Post directory interface.

Posts are owned by the content subsystem; the comment engine only needs
to know whether one exists.
"""

from abc import ABC, abstractmethod

from colloquy.domain.value import PostId


class PostDirectory(ABC):
    """Read-only view of the content subsystem's posts."""

    @abstractmethod
    async def exists(self, post_id: PostId) -> bool:
        """Check whether a post exists.

        Args:
            post_id: The post ID

        Returns:
            True if comments may be attached to the post
        """
        pass
