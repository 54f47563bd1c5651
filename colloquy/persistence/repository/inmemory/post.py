"""In-memory post directory for testing."""

from colloquy.domain.repository.post import PostDirectory
from colloquy.domain.value import PostId


class InMemoryPostDirectory(PostDirectory):
    """In-memory implementation of PostDirectory for testing."""

    def __init__(self) -> None:
        self._posts: set[PostId] = set()

    def add(self, post_id: PostId) -> None:
        """Register a post as existing."""
        self._posts.add(post_id)

    async def exists(self, post_id: PostId) -> bool:
        """Check whether a post was registered."""
        return post_id in self._posts
