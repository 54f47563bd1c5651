"""In-memory comment repository for testing."""

from datetime import datetime
from typing import Collection, Optional

from colloquy.domain.model.comment import Comment
from colloquy.domain.repository.comment import CommentRepository
from colloquy.domain.value import CommentId, CommentStatus, PostId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    @staticmethod
    def _filter(
        comments: list[Comment], statuses: Optional[Collection[CommentStatus]]
    ) -> list[Comment]:
        if statuses is not None:
            comments = [c for c in comments if c.status in statuses]
        # Stable sort keeps insertion order for equal timestamps
        comments.sort(key=lambda c: c.created_at)
        return comments

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_post(
        self,
        post_id: PostId,
        statuses: Optional[Collection[CommentStatus]] = None,
    ) -> list[Comment]:
        """Find all comments for a post, oldest first."""
        comments = [c for c in self._comments.values() if c.post_id == post_id]
        return self._filter(comments, statuses)

    async def find_children(self, parent_id: CommentId) -> list[Comment]:
        """Find direct children of a comment."""
        comments = [c for c in self._comments.values() if c.parent_id == parent_id]
        return self._filter(comments, None)

    async def lock(self, comment_id: CommentId) -> None:
        """Nothing to lock, operations never interleave mid-write."""
        return None

    async def create(self, comment: Comment) -> Comment:
        """Insert a comment."""
        self._comments[comment.id] = comment
        return comment

    async def _update(self, comment_id: CommentId, **fields) -> Optional[Comment]:
        comment = self._comments.get(comment_id)
        if comment is None:
            return None
        # Comments are immutable, store a fresh copy
        updated = comment.model_copy(update={**fields, "updated_at": datetime.now()})
        self._comments[comment_id] = updated
        return updated

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Replace the content of a comment."""
        return await self._update(comment_id, content=content)

    async def update_status(
        self, comment_id: CommentId, status: CommentStatus
    ) -> Optional[Comment]:
        """Set the status of a comment."""
        return await self._update(comment_id, status=status)

    async def recompute_reply_count(self, comment_id: CommentId) -> Optional[int]:
        """Recount approved children and store the count."""
        count = sum(
            1
            for c in self._comments.values()
            if c.parent_id == comment_id and c.status == CommentStatus.APPROVED
        )
        updated = await self._update(comment_id, reply_count=count)
        return count if updated else None

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment."""
        return self._comments.pop(comment_id, None) is not None

    async def ping(self) -> None:
        """Always reachable."""
        return None
