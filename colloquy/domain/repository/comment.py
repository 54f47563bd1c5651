"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Collection, List, Optional

from colloquy.domain.model.comment import Comment
from colloquy.domain.value import CommentId, CommentStatus, PostId


class CommentRepository(ABC):
    """Repository for Comment entity (the thread store).

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer and raise
    StoreUnavailableError when the backing store fails.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(
        self,
        post_id: PostId,
        statuses: Optional[Collection[CommentStatus]] = None,
    ) -> List[Comment]:
        """Find every comment of a post in a single query.

        Args:
            post_id: The post ID
            statuses: Only return comments in these statuses (None for all)

        Returns:
            Comments ordered by created_at ascending, id as tiebreaker
        """
        pass

    @abstractmethod
    async def find_children(self, parent_id: CommentId) -> List[Comment]:
        """Find direct children of a comment.

        Args:
            parent_id: The parent comment ID

        Returns:
            Child comments ordered by created_at ascending
        """
        pass

    @abstractmethod
    async def lock(self, comment_id: CommentId) -> None:
        """Hold a comment row until the current transaction ends.

        Writes that change a parent's approved children take this lock on
        the parent first, so concurrent reply count recomputes see each
        other's writes.

        Args:
            comment_id: The comment to lock (a missing row is not an error)
        """
        pass

    @abstractmethod
    async def create(self, comment: Comment) -> Comment:
        """Insert a new comment.

        The comment arrives fully built (id, timestamps, initial status).

        Args:
            comment: The comment to insert

        Returns:
            The stored comment
        """
        pass

    @abstractmethod
    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Replace a comment's content and refresh updated_at.

        Args:
            comment_id: The comment ID
            content: New content

        Returns:
            Updated comment, or None if the comment doesn't exist
        """
        pass

    @abstractmethod
    async def update_status(
        self, comment_id: CommentId, status: CommentStatus
    ) -> Optional[Comment]:
        """Set a comment's moderation status and refresh updated_at.

        Args:
            comment_id: The comment ID
            status: New status

        Returns:
            Updated comment, or None if the comment doesn't exist
        """
        pass

    @abstractmethod
    async def recompute_reply_count(self, comment_id: CommentId) -> Optional[int]:
        """Re-derive reply_count from the comment's approved children.

        Counts and writes in one step; never increments in place.

        Args:
            comment_id: The parent comment ID

        Returns:
            The stored count, or None if the comment doesn't exist
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment (hard delete, no cascade).

        Children keep their parent_id and become orphans.

        Args:
            comment_id: The comment ID to delete

        Returns:
            True if a comment was removed
        """
        pass

    @abstractmethod
    async def ping(self) -> None:
        """Check that the store answers.

        Raises:
            StoreUnavailableError: If the store cannot be reached
        """
        pass
