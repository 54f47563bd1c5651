"""Comment domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from colloquy.domain.error import NotFoundError
from colloquy.domain.model.comment import Authorship, Comment
from colloquy.domain.repository import CommentRepository
from colloquy.domain.value import CommentId, CommentStatus, PostId

from .base import Service
from .moderation_service import ModerationService


class CommentService(Service):
    """Domain service for thread store operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        moderation_service: ModerationService,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            moderation_service: Decides the initial status of new comments
        """
        self.comment_repository = comment_repository
        self.moderation_service = moderation_service

    async def create_comment(
        self,
        post_id: PostId,
        author: Authorship,
        content: str,
        parent_id: CommentId | None = None,
        ip_address: str = "unknown",
        user_agent: str = "unknown",
    ) -> Comment:
        """Create a comment on a post or reply to another comment.

        Args:
            post_id: Post ID
            author: Registered or anonymous authorship
            content: Validated comment content
            parent_id: Parent comment ID for replies (None for top-level)
            ip_address: Client IP address (audit)
            user_agent: Client user agent (audit)

        Returns:
            Created comment with its initial moderation status

        Raises:
            NotFoundError: If the parent doesn't exist or belongs to another post
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=str(post_id),
            author_kind=author.kind,
            parent_id=str(parent_id) if parent_id else None,
        ):
            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.warn(
                        "Parent comment not found",
                        parent_id=str(parent_id),
                        post_id=str(post_id),
                    )
                    raise NotFoundError("Parent comment", str(parent_id))
                if parent.post_id != post_id:
                    logfire.warn(
                        "Parent comment does not belong to post",
                        parent_id=str(parent_id),
                        parent_post_id=str(parent.post_id),
                        target_post_id=str(post_id),
                    )
                    raise NotFoundError("Parent comment", str(parent_id))

            now = datetime.now()
            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                parent_id=parent_id,
                content=content,
                author=author,
                status=self.moderation_service.initial_status(author),
                reply_count=0,
                like_count=0,
                ip_address=ip_address,
                user_agent=user_agent,
                created_at=now,
                updated_at=now,
            )

            saved = await self.comment_repository.create(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                post_id=str(post_id),
                status=saved.status.value,
                author_kind=author.kind,
            )
            return saved

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment:
                logfire.info("Comment found", comment_id=str(comment_id))
            else:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def require_comment(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID or fail.

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        comment = await self.get_comment_by_id(comment_id)
        if comment is None:
            raise NotFoundError("Comment", str(comment_id))
        return comment

    async def update_content(self, comment_id: CommentId, content: str) -> Comment:
        """Update the content of a comment.

        Status, authorship and threading fields are left untouched.

        Args:
            comment_id: Comment ID
            content: New validated content

        Returns:
            Updated comment

        Raises:
            NotFoundError: If the comment disappeared before the update
        """
        with logfire.span(
            "comment_service.update_content",
            comment_id=str(comment_id),
            content_length=len(content),
        ):
            updated = await self.comment_repository.update_content(
                comment_id, content
            )
            if updated is None:
                logfire.warn(
                    "Comment not found for content update", comment_id=str(comment_id)
                )
                raise NotFoundError("Comment", str(comment_id))

            logfire.info(
                "Comment content updated",
                comment_id=str(comment_id),
                post_id=str(updated.post_id),
                content_length=len(updated.content),
            )
            return updated

    async def update_status(
        self, comment_id: CommentId, status: CommentStatus
    ) -> Comment:
        """Set the moderation status of a comment.

        Args:
            comment_id: Comment ID
            status: New status

        Returns:
            Updated comment

        Raises:
            NotFoundError: If the comment disappeared before the update
        """
        with logfire.span(
            "comment_service.update_status",
            comment_id=str(comment_id),
            status=status.value,
        ):
            updated = await self.comment_repository.update_status(comment_id, status)
            if updated is None:
                logfire.warn(
                    "Comment not found for status update", comment_id=str(comment_id)
                )
                raise NotFoundError("Comment", str(comment_id))

            logfire.info(
                "Comment status updated",
                comment_id=str(comment_id),
                post_id=str(updated.post_id),
                status=status.value,
            )
            return updated

    async def delete_comment(self, comment_id: CommentId) -> int:
        """Hard delete a comment, leaving its replies in place.

        Args:
            comment_id: Comment ID

        Returns:
            Number of direct replies left with a dangling parent_id

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        with logfire.span("comment_service.delete_comment", comment_id=str(comment_id)):
            children = await self.comment_repository.find_children(comment_id)
            deleted = await self.comment_repository.delete(comment_id)
            if not deleted:
                logfire.warn("Comment not found for delete", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))

            logfire.info(
                "Comment deleted",
                comment_id=str(comment_id),
                orphaned_children=len(children),
            )
            return len(children)
