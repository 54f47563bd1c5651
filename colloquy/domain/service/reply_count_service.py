"""Reply count maintenance."""

import logfire

from colloquy.domain.error import StoreUnavailableError
from colloquy.domain.repository import CommentRepository
from colloquy.domain.value import CommentId

from .base import Service


class ReplyCountService(Service):
    """Keeps each comment's reply_count cache in line with its children.

    The count is always re-derived from the approved children, never
    incremented, so concurrent recomputes settle on the latest snapshot.
    """

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize reply count service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def hold(self, parent_id: CommentId) -> None:
        """Lock a parent before a write that changes its approved children.

        Must run before the child write in the same transaction. Two writers
        under one parent then commit one after the other, and the second
        recompute counts the first writer's child. Store failures propagate
        and fail the write.

        Args:
            parent_id: The parent whose reply_count the write will change
        """
        await self.comment_repository.lock(parent_id)

    async def recompute(self, parent_id: CommentId) -> int | None:
        """Recount approved children of a comment and store the count.

        Idempotent and safe to re-run.

        Args:
            parent_id: The comment whose reply_count is refreshed

        Returns:
            The new count, or None if the parent no longer exists
        """
        with logfire.span("reply_count_service.recompute", parent_id=str(parent_id)):
            count = await self.comment_repository.recompute_reply_count(parent_id)
            if count is None:
                logfire.info(
                    "Reply count skipped, parent gone", parent_id=str(parent_id)
                )
            else:
                logfire.info(
                    "Reply count recomputed",
                    parent_id=str(parent_id),
                    reply_count=count,
                )
            return count

    async def refresh(self, parent_id: CommentId) -> int | None:
        """Best-effort recompute after a write.

        A stale count is preferred over failing the write that triggered it,
        so store failures are logged and swallowed here.

        Args:
            parent_id: The comment whose reply_count is refreshed

        Returns:
            The new count, or None if it could not be refreshed
        """
        try:
            return await self.recompute(parent_id)
        except StoreUnavailableError as e:
            logfire.error(
                "Reply count recompute failed",
                parent_id=str(parent_id),
                error=str(e),
            )
            return None
