"""Delete comment use case."""

from pydantic import BaseModel

from colloquy.application.usecase.base import BaseUseCase
from colloquy.domain.model.caller import Caller
from colloquy.domain.service import (
    AccessControlService,
    CommentService,
    ReplyCountService,
)
from colloquy.domain.value import Operation

from .identifiers import parse_comment_id


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str  # UUID string
    caller: Caller


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    deleted: bool
    orphaned_children: int  # Direct replies now shown as roots


class DeleteCommentUseCase(BaseUseCase):
    """Use case for hard deleting a comment.

    Replies are not deleted or re-parented; they keep pointing at the
    removed comment and surface as roots of the thread.
    """

    def __init__(
        self,
        comment_service: CommentService,
        access_service: AccessControlService,
        reply_count_service: ReplyCountService,
    ) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
            access_service: Access control matrix
            reply_count_service: Reply count maintenance
        """
        self.comment_service = comment_service
        self.access_service = access_service
        self.reply_count_service = reply_count_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Args:
            request: Delete comment request

        Returns:
            Deletion result with the number of orphaned replies

        Raises:
            NotFoundError: If the comment doesn't exist
            ForbiddenError: If the delete policy denies the caller
        """
        comment_id = parse_comment_id(request.comment_id)
        comment = await self.comment_service.require_comment(comment_id)

        self.access_service.require(Operation.DELETE, request.caller, comment)

        if comment.parent_id:
            await self.reply_count_service.hold(comment.parent_id)

        orphaned = await self.comment_service.delete_comment(comment_id)

        if comment.parent_id:
            await self.reply_count_service.refresh(comment.parent_id)

        return DeleteCommentResponse(deleted=True, orphaned_children=orphaned)
