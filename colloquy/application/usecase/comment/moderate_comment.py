"""Moderate comment use case."""

import logfire
from pydantic import BaseModel

from colloquy.application.usecase.base import BaseUseCase
from colloquy.domain.model.caller import Caller
from colloquy.domain.service import (
    AccessControlService,
    CommentService,
    ModerationService,
    ReplyCountService,
)
from colloquy.domain.value import Operation

from .identifiers import parse_comment_id
from .views import CommentView, project_comment


class ModerateCommentRequest(BaseModel):
    """Moderate comment request."""

    comment_id: str  # UUID string
    status: str  # pending, approved, rejected or spam
    caller: Caller


class ModerateCommentUseCase(BaseUseCase):
    """Use case for changing a comment's moderation status (admins only)."""

    def __init__(
        self,
        comment_service: CommentService,
        access_service: AccessControlService,
        moderation_service: ModerationService,
        reply_count_service: ReplyCountService,
    ) -> None:
        """Initialize moderate comment use case.

        Args:
            comment_service: Comment domain service
            access_service: Access control matrix
            moderation_service: Moderation state machine
            reply_count_service: Reply count maintenance
        """
        self.comment_service = comment_service
        self.access_service = access_service
        self.moderation_service = moderation_service
        self.reply_count_service = reply_count_service

    async def execute(self, request: ModerateCommentRequest) -> CommentView:
        """Execute moderate comment flow.

        Steps:
        1. Load the comment and authorize the status change
        2. Resolve the requested status through the state machine
        3. Lock the parent if approval changes
        4. Store the new status (content is untouched)
        5. Refresh the parent's reply count if approval changed

        Args:
            request: Moderate comment request

        Returns:
            Updated comment, projected for the caller

        Raises:
            NotFoundError: If the comment doesn't exist
            ForbiddenError: If the caller is not an admin
            InvalidTransitionError: If the status is not recognized
        """
        comment_id = parse_comment_id(request.comment_id)
        comment = await self.comment_service.require_comment(comment_id)

        self.access_service.require(Operation.CHANGE_STATUS, request.caller, comment)

        old_status = comment.status
        new_status = self.moderation_service.transition(old_status, request.status)
        counts = comment.parent_id is not None and (
            self.moderation_service.affects_reply_count(old_status, new_status)
        )
        if counts:
            await self.reply_count_service.hold(comment.parent_id)

        updated = await self.comment_service.update_status(comment_id, new_status)

        if counts:
            await self.reply_count_service.refresh(comment.parent_id)

        if self.moderation_service.is_approval(old_status, new_status):
            logfire.info(
                "Comment approved",
                comment_id=str(comment_id),
                post_id=str(updated.post_id),
                previous_status=old_status.value,
            )

        return project_comment(updated, request.caller)
