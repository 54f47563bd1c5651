"""Get comment use case."""

import logfire
from pydantic import BaseModel

from colloquy.application.usecase.base import BaseUseCase
from colloquy.domain.error import NotFoundError
from colloquy.domain.model.caller import Caller
from colloquy.domain.service import AccessControlService, CommentService
from colloquy.domain.value import Operation

from .identifiers import parse_comment_id
from .views import CommentView, project_comment


class GetCommentRequest(BaseModel):
    """Get comment request."""

    comment_id: str  # UUID string
    caller: Caller


class GetCommentUseCase(BaseUseCase):
    """Use case for fetching a single comment by ID."""

    def __init__(
        self,
        comment_service: CommentService,
        access_service: AccessControlService,
    ) -> None:
        """Initialize get comment use case.

        Args:
            comment_service: Comment domain service
            access_service: Access control matrix
        """
        self.comment_service = comment_service
        self.access_service = access_service

    async def execute(self, request: GetCommentRequest) -> CommentView:
        """Execute get comment flow.

        A comment the caller may not read is reported as missing, the same
        way the thread leaves it out.

        Raises:
            NotFoundError: If the comment doesn't exist or isn't visible
        """
        comment_id = parse_comment_id(request.comment_id)
        comment = await self.comment_service.require_comment(comment_id)

        if not self.access_service.authorize(Operation.READ, request.caller, comment):
            logfire.info(
                "Hidden comment requested",
                comment_id=str(comment_id),
                status=comment.status.value,
            )
            raise NotFoundError("Comment", request.comment_id)

        return project_comment(comment, request.caller)
