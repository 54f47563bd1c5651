"""Update comment use case."""

from pydantic import BaseModel

from colloquy.application.usecase.base import BaseUseCase
from colloquy.domain.error import ValidationFailedError
from colloquy.domain.model.caller import Caller
from colloquy.domain.service import (
    AccessControlService,
    CommentService,
    validate_content,
)
from colloquy.domain.value import Operation

from .identifiers import parse_comment_id
from .views import CommentView, project_comment


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str  # UUID string
    content: str | None = None  # New content (required, cannot be blank)
    caller: Caller


class UpdateCommentUseCase(BaseUseCase):
    """Use case for editing a comment's content."""

    def __init__(
        self,
        comment_service: CommentService,
        access_service: AccessControlService,
    ) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
            access_service: Access control matrix
        """
        self.comment_service = comment_service
        self.access_service = access_service

    async def execute(self, request: UpdateCommentRequest) -> CommentView:
        """Execute update comment flow.

        Only the content changes. Status, authorship, post and parent stay as
        they are, and the reply count is left alone.

        Args:
            request: Update comment request with comment ID and new content

        Returns:
            Updated comment, projected for the caller

        Raises:
            NotFoundError: If the comment doesn't exist
            ForbiddenError: If the caller may not edit the comment
            ValidationFailedError: If the new content is invalid
        """
        comment_id = parse_comment_id(request.comment_id)

        # 1. Retrieve existing comment
        comment = await self.comment_service.require_comment(comment_id)

        # 2. Owner or admin only
        self.access_service.require(Operation.EDIT, request.caller, comment)

        # 3. Validate the new content
        errors = validate_content(request.content)
        if errors:
            raise ValidationFailedError(errors)

        # 4. Update via service
        updated = await self.comment_service.update_content(
            comment_id, request.content
        )
        return project_comment(updated, request.caller)
