"""Create comment use case."""

from pydantic import BaseModel

from colloquy.application.usecase.base import BaseUseCase
from colloquy.domain.error import ValidationFailedError
from colloquy.domain.model import AnonymousAuthor, IdentifiedAuthor
from colloquy.domain.model.caller import AuthenticatedCaller, Caller
from colloquy.domain.model.comment import Authorship
from colloquy.domain.service import (
    AccessControlService,
    CommentPayload,
    CommentService,
    PostService,
    ReplyCountService,
    validate_comment_payload,
)
from colloquy.domain.value import CommentStatus, Operation

from .identifiers import parse_parent_id, parse_post_id
from .views import CommentView, project_comment


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str  # UUID string
    content: str | None = None
    parent_id: str | None = None  # Parent comment ID for replies
    name: str | None = None  # Anonymous commenters only
    email: str | None = None  # Anonymous commenters only
    website: str | None = None  # Anonymous commenters only
    caller: Caller
    ip_address: str = "unknown"
    user_agent: str = "unknown"


def author_for(caller: Caller, payload: CommentPayload) -> Authorship:
    """Authorship of a new comment, fixed from the caller at creation."""
    if isinstance(caller, AuthenticatedCaller):
        return IdentifiedAuthor(user_id=caller.user_id)
    website = payload.website.strip() if payload.website else None
    return AnonymousAuthor(
        name=payload.name.strip(),
        email=payload.email.strip(),
        website=website or None,
    )


class CreateCommentUseCase(BaseUseCase):
    """Use case for commenting on a post or replying to another comment."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        access_service: AccessControlService,
        reply_count_service: ReplyCountService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post lookup service
            access_service: Access control matrix
            reply_count_service: Reply count maintenance
        """
        self.comment_service = comment_service
        self.post_service = post_service
        self.access_service = access_service
        self.reply_count_service = reply_count_service

    async def execute(self, request: CreateCommentRequest) -> CommentView:
        """Execute create comment flow.

        Steps:
        1. Validate the payload for the caller's identity
        2. Authorize creation
        3. Verify the post exists
        4. Lock the parent of a reply
        5. Create the comment (service checks the parent and picks the status)
        6. Refresh the parent's reply count when the reply is approved

        Args:
            request: Create comment request

        Returns:
            The new comment, projected for the caller

        Raises:
            ValidationFailedError: If any field is invalid
            NotFoundError: If the post or parent comment doesn't exist
        """
        payload = CommentPayload(
            content=request.content,
            name=request.name,
            email=request.email,
            website=request.website,
        )
        errors = validate_comment_payload(payload, request.caller)
        if errors:
            raise ValidationFailedError(errors)

        post_id = parse_post_id(request.post_id)
        parent_id = parse_parent_id(request.parent_id)

        self.access_service.require(Operation.CREATE, request.caller)
        await self.post_service.ensure_post_exists(post_id)

        if parent_id:
            await self.reply_count_service.hold(parent_id)

        comment = await self.comment_service.create_comment(
            post_id=post_id,
            author=author_for(request.caller, payload),
            content=request.content,
            parent_id=parent_id,
            ip_address=request.ip_address,
            user_agent=request.user_agent,
        )

        # Pending replies don't count until approved
        if comment.parent_id and comment.status == CommentStatus.APPROVED:
            await self.reply_count_service.refresh(comment.parent_id)

        return project_comment(comment, request.caller)
