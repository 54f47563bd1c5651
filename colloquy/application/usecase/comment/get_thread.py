"""Get comment thread use case."""

from pydantic import BaseModel, Field

from colloquy.application.usecase.base import BaseUseCase
from colloquy.domain.error import InvalidTransitionError, ValidationFailedError
from colloquy.domain.model.caller import Caller
from colloquy.domain.service import (
    AccessControlService,
    ModerationService,
    ThreadService,
)
from colloquy.domain.value import CommentStatus, FieldError

from .identifiers import parse_post_id
from .views import CommentNodeView, count_nodes, project_forest


class GetThreadRequest(BaseModel):
    """Get thread request."""

    post_id: str  # UUID string
    caller: Caller
    status: str | None = None  # Admins may narrow the thread to one status
    limit: int | None = Field(default=None, ge=1)  # Root comments per page
    offset: int = Field(default=0, ge=0)


class ThreadResponse(BaseModel):
    """Get thread response."""

    post_id: str
    comments: list[CommentNodeView]  # Root comments with nested replies
    total_roots: int
    total_comments: int
    limit: int | None
    offset: int


class GetThreadUseCase(BaseUseCase):
    """Use case for reading a post's full comment thread.

    Non-admin callers only ever see approved comments. A visible reply to a
    hidden or deleted comment is shown as a root.
    """

    def __init__(
        self,
        thread_service: ThreadService,
        access_service: AccessControlService,
        moderation_service: ModerationService,
    ) -> None:
        """Initialize get thread use case.

        Args:
            thread_service: Thread assembly service
            access_service: Access control matrix
            moderation_service: Moderation state machine (status parsing)
        """
        self.thread_service = thread_service
        self.access_service = access_service
        self.moderation_service = moderation_service

    def _statuses(
        self, caller: Caller, status_filter: str | None
    ) -> frozenset[CommentStatus] | None:
        visible = self.access_service.visible_statuses(caller)
        if status_filter is None:
            return visible

        try:
            requested = self.moderation_service.parse_status(status_filter)
        except InvalidTransitionError:
            raise ValidationFailedError(
                [FieldError(field="status", reason="Unknown comment status")]
            )

        if visible is None:
            return frozenset({requested})
        return visible & {requested}

    async def execute(self, request: GetThreadRequest) -> ThreadResponse:
        """Execute get thread flow.

        Pagination applies to root comments only; every root on the page
        keeps its complete subtree.

        Args:
            request: Get thread request with post ID, caller and paging

        Returns:
            Forest of comments visible to the caller

        Raises:
            ValidationFailedError: If the status filter is unknown
        """
        post_id = parse_post_id(request.post_id)
        statuses = self._statuses(request.caller, request.status)

        roots = await self.thread_service.get_thread(post_id, statuses)

        end = request.offset + request.limit if request.limit else None
        page = roots[request.offset : end]

        return ThreadResponse(
            post_id=str(post_id),
            comments=project_forest(page, request.caller),
            total_roots=len(roots),
            total_comments=count_nodes(roots),
            limit=request.limit,
            offset=request.offset,
        )
