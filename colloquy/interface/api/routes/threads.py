"""Thread routes: comments listed and created per post."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Request, status
from pydantic import BaseModel

from colloquy.application.usecase.comment import (
    CommentView,
    CreateCommentRequest,
    CreateCommentUseCase,
    GetThreadRequest,
    GetThreadUseCase,
    ThreadResponse,
)
from colloquy.domain.error import DomainError
from colloquy.domain.service import IdentityService
from colloquy.interface.api.dependencies import (
    client_ip,
    client_user_agent,
    http_error,
    resolve_caller,
)

router = APIRouter(prefix="/threads", tags=["threads"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment.

    Field rules are checked by the use case so every failure is reported
    with the same error shape.
    """

    content: str | None = None
    parent_id: str | None = None  # Parent comment ID for replies
    name: str | None = None  # Required when not signed in
    email: str | None = None  # Required when not signed in
    website: str | None = None


@router.post(
    "/{post_id}/comments",
    response_model=CommentView,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: str,
    body: CreateCommentAPIRequest,
    request: Request,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    identity_service: FromDishka[IdentityService],
) -> CommentView:
    """Comment on a post or reply to another comment.

    Signed-in users are published immediately; anonymous comments wait for
    moderation and must include a name and email.

    Args:
        post_id: Post UUID
        body: Comment data
        request: Incoming request (credentials and audit headers)
        create_comment_use_case: Create comment use case from DI
        identity_service: Identity resolution from DI

    Returns:
        Created comment

    Raises:
        HTTPException: 400 on invalid fields, 404 if post or parent is missing
    """
    try:
        use_case_request = CreateCommentRequest(
            post_id=post_id,
            content=body.content,
            parent_id=body.parent_id,
            name=body.name,
            email=body.email,
            website=body.website,
            caller=resolve_caller(request, identity_service),
            ip_address=client_ip(request),
            user_agent=client_user_agent(request),
        )
        return await create_comment_use_case.execute(use_case_request)
    except DomainError as e:
        raise http_error(e) from e


@router.get(
    "/{post_id}/comments",
    response_model=ThreadResponse,
    response_model_exclude_none=True,
)
async def get_thread(
    post_id: str,
    request: Request,
    get_thread_use_case: FromDishka[GetThreadUseCase],
    identity_service: FromDishka[IdentityService],
    status_filter: str | None = Query(default=None, alias="status"),
    limit: int | None = Query(default=None, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
) -> ThreadResponse:
    """Get the full comment thread of a post.

    Everyone but admins sees approved comments only. Replies whose parent is
    hidden or deleted are listed as roots. Paging applies to root comments.

    Args:
        post_id: Post UUID
        request: Incoming request (credentials)
        get_thread_use_case: Get thread use case from DI
        identity_service: Identity resolution from DI
        status_filter: Only comments in this status (admins)
        limit: Root comments per page
        offset: Root comments to skip

    Returns:
        Nested comment forest
    """
    try:
        use_case_request = GetThreadRequest(
            post_id=post_id,
            caller=resolve_caller(request, identity_service),
            status=status_filter,
            limit=limit,
            offset=offset,
        )
        return await get_thread_use_case.execute(use_case_request)
    except DomainError as e:
        raise http_error(e) from e
