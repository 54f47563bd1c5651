"""Comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, Response, status
from pydantic import BaseModel

from colloquy.application.usecase.comment import (
    CommentView,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentRequest,
    GetCommentUseCase,
    ModerateCommentRequest,
    ModerateCommentUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from colloquy.domain.error import DomainError
from colloquy.domain.service import IdentityService
from colloquy.interface.api.dependencies import http_error, resolve_caller

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


class UpdateCommentAPIRequest(BaseModel):
    """API request for editing a comment."""

    content: str | None = None


class ModerateCommentAPIRequest(BaseModel):
    """API request for changing a comment's status."""

    status: str


@router.get(
    "/{comment_id}",
    response_model=CommentView,
    response_model_exclude_none=True,
)
async def get_comment(
    comment_id: str,
    request: Request,
    get_comment_use_case: FromDishka[GetCommentUseCase],
    identity_service: FromDishka[IdentityService],
) -> CommentView:
    """Get a single comment.

    Comments the caller may not see answer 404, as if they did not exist.
    """
    try:
        use_case_request = GetCommentRequest(
            comment_id=comment_id,
            caller=resolve_caller(request, identity_service),
        )
        return await get_comment_use_case.execute(use_case_request)
    except DomainError as e:
        raise http_error(e) from e


@router.patch(
    "/{comment_id}",
    response_model=CommentView,
    response_model_exclude_none=True,
)
async def update_comment(
    comment_id: str,
    body: UpdateCommentAPIRequest,
    request: Request,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    identity_service: FromDishka[IdentityService],
) -> CommentView:
    """Edit a comment's content.

    Only the comment's registered author or an admin can edit.

    Args:
        comment_id: Comment UUID
        body: New content
        request: Incoming request (credentials)
        update_comment_use_case: Update comment use case from DI
        identity_service: Identity resolution from DI

    Returns:
        Updated comment

    Raises:
        HTTPException: 400 on invalid content, 403 if not allowed, 404 if missing
    """
    try:
        use_case_request = UpdateCommentRequest(
            comment_id=comment_id,
            content=body.content,
            caller=resolve_caller(request, identity_service),
        )
        return await update_comment_use_case.execute(use_case_request)
    except DomainError as e:
        raise http_error(e) from e


@router.patch(
    "/{comment_id}/status",
    response_model=CommentView,
    response_model_exclude_none=True,
)
async def moderate_comment(
    comment_id: str,
    body: ModerateCommentAPIRequest,
    request: Request,
    moderate_comment_use_case: FromDishka[ModerateCommentUseCase],
    identity_service: FromDishka[IdentityService],
) -> CommentView:
    """Change a comment's moderation status (admins only).

    Args:
        comment_id: Comment UUID
        body: Target status (pending, approved, rejected or spam)
        request: Incoming request (credentials)
        moderate_comment_use_case: Moderate comment use case from DI
        identity_service: Identity resolution from DI

    Returns:
        Updated comment

    Raises:
        HTTPException: 400 on unknown status, 403 if not admin, 404 if missing
    """
    try:
        use_case_request = ModerateCommentRequest(
            comment_id=comment_id,
            status=body.status,
            caller=resolve_caller(request, identity_service),
        )
        return await moderate_comment_use_case.execute(use_case_request)
    except DomainError as e:
        raise http_error(e) from e


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    comment_id: str,
    request: Request,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    identity_service: FromDishka[IdentityService],
) -> Response:
    """Delete a comment.

    Replies to the deleted comment stay in the thread as roots.

    Raises:
        HTTPException: 403 if not allowed, 404 if missing
    """
    try:
        use_case_request = DeleteCommentRequest(
            comment_id=comment_id,
            caller=resolve_caller(request, identity_service),
        )
        result = await delete_comment_use_case.execute(use_case_request)
    except DomainError as e:
        raise http_error(e) from e

    logfire.info(
        "Comment delete handled",
        comment_id=comment_id,
        orphaned_children=result.orphaned_children,
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
