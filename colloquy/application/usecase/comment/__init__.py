"""Comment use cases."""

from .create_comment import CreateCommentRequest, CreateCommentUseCase
from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from .get_comment import GetCommentRequest, GetCommentUseCase
from .get_thread import GetThreadRequest, GetThreadUseCase, ThreadResponse
from .moderate_comment import ModerateCommentRequest, ModerateCommentUseCase
from .update_comment import UpdateCommentRequest, UpdateCommentUseCase
from .views import AuthorView, CommentNodeView, CommentView

__all__ = [
    "AuthorView",
    "CommentNodeView",
    "CommentView",
    "CreateCommentRequest",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "GetCommentRequest",
    "GetCommentUseCase",
    "GetThreadRequest",
    "GetThreadUseCase",
    "ModerateCommentRequest",
    "ModerateCommentUseCase",
    "ThreadResponse",
    "UpdateCommentRequest",
    "UpdateCommentUseCase",
]
