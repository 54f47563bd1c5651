"""Domain value objects for Colloquy."""

from colloquy.domain.value.identifiers import CommentId, PostId, UserId
from colloquy.domain.value.types import (
    MAX_CONTENT_LENGTH,
    MAX_EMAIL_LENGTH,
    MAX_NAME_LENGTH,
    CommentStatus,
    FieldError,
    Operation,
    Role,
)

__all__ = [
    # Identifiers
    "PostId",
    "CommentId",
    "UserId",
    # Types
    "CommentStatus",
    "FieldError",
    "MAX_CONTENT_LENGTH",
    "MAX_EMAIL_LENGTH",
    "MAX_NAME_LENGTH",
    "Operation",
    "Role",
]
