"""Parsing of identifiers received from callers."""

from uuid import UUID

from colloquy.domain.error import NotFoundError, ValidationFailedError
from colloquy.domain.value import CommentId, FieldError, PostId


def _uuid(value: str) -> UUID | None:
    try:
        return UUID(value)
    except (TypeError, ValueError, AttributeError):
        return None


def parse_post_id(value: str) -> PostId:
    """Parse a post id from a path; malformed ids name no post."""
    parsed = _uuid(value)
    if parsed is None:
        raise NotFoundError("Post", value)
    return PostId(parsed)


def parse_comment_id(value: str) -> CommentId:
    """Parse a comment id from a path; malformed ids name no comment."""
    parsed = _uuid(value)
    if parsed is None:
        raise NotFoundError("Comment", value)
    return CommentId(parsed)


def parse_parent_id(value: str | None) -> CommentId | None:
    """Parse an optional parent id from a request body.

    Raises:
        ValidationFailedError: If the id is not a UUID
    """
    if value is None:
        return None
    parsed = _uuid(value)
    if parsed is None:
        raise ValidationFailedError(
            [FieldError(field="parent_id", reason="Invalid comment id")]
        )
    return CommentId(parsed)
