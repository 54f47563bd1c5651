"""Mappers for converting between database rows and domain models.

Since the domain models are immutable Pydantic models, mapping is manual.
The authorship union is flattened into author_* columns.
"""

from typing import Any, Dict
from uuid import UUID

from colloquy.domain.model import AnonymousAuthor, Comment, IdentifiedAuthor
from colloquy.domain.model.comment import Authorship
from colloquy.domain.value import CommentId, CommentStatus, PostId, UserId


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_author(row: Dict[str, Any]) -> Authorship:
    """Rebuild the authorship variant from author_* columns.

    Args:
        row: Database row as dict

    Returns:
        IdentifiedAuthor or AnonymousAuthor
    """
    if row["author_kind"] == "identified":
        return IdentifiedAuthor(user_id=UserId(_uuid(row["author_user_id"])))
    return AnonymousAuthor(
        name=row["author_name"],
        email=row["author_email"],
        website=row.get("author_website"),
    )


def author_to_dict(author: Authorship) -> Dict[str, Any]:
    """Flatten an authorship variant into author_* columns.

    Args:
        author: Authorship of a comment

    Returns:
        Dict with every author_* column set
    """
    if isinstance(author, IdentifiedAuthor):
        return {
            "author_kind": author.kind,
            "author_user_id": author.user_id,
            "author_name": None,
            "author_email": None,
            "author_website": None,
        }
    return {
        "author_kind": author.kind,
        "author_user_id": None,
        "author_name": author.name,
        "author_email": author.email,
        "author_website": author.website,
    }


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        parent_id=CommentId(_uuid(row["parent_id"])) if row.get("parent_id") else None,
        content=row["content"],
        author=row_to_author(row),
        status=CommentStatus(row["status"]),
        reply_count=row["reply_count"],
        like_count=row["like_count"],
        ip_address=row["ip_address"],
        user_agent=row["user_agent"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion
    """
    return {
        "id": comment.id,
        "post_id": comment.post_id,
        "parent_id": comment.parent_id,
        "content": comment.content,
        **author_to_dict(comment.author),
        "status": comment.status.value,
        "reply_count": comment.reply_count,
        "like_count": comment.like_count,
        "ip_address": comment.ip_address,
        "user_agent": comment.user_agent,
        "created_at": comment.created_at,
        "updated_at": comment.updated_at,
    }
