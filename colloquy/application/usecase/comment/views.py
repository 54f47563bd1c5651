"""Comment response models and role-conditional projection.

Everything a use case returns about a comment goes through ``project_comment``
so that admin-only fields are stripped in one place.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from colloquy.domain.model import AnonymousAuthor, Comment
from colloquy.domain.model.caller import Caller
from colloquy.domain.service import CommentNode, iter_subtree
from colloquy.domain.value import CommentStatus


class AuthorView(BaseModel):
    """Comment author as shown to a caller."""

    kind: str  # 'identified' or 'anonymous'
    user_id: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None  # admins only
    website: Optional[str] = None


class CommentView(BaseModel):
    """Comment as shown to a caller.

    status, ip_address and user_agent are only filled in for admins.
    """

    comment_id: str
    post_id: str
    parent_id: Optional[str] = None
    content: str
    author: AuthorView
    reply_count: int
    like_count: int
    created_at: datetime
    updated_at: datetime
    status: Optional[CommentStatus] = None
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None


class CommentNodeView(CommentView):
    """Comment with its nested replies, oldest first."""

    children: list["CommentNodeView"] = []


def project_author(comment: Comment, admin: bool) -> AuthorView:
    """Project the authorship of a comment."""
    author = comment.author
    if isinstance(author, AnonymousAuthor):
        return AuthorView(
            kind=author.kind,
            name=author.name,
            email=author.email if admin else None,
            website=author.website,
        )
    return AuthorView(kind=author.kind, user_id=str(author.user_id))


def _fields(comment: Comment, admin: bool) -> dict:
    fields = {
        "comment_id": str(comment.id),
        "post_id": str(comment.post_id),
        "parent_id": str(comment.parent_id) if comment.parent_id else None,
        "content": comment.content,
        "author": project_author(comment, admin),
        "reply_count": comment.reply_count,
        "like_count": comment.like_count,
        "created_at": comment.created_at,
        "updated_at": comment.updated_at,
    }
    if admin:
        fields.update(
            status=comment.status,
            ip_address=comment.ip_address,
            user_agent=comment.user_agent,
        )
    return fields


def project_comment(comment: Comment, caller: Caller) -> CommentView:
    """Build the response view of a comment for a caller.

    Args:
        comment: Comment to show
        caller: Caller the response is for

    Returns:
        View with admin-only fields stripped for everyone else
    """
    return CommentView(**_fields(comment, caller.is_admin))


def project_forest(roots: list[CommentNode], caller: Caller) -> list[CommentNodeView]:
    """Build nested views of a comment forest.

    Walks the forest with an explicit stack, so depth is not limited by
    the interpreter's recursion limit.

    Args:
        roots: Root nodes from the thread service
        caller: Caller the response is for

    Returns:
        Root views with their nested children
    """
    admin = caller.is_admin
    views: list[CommentNodeView] = []
    stack: list[tuple[CommentNode, list[CommentNodeView]]] = [
        (node, views) for node in reversed(roots)
    ]
    while stack:
        node, siblings = stack.pop()
        view = CommentNodeView(**_fields(node.comment, admin), children=[])
        siblings.append(view)
        stack.extend((child, view.children) for child in reversed(node.children))
    return views


def count_nodes(roots: list[CommentNode]) -> int:
    """Count every comment in a forest."""
    return sum(1 for _ in iter_subtree(roots))
