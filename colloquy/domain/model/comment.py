"""Comment entity.

Comments are stored flat, keyed by id, with a parent pointer. The nested
thread view is only built at read time by the thread service.
"""

from datetime import datetime
from typing import Annotated, Literal, Optional, Union

from pydantic import Field

from colloquy.domain.model.common import DomainModel
from colloquy.domain.value import (
    MAX_CONTENT_LENGTH,
    CommentId,
    CommentStatus,
    PostId,
    UserId,
)
from colloquy.domain.value.common import ValueObject


class IdentifiedAuthor(ValueObject):
    """A comment written by a registered user."""

    kind: Literal["identified"] = "identified"
    user_id: UserId


class AnonymousAuthor(ValueObject):
    """A comment written without an account.

    The commenter supplies their own display name and email; website is
    optional.
    """

    kind: Literal["anonymous"] = "anonymous"
    name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    website: Optional[str] = None


Authorship = Annotated[
    Union[IdentifiedAuthor, AnonymousAuthor], Field(discriminator="kind")
]


class Comment(DomainModel):
    """Comment entity.

    Represents a comment on a post or a reply to another comment on the
    same post. Nesting depth is unbounded.

    - author: set once at creation, never rewritten
    - reply_count: cache of approved direct children, recomputed by the
      reply count service
    - like_count: stored for a future reactions feature, never mutated here
    - ip_address / user_agent: audit fields, admin-only
    """

    id: CommentId
    post_id: PostId
    parent_id: Optional[CommentId] = None
    content: str = Field(min_length=1, max_length=MAX_CONTENT_LENGTH)
    author: Authorship
    status: CommentStatus = CommentStatus.PENDING
    reply_count: int = Field(default=0, ge=0)
    like_count: int = Field(default=0, ge=0)
    ip_address: str = "unknown"
    user_agent: str = "unknown"
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    def is_owned_by(self, user_id: UserId) -> bool:
        """Whether the comment was written by the given registered user."""
        return (
            isinstance(self.author, IdentifiedAuthor)
            and self.author.user_id == user_id
        )
