"""Test configuration and helpers."""

from datetime import datetime, timedelta
from uuid import uuid4

from colloquy.config import AuthSettings
from colloquy.domain.model import (
    AnonymousAuthor,
    AnonymousCaller,
    AuthenticatedCaller,
    Comment,
    IdentifiedAuthor,
)
from colloquy.domain.value import CommentId, CommentStatus, PostId, Role, UserId
from colloquy.persistence.repository.inmemory import InMemoryPostDirectory
from colloquy.util.jwt import create_token

ANONYMOUS = AnonymousCaller()


def make_user(role: Role = Role.USER) -> AuthenticatedCaller:
    """Authenticated caller with a fresh user id."""
    return AuthenticatedCaller(user_id=UserId(uuid4()), role=role)


def make_admin() -> AuthenticatedCaller:
    """Authenticated admin caller."""
    return make_user(Role.ADMIN)


def make_token(caller: AuthenticatedCaller) -> str:
    """JWT for a caller, signed with the default test secret."""
    return create_token(str(caller.user_id), caller.role.value, AuthSettings())


def make_comment(
    post_id: PostId,
    parent_id: CommentId | None = None,
    status: CommentStatus = CommentStatus.APPROVED,
    author=None,
    content: str = "A comment",
    created_at: datetime | None = None,
) -> Comment:
    """Comment ready to be stored directly in a repository.

    Comments without an explicit author are written by a fresh registered
    user; anonymous ones are built with make_anonymous_author.
    """
    created = created_at or datetime.now()
    return Comment(
        id=CommentId(uuid4()),
        post_id=post_id,
        parent_id=parent_id,
        content=content,
        author=author or IdentifiedAuthor(user_id=UserId(uuid4())),
        status=status,
        created_at=created,
        updated_at=created,
    )


def make_anonymous_author() -> AnonymousAuthor:
    """Anonymous author with complete details."""
    return AnonymousAuthor(name="Guest", email="guest@example.com")


def timeline(count: int) -> list[datetime]:
    """Strictly increasing timestamps, one second apart."""
    start = datetime(2026, 1, 1, 12, 0, 0)
    return [start + timedelta(seconds=i) for i in range(count)]


async def seed_post(container) -> PostId:
    """Register a new post in the in-memory post directory."""
    directory = await container.get(InMemoryPostDirectory)
    post_id = PostId(uuid4())
    directory.add(post_id)
    return post_id


def record_calls(monkeypatch, repo, *names: str) -> list[str]:
    """Record the order in which repository methods are called."""
    calls: list[str] = []
    for name in names:
        original = getattr(repo, name)

        async def recorder(*args, _name=name, _original=original, **kwargs):
            calls.append(_name)
            return await _original(*args, **kwargs)

        monkeypatch.setattr(repo, name, recorder)
    return calls
