"""Domain model entities for Colloquy."""

from colloquy.domain.model.caller import AnonymousCaller, AuthenticatedCaller, Caller
from colloquy.domain.model.comment import (
    AnonymousAuthor,
    Authorship,
    Comment,
    IdentifiedAuthor,
)

__all__ = [
    "AnonymousAuthor",
    "AnonymousCaller",
    "AuthenticatedCaller",
    "Authorship",
    "Caller",
    "Comment",
    "IdentifiedAuthor",
]
