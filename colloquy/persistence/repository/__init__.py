"""PostgreSQL repository implementations."""

from colloquy.persistence.repository.comment import PostgresCommentRepository
from colloquy.persistence.repository.post import PostgresPostDirectory

__all__ = [
    "PostgresCommentRepository",
    "PostgresPostDirectory",
]
