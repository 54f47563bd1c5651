"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .post import InMemoryPostDirectory

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryPostDirectory",
]
