"""Repository interfaces for the Colloquy domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from colloquy.domain.repository.comment import CommentRepository
from colloquy.domain.repository.post import PostDirectory

__all__ = [
    "CommentRepository",
    "PostDirectory",
]
