"""Strongly typed identifiers for Colloquy domain entities.

Using NewType keeps post, comment and user ids from being mixed up
while staying plain UUIDs at runtime.
"""

from typing import NewType
from uuid import UUID

PostId = NewType("PostId", UUID)
CommentId = NewType("CommentId", UUID)
UserId = NewType("UserId", UUID)
