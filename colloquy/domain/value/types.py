"""Domain value types for Colloquy.

Enumerations shared by the moderation, access control and validation
services.
"""

from enum import Enum

from colloquy.domain.value.common import ValueObject

MAX_CONTENT_LENGTH = 1000
MAX_NAME_LENGTH = 255  # author_name column
MAX_EMAIL_LENGTH = 255  # author_email column


class CommentStatus(str, Enum):
    """Moderation status of a comment.

    Only approved comments are shown to non-admin callers.
    """

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    SPAM = "spam"


class Role(str, Enum):
    """Role of an authenticated caller."""

    ADMIN = "admin"
    USER = "user"


class Operation(str, Enum):
    """Operations governed by the access control matrix."""

    CREATE = "create"
    READ = "read"
    EDIT = "edit"
    CHANGE_STATUS = "change_status"
    DELETE = "delete"


class FieldError(ValueObject):
    """A single field-level validation failure."""

    field: str
    reason: str
