"""Access control matrix for comment operations."""

from typing import Optional

import logfire

from colloquy.config import ModerationSettings
from colloquy.domain.error import ForbiddenError
from colloquy.domain.model.caller import AuthenticatedCaller, Caller
from colloquy.domain.model.comment import Comment
from colloquy.domain.value import CommentStatus, Operation

from .base import Service

PUBLIC_STATUSES = frozenset({CommentStatus.APPROVED})


class AccessControlService(Service):
    """Authorizes comment operations for a caller.

    | Operation     | Admin | Owner           | Other user | Anonymous |
    |---------------|-------|-----------------|------------|-----------|
    | create        | yes   | yes             | yes        | yes       |
    | read          | all   | approved        | approved   | approved  |
    | edit          | any   | own             | no         | no        |
    | change_status | yes   | no              | no         | no        |
    | delete        | yes   | owner_can_delete| no         | no        |

    Owner means the comment's author is the caller's registered user id.
    Anonymous authorship never grants anything back to a later caller.
    """

    def __init__(self, moderation_settings: ModerationSettings) -> None:
        """Initialize access control service.

        Args:
            moderation_settings: Moderation configuration (delete policy)
        """
        self.moderation_settings = moderation_settings

    def authorize(
        self,
        operation: Operation,
        caller: Caller,
        target: Optional[Comment] = None,
    ) -> bool:
        """Decide whether the caller may perform an operation.

        Args:
            operation: Operation being attempted
            caller: Resolved caller identity
            target: Comment the operation applies to (if any)

        Returns:
            True if the operation is allowed
        """
        if operation == Operation.CREATE:
            return True

        if caller.is_admin:
            return True

        if operation == Operation.READ:
            return target is None or target.status in PUBLIC_STATUSES

        if operation == Operation.CHANGE_STATUS:
            return False

        is_owner = (
            isinstance(caller, AuthenticatedCaller)
            and target is not None
            and target.is_owned_by(caller.user_id)
        )

        if operation == Operation.EDIT:
            return is_owner

        if operation == Operation.DELETE:
            return is_owner and self.moderation_settings.owner_can_delete

        return False

    def require(
        self,
        operation: Operation,
        caller: Caller,
        target: Optional[Comment] = None,
    ) -> None:
        """Raise unless the caller may perform the operation.

        Raises:
            ForbiddenError: If the access matrix denies the operation
        """
        if not self.authorize(operation, caller, target):
            logfire.warn(
                "Comment operation denied",
                operation=operation.value,
                caller_kind=caller.kind,
                comment_id=str(target.id) if target else None,
            )
            raise ForbiddenError(
                operation.value, str(target.id) if target else None
            )

    def visible_statuses(self, caller: Caller) -> Optional[frozenset[CommentStatus]]:
        """Statuses the caller may read.

        Returns:
            None for admins (every status), approved only for everyone else
        """
        if caller.is_admin:
            return None
        return PUBLIC_STATUSES
