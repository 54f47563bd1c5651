"""Moderation state machine."""

import logfire

from colloquy.domain.error import InvalidTransitionError
from colloquy.domain.model.comment import Authorship, IdentifiedAuthor
from colloquy.domain.value import CommentStatus

from .base import Service


class ModerationService(Service):
    """Decides initial comment status and validates status changes.

    States are pending, approved, rejected and spam. Registered authors
    are trusted and start approved; anonymous submissions start pending.
    Admins may move a comment from any state to any other. Nothing here
    changes status on its own.
    """

    def initial_status(self, author: Authorship) -> CommentStatus:
        """Status a new comment starts in.

        Args:
            author: Authorship of the new comment

        Returns:
            approved for registered users, pending for anonymous ones
        """
        if isinstance(author, IdentifiedAuthor):
            return CommentStatus.APPROVED
        return CommentStatus.PENDING

    def parse_status(self, value: str | CommentStatus) -> CommentStatus:
        """Map a requested status onto one of the four legal states.

        Args:
            value: Raw status from the request

        Returns:
            The matching CommentStatus

        Raises:
            InvalidTransitionError: If the value names no known status
        """
        if isinstance(value, CommentStatus):
            return value
        try:
            return CommentStatus(value.strip().lower())
        except (AttributeError, ValueError):
            logfire.warn("Unrecognized moderation status", requested=str(value))
            raise InvalidTransitionError(str(value))

    def transition(
        self, current: CommentStatus, requested: str | CommentStatus
    ) -> CommentStatus:
        """Resolve the status a moderation request moves a comment to.

        Every state is reachable from every other, so the only failure is an
        unknown target.

        Args:
            current: Current status
            requested: Requested status

        Returns:
            The new status

        Raises:
            InvalidTransitionError: If the requested status is unknown
        """
        target = self.parse_status(requested)
        logfire.debug(
            "Moderation transition resolved",
            from_status=current.value,
            to_status=target.value,
        )
        return target

    @staticmethod
    def affects_reply_count(old: CommentStatus, new: CommentStatus) -> bool:
        """Whether a status change crosses the approved boundary."""
        return (old == CommentStatus.APPROVED) != (new == CommentStatus.APPROVED)

    @staticmethod
    def is_approval(old: CommentStatus, new: CommentStatus) -> bool:
        """Whether a status change newly approves a comment."""
        return new == CommentStatus.APPROVED and old != CommentStatus.APPROVED
