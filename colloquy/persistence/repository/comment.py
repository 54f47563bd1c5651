"""PostgreSQL implementation of Comment repository."""

from contextlib import contextmanager
from datetime import datetime
from typing import Collection, Iterator, List, Optional

import logfire
from sqlalchemy import func, select, update
from sqlalchemy.exc import DataError, IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from colloquy.domain.error import StoreUnavailableError, ValidationFailedError
from colloquy.domain.model import Comment
from colloquy.domain.repository import CommentRepository
from colloquy.domain.value import CommentId, CommentStatus, FieldError, PostId
from colloquy.persistence.mappers import comment_to_dict, row_to_comment
from colloquy.persistence.tables import comments_table


# SQLSTATE classes for data exceptions and integrity constraint violations
REJECTED_DATA_SQLSTATE_CLASSES = ("22", "23")


def is_rejected_data(error: SQLAlchemyError) -> bool:
    """Check whether the database refused the values rather than the request.

    asyncpg data errors surface as a plain DBAPIError, so the SQLSTATE of
    the driver error is consulted as well as the exception type.
    """
    if isinstance(error, (DataError, IntegrityError)):
        return True
    sqlstate = getattr(getattr(error, "orig", None), "sqlstate", None) or ""
    return sqlstate[:2] in REJECTED_DATA_SQLSTATE_CLASSES


@contextmanager
def store_errors(operation: str) -> Iterator[None]:
    """Translate SQLAlchemy failures into domain errors.

    Values the database refuses become ValidationFailedError. Any other
    failure becomes StoreUnavailableError.

    Args:
        operation: Repository operation name for the error message
    """
    try:
        yield
    except SQLAlchemyError as e:
        if is_rejected_data(e):
            logfire.warn(
                "Comment store rejected data", operation=operation, error=str(e)
            )
            raise ValidationFailedError(
                [FieldError(field="comment", reason="Rejected by the comment store")]
            ) from e
        logfire.error("Comment store failure", operation=operation, error=str(e))
        raise StoreUnavailableError(operation, str(e)) from e


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        with store_errors("find_by_id"):
            stmt = select(comments_table).where(comments_table.c.id == comment_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_post(
        self,
        post_id: PostId,
        statuses: Optional[Collection[CommentStatus]] = None,
    ) -> List[Comment]:
        """Find all comments for a post in one query, oldest first."""
        stmt = select(comments_table).where(comments_table.c.post_id == post_id)

        if statuses is not None:
            stmt = stmt.where(comments_table.c.status.in_([s.value for s in statuses]))

        stmt = stmt.order_by(comments_table.c.created_at, comments_table.c.id)

        with store_errors("find_by_post"):
            result = await self.session.execute(stmt)
            rows = result.fetchall()
        return [row_to_comment(row._asdict()) for row in rows]

    async def find_children(self, parent_id: CommentId) -> List[Comment]:
        """Find direct child comments of a parent comment."""
        stmt = select(comments_table).where(comments_table.c.parent_id == parent_id)
        stmt = stmt.order_by(comments_table.c.created_at, comments_table.c.id)

        with store_errors("find_children"):
            result = await self.session.execute(stmt)
            rows = result.fetchall()
        return [row_to_comment(row._asdict()) for row in rows]

    async def lock(self, comment_id: CommentId) -> None:
        """SELECT ... FOR UPDATE on the comment row."""
        stmt = (
            select(comments_table.c.id)
            .where(comments_table.c.id == comment_id)
            .with_for_update()
        )
        with store_errors("lock"):
            await self.session.execute(stmt)

    async def create(self, comment: Comment) -> Comment:
        """Insert a comment."""
        with store_errors("create"):
            stmt = (
                comments_table.insert()
                .values(**comment_to_dict(comment))
                .returning(comments_table)
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()
        return row_to_comment(row._asdict())

    async def _update(self, comment_id: CommentId, **values) -> Optional[Comment]:
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(**values, updated_at=datetime.now())
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            return None
        await self.session.flush()
        return row_to_comment(row._asdict())

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Update the content of a comment."""
        with store_errors("update_content"):
            return await self._update(comment_id, content=content)

    async def update_status(
        self, comment_id: CommentId, status: CommentStatus
    ) -> Optional[Comment]:
        """Update the moderation status of a comment."""
        with store_errors("update_status"):
            return await self._update(comment_id, status=status.value)

    async def recompute_reply_count(self, comment_id: CommentId) -> Optional[int]:
        """Recount approved children and store the count in one statement.

        Runs inside a SAVEPOINT so a failure here never aborts the request
        transaction that holds the triggering write.
        """
        children = comments_table.alias("children")
        approved_children = (
            select(func.count())
            .select_from(children)
            .where(children.c.parent_id == comments_table.c.id)
            .where(children.c.status == CommentStatus.APPROVED.value)
            .scalar_subquery()
        )
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(reply_count=approved_children, updated_at=datetime.now())
            .returning(comments_table.c.reply_count)
        )

        with store_errors("recompute_reply_count"):
            async with self.session.begin_nested():
                result = await self.session.execute(stmt)
                count = result.scalar_one_or_none()
        return count

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment (hard delete, replies are kept)."""
        with store_errors("delete"):
            stmt = (
                comments_table.delete()
                .where(comments_table.c.id == comment_id)
                .returning(comments_table.c.id)
            )
            result = await self.session.execute(stmt)
            deleted = result.fetchone() is not None
            await self.session.flush()
        return deleted

    async def ping(self) -> None:
        """Run a trivial query against the store."""
        with store_errors("ping"):
            await self.session.execute(select(1))
