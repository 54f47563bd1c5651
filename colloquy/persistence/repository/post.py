"""PostgreSQL implementation of the post directory."""

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from colloquy.domain.repository import PostDirectory
from colloquy.domain.value import PostId
from colloquy.persistence.repository.comment import store_errors
from colloquy.persistence.tables import posts_table


class PostgresPostDirectory(PostDirectory):
    """Looks posts up in the content subsystem's posts table."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize directory with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def exists(self, post_id: PostId) -> bool:
        """Check whether a post row exists."""
        stmt = select(exists().where(posts_table.c.id == post_id))
        with store_errors("post_exists"):
            result = await self.session.execute(stmt)
            return bool(result.scalar())
