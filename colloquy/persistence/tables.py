"""SQLAlchemy table definitions for Colloquy.

These table definitions match the schema defined in the Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# COMMENTS TABLE
# ============================================================================
# parent_id has no foreign key: deleting a comment leaves its replies with a
# dangling parent_id, and they surface as roots of the thread.
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("post_id", UUID(as_uuid=True), nullable=False),
    Column("parent_id", UUID(as_uuid=True), nullable=True),
    Column("content", Text, nullable=False),
    Column("author_kind", String(20), nullable=False),  # 'identified', 'anonymous'
    Column("author_user_id", UUID(as_uuid=True), nullable=True),
    Column("author_name", String(255), nullable=True),
    Column("author_email", String(255), nullable=True),
    Column("author_website", Text, nullable=True),
    Column("status", String(20), nullable=False, server_default="pending"),
    Column("reply_count", Integer, nullable=False, server_default="0"),
    Column("like_count", Integer, nullable=False, server_default="0"),
    Column("ip_address", String(255), nullable=False, server_default="unknown"),
    Column("user_agent", Text, nullable=False, server_default="unknown"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "char_length(content) BETWEEN 1 AND 1000", name="comment_content_length"
    ),
    CheckConstraint(
        "status IN ('pending', 'approved', 'rejected', 'spam')",
        name="comment_status_valid",
    ),
    CheckConstraint(
        "(author_kind = 'identified' AND author_user_id IS NOT NULL) OR "
        "(author_kind = 'anonymous' AND author_name IS NOT NULL "
        "AND author_email IS NOT NULL)",
        name="comment_author_complete",
    ),
    CheckConstraint("reply_count >= 0", name="comment_reply_count_positive"),
    CheckConstraint("like_count >= 0", name="comment_like_count_positive"),
)

Index(
    "idx_comments_post_id_created_at",
    comments_table.c.post_id,
    comments_table.c.created_at,
)
Index(
    "idx_comments_parent_id_status",
    comments_table.c.parent_id,
    comments_table.c.status,
)

# ============================================================================
# POSTS TABLE (owned by the content subsystem, read-only here)
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
)
