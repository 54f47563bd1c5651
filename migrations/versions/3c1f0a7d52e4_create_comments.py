"""create_comments

Create the comment store:
- Comments (flat rows with a parent pointer, unlimited nesting)
- Posts lookup table, only when the content subsystem hasn't created it

Revision ID: 3c1f0a7d52e4
Revises:
Create Date: 2026-10-19 09:12:44.218305

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0a7d52e4"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # Posts are owned by the content subsystem; comments only check existence
    op.execute("CREATE TABLE IF NOT EXISTS posts (id UUID PRIMARY KEY)")

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    # parent_id has no foreign key: deleting a comment keeps its replies
    op.create_table(
        "comments",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("post_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("parent_id", postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("author_kind", sa.String(length=20), nullable=False),
        sa.Column("author_user_id", postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column("author_name", sa.String(length=255), nullable=True),
        sa.Column("author_email", sa.String(length=255), nullable=True),
        sa.Column("author_website", sa.Text(), nullable=True),
        sa.Column(
            "status", sa.String(length=20), server_default="pending", nullable=False
        ),
        sa.Column("reply_count", sa.Integer(), server_default="0", nullable=False),
        sa.Column("like_count", sa.Integer(), server_default="0", nullable=False),
        sa.Column(
            "ip_address",
            sa.String(length=255),
            server_default="unknown",
            nullable=False,
        ),
        sa.Column("user_agent", sa.Text(), server_default="unknown", nullable=False),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "char_length(content) BETWEEN 1 AND 1000", name="comment_content_length"
        ),
        sa.CheckConstraint(
            "status IN ('pending', 'approved', 'rejected', 'spam')",
            name="comment_status_valid",
        ),
        sa.CheckConstraint(
            "(author_kind = 'identified' AND author_user_id IS NOT NULL) OR "
            "(author_kind = 'anonymous' AND author_name IS NOT NULL "
            "AND author_email IS NOT NULL)",
            name="comment_author_complete",
        ),
        sa.CheckConstraint("reply_count >= 0", name="comment_reply_count_positive"),
        sa.CheckConstraint("like_count >= 0", name="comment_like_count_positive"),
    )

    # One query loads a whole thread, oldest first
    op.create_index(
        "idx_comments_post_id_created_at",
        "comments",
        ["post_id", "created_at"],
    )
    # Reply count recompute counts approved children of one parent
    op.create_index(
        "idx_comments_parent_id_status",
        "comments",
        ["parent_id", "status"],
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_comments_parent_id_status", table_name="comments")
    op.drop_index("idx_comments_post_id_created_at", table_name="comments")
    op.drop_table("comments")
