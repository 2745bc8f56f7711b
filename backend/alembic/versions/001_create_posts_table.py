"""Create posts table

Revision ID: 001
Revises: None
Create Date: 2026-10-18 00:00:00.000000+00:00

What:  Creates the `posts` table backing the /posts resource.
How:   Portable column types (sa.Uuid, DateTime with time zone) so the same
       migration runs on PostgreSQL and SQLite.

Rollback: downgrade() drops the table entirely (destructive — all posts lost).
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the posts table and its created_at index."""
    op.create_table(
        "posts",
        sa.Column("id", sa.Uuid(as_uuid=True), nullable=False, comment="Unique identifier"),
        sa.Column("title", sa.String(255), nullable=False, comment="Post headline"),
        sa.Column("content", sa.Text(), nullable=False, comment="Post body"),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
            comment="When this post was created (UTC)",
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
            comment="When this post was last written (UTC)",
        ),
        sa.PrimaryKeyConstraint("id", name="pk_posts"),
    )

    op.create_index("idx_posts_created_at", "posts", ["created_at"])


def downgrade() -> None:
    """Drop the posts table (and its index)."""
    op.drop_index("idx_posts_created_at", table_name="posts")
    op.drop_table("posts")
