"""
Postboard Backend — Post SQLAlchemy Model
===========================================

What:  ORM model representing the `posts` table.
Why:   Maps Python objects to database rows for type-safe database operations.
How:   Inherits from SQLAlchemy's DeclarativeBase; Alembic reads this for migrations.
Who:   Used by PostService for CRUD operations and by Alembic for schema management.

Table Design Rationale:
    - UUID primary key generated in Python (works on PostgreSQL and SQLite alike)
    - title: short, bounded headline
    - content: unbounded body text
    - created_at / updated_at: UTC with timezone (never naive datetimes)

    Index on created_at:
        GET /posts lists every post in creation order
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Index, String, Text, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Post(Base):
    """
    A single post.

    Lifecycle:
        1. Created by POST /posts
        2. title/content replaced by PUT /posts/{id} (updated_at refreshed)
        3. Removed by an authenticated DELETE /posts/{id}
    """

    __tablename__ = "posts"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        comment="Unique identifier",
    )

    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Post headline",
    )

    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Post body",
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
        comment="When this post was created (UTC)",
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
        comment="When this post was last written (UTC)",
    )

    __table_args__ = (
        Index("idx_posts_created_at", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<Post(id={self.id}, title='{self.title}')>"
