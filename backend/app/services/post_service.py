"""
Postboard Backend — Post Service (Persistence Collaborator)
=============================================================

What:  CRUD operations for posts over an async SQLAlchemy session.
Why:   Keeps every database concern out of the route handlers.
How:   Each method receives the request's AsyncSession, runs one logical
       operation, and returns PostResponse objects (or None).
Who:   Called by the /posts route handlers.

Design Decision:
    PostService is stateless — it receives the db session for each call.
    Write operations commit before returning, so a PUT is visible to the
    next GET as soon as the handler has its result.

Missing-record semantics:
    get_one  → None
    update   → NotFoundError
    delete   → None

Malformed ids (anything uuid.UUID() refuses) raise ValidationError.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import asc, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import DatabaseError, NotFoundError, PostboardError, ValidationError
from app.models.post import Post
from app.schemas.post import PostResponse

logger = logging.getLogger(__name__)


def _parse_post_id(post_id: str) -> uuid.UUID:
    try:
        return uuid.UUID(str(post_id))
    except ValueError:
        raise ValidationError(
            message=f"Invalid post id '{post_id}'",
            field="postId",
        )


class PostService:
    """
    Data access for the posts resource.

    Error Handling Strategy:
        Application errors (ValidationError, NotFoundError) propagate as-is.
        Anything else raised while talking to the database is logged and
        wrapped in DatabaseError, which hides driver details from clients.
    """

    async def get_all(self, db: AsyncSession) -> List[PostResponse]:
        """
        Return every post in creation order.

        Ordering is fixed (created_at, then id) so that two reads with no
        write in between return identical lists.
        """
        try:
            result = await db.execute(
                select(Post).order_by(asc(Post.created_at), asc(Post.id))
            )
            posts = list(result.scalars().all())
            return [PostResponse.model_validate(post) for post in posts]
        except Exception as e:
            logger.error("Database error listing posts: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve posts. Please try again.",
                context={"error_type": type(e).__name__},
            )

    async def get_one(self, db: AsyncSession, post_id: str) -> Optional[PostResponse]:
        """
        Retrieve a single post by id.

        Returns:
            PostResponse, or None when no post has this id.

        Raises:
            ValidationError: post_id is not a UUID
            DatabaseError: query execution failed
        """
        uid = _parse_post_id(post_id)
        try:
            post = await self._load(db, uid)
            if post is None:
                logger.debug("Post %s not found", uid)
                return None
            return PostResponse.model_validate(post)
        except Exception as e:
            logger.error("Database error fetching post %s: %s", uid, str(e))
            raise DatabaseError(
                message="Could not retrieve the post. Please try again.",
                context={"post_id": str(uid)},
            )

    async def create(self, db: AsyncSession, title: str, content: str) -> PostResponse:
        """Insert a new post and return it with its generated id."""
        try:
            post = Post(title=title, content=content)
            db.add(post)
            await db.flush()  # Assigns defaults (id, timestamps)
            await db.commit()
            logger.info("Post created: %s", post.id)
            return PostResponse.model_validate(post)
        except Exception as e:
            logger.error("Database error creating post: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not create the post. Please try again.",
                context={"error_type": type(e).__name__},
            )

    async def update(
        self,
        db: AsyncSession,
        post_id: str,
        title: str,
        content: str,
    ) -> PostResponse:
        """
        Replace title and content of an existing post.

        Raises:
            ValidationError: post_id is not a UUID
            NotFoundError: no post has this id
            DatabaseError: the write failed
        """
        uid = _parse_post_id(post_id)
        try:
            post = await self._load(db, uid)
            if post is None:
                raise NotFoundError(resource="post", resource_id=str(uid))

            post.title = title
            post.content = content
            post.updated_at = datetime.now(timezone.utc)
            await db.flush()
            await db.commit()
            logger.info("Post updated: %s", uid)
            return PostResponse.model_validate(post)

        except PostboardError:
            raise
        except Exception as e:
            logger.error("Database error updating post %s: %s", uid, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not update the post. Please try again.",
                context={"post_id": str(uid)},
            )

    async def delete(self, db: AsyncSession, post_id: str) -> Optional[PostResponse]:
        """
        Delete a post and return the record as it was before removal.

        Returns:
            PostResponse of the deleted post, or None when nothing matched.
        """
        uid = _parse_post_id(post_id)
        try:
            post = await self._load(db, uid)
            if post is None:
                logger.info("Delete requested for missing post %s", uid)
                return None

            deleted = PostResponse.model_validate(post)
            await db.delete(post)
            await db.flush()
            await db.commit()
            logger.info("Post deleted: %s", uid)
            return deleted

        except Exception as e:
            logger.error("Database error deleting post %s: %s", uid, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not delete the post. Please try again.",
                context={"post_id": str(uid)},
            )

    async def _load(self, db: AsyncSession, uid: uuid.UUID) -> Optional[Post]:
        result = await db.execute(select(Post).where(Post.id == uid))
        return result.scalar_one_or_none()


# ── Singleton Instance ────────────────────────────────────────────────────
post_service = PostService()


def get_post_service() -> PostService:
    """FastAPI dependency returning the shared PostService."""
    return post_service
