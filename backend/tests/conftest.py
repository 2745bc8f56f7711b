"""
Postboard Backend — Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    ├── mock_db_session:   AsyncMock standing in for AsyncSession (service unit tests)
    ├── sample_post:       transient Post ORM object (never touches a database)
    ├── fake_post_service: in-memory PostService replacement (route tests)
    ├── test_client:       HTTPX AsyncClient on an app wired to fake_post_service
    └── sqlite_client:     HTTPX AsyncClient on an app backed by a real aiosqlite file
"""

import os
import uuid
from datetime import datetime, timezone
from typing import Dict, List, Optional
from unittest.mock import AsyncMock, MagicMock

# Override settings BEFORE any app import: app.database builds its engine at import
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test.db"
os.environ["API_TOKENS"] = "test-token:tester,other-token:reviewer"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from app.database import Base, get_db_session
from app.exceptions import NotFoundError, ValidationError
from app.main import create_app
from app.models.post import Post
from app.schemas.post import PostResponse
from app.services.post_service import get_post_service


@pytest.fixture
def auth_headers():
    """Authorization header for the "tester" token configured above."""
    return {"Authorization": "Bearer test-token"}


# ══════════════════════════════════════════════════════════════════════════
# Service-level Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        mock_db_session.execute.return_value.scalar_one_or_none.return_value = post
        result = await post_service.get_one(mock_db_session, str(post.id))
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.delete = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def sample_post():
    """A fully populated, transient Post instance."""
    now = datetime.now(timezone.utc)
    return Post(
        id=uuid.uuid4(),
        title="Hello",
        content="First post body",
        created_at=now,
        updated_at=now,
    )


# ══════════════════════════════════════════════════════════════════════════
# Route-level Fixtures
# ══════════════════════════════════════════════════════════════════════════

class FakePostService:
    """
    In-memory stand-in for PostService with the same call signatures.

    Records every call in `calls` so tests can assert what the routes did
    (and, for DELETE without auth, what they did not do).
    """

    def __init__(self):
        self.posts: Dict[str, PostResponse] = {}
        self.calls: List[str] = []
        self.fail_with: Optional[Exception] = None

    def _check_failure(self, name: str) -> None:
        self.calls.append(name)
        if self.fail_with is not None:
            raise self.fail_with

    def _key(self, post_id: str) -> str:
        try:
            return str(uuid.UUID(post_id))
        except ValueError:
            raise ValidationError(message=f"Invalid post id '{post_id}'", field="postId")

    async def get_all(self, db) -> List[PostResponse]:
        self._check_failure("get_all")
        return list(self.posts.values())

    async def get_one(self, db, post_id: str) -> Optional[PostResponse]:
        self._check_failure("get_one")
        return self.posts.get(self._key(post_id))

    async def create(self, db, title: str, content: str) -> PostResponse:
        self._check_failure("create")
        now = datetime.now(timezone.utc)
        post = PostResponse(
            id=uuid.uuid4(), title=title, content=content, created_at=now, updated_at=now
        )
        self.posts[str(post.id)] = post
        return post

    async def update(self, db, post_id: str, title: str, content: str) -> PostResponse:
        self._check_failure("update")
        key = self._key(post_id)
        if key not in self.posts:
            raise NotFoundError(resource="post", resource_id=key)
        post = self.posts[key].model_copy(
            update={"title": title, "content": content, "updated_at": datetime.now(timezone.utc)}
        )
        self.posts[key] = post
        return post

    async def delete(self, db, post_id: str) -> Optional[PostResponse]:
        self._check_failure("delete")
        return self.posts.pop(self._key(post_id), None)


@pytest.fixture
def fake_post_service():
    return FakePostService()


@pytest_asyncio.fixture
async def test_client(fake_post_service):
    """
    HTTPX AsyncClient talking to a fresh app whose PostService and db
    session are replaced: no database is needed.
    """
    app = create_app()

    async def _no_db():
        yield MagicMock()

    app.dependency_overrides[get_db_session] = _no_db
    app.dependency_overrides[get_post_service] = lambda: fake_post_service

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def sqlite_client(tmp_path):
    """
    HTTPX AsyncClient on an app backed by a real SQLite database file.

    The real PostService runs; only the session dependency points at a
    per-test engine so tests never share state.
    """
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'postboard.db'}",
        poolclass=NullPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def _sqlite_session():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app = create_app()
    app.dependency_overrides[get_db_session] = _sqlite_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    await engine.dispose()
