"""
Postboard Backend — Pydantic Request/Response Schemas
=======================================================

What:  Pydantic models defining the API contract for the posts resource.
Why:   Request bodies are validated before a handler runs; responses are
       serialized through a fixed shape.
How:   FastAPI validates request bodies against PostCreate / PostUpdate and
       serializes handler results through the envelope models below.

Envelopes (bit-exact with the public API):
    GET    /posts        → {"posts": [PostResponse, ...]}
    GET    /posts/{id}   → {"post": PostResponse | null}
    POST   /posts        → {"post": PostResponse}
    PUT    /posts/{id}   → {"post": PostResponse}
    DELETE /posts/{id}   → {"post": PostResponse | null}
    errors               → {"message": "..."}
"""

import uuid
from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


# ══════════════════════════════════════════════════════════════════════════
# Request Models — What the client sends in the body
# ══════════════════════════════════════════════════════════════════════════


class PostCreate(BaseModel):
    """Body of POST /posts. Both fields required and non-blank."""

    title: str = Field(min_length=1, max_length=255, description="Post headline")
    content: str = Field(min_length=1, description="Post body")

    @field_validator("title", "content")
    @classmethod
    def not_blank(cls, v: str) -> str:
        """Rejects values made only of whitespace."""
        if not v.strip():
            raise ValueError("must not be blank")
        return v


class PostUpdate(PostCreate):
    """
    Body of PUT /posts/{id}.

    Same shape as PostCreate: an update replaces both title and content.
    Kept as its own model so the two contracts can diverge independently.
    """


# ══════════════════════════════════════════════════════════════════════════
# Response Models — What the API returns to clients
# ══════════════════════════════════════════════════════════════════════════


class PostResponse(BaseModel):
    """Full representation of a post, built from the ORM object."""

    id: uuid.UUID = Field(description="Unique post identifier (UUID)")
    title: str = Field(description="Post headline")
    content: str = Field(description="Post body")
    created_at: datetime = Field(description="When the post was created (UTC ISO 8601)")
    updated_at: datetime = Field(description="When the post was last written (UTC ISO 8601)")

    model_config = {"from_attributes": True}

    @field_validator("created_at", "updated_at")
    @classmethod
    def as_utc(cls, v: datetime) -> datetime:
        """Naive values are UTC (SQLite drops the offset on read)."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)


class PostEnvelope(BaseModel):
    """{"post": ...} wrapper used by every single-post endpoint."""

    post: Optional[PostResponse] = None


class PostListEnvelope(BaseModel):
    """{"posts": [...]} wrapper used by GET /posts."""

    posts: List[PostResponse] = Field(default_factory=list)


# ══════════════════════════════════════════════════════════════════════════
# Error / Health Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """Body written by the centralized error handler."""

    message: str = Field(description="Human-readable error description")


class HealthResponse(BaseModel):
    """Health check response showing service and dependency status."""

    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
