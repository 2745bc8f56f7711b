"""
Postboard Backend — Posts Route Handlers
==========================================

What:  The /posts resource: list, get, create, update, delete.
Why:   Adapts HTTP semantics on top of PostService's CRUD operations.
How:   Each handler awaits exactly one service call and wraps the result in a
       JSON envelope. Any failure is converted into HttpException(400, message)
       and raised to the global handler in main.py.

Route table:
    GET    /posts            → 200 {"posts": [...]}
    GET    /posts/{post_id}  → 200 {"post": ... | null}
    POST   /posts            → 201 {"post": ...}          (body: PostCreate)
    PUT    /posts/{post_id}  → 201 {"post": ...}          (body: PostUpdate)
    DELETE /posts/{post_id}  → 200 {"post": ... | null}   (requires auth)

Pre-handler steps are FastAPI dependencies, resolved in declaration order;
the first one that fails short-circuits the request:
    - body validation: a malformed body never reaches the handler (400)
    - get_current_user: resolves the caller; DELETE refuses to proceed
      without one and never calls PostService.delete in that case
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth import AuthenticatedUser, get_current_user
from app.database import get_db_session
from app.exceptions import HttpException
from app.schemas.post import (
    ErrorResponse,
    PostCreate,
    PostEnvelope,
    PostListEnvelope,
    PostUpdate,
)
from app.services.post_service import PostService, get_post_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Posts"])

_ERROR_RESPONSES = {400: {"description": "Request failed", "model": ErrorResponse}}


def _bad_request(exc: Exception) -> HttpException:
    """Funnels any failure into the single error kind the API exposes."""
    message = getattr(exc, "message", None) or str(exc)
    return HttpException(400, message)


@router.get(
    "/posts",
    response_model=PostListEnvelope,
    responses=_ERROR_RESPONSES,
    summary="List all posts",
)
async def get_all(
    db: AsyncSession = Depends(get_db_session),
    service: PostService = Depends(get_post_service),
) -> PostListEnvelope:
    try:
        posts = await service.get_all(db)
    except Exception as e:
        raise _bad_request(e) from e
    return PostListEnvelope(posts=posts)


@router.get(
    "/posts/{post_id}",
    response_model=PostEnvelope,
    responses=_ERROR_RESPONSES,
    summary="Get a single post by id",
)
async def get_one(
    post_id: str,
    db: AsyncSession = Depends(get_db_session),
    service: PostService = Depends(get_post_service),
) -> PostEnvelope:
    """An unknown id answers 200 with {"post": null}."""
    try:
        post = await service.get_one(db, post_id)
    except Exception as e:
        raise _bad_request(e) from e
    return PostEnvelope(post=post)


@router.post(
    "/posts",
    status_code=201,
    response_model=PostEnvelope,
    responses=_ERROR_RESPONSES,
    summary="Create a post",
)
async def create(
    payload: PostCreate,
    db: AsyncSession = Depends(get_db_session),
    service: PostService = Depends(get_post_service),
) -> PostEnvelope:
    try:
        post = await service.create(db, payload.title, payload.content)
    except Exception as e:
        raise _bad_request(e) from e
    return PostEnvelope(post=post)


@router.put(
    "/posts/{post_id}",
    status_code=201,
    response_model=PostEnvelope,
    responses=_ERROR_RESPONSES,
    summary="Replace a post's title and content",
)
async def update(
    post_id: str,
    payload: PostUpdate,
    db: AsyncSession = Depends(get_db_session),
    service: PostService = Depends(get_post_service),
) -> PostEnvelope:
    try:
        post = await service.update(db, post_id, payload.title, payload.content)
    except Exception as e:
        raise _bad_request(e) from e
    return PostEnvelope(post=post)


@router.delete(
    "/posts/{post_id}",
    response_model=PostEnvelope,
    responses=_ERROR_RESPONSES,
    summary="Delete a post (authenticated)",
)
async def delete(
    post_id: str,
    user: Optional[AuthenticatedUser] = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
    service: PostService = Depends(get_post_service),
) -> PostEnvelope:
    """
    Delete a post and return the deleted record.

    Authentication is checked first; without a user the request fails with
    400 "Unauthorized" and the service is never called. The response is
    written exactly once.
    """
    if user is None:
        raise HttpException(400, "Unauthorized")

    try:
        post = await service.delete(db, post_id)
    except Exception as e:
        raise _bad_request(e) from e

    logger.info("Post %s deleted by %s", post_id, user.name)
    return PostEnvelope(post=post)
