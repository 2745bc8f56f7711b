"""
Postboard Backend — Request Authentication
============================================

What:  Resolves the caller's identity from an `Authorization: Bearer <token>` header.
Why:   DELETE /posts/{id} is only allowed for an authenticated user.
How:   Tokens are configured through API_TOKENS ("token:username" pairs).
       The dependency populates request.state.user and returns the user,
       or returns None when no valid credential is presented.

This dependency never rejects a request on its own: the route decides what a
missing user means (DELETE answers 400 "Unauthorized" before touching the
service).
"""

import hmac
import logging
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel, Field

from app.config import settings

logger = logging.getLogger(__name__)

# auto_error=False: a missing header yields None instead of a 403
_bearer_scheme = HTTPBearer(auto_error=False, description="API token from API_TOKENS")


class AuthenticatedUser(BaseModel):
    """Identity attached to a request that presented a known token."""

    name: str = Field(description="Username configured for the token")


def _lookup_token(provided: str) -> Optional[AuthenticatedUser]:
    for token, name in settings.api_token_map.items():
        # Constant-time comparison
        if hmac.compare_digest(provided.encode(), token.encode()):
            return AuthenticatedUser(name=name)
    return None


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer_scheme),
) -> Optional[AuthenticatedUser]:
    """
    FastAPI dependency returning the authenticated user, or None.

    Side effect: request.state.user is set to the same value so that
    middleware and logs can see who made the request.
    """
    user = None
    if credentials is not None and credentials.credentials:
        user = _lookup_token(credentials.credentials.strip())
        if user is None:
            logger.warning("Rejected bearer token on %s %s", request.method, request.url.path)

    request.state.user = user
    return user
