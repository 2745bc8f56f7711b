"""
Postboard Backend — Custom Exception Hierarchy
================================================

What:  Defines application-specific exceptions for different error scenarios.
Why:   Services raise typed errors; the route layer funnels every one of them
       into a single HttpException that the global handler writes out.
How:   Each exception class carries a message and optional context dict.
Who:   Raised by services and route handlers; caught by global handlers in main.py.

Exception Hierarchy:
    PostboardError (base)
    ├── ValidationError   raised by PostService for malformed input (e.g. post id)
    ├── NotFoundError     raised by PostService when an update target is missing
    ├── DatabaseError     raised by PostService when the driver fails
    └── HttpException     raised by route handlers, carries the HTTP status

Propagation:
    Service → (ValidationError | NotFoundError | DatabaseError | anything else)
    Route   → catches, re-raises HttpException(400, message)
    main.py → HttpException handler writes {"message": ...} with the status code

    The service-level kinds never reach the client as distinct codes.
"""

from typing import Any, Dict, Optional


class PostboardError(Exception):
    """
    Base exception for all Postboard application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(PostboardError):
    """Raised when input reaching the service cannot be used as given."""

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(PostboardError):
    """
    Raised when a requested resource does not exist.

    Only update() raises this: reads return None for a missing post and
    delete() returns None when nothing matched.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(PostboardError):
    """
    Raised when database operations fail unexpectedly.

    The message is always generic. Driver details (SQL, constraint names)
    go into context and the server log only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class HttpException(PostboardError):
    """
    Uniform error raised by route handlers.

    What:    Carries the HTTP status code and the message written to the client.
    HTTP:    status_code as given (400 for every controller-originated failure)

    Example response:
        {"message": "Unauthorized"}
    """

    def __init__(
        self,
        status_code: int = 400,
        message: str = "Bad request",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
        self.status_code = status_code
