"""
Rhythm90 Backend — Custom Exception Hierarchy
==============================================

What:  Defines application-specific exceptions for different error scenarios.
Why:   Custom exceptions enable targeted error handling with appropriate HTTP
       status codes and user-friendly messages.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return the response the route contract calls for.
Who:   Raised by services and routes; caught by global handlers.

Exception Hierarchy:
    Rhythm90Error (base)
    ├── ValidationError      → 400 Bad Request (client can fix)
    ├── UnauthorizedError    → 401 plain-text "Unauthorized"
    ├── ForbiddenError       → 403 Forbidden (feature disabled or not on this plan)
    ├── NotFoundError        → 404 Not Found (a specific resource is missing)
    ├── TooManyRequestsError → 429 Too Many Requests (per-user request limit hit)
    └── LLMServiceError      → 503 Service Unavailable

    Store failures are deliberately absent: the core routes let them
    propagate to the catch-all handler as a generic 500.
"""

from typing import Any, Dict, Optional


class Rhythm90Error(Exception):
    """
    Base exception for all Rhythm90 application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged, and returned as `details` only
                  by handlers that opt in)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(Rhythm90Error):
    """
    Raised when client input fails a business rule.

    When:    Profile name out of range, malformed waitlist email.
    HTTP:    400 Bad Request

    Schema-level problems (missing body fields, wrong JSON types) never get
    here: FastAPI rejects those with its own 422 response.
    """

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


class UnauthorizedError(Rhythm90Error):
    """
    Raised when the current user lacks the admin role for an admin-only route.

    HTTP:    401 with the plain-text body "Unauthorized"
    """

    def __init__(
        self,
        message: str = "Unauthorized",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class ForbiddenError(Rhythm90Error):
    """
    Raised when a route is switched off for this deployment or plan.

    When:    POST /auth/demo while DEMO_MODE is false; GET /premium-content
             for a user without a premium subscription.
    HTTP:    403 Forbidden
    """

    def __init__(
        self,
        message: str = "This action is not allowed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(Rhythm90Error):
    """
    Raised when a specific requested resource does not exist.

    When:    GET /me for a user id with no row.
    HTTP:    404 Not Found (structured JSON, unlike a routing miss)
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


class LLMServiceError(Rhythm90Error):
    """
    Raised when the LLM (Gemini) service call fails.

    When:    The SDK raised, timed out, or the API key is rejected.
    HTTP:    503 Service Unavailable

    No retry is attempted; the client decides whether to ask again.
    """

    def __init__(
        self,
        message: str = "AI assistant is temporarily unavailable",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class TooManyRequestsError(Rhythm90Error):
    """
    Raised when a user exceeds a per-user request limit.

    When:    More than 5 password reset requests for one account in an hour.
    HTTP:    429 Too Many Requests
    """

    def __init__(
        self,
        message: str = "Too many requests. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
