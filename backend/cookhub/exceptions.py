"""
CookHub Backend — Custom Exception Hierarchy
==============================================

What:  Defines application-specific exceptions for different error scenarios.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with correct HTTP status codes.
Who:   Raised by services and the store; caught by global handlers.

Exception Hierarchy:
    CookHubError (base)
    ├── ValidationError          → 400 Bad Request (client can fix)
    ├── NotFoundError            → 404 Not Found
    ├── CapacityExceededError    → 409 Conflict (master class is full)
    ├── DatabaseError            → 500 Internal Server Error
    └── StoreUnavailableError    → fatal during startup (process exits)
"""

from typing import Any, Dict, Optional


class CookHubError(Exception):
    """
    Base exception for all CookHub application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client
                  unless the handler explicitly exposes it)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(CookHubError):
    """
    Raised when client input cannot be used.

    When:    Missing required query parameter, empty search query, body that is
             not valid JSON or has the wrong field types.
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "user_id is required",
            "details": {"field": "user_id"}
        }
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


class NotFoundError(CookHubError):
    """
    Raised when a requested resource does not exist.

    When:    Shopping list for an unknown recipe, enrollment into an unknown
             master class, missing landing page file.
    HTTP:    404 Not Found
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


class CapacityExceededError(CookHubError):
    """
    Raised when an enrollment would exceed a master class's max_students.

    HTTP:    409 Conflict
    No history row is written when this is raised.
    """

    def __init__(
        self,
        master_class_id: Optional[int] = None,
        enrolled: int = 0,
        capacity: int = 0,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx.update({"enrolled": enrolled, "capacity": capacity})
        if master_class_id is not None:
            ctx["master_class_id"] = master_class_id
        super().__init__(message="No available spots", context=ctx)
        self.enrolled = enrolled
        self.capacity = capacity


class DatabaseError(CookHubError):
    """
    Raised when database operations fail unexpectedly.

    When:    Constraint violation (duplicate username/email), locked database,
             I/O error, malformed statement.
    HTTP:    500 Internal Server Error

    The message returned to the client is always generic; the SQL error is
    logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class StoreUnavailableError(CookHubError):
    """
    Raised when the database file cannot be opened or connected to.

    When:    Startup only (Store.connect / Store.prepare_file).
    Effect:  The lifespan hook lets it propagate, uvicorn aborts startup and
             the process exits.
    """

    def __init__(
        self,
        message: str = "Could not open the database",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
