"""
BookStore Backend: Custom Exception Hierarchy
================================================

What:  Application-specific exceptions for the two failure kinds handlers
       can meet: a missing row and a storage fault.
How:   Each exception carries a message and an optional context dict.
       Global exception handlers (registered in main.py) turn them into
       HTTP responses.
Who:   Raised by services; caught by global handlers.

Exception Hierarchy:
    BookStoreError (base)   → 500 Internal Server Error
    ├── NotFoundError       → 404 Not Found (empty body)
    └── DatabaseError       → 500 Internal Server Error

Malformed request bodies never reach these: FastAPI answers them with 422
before the handler runs.
"""

from typing import Any, Dict, Optional


class BookStoreError(Exception):
    """
    Base exception for all BookStore application errors.

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


class NotFoundError(BookStoreError):
    """
    Raised when a requested book, author or category does not exist.

    SQLAlchemy returns None for missing rows; services convert that None
    into this exception so routes stay free of status-code branching.
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
        self.resource = resource
        self.resource_id = resource_id


class DatabaseError(BookStoreError):
    """
    Raised when a storage operation fails (I/O error, constraint violation,
    lost connection).

    The message returned to the client is always generic. The SQL error is
    logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
