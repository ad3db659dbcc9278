"""
Users API Backend - Custom Exception Hierarchy
===============================================

What:  Application-specific exceptions for the client error scenarios.
Why:   Services raise these instead of building error responses themselves;
       global handlers (registered in main.py) turn them into error envelopes
       with the right HTTP status code.

Exception Hierarchy:
    UserAPIError (base)          → 500 Internal Server Error
    ├── ValidationError          → 400 Bad Request (client can fix)
    └── NotFoundError            → 404 Not Found
"""

from typing import Any, Dict, Optional


class UserAPIError(Exception):
    """
    Base exception for all Users API application errors.

    Attributes:
        message:  User-facing error description (returned in the envelope)
        context:  Additional debug info (logged but NOT returned to client)
    """

    status_code = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(UserAPIError):
    """
    Raised when client input fails validation.

    When:    Body is not valid JSON for the create payload, or a required
             field is empty.
    HTTP:    400 Bad Request
    """

    status_code = 400

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


class NotFoundError(UserAPIError):
    """
    Raised when a requested resource does not exist.

    When:    GET or DELETE /api/v1/users/{id} with an id no user carries.
    HTTP:    404 Not Found

    The store returns None for a missing user; the service converts that into
    this exception so the route never deals with status codes.
    """

    status_code = 404

    def __init__(
        self,
        resource: str = "User",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=f"{resource} not found", context=ctx)
        self.resource_id = resource_id
