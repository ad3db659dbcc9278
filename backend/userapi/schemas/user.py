"""
Users API Backend - Pydantic Request/Response Schemas
======================================================

What:  Pydantic models defining the API contract between clients and backend.
Why:   Strict input validation, automatic serialization, and OpenAPI doc generation.
How:   FastAPI uses these models to validate request bodies and serialize
       responses. Every response body is an `APIResponse` envelope.
"""

from typing import Any, Generic, List, Literal, Optional, TypeVar

from pydantic import BaseModel, Field, StrictStr, field_validator, model_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticCustomError

from userapi.exceptions import ValidationError

DataT = TypeVar("DataT")

# Error type reported by UserCreate when name or email is empty.
# UserCreate.from_json keys its message off this value.
REQUIRED_FIELDS_ERROR = "required_fields"
REQUIRED_FIELDS_MESSAGE = "Name and email are required"
INVALID_PAYLOAD_MESSAGE = "Invalid JSON payload"
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"


# ══════════════════════════════════════════════════════════════════════════
# Domain Models
# ══════════════════════════════════════════════════════════════════════════


class User(BaseModel):
    """
    What:  A user record as held by the store and returned by the API.
    Who:   Created by UserStore.add, returned by every users endpoint.

    Frozen: a user never changes after creation, it can only be removed.
    """

    id: int = Field(description="Unique user identifier, assigned by the store")
    name: str = Field(description="Display name")
    email: str = Field(description="Email address (not a uniqueness key)")
    created: str = Field(description="Creation time, UTC RFC3339 (e.g. 2024-01-15T12:00:00Z)")

    model_config = {"frozen": True}


class HealthData(BaseModel):
    """Payload of the health check envelope."""

    timestamp: str = Field(description="Current UTC time, RFC3339")
    version: str = Field(description="Application version")
    service: str = Field(description="Service name")


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class UserCreate(BaseModel):
    """
    What:  Body of POST /api/v1/users.

    Absent and null fields count as "", and a bare `null` body as `{}`, so
    all of them get the same "Name and email are required" answer as an
    empty string. Wrong types (numbers, lists, objects) fail strict string
    validation and are reported as an invalid payload instead.
    """

    name: StrictStr = ""
    email: StrictStr = ""

    @model_validator(mode="before")
    @classmethod
    def null_body_as_empty(cls, data: Any) -> Any:
        return {} if data is None else data

    @field_validator("name", "email", mode="before")
    @classmethod
    def null_as_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @classmethod
    def from_json(cls, raw: bytes) -> "UserCreate":
        """
        Decode a request body regardless of its Content-Type.

        Raises:
            ValidationError: body is not JSON for this shape, or a required
                             field is empty
        """
        try:
            return cls.model_validate_json(raw)
        except PydanticValidationError as exc:
            errors = exc.errors()
            if errors and all(e.get("type") == REQUIRED_FIELDS_ERROR for e in errors):
                raise ValidationError(message=REQUIRED_FIELDS_MESSAGE) from exc
            raise ValidationError(message=INVALID_PAYLOAD_MESSAGE) from exc

    @model_validator(mode="after")
    def check_required_fields(self) -> "UserCreate":
        if not self.name or not self.email:
            raise PydanticCustomError(REQUIRED_FIELDS_ERROR, REQUIRED_FIELDS_MESSAGE)
        return self


# ══════════════════════════════════════════════════════════════════════════
# Response Envelope
# ══════════════════════════════════════════════════════════════════════════


class APIResponse(BaseModel, Generic[DataT]):
    """
    What:  Uniform envelope wrapping every application response.

    Shape:
        {"status": "success" | "error", "message": "...", "data": ...}

    `data` is left out of the JSON entirely when there is nothing to return
    (routes serialize with exclude_none). An empty user list is still `[]`.
    """

    status: Literal["success", "error"] = Field(description="Outcome of the request")
    message: str = Field(description="Human-readable description of the outcome")
    data: Optional[DataT] = Field(default=None, description="Payload, omitted when absent")

    @classmethod
    def success(cls, message: str, data: Any = None) -> "APIResponse":
        return cls(status="success", message=message, data=data)

    @classmethod
    def error(cls, message: str) -> "APIResponse":
        return cls(status="error", message=message)

    def to_content(self) -> dict:
        """JSON-ready dict with `data` dropped when absent."""
        return self.model_dump(mode="json", exclude_none=True)


class ErrorResponse(BaseModel):
    """Error envelope, documented in the OpenAPI responses of each route."""

    status: Literal["error"] = "error"
    message: str = Field(description="Human-readable error description")


UserListResponse = APIResponse[List[User]]
UserResponse = APIResponse[User]
HealthResponse = APIResponse[HealthData]
