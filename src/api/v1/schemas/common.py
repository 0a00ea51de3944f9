"""Error body shared by every endpoint."""

from typing import Any

from pydantic import BaseModel


class FieldError(BaseModel):
    """One rejected request field."""

    field: str
    message: str
    type: str


class ErrorResponse(BaseModel):
    """Standardized error response.

    ``details`` is a dict for domain errors (``{"profile_id": ...}``) and a
    list of ``FieldError`` for request validation failures.
    """

    error_code: str
    message: str
    details: dict[str, Any] | list[FieldError] | None = None
