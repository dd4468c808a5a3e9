"""
Pydantic schemas for the users API.

Request schemas check type shape only: name and email must be strings
that can be stored as UTF-8 text. Email format and uniqueness are
deliberately not checked.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CreateUserRequest(BaseModel):
    """Request body for ``POST /users``."""

    name: str = Field(..., description="Display name of the user")
    email: str = Field(..., description="Contact address of the user")

    @field_validator("name", "email")
    @classmethod
    def _storable_text(cls, value: str) -> str:
        # JSON allows lone surrogate escapes such as "\ud800"
        try:
            value.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise ValueError("must be valid UTF-8 text") from exc
        return value


class UserResponse(BaseModel):
    """A stored user as returned by the API."""

    id: int
    name: str
    email: str


class ErrorResponse(BaseModel):
    """Uniform error body, e.g. ``{"Error": "User not found"}``."""

    model_config = ConfigDict(populate_by_name=True)

    error: str = Field(..., alias="Error")
    detail: str | None = None


class HealthResponse(BaseModel):
    """Response schema for the health endpoint."""

    status: str
    version: str
