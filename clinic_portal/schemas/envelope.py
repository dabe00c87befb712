# schemas/envelope.py
from __future__ import annotations

from enum import Enum as PyEnum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, model_validator

T = TypeVar("T")

_bool = TypeAdapter(bool)


def _is_failure(success: Any) -> bool:
    """success as pydantic would coerce it (lax mode: "false", 0, "no", ...)."""
    try:
        return not _bool.validate_python(success)
    except ValidationError:
        return False


class AccountRole(str, PyEnum):
    """
    Portal account roles as seen by the frontend.

    Distinct from the auth store's staff roles (ADMIN / MANAGER / STAFF).
    """

    USER = "USER"
    ADMIN = "ADMIN"
    SUPER_ADMIN = "SUPER_ADMIN"


class ApiResponse(BaseModel, Generic[T]):
    """
    Uniform response wrapper returned by every portal endpoint.

    success=False never carries data.
    """

    success: bool
    data: T | None = None
    error: str | None = None
    message: str | None = None

    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _skip_data_on_failure(cls, values: Any) -> Any:
        # A failure payload is never validated against T.
        if isinstance(values, dict) and _is_failure(values.get("success")):
            values = {k: v for k, v in values.items() if k != "data"}
        return values

    @model_validator(mode="after")
    def drop_data_on_failure(self) -> "ApiResponse[T]":
        if not self.success:
            self.data = None
        return self

    @classmethod
    def failure(cls, error: str, message: str | None = None) -> "ApiResponse[Any]":
        return cls(success=False, error=error, message=message)

    def as_dict(self) -> dict[str, Any]:
        """Envelope as a plain dict, without the keys that are unset."""
        return self.model_dump(mode="json", exclude_none=True)


class Pagination(BaseModel):
    page: int = Field(ge=1)
    limit: int = Field(ge=0)
    total: int = Field(ge=0)
    total_pages: int = Field(alias="totalPages", ge=0)

    model_config = ConfigDict(populate_by_name=True)


class Page(BaseModel, Generic[T]):
    """Payload of list endpoints: data = {items: [...], pagination: {...}}."""

    items: list[T]
    pagination: Pagination
