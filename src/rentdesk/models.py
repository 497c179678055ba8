"""Pydantic models for the Rentdesk API client."""

from typing import Any

from pydantic import BaseModel, ConfigDict

from .types import ErrorClass


class Identity(BaseModel):
    """The signed-in user as reported by the identity provider."""

    model_config = ConfigDict(frozen=True)

    uid: str
    email: str | None = None
    display_name: str | None = None


class DiagnosticRecord(BaseModel):
    """A classified request failure."""

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    error_class: ErrorClass
    status_code: int | None = None
    detail: Any = None
    method: str | None = None
    url: str | None = None
