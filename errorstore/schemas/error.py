"""Standardized error response schemas."""

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Serialized error descriptor as sent to API clients."""

    errorcode: int | str = Field(..., description="Machine-readable error code")
    errorname: str = Field(..., description="Symbolic name of the error code")
    debug: str | list[str] = Field(..., description="Developer-facing message")
    message: str | list[str] = Field(..., description="Human-readable error message")
    adminmsg: str | list[str] = Field("", description="Administrator-facing message")
    data: Any = Field(None, description="Optional data attached to the error")


class ClientExport(BaseModel):
    """Error tables handed to the front-end error handling library.

    Field names and nesting are a wire contract; do not change them without
    a compatibility note.
    """

    errorMetaMap: dict[int | str, ErrorResponse]
    errorCodes: dict[str, int | str]


@dataclass(frozen=True, slots=True)
class RestResponse:
    """Response body paired with the HTTP status code it should be sent with."""

    response: Any
    status_code: int
