"""
Anjali Furniture Backend — Response Envelope
==============================================

What:  The uniform wrapper every API outcome is returned in.
Why:   The storefront and admin dashboard check `success` first and read
       either `data`, `message`, or `error`.

Shapes:
    Success with payload:   {"success": true,  "data": <record | [records]>}
    Success with message:   {"success": true,  "message": "Product deleted"}
    Failure:                {"success": false, "error": "<message>"}

There is no partial-success shape: an operation either fully succeeds or
reports a single error string.
"""

from typing import Any, Dict

from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field


class SuccessEnvelope(BaseModel):
    """A successful result carrying one record or a list of records."""
    success: bool = Field(default=True)
    data: Any = Field(description="The record, or list of records, produced by the store")


class MessageEnvelope(BaseModel):
    """A successful result confirmed by a message instead of a payload."""
    success: bool = Field(default=True)
    message: str = Field(description="Human-readable confirmation")


class ErrorEnvelope(BaseModel):
    """A failed result. The HTTP status code carries the failure class."""
    success: bool = Field(default=False)
    error: str = Field(description="Error message")


def ok(data: Any) -> SuccessEnvelope:
    return SuccessEnvelope(data=data)


def confirmed(message: str) -> MessageEnvelope:
    return MessageEnvelope(message=message)


def failure(
    status_code: int,
    message: str,
    headers: Dict[str, str] | None = None,
) -> JSONResponse:
    """Builds the JSON error response used by exception handlers and middleware."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorEnvelope(error=message).model_dump(),
        headers=headers,
    )
