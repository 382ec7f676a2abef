"""Error envelope returned by the exception handlers."""

from typing import Any

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Machine-stable error code, human message, optional details."""

    error: str
    message: str
    details: dict[str, Any] | None = None
