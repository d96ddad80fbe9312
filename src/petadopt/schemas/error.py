"""Error response schemas.

All error responses use the same envelope:
{"status": 404, "message": "...", "error": {"name": "...", "code": "...", "details": ...}}.
Exception handlers in main.py construct these from AppError and friends.
"""

from typing import Any

from pydantic import BaseModel


class ErrorDetail(BaseModel):
    """Inner error object: exception name, machine-readable code, optional context."""

    name: str
    code: str
    details: Any | None = None
    # Only populated outside production
    stack: str | None = None


class ErrorResponse(BaseModel):
    """Top-level error envelope returned by all error responses."""

    status: int
    message: str
    error: ErrorDetail
