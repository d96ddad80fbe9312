"""Application error dictionary.

Every error the service raises on purpose is an ``AppError`` built by one
of the factories below, so the set of codes is closed and each code maps to
exactly one HTTP status. Exception handlers in main.py render them into the
standard envelope: {"status": ..., "message": ..., "error": {...}}.
"""

from enum import StrEnum


class ErrorCode(StrEnum):
    RESOURCE_EXISTS = "RESOURCE_EXISTS"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    INVALID_REQUEST = "INVALID_REQUEST"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


STATUS_BY_CODE: dict[ErrorCode, int] = {
    ErrorCode.RESOURCE_EXISTS: 400,
    ErrorCode.RESOURCE_NOT_FOUND: 404,
    ErrorCode.INVALID_REQUEST: 400,
    ErrorCode.VALIDATION_ERROR: 400,
    ErrorCode.UNAUTHORIZED: 401,
    ErrorCode.FORBIDDEN: 403,
    ErrorCode.INTERNAL_SERVER_ERROR: 500,
}


class AppError(Exception):
    """Typed application error carrying code, HTTP status and optional details."""

    def __init__(
        self,
        message: str,
        code: ErrorCode,
        status: int,
        details: object | None = None,
    ) -> None:
        self.message = message
        self.code = code
        self.status = status
        self.details = details
        super().__init__(message)

    def __repr__(self) -> str:
        return f"AppError(code={self.code.value!r}, status={self.status}, message={self.message!r})"


def create_error(message: str, code: ErrorCode, details: object | None = None) -> AppError:
    return AppError(message, code, STATUS_BY_CODE[code], details)


def resource_exists(resource: str, details: object | None = None) -> AppError:
    return create_error(f"{resource} already exists", ErrorCode.RESOURCE_EXISTS, details)


def resource_not_found(
    resource: str,
    identifier: object | None = None,
    details: object | None = None,
) -> AppError:
    """Build a 404 error; the identifier is echoed in the message when given."""
    if identifier:
        message = f"{resource} not found with id: {identifier}"
    else:
        message = f"{resource} not found"
    return create_error(message, ErrorCode.RESOURCE_NOT_FOUND, details)


def invalid_request(message: str, details: object | None = None) -> AppError:
    return create_error(message, ErrorCode.INVALID_REQUEST, details)


def validation_error(message: str = "Validation failed", details: object | None = None) -> AppError:
    return create_error(message, ErrorCode.VALIDATION_ERROR, details)


def unauthorized(message: str = "Unauthorized access", details: object | None = None) -> AppError:
    return create_error(message, ErrorCode.UNAUTHORIZED, details)


def forbidden(message: str = "Forbidden access", details: object | None = None) -> AppError:
    return create_error(message, ErrorCode.FORBIDDEN, details)


def internal_server_error(
    message: str = "Internal Server Error",
    details: object | None = None,
) -> AppError:
    return create_error(message, ErrorCode.INTERNAL_SERVER_ERROR, details)
