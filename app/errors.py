"""Classified HTTP exceptions raised by the application.

Routes raise these for expected failures; each one fixes its status code and a
default error code, and all of them are part of the public API of this package.
"""

from http import HTTPStatus

from starlette.exceptions import HTTPException

# Stable, machine-readable error codes for API consumers.
VALIDATION_ERROR = "VALIDATION_ERROR"
UNAUTHORIZED = "UNAUTHORIZED"
FORBIDDEN = "FORBIDDEN"
NOT_FOUND = "NOT_FOUND"
CONFLICT = "CONFLICT"


class ApiError(HTTPException):
    """Base exception for errors that carry their own status and payload.

    The payload is an object with ``message`` (a string or a list of
    strings), the status phrase under ``error`` and, when given, ``errorCode``.
    """

    status_code = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(
        self,
        message: str | list[str],
        error_code: str | None = None,
        status_code: int | None = None,
        headers: dict[str, str] | None = None,
    ):
        status_code = int(status_code or self.status_code)
        detail = {"message": message, "error": HTTPStatus(status_code).phrase}
        if error_code is not None:
            detail["errorCode"] = error_code
        super().__init__(status_code=status_code, detail=detail, headers=headers)


class BadRequestError(ApiError):
    """Raised when the request is malformed or fails validation rules."""

    status_code = HTTPStatus.BAD_REQUEST

    def __init__(self, message: str | list[str], error_code: str | None = VALIDATION_ERROR, **kwargs):
        super().__init__(message, error_code, **kwargs)


class UnauthorizedError(ApiError):
    """Raised when authentication is required or has failed."""

    status_code = HTTPStatus.UNAUTHORIZED

    def __init__(self, message: str | list[str], error_code: str | None = UNAUTHORIZED, **kwargs):
        super().__init__(message, error_code, **kwargs)


class ForbiddenError(ApiError):
    """Raised when the caller is authenticated but not allowed to act."""

    status_code = HTTPStatus.FORBIDDEN

    def __init__(self, message: str | list[str], error_code: str | None = FORBIDDEN, **kwargs):
        super().__init__(message, error_code, **kwargs)


class NotFoundError(ApiError):
    """Raised when a requested resource does not exist."""

    status_code = HTTPStatus.NOT_FOUND

    def __init__(self, message: str | list[str], error_code: str | None = NOT_FOUND, **kwargs):
        super().__init__(message, error_code, **kwargs)


class ConflictError(ApiError):
    """Raised when an operation would violate a uniqueness constraint."""

    status_code = HTTPStatus.CONFLICT

    def __init__(self, message: str | list[str], error_code: str | None = CONFLICT, **kwargs):
        super().__init__(message, error_code, **kwargs)
