"""Global exception filter that formats every error response the same way."""

import logging
from http import HTTPStatus
from typing import Any

from fastapi import status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException

from app.api.http_adapter import HttpAdapter
from app.domain.error_payload import (
    Payload,
    StructuredPayload,
    payload_from_detail,
    resolve_error_code,
    resolve_message,
)
from app.schemas.error import ErrorResponseBody

logger = logging.getLogger(__name__)

INTERNAL_SERVER_ERROR_MESSAGE = "Internal server error"


def _validation_messages(exc: RequestValidationError) -> list[str]:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        text = error.get("msg", "Invalid value")
        messages.append(f"{location}: {text}" if location else text)
    return messages


class AllExceptionsFilter:
    """
    Turn any exception into a single JSON error response.

    Classified exceptions (Starlette/FastAPI ``HTTPException`` and request
    validation errors) keep their own status and message. Everything else
    becomes a 500 whose message is redacted when ``production`` is set.
    """

    def __init__(self, http_adapter: HttpAdapter, *, production: bool):
        self.http_adapter = http_adapter
        self.production = production

    def _classified(self, exception: object) -> tuple[int, Any] | None:
        if isinstance(exception, HTTPException):
            return exception.status_code, exception.detail
        if isinstance(exception, RequestValidationError):
            return int(HTTPStatus.UNPROCESSABLE_ENTITY), {"message": _validation_messages(exception)}
        return None

    def _payload(self, detail: Any) -> Payload:
        try:
            return payload_from_detail(detail)
        except Exception:
            logger.warning("Could not read exception payload", exc_info=True)
            return StructuredPayload()

    def normalize(self, exception: object, path: str) -> tuple[ErrorResponseBody, int]:
        """Compute the error body and status code for ``exception`` raised on ``path``."""
        error_code = None
        classified = self._classified(exception)
        if classified is not None:
            status_code, detail = classified
            payload = self._payload(detail)
            message = resolve_message(payload)
            error_code = resolve_error_code(payload)
        else:
            status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
            # Only real exceptions have message text to show; anything else stays generic
            if not self.production and isinstance(exception, BaseException):
                message = str(exception)
            else:
                message = INTERNAL_SERVER_ERROR_MESSAGE

        body = ErrorResponseBody(
            status_code=status_code,
            path=path,
            message=message,
            error_code=error_code,
        )
        return body, status_code

    def catch(self, exception: object, request: Any) -> Any:
        """Log ``exception`` and reply once through the HTTP adapter."""
        path = self.http_adapter.get_request_url(request)
        body, status_code = self.normalize(exception, path)

        extra = {"context": type(self).__name__, "path": path, "status_code": status_code}
        if isinstance(exception, BaseException):
            logger.error("Exception caught: %s", body.message, exc_info=exception, extra=extra)
        else:
            logger.error("Exception caught: %s", body.message, extra={**extra, "exception": repr(exception)})

        return self.http_adapter.reply(body.to_wire(), status_code)
