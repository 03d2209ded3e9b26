"""Transport boundary used by the exception filter to read the request and reply."""

from typing import Any, Protocol

from fastapi import Request
from fastapi.responses import JSONResponse


class UTF8JSONResponse(JSONResponse):
    media_type = "application/json; charset=utf-8"


class HttpAdapter(Protocol):
    def get_request_url(self, request: Any) -> str:
        """Return the path portion of the request URL."""
        ...

    def reply(self, body: dict[str, Any], status_code: int) -> Any:
        """Send ``body`` to the client with ``status_code``."""
        ...


class StarletteHttpAdapter:
    """HttpAdapter backed by Starlette requests and JSON responses."""

    def get_request_url(self, request: Request) -> str:
        return request.url.path

    def reply(self, body: dict[str, Any], status_code: int) -> JSONResponse:
        return UTF8JSONResponse(status_code=status_code, content=body)
