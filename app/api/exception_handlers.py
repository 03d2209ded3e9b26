"""Global exception handlers that route every exception through AllExceptionsFilter."""

from collections.abc import Callable

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from app.api.http_adapter import StarletteHttpAdapter
from app.core.config import Settings
from app.filters.all_exceptions import AllExceptionsFilter


def build_exception_handler(settings_provider: Callable[[], Settings] = Settings):
    """
    Create the handler shared by every exception type.

    ``settings_provider`` is called once per caught exception, so the
    production flag is re-read each time instead of being frozen at startup.
    """
    http_adapter = StarletteHttpAdapter()

    async def all_exceptions_handler(request: Request, exc: Exception) -> Response:
        settings = settings_provider()
        exception_filter = AllExceptionsFilter(http_adapter, production=settings.is_production)
        return exception_filter.catch(exc, request)

    return all_exceptions_handler


def register_exception_handlers(app: FastAPI, settings_provider: Callable[[], Settings] = Settings):
    """
    Register the global exception handler on the FastAPI app.

    Classified exceptions go through Starlette's exception handlers. Anything
    else is caught by a middleware instead of an ``Exception`` handler: that
    one runs in ServerErrorMiddleware, which re-raises after replying (so the
    server logs the error a second time) and sits outside every other
    middleware. Call this before adding middlewares that should see the
    error response.
    """
    handler = build_exception_handler(settings_provider)
    app.add_exception_handler(StarletteHTTPException, handler)
    app.add_exception_handler(RequestValidationError, handler)

    @app.middleware("http")
    async def catch_unhandled_exceptions(request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            return await handler(request, exc)
