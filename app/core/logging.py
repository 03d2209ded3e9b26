"""
Structured logging configuration.

Both stdlib ``logging`` loggers and ``structlog`` loggers end up in a single
handler on the root logger, rendered by structlog:

- production: ``info`` level, one JSON object per line on stdout;
- anything else: ``debug`` level, colored human-readable console output.
"""

from __future__ import annotations

import logging
import sys
import time
import uuid

import structlog
from fastapi import FastAPI, Request
from pydantic import BaseModel, ConfigDict

from app.core.config import Settings

HANDLER_NAME = "app"
REQUEST_ID_HEADER = "X-Request-Id"

http_log = structlog.stdlib.get_logger("app.http")


class PrettyOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    colors: bool = True
    # strftime format, local system time
    time_format: str = "%Y-%m-%d %H:%M:%S"


class LoggingOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    level: str
    pretty: PrettyOptions | None = None


def build_logging_options(settings: Settings) -> LoggingOptions:
    if settings.is_production:
        return LoggingOptions(level="info")
    return LoggingOptions(level="debug", pretty=PrettyOptions())


def _shared_processors(options: LoggingOptions) -> list:
    if options.pretty is not None:
        timestamper = structlog.processors.TimeStamper(fmt=options.pretty.time_format, utc=False)
    else:
        timestamper = structlog.processors.TimeStamper(fmt="iso")
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.ExtraAdder(),
        timestamper,
        structlog.processors.StackInfoRenderer(),
    ]


def setup_logging(options: LoggingOptions) -> None:
    """
    Configure structlog and the root logger from ``options``.

    Safe to call more than once: only the handler installed by a previous
    call is replaced, other handlers on the root logger are left alone.
    """
    shared = _shared_processors(options)

    if options.pretty is not None:
        final = [structlog.dev.ConsoleRenderer(colors=options.pretty.colors)]
    else:
        final = [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        # Module-level loggers must pick up later reconfiguration
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared,
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *final],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == HANDLER_NAME:
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(options.level.upper())

    # uvicorn installs its own handlers; route its records through the root one
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True


def install_request_logging(app: FastAPI) -> None:
    """Add a middleware that tags each request with an id and logs its outcome."""

    @app.middleware("http")
    async def request_logging(request: Request, call_next):
        request_id = (request.headers.get(REQUEST_ID_HEADER) or "").strip() or str(uuid.uuid4())
        structlog.contextvars.bind_contextvars(request_id=request_id)

        start = time.perf_counter()
        response = None
        try:
            response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            duration_ms = int((time.perf_counter() - start) * 1000)
            http_log.info(
                "request completed",
                method=request.method,
                path=request.url.path,
                # No response means an exception escaped the catch-all middleware
                status_code=response.status_code if response is not None else 500,
                duration_ms=duration_ms,
            )
            structlog.contextvars.unbind_contextvars("request_id")
