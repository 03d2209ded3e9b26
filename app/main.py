import logging
from collections.abc import Callable

import uvicorn
from fastapi import FastAPI

from app.api.exception_handlers import register_exception_handlers
from app.api.router import api_router
from app.core.config import Settings
from app.core.logging import build_logging_options, install_request_logging, setup_logging

logger = logging.getLogger("app.bootstrap")


def create_app(settings_provider: Callable[[], Settings] = Settings) -> FastAPI:
    settings = settings_provider()
    setup_logging(build_logging_options(settings))

    app = FastAPI(title=settings.app_name)
    # The last middleware added runs outermost: request logging wraps the catch-all
    register_exception_handlers(app, settings_provider)
    install_request_logging(app)
    app.include_router(api_router)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn on HOST:PORT."""
    settings = Settings()
    logger.info("Starting application on: http://localhost:%s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
