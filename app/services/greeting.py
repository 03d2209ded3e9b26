import logging

logger = logging.getLogger(__name__)

GREETING = "Hello from the logging and error-handling demo!"


def get_hello() -> str:
    """Return the welcome message."""
    logger.debug("get_hello() invoked")
    return GREETING
