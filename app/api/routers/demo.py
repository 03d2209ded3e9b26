import logging

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import PlainTextResponse

from app.errors import ForbiddenError, NotFoundError
from app.services.greeting import get_hello

logger = logging.getLogger(__name__)

router = APIRouter(tags=["demo"])


@router.get("/", response_class=PlainTextResponse)
def read_root() -> str:
    logger.info("Root route requested")
    return get_hello()


@router.get("/error")
def raise_error():
    """
    Always raise a plain RuntimeError.

    Shows how the global filter turns an unclassified exception into a 500.
    """
    logger.warning("Intentional error route requested")
    raise RuntimeError("Intentional error for filter testing")


@router.get("/http-error")
def raise_http_error():
    """
    Always raise an HTTPException with status 400.

    The payload has no ``message`` field, so clients get the generic HTTP message.
    """
    logger.warning("Intentional HTTP error route requested")
    raise HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail={"reason": "Bad request for filter testing"},
    )


DEMO_ITEMS = {1: "first", 2: "second"}


@router.get("/items/{item_id}")
def read_item(item_id: int):
    """Return a demo item; unknown ids raise NotFoundError, non-integer ids fail validation."""
    if item_id not in DEMO_ITEMS:
        raise NotFoundError(f"Item {item_id} not found")
    return {"id": item_id, "name": DEMO_ITEMS[item_id]}


@router.delete("/items/{item_id}")
def delete_item(item_id: int):
    """Demo items are read-only; deleting one is always forbidden."""
    if item_id not in DEMO_ITEMS:
        raise NotFoundError(f"Item {item_id} not found")
    raise ForbiddenError("Demo items are read-only")
