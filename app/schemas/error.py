"""Standardized error response schema."""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


def utc_timestamp(moment: datetime | None = None) -> str:
    """Format an instant as ISO-8601 UTC with millisecond precision and a ``Z`` suffix."""
    moment = moment or datetime.now(timezone.utc)
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ErrorResponseBody(BaseModel):
    """Body sent for every error response, whatever raised it."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    status_code: int = Field(..., alias="statusCode", description="HTTP status code")
    timestamp: str = Field(
        default_factory=utc_timestamp, description="ISO-8601 instant the error was handled"
    )
    path: str = Field(..., description="Request path that led to the error")
    message: str = Field(..., description="Human-readable error message")
    error_code: str | None = Field(
        default=None, alias="errorCode", description="Machine-readable error code"
    )

    def to_wire(self) -> dict[str, Any]:
        # errorCode is left out entirely rather than sent as null
        return self.model_dump(by_alias=True, exclude_none=True)
