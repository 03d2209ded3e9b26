from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union

GENERIC_HTTP_MESSAGE = "An HTTP error occurred"

# Multiple messages are joined with a comma and a space. Kept for
# compatibility with existing clients; nothing else depends on it.
MESSAGE_SEPARATOR = ", "


@dataclass(frozen=True, slots=True)
class SingleMessage:
    text: str


@dataclass(frozen=True, slots=True)
class MultipleMessages:
    items: tuple[str, ...]


MessageField = Union[SingleMessage, MultipleMessages]


@dataclass(frozen=True, slots=True)
class StringPayload:
    """A classified exception whose whole payload is a plain string."""

    text: str


@dataclass(frozen=True, slots=True)
class StructuredPayload:
    """A classified exception whose payload is an object.

    Either field may be absent. An object without a usable ``message``
    resolves to the generic HTTP message.
    """

    message: MessageField | None = None
    error_code: str | None = None


Payload = Union[StringPayload, StructuredPayload]


def _message_field(value: Any) -> MessageField | None:
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        return MultipleMessages(tuple(str(item) for item in value))
    return SingleMessage(str(value))


def payload_from_detail(detail: Any) -> Payload:
    """Convert the raw detail carried by an HTTP exception into a payload variant."""
    if isinstance(detail, str):
        return StringPayload(detail)
    if isinstance(detail, Mapping):
        error_code = detail.get("errorCode")
        return StructuredPayload(
            message=_message_field(detail.get("message")),
            error_code=None if error_code is None else str(error_code),
        )
    return StructuredPayload()


def resolve_message(payload: Payload) -> str:
    if isinstance(payload, StringPayload):
        return payload.text
    message = payload.message
    if isinstance(message, MultipleMessages):
        return MESSAGE_SEPARATOR.join(message.items)
    if isinstance(message, SingleMessage):
        return message.text
    return GENERIC_HTTP_MESSAGE


def resolve_error_code(payload: Payload) -> str | None:
    if isinstance(payload, StructuredPayload):
        return payload.error_code
    return None
