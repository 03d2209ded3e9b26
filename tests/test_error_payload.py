from app.domain.error_payload import (
    GENERIC_HTTP_MESSAGE,
    MultipleMessages,
    SingleMessage,
    StringPayload,
    StructuredPayload,
    payload_from_detail,
    resolve_error_code,
    resolve_message,
)


def test_string_detail():
    """Test that a string detail becomes a StringPayload."""
    payload = payload_from_detail("Forbidden")

    assert payload == StringPayload("Forbidden")
    assert resolve_message(payload) == "Forbidden"
    assert resolve_error_code(payload) is None


def test_mapping_with_single_message_and_code():
    """Test that message and errorCode are both read from a mapping."""
    payload = payload_from_detail({"message": "Not found", "errorCode": "RESOURCE_NOT_FOUND"})

    assert payload == StructuredPayload(SingleMessage("Not found"), "RESOURCE_NOT_FOUND")
    assert resolve_message(payload) == "Not found"
    assert resolve_error_code(payload) == "RESOURCE_NOT_FOUND"


def test_mapping_with_message_sequence():
    """Test that list and tuple messages are kept as multiple messages."""
    assert payload_from_detail({"message": ["a", "b"]}).message == MultipleMessages(("a", "b"))
    assert resolve_message(payload_from_detail({"message": ("a", "b")})) == "a, b"


def test_non_string_message_uses_its_string_value():
    """Test that a scalar message is converted with str()."""
    assert resolve_message(payload_from_detail({"message": 404})) == "404"


def test_mapping_without_message():
    """Test that a mapping without message resolves to the generic message."""
    payload = payload_from_detail({"reason": "nope"})

    assert payload == StructuredPayload()
    assert resolve_message(payload) == GENERIC_HTTP_MESSAGE


def test_null_message_and_code_are_absent():
    """Test that None values are treated like missing keys."""
    payload = payload_from_detail({"message": None, "errorCode": None})

    assert resolve_message(payload) == GENERIC_HTTP_MESSAGE
    assert resolve_error_code(payload) is None


def test_other_detail_types():
    """Test that non-string, non-mapping details resolve to the generic message."""
    for detail in (None, 42, ["a", "b"]):
        assert resolve_message(payload_from_detail(detail)) == GENERIC_HTTP_MESSAGE
