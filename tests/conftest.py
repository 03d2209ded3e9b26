import logging

import pytest
from fastapi.testclient import TestClient

from app.main import create_app


class RecordingHttpAdapter:
    """HttpAdapter double that records every call instead of writing a response."""

    def __init__(self, path: str = "/test-path"):
        self.path = path
        self.requests = []
        self.replies = []

    def get_request_url(self, request) -> str:
        self.requests.append(request)
        return self.path

    def reply(self, body: dict, status_code: int):
        self.replies.append((body, status_code))
        return {"sent": len(self.replies)}


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Make every test start from the non-production defaults."""
    for name in ("ENVIRONMENT", "PORT", "HOST", "APP_NAME"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(scope="function")
def http_adapter() -> RecordingHttpAdapter:
    return RecordingHttpAdapter()


@pytest.fixture(scope="function")
def mock_request() -> dict:
    return {"url": "/test-path"}


@pytest.fixture(scope="function")
def client():
    """Create a test client; server errors come back as responses instead of being raised."""
    with TestClient(create_app(), raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture(scope="function")
def restore_root_logger():
    """Put the root logger back the way it was after the test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
