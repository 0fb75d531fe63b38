# ABOUTME: Shared pytest fixtures for linkedin-search tests.
# ABOUTME: Provides temporary databases, settings, mock HTTP transports and sample responses.

import json
import tempfile
from collections.abc import Callable
from pathlib import Path
from typing import Any

import httpx
import pytest
import structlog

from linkedin_search.config import Settings
from linkedin_search.database import DatabaseService
from linkedin_search.linkedin.client import SearchApiClient


@pytest.fixture(autouse=True)
def reset_structlog():
    """Restore structlog defaults so a CLI run cannot leak its configuration."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def temp_db_path() -> Path:
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture
def db_service(temp_db_path: Path) -> DatabaseService:
    """Create a DatabaseService with a temporary database."""
    service = DatabaseService(db_path=temp_db_path)
    service.init_db()
    return service


@pytest.fixture
def settings(temp_db_path: Path) -> Settings:
    """Create Settings pointing at a fake API host and a temporary database."""
    return Settings(
        base_url="https://api.example.test",
        api_key="test-api-key-123",
        db_path=temp_db_path,
    )


@pytest.fixture
def sample_search_response() -> dict[str, Any]:
    """A raw people search response with one result and a next-page cursor."""
    return {
        "object": "LinkedinSearch",
        "items": [
            {
                "type": "PEOPLE",
                "id": "ACoAAA123",
                "name": "Jane Doe",
                "headline": "Staff Engineer at Acme",
                "location": "Paris, France",
                "network_distance": "DISTANCE_2",
                "public_identifier": "jane-doe",
                "profile_url": "https://www.linkedin.com/in/ACoAAA123",
                "public_profile_url": "https://www.linkedin.com/in/jane-doe",
            }
        ],
        "paging": {"start": 0, "page_count": 1, "total_count": 1},
        "cursor": "next-cursor-abc",
        "config": {"params": {"api": "classic"}},
    }


class RecordingTransport:
    """Collects every request and answers with a canned response."""

    def __init__(self, status_code: int = 200, body: Any = None, raw: bytes | None = None):
        self.requests: list[httpx.Request] = []
        self.status_code = status_code
        self.body = body if body is not None else {"items": []}
        self.raw = raw

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.raw is not None:
            return httpx.Response(self.status_code, content=self.raw)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def last_json(self) -> Any:
        return json.loads(self.last_request.content)


@pytest.fixture
def recording_transport() -> Callable[..., RecordingTransport]:
    """Factory for RecordingTransport instances."""
    return RecordingTransport


@pytest.fixture
def make_client(settings: Settings) -> Callable[[Any], SearchApiClient]:
    """Factory building a SearchApiClient over a mock transport handler."""

    def _make(handler: Any) -> SearchApiClient:
        return SearchApiClient(settings, transport=httpx.MockTransport(handler))

    return _make
