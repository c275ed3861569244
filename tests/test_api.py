"""
test_api.py — Tests for the FastAPI web API endpoints.

Uses FastAPI's TestClient (backed by httpx) so tests run in-process without
needing a live server.  Transcript fetching is mocked so these tests are fast
and don't require network access.
"""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest
import requests
from fastapi.testclient import TestClient

from yt_page_transcript.api import app
from yt_page_transcript.errors import (
    ExtractionError,
    InvalidInputError,
    ParseError,
    TranscriptUnavailableError,
)

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def client() -> TestClient:
    """Create a fresh TestClient for each test."""
    return TestClient(app)


_SAMPLE_TEXT = "We're no  strangers to love..."


# ---------------------------------------------------------------------------
# Health endpoint
# ---------------------------------------------------------------------------

class TestHealth:
    """Tests for GET /health."""

    def test_health_returns_ok(self, client: TestClient) -> None:
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}


# ---------------------------------------------------------------------------
# Transcript endpoints — success cases
# ---------------------------------------------------------------------------

class TestTranscriptEndpoints:
    """Tests for GET /transcript/{video_id} and GET /transcript?url=..."""

    @patch("yt_page_transcript.api.get_transcript")
    def test_by_id(self, mock_get: MagicMock, client: TestClient) -> None:
        mock_get.return_value = _SAMPLE_TEXT

        resp = client.get("/transcript/dQw4w9WgXcQ")

        assert resp.status_code == 200
        assert resp.text == _SAMPLE_TEXT
        assert resp.headers["content-type"].startswith("text/plain")
        mock_get.assert_called_once_with("dQw4w9WgXcQ")

    @patch("yt_page_transcript.api.get_transcript")
    def test_by_url(self, mock_get: MagicMock, client: TestClient) -> None:
        mock_get.return_value = _SAMPLE_TEXT
        url = "https://www.youtube.com/watch?v=dQw4w9WgXcQ&t=42"

        resp = client.get("/transcript", params={"url": url})

        assert resp.status_code == 200
        assert resp.text == _SAMPLE_TEXT
        mock_get.assert_called_once_with(url)

    def test_by_url_requires_param(self, client: TestClient) -> None:
        resp = client.get("/transcript")
        assert resp.status_code == 422


# ---------------------------------------------------------------------------
# Transcript endpoints — error mapping
# ---------------------------------------------------------------------------

class TestErrorHandling:
    """Library errors become JSON bodies with the status stored on them."""

    @pytest.mark.parametrize(
        ("error", "status"),
        [
            (InvalidInputError("Invalid YouTube URL: nope"), 400),
            (TranscriptUnavailableError("dQw4w9WgXcQ"), 404),
            (ExtractionError("Failed to extract transcript from the received data."), 502),
            (ParseError("Failed to parse YouTube page data."), 502),
        ],
    )
    @patch("yt_page_transcript.api.get_transcript")
    def test_transcript_errors(
        self,
        mock_get: MagicMock,
        error: Exception,
        status: int,
        client: TestClient,
    ) -> None:
        mock_get.side_effect = error

        resp = client.get("/transcript/dQw4w9WgXcQ")

        assert resp.status_code == status
        assert resp.json() == {"error": error.message}

    @patch("yt_page_transcript.api.get_transcript")
    def test_upstream_failure_is_502(self, mock_get: MagicMock, client: TestClient) -> None:
        mock_get.side_effect = requests.HTTPError("429 Client Error: Too Many Requests")

        resp = client.get("/transcript/dQw4w9WgXcQ")

        assert resp.status_code == 502
        assert "Too Many Requests" in resp.json()["error"]
