"""
test_cli.py — Tests for the `yt-page-transcript` command.

get_transcript() is mocked so these tests never touch the network.
"""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import requests
from click.testing import CliRunner

from yt_page_transcript.cli import main
from yt_page_transcript.errors import InvalidInputError, TranscriptUnavailableError


class TestMain:
    """Tests for output routing and error reporting."""

    @patch("yt_page_transcript.cli.get_transcript")
    def test_prints_transcript(self, mock_get: MagicMock) -> None:
        mock_get.return_value = "Hello world"

        result = CliRunner().invoke(main, ["dQw4w9WgXcQ"])

        assert result.exit_code == 0
        assert result.output == "Hello world\n"
        mock_get.assert_called_once_with("dQw4w9WgXcQ", timeout=None)

    @patch("yt_page_transcript.cli.get_transcript")
    def test_timeout_forwarded(self, mock_get: MagicMock) -> None:
        mock_get.return_value = "Hello"

        result = CliRunner().invoke(main, ["dQw4w9WgXcQ", "--timeout", "2.5"])

        assert result.exit_code == 0
        mock_get.assert_called_once_with("dQw4w9WgXcQ", timeout=2.5)

    @patch("yt_page_transcript.cli.get_transcript")
    def test_writes_output_file(self, mock_get: MagicMock, tmp_path) -> None:
        mock_get.return_value = "Never gonna give you up"
        out = tmp_path / "rick.txt"

        result = CliRunner().invoke(main, ["dQw4w9WgXcQ", "-o", str(out)])

        assert result.exit_code == 0
        assert out.read_text(encoding="utf-8") == "Never gonna give you up\n"

    @patch("yt_page_transcript.cli.get_transcript")
    def test_transcript_error_exits_1(self, mock_get: MagicMock) -> None:
        mock_get.side_effect = TranscriptUnavailableError("dQw4w9WgXcQ")

        result = CliRunner().invoke(main, ["dQw4w9WgXcQ"])

        assert result.exit_code == 1
        assert "Error: Could not find a transcript for video: dQw4w9WgXcQ" in result.output

    @patch("yt_page_transcript.cli.get_transcript")
    def test_invalid_input_exits_1(self, mock_get: MagicMock) -> None:
        mock_get.side_effect = InvalidInputError("Invalid YouTube URL: nope")

        result = CliRunner().invoke(main, ["nope"])

        assert result.exit_code == 1
        assert "Invalid YouTube URL" in result.output

    @patch("yt_page_transcript.cli.get_transcript")
    def test_request_error_exits_1(self, mock_get: MagicMock) -> None:
        mock_get.side_effect = requests.ConnectionError("DNS lookup failed")

        result = CliRunner().invoke(main, ["dQw4w9WgXcQ"])

        assert result.exit_code == 1
        assert "Error: request failed: DNS lookup failed" in result.output

    def test_missing_argument(self) -> None:
        result = CliRunner().invoke(main, [])
        assert result.exit_code == 2
