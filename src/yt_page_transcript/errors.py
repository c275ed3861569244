"""
errors.py — Custom exception hierarchy for yt-page-transcript.

Every exception carries an `http_status` attribute so the FastAPI error
handler can translate library-level errors directly into the correct HTTP
response code without a separate mapping table.

Hierarchy:
    TranscriptError (base, 500)
    ├── InvalidInputError (400)
    ├── ExtractionError (502)
    ├── ParseError (502)
    └── TranscriptUnavailableError (404)

Transport failures (DNS, refused connections, non-2xx responses) are NOT part
of this hierarchy.  They surface as `requests.RequestException` subclasses
exactly as the HTTP client raised them.
"""


# ---------------------------------------------------------------------------
# Base exception
# ---------------------------------------------------------------------------

class TranscriptError(Exception):
    """
    Root exception for all transcript-related errors.

    Attributes:
        message:     Human-readable description of what went wrong.
        http_status: Suggested HTTP status code for the API layer.
    """

    def __init__(self, message: str, http_status: int = 500) -> None:
        super().__init__(message)
        self.message = message
        self.http_status = http_status


# ---------------------------------------------------------------------------
# Specific error cases
# ---------------------------------------------------------------------------

class InvalidInputError(TranscriptError):
    """
    Raised when the input is empty or no video ID can be pulled out of it.

    Maps to HTTP 400 — nothing was sent to YouTube.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message=message, http_status=400)


class ExtractionError(TranscriptError):
    """
    Raised when an expected structure is missing from what YouTube sent back.

    Two situations lead here: the watch page has no `ytInitialData` script
    (private, removed, or login-walled video), or the transcript API answered
    with JSON that doesn't reach a segment list.  Maps to HTTP 502.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message=message, http_status=502)


class ParseError(TranscriptError):
    """
    Raised when embedded page data or the API response body isn't valid JSON.

    Maps to HTTP 502.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message=message, http_status=502)


class TranscriptUnavailableError(TranscriptError):
    """
    Raised when the page parsed fine but exposes no transcript panel.

    The video exists; the creator disabled captions or YouTube hasn't
    generated any.  Maps to HTTP 404.
    """

    def __init__(self, video_id: str) -> None:
        super().__init__(
            message=f"Could not find a transcript for video: {video_id}",
            http_status=404,
        )
        self.video_id = video_id
