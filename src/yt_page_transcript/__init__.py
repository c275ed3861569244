"""
yt_page_transcript — Extract YouTube video transcripts by scraping the watch page.

Public API:
    get_transcript()            High-level one-call interface (URL → plain text).
    extract_video_id()          Pull the 11-character video ID out of a URL.
    flatten_segments()          Join raw caption segments into plain text.
    locate_initial_data()       Parse the ytInitialData blob out of page HTML.
    find_transcript_endpoint()  Find the transcript continuation token.
    EMPTY_TRANSCRIPT            Returned when a transcript exists but is empty.

Exception hierarchy (all importable from this package):
    TranscriptError                 Base exception for all transcript errors.
    ├── InvalidInputError           Empty input or no video ID in it.
    ├── ExtractionError             Expected page/response structure missing.
    ├── ParseError                  Page data or response body isn't JSON.
    └── TranscriptUnavailableError  Video has no transcript.

Usage:
    from yt_page_transcript import get_transcript
    text = get_transcript("https://www.youtube.com/watch?v=dQw4w9WgXcQ")
"""

from yt_page_transcript.extractor import (
    EMPTY_TRANSCRIPT,
    extract_video_id,
    flatten_segments,
    get_transcript,
)
from yt_page_transcript.errors import (
    ExtractionError,
    InvalidInputError,
    ParseError,
    TranscriptError,
    TranscriptUnavailableError,
)
from yt_page_transcript.page_data import (
    TranscriptEndpoint,
    find_transcript_endpoint,
    locate_initial_data,
)

__all__ = [
    "get_transcript",
    "extract_video_id",
    "flatten_segments",
    "locate_initial_data",
    "find_transcript_endpoint",
    "TranscriptEndpoint",
    "EMPTY_TRANSCRIPT",
    "TranscriptError",
    "InvalidInputError",
    "ExtractionError",
    "ParseError",
    "TranscriptUnavailableError",
]
