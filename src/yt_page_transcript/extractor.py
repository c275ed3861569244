"""
extractor.py — Core transcript extraction logic.

This is the heart of yt-page-transcript.  It scrapes the transcript the same
way YouTube's own web player does, without any official API:

    1. Parsing YouTube URLs / IDs      → extract_video_id()
    2. Fetching the watch page         → page_data.locate_initial_data()
    3. Finding the transcript token    → page_data.find_transcript_endpoint()
    4. Exchanging it for segments      → POST youtubei/v1/get_transcript
    5. Flattening segments to text     → flatten_segments()

get_transcript() chains all of the above.  Only single-video extraction is
supported, in whatever language the page serves for `Accept-Language: en-US`.
"""

from __future__ import annotations

import logging
import re

import requests

from yt_page_transcript.errors import (
    InvalidInputError,
    ParseError,
    TranscriptUnavailableError,
)
from yt_page_transcript.page_data import (
    extract_segments,
    find_transcript_endpoint,
    locate_initial_data,
    segment_runs,
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

# Tried in order, first match wins.  The URL-shaped pattern must come first:
# the ID sits after `v=` or a `/` and is followed by `?`, `&` or the end of
# the string.  That covers watch, youtu.be, embed and shorts links.
_VIDEO_ID_PATTERNS: list[re.Pattern[str]] = [
    re.compile(r"(?:v=|/)(?P<id>[A-Za-z0-9_-]{11})(?:\?|&|$)"),
    # A bare video ID is exactly 11 characters from the base64url alphabet.
    re.compile(r"^(?P<id>[A-Za-z0-9_-]{11})$"),
]

WATCH_URL = "https://www.youtube.com/watch"
TRANSCRIPT_API_URL = "https://www.youtube.com/youtubei/v1/get_transcript"

# We ask for English so panel titles and auto-captions come back in en-US.
ACCEPT_LANGUAGE = "en-US"

# Client identity sent with every get_transcript call.  CLIENT_VERSION is a
# snapshot of the web client at the time of writing; YouTube may start
# rejecting it as the site moves on, and nothing here detects that.
CLIENT_NAME = "WEB"
CLIENT_VERSION = "2.20240725.01.00"

# Returned instead of "" when the transcript exists but holds no text.
EMPTY_TRANSCRIPT = "Transcript is available but empty."


# ---------------------------------------------------------------------------
# URL / ID parsing
# ---------------------------------------------------------------------------

def extract_video_id(url_or_id: str) -> str | None:
    """
    Extract a YouTube video ID from a URL string, or accept a raw 11-char ID.

    Args:
        url_or_id: A YouTube URL or a raw video ID.

    Returns:
        The 11-character video ID, or None if the input doesn't contain one.
    """
    url_or_id = url_or_id.strip()

    for pattern in _VIDEO_ID_PATTERNS:
        match = pattern.search(url_or_id)
        if match:
            return match.group("id")

    return None


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------

def _segment_text(segment) -> str:
    runs = segment_runs(segment)
    if runs is None:
        return ""
    return "".join(
        run["text"]
        for run in runs
        if isinstance(run, dict) and isinstance(run.get("text"), str)
    )


def flatten_segments(segments: list) -> str:
    """
    Convert caption segments into a single line of plain text.

    Runs inside a segment are concatenated as-is; segments are joined with
    one space.  Segments without usable runs (section headers, malformed
    entries) contribute nothing rather than failing the whole transcript.

    Args:
        segments: The `initialSegments` list from the transcript API.

    Returns:
        The flattened, stripped transcript (possibly empty).
    """
    texts = (_segment_text(segment) for segment in segments)
    return " ".join(text for text in texts if text).strip()


# ---------------------------------------------------------------------------
# Transcript fetching (main public API)
# ---------------------------------------------------------------------------

def _fetch_transcript(
    session: requests.Session,
    video_id: str,
    timeout: float | None,
) -> str:
    response = session.get(
        WATCH_URL,
        params={"v": video_id},
        headers={"Accept-Language": ACCEPT_LANGUAGE},
        timeout=timeout,
    )
    response.raise_for_status()
    logger.debug("Fetched watch page for %s (%d bytes)", video_id, len(response.text))

    state = locate_initial_data(response.text)

    endpoint = find_transcript_endpoint(state)
    if endpoint is None or not endpoint.params:
        raise TranscriptUnavailableError(video_id)

    # params goes back exactly as the page gave it to us.
    response = session.post(
        TRANSCRIPT_API_URL,
        json={
            "context": {
                "client": {"clientName": CLIENT_NAME, "clientVersion": CLIENT_VERSION},
            },
            "params": endpoint.params,
        },
        headers={"Content-Type": "application/json"},
        timeout=timeout,
    )
    response.raise_for_status()

    try:
        data = response.json()
    except ValueError as exc:
        # requests' JSONDecodeError subclasses ValueError on every backend.
        raise ParseError("Failed to parse transcript response.") from exc

    segments = extract_segments(data)
    logger.debug("Transcript for %s has %d segments", video_id, len(segments))

    return flatten_segments(segments) or EMPTY_TRANSCRIPT


def get_transcript(
    video_url: str,
    session: requests.Session | None = None,
    timeout: float | None = None,
) -> str:
    """
    One-call interface: parse URL → scrape page → fetch segments → plain text.

    Exactly two requests are made, in order: a GET for the watch page and a
    POST to the transcript API.  Nothing is retried.

    Args:
        video_url: A YouTube URL or raw video ID.
        session:   Optional requests.Session to send both requests through
                   (for custom headers, proxies, adapters).  When omitted a
                   new session is created and closed afterwards.
        timeout:   Passed straight to requests.  None means no timeout.

    Returns:
        The transcript as one string, or EMPTY_TRANSCRIPT when the video has
        a transcript that contains no text.

    Raises:
        InvalidInputError:          Empty input, or no video ID found in it.
        ExtractionError:            Page data missing, or the API response
                                    doesn't contain a segment list.
        ParseError:                 Page data or API response isn't JSON.
        TranscriptUnavailableError: The video has no transcript.
        requests.RequestException:  Any transport failure, including non-2xx
                                    responses, unchanged.
    """
    if not video_url or not video_url.strip():
        raise InvalidInputError("No URL provided.")

    video_id = extract_video_id(video_url)
    if video_id is None:
        raise InvalidInputError(f"Invalid YouTube URL: {video_url}")
    logger.debug("Resolved %r to video ID %s", video_url, video_id)

    if session is not None:
        return _fetch_transcript(session, video_id, timeout)

    with requests.Session() as own_session:
        return _fetch_transcript(own_session, video_id, timeout)
