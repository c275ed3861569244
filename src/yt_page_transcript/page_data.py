"""
page_data.py — Reading YouTube's embedded and returned JSON documents.

YouTube's watch page ships its client-side bootstrap state as a
`var ytInitialData = {...};</script>` assignment, and the transcript API
replies with a deeply nested "action" document.  Neither has a published
schema, so every lookup here goes through dig(), which yields None instead
of raising when any key or index along the way is missing.

All schema paths are collected in the Constants section below.  When YouTube
changes its page layout, that section is the one place to update.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from typing import Any

from yt_page_transcript.errors import ExtractionError, ParseError

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

# The bootstrap assignment ends at the first `;</script>`.  Non-greedy so we
# stop there instead of swallowing the following script blocks.
_INITIAL_DATA_PATTERN = re.compile(r"var ytInitialData = (.*?);</script>")

# Top-level key holding the side panels (description, chapters, transcript...).
PANELS_KEY = "engagementPanels"

# targetId of the panel that backs the "Show transcript" button.
TRANSCRIPT_PANEL_TARGET_ID = "engagement-panel-searchable-transcript"

# Paths below are relative to a single entry of the panel list.
PANEL_TARGET_ID_PATH = ("engagementPanelSectionListRenderer", "targetId")
PANEL_ENDPOINT_PATH = (
    "engagementPanelSectionListRenderer",
    "content",
    "continuationItemRenderer",
    "continuationEndpoint",
    "getTranscriptEndpoint",
)

# Path from the transcript API response root down to the segment list.
SEGMENTS_PATH = (
    "actions", 0,
    "updateEngagementPanelAction",
    "content",
    "transcriptRenderer",
    "content",
    "transcriptSearchPanelRenderer",
    "body",
    "transcriptSegmentListRenderer",
    "initialSegments",
)

# Path from a single segment down to its list of text runs.
SEGMENT_RUNS_PATH = ("transcriptSegmentRenderer", "snippet", "runs")


# ---------------------------------------------------------------------------
# Data structures
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TranscriptEndpoint:
    """
    The continuation descriptor found in the transcript panel.

    Attributes:
        params: Opaque token handed back verbatim to the transcript API.
                Never decoded or validated.  None when the panel carried an
                endpoint object without a token.
    """
    params: str | None


# ---------------------------------------------------------------------------
# Safe navigation
# ---------------------------------------------------------------------------

def dig(data: Any, *path: str | int) -> Any:
    """
    Walk a nested structure of dicts and lists, returning None on any miss.

    String steps index into dicts, integer steps index into lists.  A step of
    the wrong kind for the current node (e.g. a string key on a list) counts
    as a miss, the same as an absent key or an out-of-range index.

    Args:
        data: The root object (usually the result of json.loads()).
        path: Keys and indices to follow, in order.

    Returns:
        The value at the end of the path, or None if any step is missing.
    """
    node = data
    for step in path:
        if isinstance(step, str):
            if not isinstance(node, dict):
                return None
            node = node.get(step)
        else:
            if not isinstance(node, list) or not -len(node) <= step < len(node):
                return None
            node = node[step]
        if node is None:
            return None
    return node


# ---------------------------------------------------------------------------
# Page-data locator
# ---------------------------------------------------------------------------

def locate_initial_data(html: str) -> dict:
    """
    Pull the `ytInitialData` object out of a watch page's HTML.

    Args:
        html: Full response body of https://www.youtube.com/watch?v=...

    Returns:
        The parsed bootstrap state.

    Raises:
        ExtractionError: The assignment isn't on the page at all, which
                         usually means the video is private, removed, or
                         behind a login/consent wall.
        ParseError:      The assignment is there but isn't valid JSON.
    """
    match = _INITIAL_DATA_PATTERN.search(html)
    if not match:
        raise ExtractionError(
            "Could not find page data. The video may be private, "
            "unavailable, or require a login."
        )

    try:
        return json.loads(match.group(1))
    except json.JSONDecodeError as exc:
        raise ParseError("Failed to parse YouTube page data.") from exc


# ---------------------------------------------------------------------------
# Endpoint resolver
# ---------------------------------------------------------------------------

def find_transcript_endpoint(state: Any) -> TranscriptEndpoint | None:
    """
    Find the transcript continuation descriptor in the bootstrap state.

    Panels are scanned in page order and the first one whose targetId is the
    searchable-transcript panel AND which carries a getTranscriptEndpoint
    wins.  Missing fields at any depth just disqualify that panel.

    Args:
        state: Bootstrap state from locate_initial_data().

    Returns:
        A TranscriptEndpoint, or None when the video has no transcript panel.
        None is not an error here; the caller decides what it means.
    """
    panels = dig(state, PANELS_KEY)
    if not isinstance(panels, list):
        return None

    for panel in panels:
        if dig(panel, *PANEL_TARGET_ID_PATH) != TRANSCRIPT_PANEL_TARGET_ID:
            continue
        endpoint = dig(panel, *PANEL_ENDPOINT_PATH)
        if isinstance(endpoint, dict):
            params = endpoint.get("params")
            return TranscriptEndpoint(params=params if isinstance(params, str) else None)

    logger.debug("No transcript panel among %d engagement panels", len(panels))
    return None


# ---------------------------------------------------------------------------
# Transcript API response
# ---------------------------------------------------------------------------

def extract_segments(response: Any) -> list:
    """
    Return the ordered caption segment list from a get_transcript response.

    Raises:
        ExtractionError: The response doesn't reach a segment list.
    """
    segments = dig(response, *SEGMENTS_PATH)
    if not isinstance(segments, list):
        raise ExtractionError("Failed to extract transcript from the received data.")
    return segments


def segment_runs(segment: Any) -> list | None:
    """Return a segment's text runs, or None when they're missing or malformed."""
    runs = dig(segment, *SEGMENT_RUNS_PATH)
    return runs if isinstance(runs, list) else None
