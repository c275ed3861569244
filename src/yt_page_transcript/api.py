"""
api.py — FastAPI REST API for yt-page-transcript.

Endpoints:
    GET /transcript/{video_id}  — Fetch a transcript by 11-character video ID.
    GET /transcript?url=...     — Fetch a transcript by full YouTube URL.
    GET /health                 — Simple health-check for load balancers / monitoring.

Run with:
    uvicorn yt_page_transcript.api:app

The global exception handlers convert TranscriptError into the HTTP status
stored on the exception, and any requests failure talking to YouTube into a
502.
"""

from __future__ import annotations

import requests
from fastapi import FastAPI, Query, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from yt_page_transcript.errors import TranscriptError
from yt_page_transcript.extractor import get_transcript

# ---------------------------------------------------------------------------
# App setup
# ---------------------------------------------------------------------------

app = FastAPI(
    title="YouTube Page Transcript API",
    description="Extract YouTube video transcripts as plain text by scraping "
                "the public watch page.",
    version="0.1.0",
)


# ---------------------------------------------------------------------------
# Global error handlers
# ---------------------------------------------------------------------------

@app.exception_handler(TranscriptError)
async def transcript_error_handler(request: Request, exc: TranscriptError) -> JSONResponse:
    """Translate any TranscriptError (or subclass) into an HTTP error response."""
    return JSONResponse(
        status_code=exc.http_status,
        content={"error": exc.message},
    )


@app.exception_handler(requests.RequestException)
async def upstream_error_handler(request: Request, exc: requests.RequestException) -> JSONResponse:
    """YouTube itself couldn't be reached or answered with an error status."""
    return JSONResponse(
        status_code=502,
        content={"error": f"Upstream request failed: {exc}"},
    )


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

# Plain `def` so FastAPI runs the blocking requests calls in its threadpool.
@app.get("/transcript/{video_id}", response_class=PlainTextResponse)
def transcript_by_id(video_id: str) -> str:
    """
    Fetch the transcript for a single YouTube video.

    **video_id** is the 11-character YouTube video identifier
    (e.g. `dQw4w9WgXcQ`).
    """
    return get_transcript(video_id)


@app.get("/transcript", response_class=PlainTextResponse)
def transcript_by_url(
    url: str = Query(
        description="A YouTube watch, share, embed or shorts URL.",
    ),
) -> str:
    """Fetch the transcript for the video a full YouTube URL points at."""
    return get_transcript(url)


@app.get("/health")
async def health() -> dict:
    """
    Minimal health-check endpoint.

    Returns HTTP 200 with {"status": "ok"}.
    """
    return {"status": "ok"}
