"""
cli.py — Command-line interface for yt-page-transcript.

Provides the `yt-page-transcript` command (registered as a console script
in pyproject.toml).

Usage examples:
    yt-page-transcript "https://www.youtube.com/watch?v=dQw4w9WgXcQ"
    yt-page-transcript dQw4w9WgXcQ --output rick.txt
    yt-page-transcript https://youtu.be/dQw4w9WgXcQ --timeout 10 --verbose
"""

from __future__ import annotations

import logging
import sys

import click
import requests

from yt_page_transcript.errors import TranscriptError
from yt_page_transcript.extractor import get_transcript

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


# ---------------------------------------------------------------------------
# Command
# ---------------------------------------------------------------------------

@click.command()
@click.argument("video", metavar="URL_OR_ID")
@click.option(
    "--output", "-o",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the transcript to a file instead of stdout.",
)
@click.option(
    "--timeout", "-t",
    type=float,
    default=None,
    help="Seconds to wait on each request to YouTube. No limit by default.",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Log each extraction step to stderr.",
)
def main(video: str, output: str | None, timeout: float | None, verbose: bool) -> None:
    """
    Fetch the transcript of a YouTube video as plain text.

    VIDEO can be a full YouTube URL or an 11-character video ID.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=_LOG_FORMAT,
        stream=sys.stderr,
    )

    try:
        text = get_transcript(video, timeout=timeout)
    except TranscriptError as exc:
        # The message already says what went wrong; no traceback for users.
        click.echo(f"Error: {exc.message}", err=True)
        sys.exit(1)
    except requests.RequestException as exc:
        click.echo(f"Error: request failed: {exc}", err=True)
        sys.exit(1)

    if output:
        with open(output, "w", encoding="utf-8") as fh:
            fh.write(text)
            fh.write("\n")
        click.echo(f"Transcript written to {output}", err=True)
    else:
        click.echo(text)
