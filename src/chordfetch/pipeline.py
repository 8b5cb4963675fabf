"""The fetch, save and extract sequence run when a URL is committed.

Every recoverable failure ends up as a one-line status message; the caller
never sees an exception from here unless something outside the error
taxonomy (a bug) goes wrong.
"""

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from .exceptions import (
    FileCreateError,
    FileWriteError,
    HTTPStatusError,
    ResponseReadError,
    TransportError,
)
from .extract import extract
from .fetcher import fetch_page
from .models import ExtractionResult, FetchedPage
from .storage import OUTPUT_FILE, save_body


@dataclass
class Outcome:
    """Status text for the user, plus the extraction when everything worked."""

    message: str
    result: ExtractionResult | None = None


def fetch_save_extract(
    url: str,
    output_path: Path = OUTPUT_FILE,
    fetch: Callable[[str], FetchedPage] = fetch_page,
) -> Outcome:
    try:
        page = fetch(url)
    except TransportError as exc:
        return _failed(f"Error fetching URL: {exc.reason}")
    except HTTPStatusError as exc:
        return _failed(f"HTTP error: {exc.reason}")
    except ResponseReadError as exc:
        return _failed(f"Error reading response: {exc.reason}")

    try:
        save_body(page.content, output_path)
    except FileCreateError as exc:
        return _failed(f"Error creating file: {exc.reason}")
    except FileWriteError as exc:
        return _failed(f"Error writing to file: {exc.reason}")

    result = extract(page.text)
    return Outcome(message=f"Saved to {output_path} | {result.summary()}", result=result)


def _failed(message: str) -> Outcome:
    logger.warning(message)
    return Outcome(message=message)
