"""Main event loop for the interactive UI."""

from collections.abc import Callable
from pathlib import Path

from blessed import Terminal
from loguru import logger

from ..fetcher import fetch_page
from ..models import FetchedPage
from ..pipeline import fetch_save_extract
from ..storage import OUTPUT_FILE
from .keys import Commit, Quit, handle_event
from .render import render_screen
from .state import Session, finish_entry
from .terminal import acquire, draw, read_event


def run_interactive_ui(
    output_path: Path = OUTPUT_FILE,
    fetch: Callable[[str], FetchedPage] = fetch_page,
    term: Terminal | None = None,
) -> Session:
    """Take over the terminal and run the UI until the user quits.

    Terminal errors are not caught here; the terminal is restored before
    they reach the caller.
    """
    term = term or Terminal()
    with acquire(term):
        return main_loop(term, output_path, fetch)


def main_loop(
    term: Terminal,
    output_path: Path = OUTPUT_FILE,
    fetch: Callable[[str], FetchedPage] = fetch_page,
) -> Session:
    """Render, read one event, update; repeat until a quit command.

    A committed URL is fetched, saved and parsed right here, on this thread.
    The screen is not repainted until that finishes.
    """
    session = Session()
    logger.info("UI started")

    while True:
        draw(term, render_screen(term, session, term.width, term.height))

        event = read_event(term)
        session, command = handle_event(session, event)

        if isinstance(command, Quit):
            logger.info("Quit requested")
            return session

        if isinstance(command, Commit):
            outcome = fetch_save_extract(command.url, output_path, fetch)
            session = finish_entry(session, outcome.message, outcome.result)
