import sys
from functools import partial
from pathlib import Path

import click
from loguru import logger

from .fetcher import DEFAULT_TIMEOUT, fetch_page
from .storage import OUTPUT_FILE
from .ui.app import run_interactive_ui

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} | {message}"


def setup_logging(log_file: Path | None, level: str = "INFO") -> None:
    """Route loguru to a file, or nowhere.

    The UI owns the screen, so the default stderr handler is always removed.
    """
    logger.remove()
    if log_file is None:
        return
    logger.add(log_file, rotation="10 MB", retention=5, level=level, format=LOG_FORMAT)
    logger.info(f"Logging to {log_file} (level={level})")


@click.command()
@click.option("-o", "--output", "output_path", default=str(OUTPUT_FILE), show_default=True,
              metavar="PATH", help="File the fetched page is written to (overwritten).")
@click.option("--timeout", default=DEFAULT_TIMEOUT, show_default=True, type=float,
              help="HTTP timeout in seconds.")
@click.option("--log-file", default=None, metavar="PATH",
              help="Write a log to PATH (no log is kept by default).")
@click.option("--log-level", default="INFO", show_default=True,
              type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False))
def main(output_path: str, timeout: float, log_file: str | None, log_level: str) -> None:
    """Fetch a chord page from a URL typed into a full-screen terminal UI.

    \b
    Keys:
      u  enter a URL (Enter fetches it, Esc cancels)
      q  quit

    The page is saved verbatim and its title, artist and chords are shown.
    """
    setup_logging(Path(log_file) if log_file else None, log_level.upper())

    fetch = partial(fetch_page, timeout=timeout)
    try:
        run_interactive_ui(Path(output_path), fetch)
    except Exception as exc:
        logger.exception("UI terminated by a terminal error")
        click.echo(f"Error: {exc}")
        sys.exit(1)
