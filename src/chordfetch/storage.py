from pathlib import Path

from loguru import logger

from .exceptions import FileCreateError, FileWriteError

OUTPUT_FILE = Path("fetched.html")


def save_body(content: bytes, path: Path = OUTPUT_FILE) -> Path:
    """Create or overwrite *path* with *content*, byte for byte.

    A failed write is not rolled back; whatever reached the file stays there.
    """
    try:
        fh = open(path, "wb")
    except OSError as exc:
        raise FileCreateError(str(path), exc.strerror or str(exc)) from exc

    with fh:
        try:
            fh.write(content)
            fh.flush()
        except OSError as exc:
            raise FileWriteError(str(path), exc.strerror or str(exc)) from exc

    logger.info(f"Wrote {len(content)} bytes to {path}")
    return path
