"""Terminal ownership and input reading.

blessed has no notion of bracketed paste, so this module turns it on with
the xterm private mode and recognises the ``ESC[200~ ... ESC[201~`` frame in
the keystroke stream itself.
"""

from collections.abc import Iterator
from contextlib import contextmanager

from blessed import Terminal

from ..models import KeyPress, Paste
from .keys import parse_key

ENABLE_BRACKETED_PASTE = "\x1b[?2004h"
DISABLE_BRACKETED_PASTE = "\x1b[?2004l"
PASTE_START = "\x1b[200~"
PASTE_END = "\x1b[201~"
PASTE_TIMEOUT = 0.1  # seconds to wait for the rest of a paste frame


@contextmanager
def bracketed_paste(term: Terminal) -> Iterator[None]:
    term.stream.write(ENABLE_BRACKETED_PASTE)
    term.stream.flush()
    try:
        yield
    finally:
        term.stream.write(DISABLE_BRACKETED_PASTE)
        term.stream.flush()


@contextmanager
def acquire(term: Terminal) -> Iterator[Terminal]:
    """Take over the terminal; every mode change is undone on the way out,
    including when the body raises."""
    with term.fullscreen(), term.raw(), term.hidden_cursor(), bracketed_paste(term):
        yield term


def draw(term: Terminal, lines: list[str]) -> None:
    """Write a rendered frame, one row at a time, clearing leftovers on each row."""
    out = "".join(term.move_xy(0, y) + term.clear_eol + line for y, line in enumerate(lines))
    term.stream.write(out)
    term.stream.flush()


def read_event(term: Terminal) -> KeyPress | Paste:
    """Block until the next key press or paste block."""
    key = term.inkey()
    text = str(key)

    if text.startswith("\x1b"):
        pending = text
        while len(pending) < len(PASTE_START) and PASTE_START.startswith(pending):
            nxt = term.inkey(timeout=PASTE_TIMEOUT)
            if not nxt:
                break
            pending += str(nxt)

        if pending.startswith(PASTE_START):
            return Paste(_read_paste_body(term, pending[len(PASTE_START):]))
        if len(pending) > len(text):
            # Not a paste after all: hand the extra keystrokes back
            term.ungetch(pending[len(text):])

    return parse_key(key)


def _read_paste_body(term: Terminal, body: str) -> str:
    while PASTE_END not in body:
        key = term.inkey(timeout=PASTE_TIMEOUT)
        if not key:
            break  # terminal never closed the frame
        body += str(key)

    body, _, rest = body.partition(PASTE_END)
    if rest:
        term.ungetch(rest)
    return body
