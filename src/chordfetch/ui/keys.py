"""Keystroke parsing and per-mode event dispatch."""

from dataclasses import dataclass

from blessed.keyboard import Keystroke

from ..models import KeyCode, KeyKind, KeyPress, Paste
from .state import (
    Navigation,
    Session,
    append_text,
    begin_entry,
    cancel_entry,
    delete_backward,
)

QUIT_KEY = "q"
ENTER_URL_KEY = "u"


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class Commit:
    url: str


Command = Quit | Commit


def parse_key(key: Keystroke) -> KeyPress:
    """Translate a blessed keystroke into a :class:`KeyPress`."""
    if key.name == "KEY_ENTER":
        return KeyPress(KeyCode.ENTER)
    if key.name == "KEY_ESCAPE":
        return KeyPress(KeyCode.ESCAPE)
    if key.name == "KEY_BACKSPACE" or key in ("\x7f", "\x08"):
        return KeyPress(KeyCode.BACKSPACE)
    if not key.is_sequence and len(key) == 1 and key.isprintable():
        return KeyPress(KeyCode.CHAR, str(key))
    return KeyPress(KeyCode.OTHER)


def handle_event(session: Session, event: KeyPress | Paste) -> tuple[Session, Command | None]:
    """Apply one input event.

    Returns the next session and, when the event asks for it, a command the
    loop must carry out (quit, or run the fetch for a committed URL).
    """
    if isinstance(event, KeyPress) and event.kind is not KeyKind.PRESS:
        return session, None

    if isinstance(session.mode, Navigation):
        return _handle_navigation(session, event)
    return _handle_text_entry(session, event)


def _handle_navigation(session: Session, event: KeyPress | Paste) -> tuple[Session, Command | None]:
    if not isinstance(event, KeyPress) or event.code is not KeyCode.CHAR:
        return session, None
    if event.char == QUIT_KEY:
        return session, Quit()
    if event.char == ENTER_URL_KEY:
        return begin_entry(session), None
    return session, None


def _handle_text_entry(session: Session, event: KeyPress | Paste) -> tuple[Session, Command | None]:
    if isinstance(event, Paste):
        return append_text(session, event.text), None

    if event.code is KeyCode.CHAR:
        return append_text(session, event.char), None
    if event.code is KeyCode.BACKSPACE:
        return delete_backward(session), None
    if event.code is KeyCode.ESCAPE:
        return cancel_entry(session), None
    if event.code is KeyCode.ENTER:
        return session, Commit(session.mode.url)
    return session, None
