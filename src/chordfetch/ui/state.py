"""Session state for the interactive UI.

The mode is a tagged union: ``Navigation`` carries nothing, ``TextEntry``
carries the URL being typed.  There is no separate flag that could disagree
with the buffer.

Transition helpers are pure: they return a new :class:`Session` and leave
the one they were given untouched.
"""

from dataclasses import dataclass, field, replace

from ..models import ExtractionResult


@dataclass(frozen=True)
class Navigation:
    pass


@dataclass(frozen=True)
class TextEntry:
    buffer: tuple[str, ...] = ()

    @property
    def url(self) -> str:
        return "".join(self.buffer)


@dataclass(frozen=True)
class Session:
    mode: Navigation | TextEntry = field(default_factory=Navigation)
    status_message: str = ""
    last_result: ExtractionResult | None = None  # display only


def begin_entry(session: Session) -> Session:
    """Switch to TextEntry with an empty buffer and no status message."""
    return replace(session, mode=TextEntry(), status_message="")


def append_text(session: Session, text: str) -> Session:
    if not isinstance(session.mode, TextEntry):
        return session
    return replace(session, mode=TextEntry(session.mode.buffer + tuple(text)))


def delete_backward(session: Session) -> Session:
    if not isinstance(session.mode, TextEntry) or not session.mode.buffer:
        return session
    return replace(session, mode=TextEntry(session.mode.buffer[:-1]))


def cancel_entry(session: Session) -> Session:
    return replace(session, mode=Navigation())


def finish_entry(session: Session, message: str, result: ExtractionResult | None = None) -> Session:
    """Back to Navigation after a commit, showing *message*."""
    return replace(session, mode=Navigation(), status_message=message, last_result=result)
