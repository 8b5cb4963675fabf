from dataclasses import dataclass, field
from enum import Enum, auto

UNKNOWN = "Unknown"


@dataclass
class ExtractionResult:
    """Fields pulled out of a fetched page.

    Any field may be missing: absence is expected, not an error.
    """

    title: str | None = None
    artist: str | None = None
    chords: list[str] = field(default_factory=list)  # document order

    def summary(self) -> str:
        return (
            f"Chords: {len(self.chords)} | "
            f"Title: {self.title or UNKNOWN} | "
            f"Artist: {self.artist or UNKNOWN}"
        )


@dataclass
class FetchedPage:
    """A successful HTTP response, fully read."""

    url: str
    status_code: int
    content: bytes  # raw body, written to disk verbatim
    text: str  # decoded body, fed to extraction


class KeyCode(Enum):
    CHAR = auto()  # printable character, see KeyPress.char
    ENTER = auto()
    BACKSPACE = auto()
    ESCAPE = auto()
    OTHER = auto()  # arrows, function keys, control characters


class KeyKind(Enum):
    PRESS = auto()
    REPEAT = auto()
    RELEASE = auto()


@dataclass(frozen=True)
class KeyPress:
    """A single key event read from the terminal."""

    code: KeyCode
    char: str | None = None
    kind: KeyKind = KeyKind.PRESS


@dataclass(frozen=True)
class Paste:
    """A bracketed paste block, delivered as one event."""

    text: str
