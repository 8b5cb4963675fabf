"""Pull the title, artist and chord tokens out of a fetched page.

Three independent lookups, none of which falls back on another:

  title   — first ``<title>`` element, stripped text
  artist  — first ``<meta name="artist">``, its ``content`` attribute
  chords  — every ``.chord-class`` element, stripped text, document order

The selectors describe a page layout rather than engineering logic, so they
are grouped in :class:`Selectors` and callers may pass their own set.  They
are compiled when the object is built, which means a malformed selector in
``DEFAULT_SELECTORS`` fails at import time rather than on the first fetch.

Parsing uses BeautifulSoup's lenient ``html.parser``; broken markup still
yields a (best-effort) tree, so :func:`extract` never raises on bad HTML.
"""

from dataclasses import dataclass, field

import soupsieve
from bs4 import BeautifulSoup
from loguru import logger

from .models import ExtractionResult

TITLE_SELECTOR = "title"
ARTIST_SELECTOR = 'meta[name="artist"]'
CHORD_SELECTOR = ".chord-class"


@dataclass(frozen=True)
class Selectors:
    """A compiled selector set for :func:`extract`."""

    title: str = TITLE_SELECTOR
    artist: str = ARTIST_SELECTOR
    chords: str = CHORD_SELECTOR
    _compiled: tuple = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        compiled = tuple(soupsieve.compile(s) for s in (self.title, self.artist, self.chords))
        object.__setattr__(self, "_compiled", compiled)


DEFAULT_SELECTORS = Selectors()


def extract(html: str, selectors: Selectors = DEFAULT_SELECTORS) -> ExtractionResult:
    soup = BeautifulSoup(html, "html.parser")
    title_sel, artist_sel, chord_sel = selectors._compiled

    title_tag = title_sel.select_one(soup)
    title = title_tag.get_text(strip=True) if title_tag else None

    # A <meta> without a content attribute counts as no artist
    artist_tag = artist_sel.select_one(soup)
    artist = artist_tag.get("content") if artist_tag else None

    chords = [el.get_text(strip=True) for el in chord_sel.select(soup)]

    logger.debug(f"Extracted title={title!r} artist={artist!r} chords={len(chords)}")
    return ExtractionResult(title=title, artist=artist, chords=chords)
