"""Parser: turns mico text, one line at a time, into a Document.

The format has no invalid syntax. Every trimmed, non-blank line is one of

- ``key: value``  a string entry (split at the first ``": "``)
- ``- item``      an item of the currently open list
- ``key``         anything else: the key of a new, possibly empty, list

so the parser never rejects content; only the input stream can fail.
"""

from __future__ import annotations

import io
import logging
from enum import Enum, auto
from typing import IO, Iterable

from .document import Document
from .entry import Entry
from .errors import MicoError
from .values import VList, VString

logger = logging.getLogger(__name__)

ITEM_MARKER = "- "
SEPARATOR = ": "


class ParserState(Enum):
    IDLE = auto()       # no list open
    LIST_OPEN = auto()  # a list key has been read, items may follow


class Parser:
    """Two-state line machine.

    Feed it lines with :meth:`feed`, then call :meth:`close` once the input
    is exhausted to flush a list that is still open::

        parser = Parser()
        for line in lines:
            parser.feed(line)
        doc = parser.close()
    """

    def __init__(self) -> None:
        self.state = ParserState.IDLE
        self._document = Document()
        self._list_key: str | None = None
        self._list_items: list[str] = []
        self._closed = False

    @property
    def document(self) -> Document:
        """Entries closed so far (an open list is not included yet)."""
        return self._document

    def feed(self, line: str) -> None:
        """Consume one raw line (line terminator may still be attached)."""
        if self._closed:
            raise MicoError("parser is closed; use a new Parser for more input")
        line = line.strip()
        if not line:
            return

        if self.state is ParserState.LIST_OPEN:
            if line.startswith(ITEM_MARKER):
                self._list_items.append(line[len(ITEM_MARKER):].lstrip())
                return
            self._close_list()

        assert self.state is ParserState.IDLE
        key, sep, value = line.partition(SEPARATOR)
        if sep:
            self._document.append(Entry(key.rstrip(), VString(value.lstrip())))
        else:
            self._open_list(line)

    def close(self) -> Document:
        """Flush the open list, if any, and return the finished Document.

        The parser is single-use: after this, :meth:`feed` raises MicoError.
        """
        if self.state is ParserState.LIST_OPEN:
            self._close_list()
        self._closed = True
        return self._document

    # -- State transitions ------------------------------------------------

    def _open_list(self, key: str) -> None:
        self.state = ParserState.LIST_OPEN
        self._list_key = key
        self._list_items = []

    def _close_list(self) -> None:
        assert self._list_key is not None
        self._document.append(Entry(self._list_key, VList(self._list_items)))
        self.state = ParserState.IDLE
        self._list_key = None
        self._list_items = []


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------

def parse_lines(lines: Iterable[str]) -> Document:
    """Parse an iterable of text lines."""
    parser = Parser()
    for line in lines:
        parser.feed(line)
    doc = parser.close()
    logger.debug("parsed %d entries", len(doc))
    return doc


def parse(stream: IO) -> Document:
    """Parse a readable text or binary stream.

    Binary streams are decoded as UTF-8 with universal newlines. Read and
    decode errors propagate unchanged.
    """
    if _is_binary(stream):
        text = io.TextIOWrapper(stream, encoding="utf-8", newline=None)
        try:
            return parse_lines(text)
        finally:
            # leave the caller's stream open
            text.detach()
    return parse_lines(stream)


def loads(text: str) -> Document:
    """Parse an in-memory string."""
    return parse(io.StringIO(text, newline=None))


def _is_binary(stream) -> bool:
    if isinstance(stream, io.TextIOBase):
        return False
    if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
        return True
    return "b" in getattr(stream, "mode", "")
