"""Emitter: writes a Document back out as mico text."""

from __future__ import annotations

import io
import logging
from typing import IO, Iterable

from .entry import Entry
from .errors import IndentError
from .values import VList, VString

logger = logging.getLogger(__name__)


class Emitter:
    """Writes entries to *sink*, indenting list items by *indent* spaces.

    Keys and values are written verbatim: nothing is trimmed or validated,
    and a line terminator inside a key or value ends up in the output as is.
    """

    def __init__(self, sink: IO[str], indent: int = 0) -> None:
        if isinstance(indent, bool) or not isinstance(indent, int) or indent < 0:
            raise IndentError(
                f"indent must be a non-negative integer, got {indent!r}"
            )
        self.sink = sink
        self.indent = indent
        self._prefix = " " * indent

    def emit(self, entries: Iterable[Entry]) -> None:
        count = 0
        for entry in entries:
            if isinstance(entry.value, VList):
                self._emit_list(entry.key, entry.value)
            else:
                assert isinstance(entry.value, VString), entry.value
                self._emit_string(entry.key, entry.value)
            count += 1
        logger.debug("emitted %d entries (indent=%d)", count, self.indent)

    def _emit_string(self, key: str, value: VString) -> None:
        self.sink.write(f"{key}: {value.value}\n")

    def _emit_list(self, key: str, value: VList) -> None:
        self.sink.write(f"{key}\n")
        for item in value.items:
            self.sink.write(f"{self._prefix}- {item}\n")


def dump(entries: Iterable[Entry], sink: IO[str], indent: int = 0) -> None:
    """Write *entries* to the text stream *sink*."""
    Emitter(sink, indent).emit(entries)


def dumps(entries: Iterable[Entry], indent: int = 0) -> str:
    """Return *entries* as mico text."""
    buf = io.StringIO()
    dump(entries, buf, indent)
    return buf.getvalue()
