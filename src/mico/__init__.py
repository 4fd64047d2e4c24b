"""mico — parser and emitter for the minimalistic config file format."""

from .document import Document
from .emitter import Emitter, dump, dumps
from .entry import Entry
from .errors import IndentError, MicoError
from .parser import Parser, ParserState, loads, parse, parse_lines
from .values import Value, VList, VString, to_value


def from_str(text: str) -> Document:
    """Parse *text* into a Document."""
    return loads(text)


def to_string(entries, indent: int = 0) -> str:
    """Emit *entries* as text, list items indented by *indent* spaces."""
    return dumps(entries, indent)


__all__ = [
    "from_str",
    "to_string",
    "parse",
    "parse_lines",
    "loads",
    "dump",
    "dumps",
    "Parser",
    "ParserState",
    "Emitter",
    "Document",
    "Entry",
    "Value",
    "VString",
    "VList",
    "to_value",
    "MicoError",
    "IndentError",
]
