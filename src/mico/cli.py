"""``mico`` command: normalise mico files or print them as JSON."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import IO

from .document import Document
from .emitter import dump
from .errors import MicoError
from .parser import parse

logger = logging.getLogger(__name__)


def _indent_width(text: str) -> int:
    try:
        width = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid indent: {text!r}") from None
    if width < 0:
        raise argparse.ArgumentTypeError(f"indent must be >= 0, got {width}")
    return width


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mico",
        description="Read mico config files and write them back normalised",
    )
    parser.add_argument(
        "files",
        nargs="*",
        metavar="FILE",
        help="Input files; '-' or none reads standard input",
    )
    parser.add_argument(
        "--indent",
        type=_indent_width,
        default=1,
        help="Spaces before each list item (default: 1)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the entries as a JSON array instead of mico text",
    )
    parser.add_argument(
        "-o",
        "--output",
        metavar="PATH",
        help="Write to PATH instead of standard output",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging and show tracebacks on errors",
    )
    return parser


def read_documents(paths: list[str], stdin: IO) -> Document:
    """Parse every path in order into one Document.

    *stdin* may be a text or binary stream; main() passes the binary buffer
    so standard input is decoded as UTF-8 like the files.
    """
    doc = Document()
    for path in paths or ["-"]:
        if path == "-":
            logger.debug("reading standard input")
            doc.extend(parse(stdin))
            continue
        logger.debug("reading %s", path)
        with open(path, "rb") as fh:
            doc.extend(parse(fh))
    return doc


def write_document(doc: Document, dest: IO[str], indent: int, as_json: bool) -> None:
    if as_json:
        json.dump(
            [{key: value} for key, value in doc.to_pairs()],
            dest,
            ensure_ascii=False,
            indent=2,
        )
        dest.write("\n")
    else:
        dump(doc, dest, indent)


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for the mico command.

    Usage:
        mico [--indent N] [--json] [-o PATH] [--debug] [FILE ...]
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s:%(name)s:%(message)s",
    )

    try:
        doc = read_documents(args.files, sys.stdin.buffer)
        if args.output:
            with open(args.output, "w", encoding="utf-8") as fh:
                write_document(doc, fh, args.indent, args.json)
        else:
            write_document(doc, sys.stdout, args.indent, args.json)
    except (MicoError, OSError, UnicodeDecodeError) as exc:
        if args.debug:
            raise
        print(f"mico: error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
