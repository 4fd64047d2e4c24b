"""Exceptions raised by mico itself.

Read and write failures of the underlying streams are never wrapped; they
reach the caller as the original ``OSError`` / ``UnicodeDecodeError``.
"""


class MicoError(Exception):
    """Base class for mico errors."""


class IndentError(MicoError, ValueError):
    """Raised when the emitter indentation width is not a non-negative int."""
