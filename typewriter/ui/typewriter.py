import sys, time
from typing import Optional, TextIO

from typewriter.core.builder import as_char_durations
from typewriter.core.durations import CharDurations, ZERO
from typewriter.core.errors import FlushError
from typewriter.core.logging import logger

__all__ = [
    "FLUSH_FAILED_MESSAGE",
    "Typewriter",
    "print_typed",
    "print_typed_line",
    "print_typed_no_line",
    "try_print_typed",
]

FLUSH_FAILED_MESSAGE = "Failed to flush stdout"

# A closed file raises ValueError rather than OSError
_STREAM_ERRORS = (OSError, ValueError)


def _format(template: str, args, kwargs) -> str:
    # Same convention as logging: no arguments, no formatting
    if args or kwargs:
        return template.format(*args, **kwargs)
    return template


def try_print_typed(durations: CharDurations, text: str, *, stream: Optional[TextIO] = None) -> int:
    """Type ``text`` out one code point at a time.

    Each character is written and flushed, then the caller's thread sleeps for
    ``durations.duration(ch)`` unless that is zero.  Returns the number of
    characters written and flushed.  Raises FlushError if the stream rejects a
    write or a flush; nothing after the failing character is written.
    """
    out = stream if stream is not None else sys.stdout
    written = 0
    for ch in text:
        try:
            out.write(ch)
            out.flush()
        except _STREAM_ERRORS as e:
            raise FlushError(written, str(e)) from e
        written += 1
        wait = durations.duration(ch)
        if wait > ZERO:
            time.sleep(wait.total_seconds())
    return written


def print_typed(durations: CharDurations, text: str, *, stream: Optional[TextIO] = None) -> None:
    """Like ``try_print_typed`` but never raises on output failure.

    On failure the fixed message "Failed to flush stdout" is written where
    typing stopped and the call returns.
    """
    out = stream if stream is not None else sys.stdout
    try:
        try_print_typed(durations, text, stream=out)
    except FlushError as e:
        logger.error("TypedPrintAborted", written=e.written, error=e.detail)
        try:
            out.write(FLUSH_FAILED_MESSAGE + "\n")
        except _STREAM_ERRORS as write_err:
            logger.error("FlushDiagnosticLost", error=str(write_err))


def print_typed_line(durations: CharDurations, template: str, *args, stream: Optional[TextIO] = None, **kwargs) -> None:
    """Format, append a newline and type it out.

    The newline goes through the same duration lookup as any other character.
    """
    print_typed(durations, _format(template, args, kwargs) + "\n", stream=stream)


def print_typed_no_line(durations: CharDurations, template: str, *args, stream: Optional[TextIO] = None, **kwargs) -> None:
    print_typed(durations, _format(template, args, kwargs), stream=stream)


class Typewriter:
    def __init__(self, durations, stream: Optional[TextIO] = None):
        # A table, a duration literal, or a list of (char, value, unit)
        self._base = as_char_durations(durations)
        self.durations = self._base
        self.stream = stream

    def print(self, template: str, *args, **kwargs):
        """Type text without a trailing newline"""
        print_typed_no_line(self.durations, template, *args, stream=self.stream, **kwargs)

    def println(self, template: str = "", *args, **kwargs):
        """Type text followed by a newline"""
        print_typed_line(self.durations, template, *args, stream=self.stream, **kwargs)

    def set_durations(self, durations):
        self._base = as_char_durations(durations)
        self.durations = self._base

    def set_speed(self, speed: float):
        """Set typing speed relative to the table given last (higher = faster)"""
        if speed <= 0:
            raise ValueError("speed must be positive")
        self.durations = self._base.scaled(1 / speed)
