"""
Typewriter-style terminal output.

- core/durations.py (CharDurations: per-character waits plus a default)
- core/builder.py (char_duration / parse_char_durations)
- ui/typewriter.py (print_typed and friends)
- presets.py, system/settings.py, cli.py
"""
from .core.durations import CharDurations
from .core.builder import char_duration, parse_char_durations, parse_duration
from .core.errors import TypewriterError, ValidationError, UnitError, DurationSyntaxError, FlushError
from .ui.typewriter import (
    FLUSH_FAILED_MESSAGE,
    Typewriter,
    print_typed,
    print_typed_line,
    print_typed_no_line,
    try_print_typed,
)
from .presets import PRESETS, get_preset

__version__ = "0.1.0"

__all__ = [
    "CharDurations",
    "char_duration",
    "parse_char_durations",
    "parse_duration",
    "TypewriterError",
    "ValidationError",
    "UnitError",
    "DurationSyntaxError",
    "FlushError",
    "FLUSH_FAILED_MESSAGE",
    "Typewriter",
    "print_typed",
    "print_typed_line",
    "print_typed_no_line",
    "try_print_typed",
    "PRESETS",
    "get_preset",
]
