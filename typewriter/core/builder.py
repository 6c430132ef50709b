"""
Declarative construction of ``CharDurations``.

Two front ends produce the same tables:

``char_duration`` takes Python values::

    char_duration(default=(10, "ms"))
    char_duration((" ", 1, "s"), (",", 100, "ms"), default=(50, "ms"))
    char_duration((" ", 1, "s"))                # default is zero

``parse_char_durations`` reads the same thing from a one-line literal, which
is what the settings file and the command line store::

    parse_char_durations("default 50.ms, ' '->1.s, ','->100.ms")

Duplicate characters: the last occurrence wins.
"""
from __future__ import annotations
import re
from datetime import timedelta
from typing import Dict, Optional, Sequence, Tuple, Union

from typewriter.core.durations import CharDurations, ZERO
from typewriter.core.errors import DurationSyntaxError, ValidationError
from typewriter.core.units import Number, to_duration

DurationValue = Union[Tuple[Number, str], str]
Override = Tuple[str, Number, str]

_DURATION_RE = re.compile(r"(?P<value>\d+(?:\.\d+)?)\.(?P<unit>[A-Za-z_]\w*)")
_ENTRY_RE = re.compile(
    r"""\s*(?:
        default\s+(?P<default>[^,\s]+)
      | '(?P<char>\\.|[^'\\])'\s*->\s*(?P<dur>[^,\s]+)
    )\s*(?P<sep>,|$)""",
    re.VERBOSE,
)
_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", "'": "'", "\\": "\\", "0": "\0"}


def parse_duration(token: str) -> timedelta:
    """Parse a single ``<number>.<unit>`` token such as ``250.ms``."""
    m = _DURATION_RE.fullmatch(token.strip())
    if not m:
        raise DurationSyntaxError(token, "expected <number>.ms or <number>.s")
    value = m.group("value")
    number: Number = float(value) if "." in value else int(value)
    return to_duration(number, m.group("unit"))


def _resolve(given: DurationValue) -> timedelta:
    if isinstance(given, str):
        return parse_duration(given)
    try:
        value, unit = given
    except (TypeError, ValueError):
        raise ValidationError(f"Duration must be a (value, unit) pair, got {given!r}") from None
    return to_duration(value, unit)


def _check_char(ch) -> str:
    if not isinstance(ch, str) or len(ch) != 1:
        raise ValidationError(f"Duration key must be a single character, got {ch!r}")
    return ch


def char_duration(*overrides: Override, default: Optional[DurationValue] = None) -> CharDurations:
    """Build a table from a default and/or ``(char, value, unit)`` overrides.

    Every unit tag is checked before the table exists; an unknown tag raises
    ``UnitError``.  Omitting ``default`` means "no wait" for unlisted
    characters, but at least one of the two must be given.
    """
    if default is None and not overrides:
        raise ValidationError("char_duration needs a default, overrides, or both")
    specific: Dict[str, timedelta] = {}
    for entry in overrides:
        try:
            ch, value, unit = entry
        except (TypeError, ValueError):
            raise ValidationError(f"Override must be (char, value, unit), got {entry!r}") from None
        specific[_check_char(ch)] = to_duration(value, unit)
    base = _resolve(default) if default is not None else ZERO
    return CharDurations(base, specific)


def _unescape(raw: str, fragment: str) -> str:
    if not raw.startswith("\\"):
        return raw
    try:
        return _ESCAPES[raw[1]]
    except KeyError:
        raise DurationSyntaxError(fragment, f"unknown escape {raw!r}") from None


def parse_char_durations(text: str) -> CharDurations:
    """Parse ``default 90.ms, ' '->250.ms, '.'->1.s`` into a table.

    ``default`` is optional but must come first when present.
    """
    source = text.strip()
    if not source:
        raise DurationSyntaxError(text, "empty duration literal")
    base: Optional[timedelta] = None
    specific: Dict[str, timedelta] = {}
    pos = 0
    while pos < len(source):
        m = _ENTRY_RE.match(source, pos)
        if not m:
            raise DurationSyntaxError(source[pos:].strip(), "expected `default <n>.<unit>` or `'<c>'-><n>.<unit>`")
        fragment = m.group(0).strip().rstrip(",").strip()
        if m.group("default") is not None:
            if base is not None or specific:
                raise DurationSyntaxError(fragment, "`default` may appear once, before any override")
            base = parse_duration(m.group("default"))
        else:
            ch = _unescape(m.group("char"), fragment)
            specific[ch] = parse_duration(m.group("dur"))
        pos = m.end()
        if m.group("sep") == "," and pos >= len(source):
            raise DurationSyntaxError(fragment, "trailing comma")
    return CharDurations(base if base is not None else ZERO, specific)


def as_char_durations(value: Union[CharDurations, str, Sequence[Override]]) -> CharDurations:
    """Accept a ready table, a literal string, or a list of overrides."""
    if isinstance(value, CharDurations):
        return value
    if isinstance(value, str):
        return parse_char_durations(value)
    return char_duration(*value)
