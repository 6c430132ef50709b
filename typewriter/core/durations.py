"""
Per-character wait durations.

A ``CharDurations`` table answers one question: how long should the printer
wait after writing a given character?  Characters listed in
``specific_durations`` use their own value; everything else falls back to
``default_duration``.

Example::

    >>> from datetime import timedelta
    >>> d = CharDurations(timedelta(milliseconds=10), {" ": timedelta(milliseconds=100)})
    >>> d.duration(" ")
    datetime.timedelta(microseconds=100000)
    >>> d.duration("a")
    datetime.timedelta(microseconds=10000)
"""
from __future__ import annotations
from dataclasses import dataclass, field
from datetime import timedelta
from types import MappingProxyType
from typing import Mapping, Union

from typewriter.core.units import format_duration

DurationLike = Union[timedelta, int, float]

ZERO = timedelta(0)

def as_timedelta(value: DurationLike) -> timedelta:
    """Numbers are read as seconds, the same unit ``time.sleep`` uses."""
    if isinstance(value, timedelta):
        return value
    return timedelta(seconds=value)

def _char_literal(ch: str) -> str:
    escaped = {"\n": "\\n", "\t": "\\t", "\r": "\\r", "'": "\\'", "\\": "\\\\"}.get(ch, ch)
    return f"'{escaped}'"

@dataclass(frozen=True)
class CharDurations:
    default_duration: timedelta = ZERO
    specific_durations: Mapping[str, timedelta] = field(default_factory=dict)

    def __post_init__(self):
        # Copy then freeze so later edits to the caller's dict don't leak in
        frozen = MappingProxyType({ch: as_timedelta(d) for ch, d in self.specific_durations.items()})
        object.__setattr__(self, "default_duration", as_timedelta(self.default_duration))
        object.__setattr__(self, "specific_durations", frozen)

    def __eq__(self, other):
        if not isinstance(other, CharDurations):
            return NotImplemented
        return (self.default_duration == other.default_duration
                and dict(self.specific_durations) == dict(other.specific_durations))

    def __hash__(self):
        return hash((self.default_duration, frozenset(self.specific_durations.items())))

    def __deepcopy__(self, memo):
        # Immutable; timedelta values are immutable too
        return self

    def __reduce__(self):
        return (CharDurations, (self.default_duration, dict(self.specific_durations)))

    def duration(self, ch: str) -> timedelta:
        """Return the wait after ``ch``; never fails."""
        return self.specific_durations.get(ch, self.default_duration)

    duration_for = duration

    def scaled(self, factor: float) -> "CharDurations":
        """Return a copy with every duration multiplied by ``factor``."""
        return CharDurations(
            self.default_duration * factor,
            {ch: d * factor for ch, d in self.specific_durations.items()},
        )

    def to_literal(self) -> str:
        """Render in the ``default 90.ms, ' '->250.ms`` builder syntax."""
        parts = [f"default {format_duration(self.default_duration)}"]
        for ch in sorted(self.specific_durations):
            parts.append(f"{_char_literal(ch)}->{format_duration(self.specific_durations[ch])}")
        return ", ".join(parts)
