"""
Unit selectors accepted by the duration builders.

Only two tags exist: ``ms`` (milliseconds) and ``s`` (seconds).
"""
from __future__ import annotations
from datetime import timedelta
from typing import Callable, Dict, Union

from typewriter.core.errors import UnitError, ValidationError

Number = Union[int, float]

UNITS: Dict[str, Callable[[Number], timedelta]] = {
    "ms": lambda v: timedelta(milliseconds=v),
    "s": lambda v: timedelta(seconds=v),
}

def converter(unit: str) -> Callable[[Number], timedelta]:
    try:
        return UNITS[unit]
    except (KeyError, TypeError):
        raise UnitError(str(unit)) from None

def to_duration(value: Number, unit: str) -> timedelta:
    """Convert ``value`` expressed in ``unit`` into a timedelta.

    The unit is checked before the value so an unknown tag is always
    reported as a UnitError.
    """
    convert = converter(unit)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"Duration value must be a number, got {value!r}")
    if value < 0:
        raise ValidationError(f"Duration value must not be negative, got {value!r}")
    return convert(value)

def format_duration(duration: timedelta) -> str:
    """Render a timedelta as a builder literal, preferring whole seconds."""
    micros = duration // timedelta(microseconds=1)
    if micros % 1_000_000 == 0:
        return f"{micros // 1_000_000}.s"
    if micros % 1000 == 0:
        return f"{micros // 1000}.ms"
    return f"{micros // 1000}.{micros % 1000:03d}.ms"
