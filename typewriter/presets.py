"""
Named duration tables.

fast / normal / slow keep the classic per-character delays (4, 12 and 20 ms);
word and sentence pause on whitespace and punctuation instead.
"""
from __future__ import annotations
from typing import Dict

from typewriter.core.builder import char_duration
from typewriter.core.durations import CharDurations
from typewriter.core.errors import ValidationError

DEFAULT_PRESET = "normal"

PRESETS: Dict[str, CharDurations] = {
    "fast": char_duration(default=(4, "ms")),
    "normal": char_duration(default=(12, "ms")),
    "slow": char_duration(default=(20, "ms")),
    "word": char_duration((" ", 150, "ms")),
    "sentence": char_duration(
        (",", 250, "ms"),
        (".", 600, "ms"),
        ("!", 600, "ms"),
        ("?", 600, "ms"),
        default=(30, "ms"),
    ),
}

def get_preset(name: str) -> CharDurations:
    try:
        return PRESETS[name.lower()]
    except (KeyError, AttributeError):
        choices = ", ".join(sorted(PRESETS))
        raise ValidationError(f"Unknown preset '{name}' (choose from {choices})") from None

def preset_names():
    return sorted(PRESETS)
