"""
Error classes for clearer exception sources.
"""
from __future__ import annotations

class TypewriterError(Exception):
    pass

class ValidationError(TypewriterError):
    pass

class UnitError(ValidationError):
    def __init__(self, unit: str):
        super().__init__(f"Unknown duration unit '{unit}' (expected 'ms' or 's')")
        self.unit = unit

class DurationSyntaxError(ValidationError):
    def __init__(self, fragment: str, detail: str):
        super().__init__(f"Bad duration literal '{fragment}': {detail}")
        self.fragment = fragment
        self.detail = detail

class FlushError(TypewriterError):
    def __init__(self, written: int, detail: str):
        super().__init__(f"Output failed after {written} characters: {detail}")
        self.written = written
        self.detail = detail
