from datetime import timedelta

import pytest

from typewriter.core.builder import char_duration, parse_char_durations, parse_duration, as_char_durations
from typewriter.core.durations import CharDurations, ZERO
from typewriter.core.errors import UnitError, ValidationError, DurationSyntaxError

MS = timedelta(milliseconds=1)


def test_default_only():
    d = char_duration(default=(20, "ms"))
    assert d.default_duration == 20 * MS
    assert dict(d.specific_durations) == {}
    assert d.duration(" ") == 20 * MS


def test_default_with_overrides():
    d = char_duration((" ", 1, "s"), (",", 100, "ms"), default=(50, "ms"))
    assert d.default_duration == 50 * MS
    assert dict(d.specific_durations) == {" ": timedelta(seconds=1), ",": 100 * MS}
    assert d.duration("a") == 50 * MS


def test_overrides_only_has_zero_default():
    d = char_duration((" ", 1, "s"))
    assert d.default_duration == ZERO
    assert d.duration(" ") == timedelta(seconds=1)
    assert d.duration("a") == ZERO


def test_unit_conversion():
    assert parse_duration("50.ms") == timedelta(milliseconds=50)
    assert parse_duration("1.s") == timedelta(milliseconds=1000)
    assert parse_duration("1.5.s") == timedelta(milliseconds=1500)
    assert char_duration(default=(1, "s")).default_duration == 1000 * MS


def test_unknown_unit_rejected_before_build():
    with pytest.raises(UnitError) as exc:
        char_duration((" ", 10, "min"), default=(1, "ms"))
    assert exc.value.unit == "min"
    assert isinstance(exc.value, ValidationError)
    with pytest.raises(UnitError):
        char_duration(default=(10, "us"))


def test_needs_default_or_overrides():
    with pytest.raises(ValidationError):
        char_duration()


@pytest.mark.parametrize("bad", [("ab", 1, "ms"), ("", 1, "ms"), (1, 1, "ms"), (" ", 1)])
def test_bad_override_shapes(bad):
    with pytest.raises(ValidationError):
        char_duration(bad)


def test_negative_duration_rejected():
    with pytest.raises(ValidationError):
        char_duration(default=(-1, "ms"))


def test_duplicate_key_last_wins():
    d = char_duration((" ", 1, "ms"), (" ", 2, "ms"))
    assert d.duration(" ") == 2 * MS
    p = parse_char_durations("' '->1.ms, ' '->2.ms")
    assert p.duration(" ") == 2 * MS


def test_default_accepts_literal_string():
    assert char_duration(default="90.ms") == char_duration(default=(90, "ms"))


def test_parse_three_forms():
    assert parse_char_durations("default 10.ms") == CharDurations(10 * MS, {})
    assert parse_char_durations("default 90.ms, ' '->250.ms, '.'->1.s") == CharDurations(
        90 * MS, {" ": 250 * MS, ".": timedelta(seconds=1)}
    )
    assert parse_char_durations("' '->1.s") == CharDurations(ZERO, {" ": timedelta(seconds=1)})


def test_parse_matches_builder():
    assert parse_char_durations("default 50.ms, ' '->1.s, ','->100.ms") == char_duration(
        (" ", 1, "s"), (",", 100, "ms"), default=(50, "ms")
    )


def test_parse_escapes_and_punctuation():
    d = parse_char_durations(r"'\n'->300.ms, '\''->5.ms, '\\'->6.ms, ','->7.ms, '-'->8.ms")
    assert d.duration("\n") == 300 * MS
    assert d.duration("'") == 5 * MS
    assert d.duration("\\") == 6 * MS
    assert d.duration(",") == 7 * MS
    assert d.duration("-") == 8 * MS


def test_parse_non_ascii_char():
    assert parse_char_durations("'é'->4.ms").duration("é") == 4 * MS


def test_parse_unknown_unit():
    with pytest.raises(UnitError):
        parse_char_durations("default 10.min")


@pytest.mark.parametrize("text", [
    "",
    "   ",
    "default 10ms",
    "default 1.ms,",
    "default 1.ms ' '->2.ms",
    "' '->1.s, default 1.ms",
    "default 1.ms, default 2.ms",
    "'ab'->1.ms",
    r"'\q'->1.ms",
    "' '=>1.ms",
    "default -1.ms",
])
def test_parse_syntax_errors(text):
    with pytest.raises(DurationSyntaxError):
        parse_char_durations(text)


def test_as_char_durations_accepts_each_form():
    table = char_duration(default=(5, "ms"))
    assert as_char_durations(table) is table
    assert as_char_durations("default 5.ms") == table
    assert as_char_durations([(" ", 5, "ms")]).duration(" ") == 5 * MS
