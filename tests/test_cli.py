import json

from typewriter.cli import run, EXIT_OK, EXIT_CONFIG


def _settings(tmp_path):
    return ["--settings", str(tmp_path / "settings.json")]


def test_types_given_text(tmp_path, capsys, sleeps):
    assert run(["hello", "world", "-d", "default 1.ms"] + _settings(tmp_path)) == EXIT_OK
    assert capsys.readouterr().out == "hello world\n"
    assert len(sleeps) == len("hello world\n")


def test_no_newline(tmp_path, capsys, sleeps):
    assert run(["hi", "-n", "-p", "word"] + _settings(tmp_path)) == EXIT_OK
    assert capsys.readouterr().out == "hi"
    assert sleeps == []


def test_speed_scales_durations(tmp_path, capsys, sleeps):
    run(["ab", "-n", "-d", "default 10.ms", "--speed", "2"] + _settings(tmp_path))
    assert sleeps == [0.005, 0.005]


def test_bad_literal_exits_with_config_error(tmp_path, capsys, sleeps):
    assert run(["x", "-d", "default 10.min"] + _settings(tmp_path)) == EXIT_CONFIG
    assert "Unknown duration unit" in capsys.readouterr().out
    assert sleeps == []


def test_bad_speed(tmp_path, capsys):
    assert run(["x", "--speed", "0"] + _settings(tmp_path)) == EXIT_CONFIG


def test_unknown_preset(tmp_path, capsys):
    assert run(["x", "-p", "ludicrous"] + _settings(tmp_path)) == EXIT_CONFIG


def test_list_presets(tmp_path, capsys):
    assert run(["--list-presets"] + _settings(tmp_path)) == EXIT_OK
    out = capsys.readouterr().out
    for name in ("fast", "normal", "slow", "word", "sentence"):
        assert name in out


def test_save_writes_settings(tmp_path, capsys, sleeps):
    path = tmp_path / "settings.json"
    run(["ok", "-d", "' '->1.ms", "--save", "--settings", str(path)])
    assert json.loads(path.read_text(encoding="utf-8"))["durations"] == "' '->1.ms"


def test_saved_settings_are_used(tmp_path, capsys, sleeps):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"durations": "default 3.ms"}), encoding="utf-8")
    run(["ab", "-n", "--settings", str(path)])
    assert sleeps == [0.003, 0.003]


def test_demo_runs_without_text(tmp_path, capsys, sleeps):
    assert run(_settings(tmp_path)) == EXIT_OK
    out = capsys.readouterr().out
    assert "hello world\n" in out
    assert "hello beans world.\n" in out
    assert 1.0 in sleeps


def test_list_presets_shows_rendered_tables(tmp_path, capsys):
    run(["--list-presets"] + _settings(tmp_path))
    assert "default 12.ms" in capsys.readouterr().out
