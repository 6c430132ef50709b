from __future__ import annotations
import argparse
import sys
from typing import List, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.text import Text
from rich.align import Align

from typewriter.core.builder import parse_char_durations
from typewriter.core.durations import CharDurations
from typewriter.core.errors import ValidationError
from typewriter.core.logging import logger, LEVELS
from typewriter.presets import PRESETS, get_preset, preset_names
from typewriter.system.settings import Settings
from typewriter.ui.typewriter import print_typed_line, print_typed_no_line

console = Console()

# Typed when no TEXT is given: one line per example table
DEMO_LINES = [
    ("default 10.ms", "hello"),
    ("' '->250.ms", "hello world"),
    ("default 90.ms, ' '->250.ms, '.'->1.s", "hello beans world."),
]

EXIT_OK = 0
EXIT_CONFIG = 2


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="typewriter",
        description="Print text one character at a time.",
    )
    p.add_argument("text", nargs="*", help="text to type (words are joined with spaces)")
    p.add_argument("-d", "--durations", help="duration literal, e.g. \"default 50.ms, ' '->200.ms\"")
    p.add_argument("-p", "--preset", help="named preset: " + ", ".join(preset_names()))
    p.add_argument("--speed", type=float, help="speed factor (>1 faster, <1 slower)")
    p.add_argument("-n", "--no-newline", action="store_true", help="do not type a trailing newline")
    p.add_argument("--list-presets", action="store_true", help="show presets and exit")
    p.add_argument("--save", action="store_true", help="store the given options in the settings file")
    p.add_argument("--log-level", choices=LEVELS, help="logger threshold")
    p.add_argument("--settings", help="settings file path (default: ~/.typewriter_settings.json)")
    return p


def show_presets():
    table = Table(title="Presets")
    table.add_column("Name", style="bold bright_yellow")
    table.add_column("Durations", style="bright_white")
    for name in preset_names():
        table.add_row(name, PRESETS[name].to_literal())
    console.print(table)


def resolve_durations(args: argparse.Namespace, settings: Settings) -> CharDurations:
    """Command line options win over the settings file."""
    if args.durations:
        base = parse_char_durations(args.durations)
    elif args.preset:
        base = get_preset(args.preset)
    else:
        base = settings.base_durations()
    speed = args.speed if args.speed is not None else settings.data.speed
    return base if speed == 1.0 else base.scaled(1 / speed)


def _save_options(args: argparse.Namespace, settings: Settings):
    changes = {}
    if args.durations:
        changes["durations"] = args.durations
    if args.preset:
        changes["preset"] = args.preset
        changes.setdefault("durations", "")
    if args.speed is not None:
        changes["speed"] = args.speed
    if args.log_level:
        changes["log_level"] = args.log_level
    settings.update(**changes)
    logger.info("SettingsUpdated", path=str(settings.path), **changes)


def run_demo():
    console.print(Align.center(Panel(
        Text("Typewriter demo", justify="center", style="bold bright_yellow"),
        border_style="bright_white",
        padding=(0, 2),
    )))
    for literal, line in DEMO_LINES:
        console.print(literal, style="dim", markup=False)
        print_typed_line(parse_char_durations(literal), line)


def run(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings.load(args.settings)
    settings.apply_log_level()
    if args.log_level:
        logger.set_level(args.log_level)

    if args.list_presets:
        show_presets()
        return EXIT_OK

    if args.speed is not None and not args.speed > 0:
        console.print("[red]--speed must be positive[/]")
        return EXIT_CONFIG

    try:
        durations = resolve_durations(args, settings)
        if args.save:
            _save_options(args, settings)
    except ValidationError as e:
        console.print(str(e), style="red", markup=False)
        return EXIT_CONFIG

    if not args.text:
        run_demo()
        return EXIT_OK

    text = " ".join(args.text)
    logger.debug("TypingText", chars=len(text), default=durations.default_duration)
    if args.no_newline:
        print_typed_no_line(durations, text)
    else:
        print_typed_line(durations, text)
    return EXIT_OK


def main():
    sys.exit(run())
