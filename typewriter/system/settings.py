from __future__ import annotations
import json, os
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Callable, List, Optional
from typewriter.core.builder import parse_char_durations
from typewriter.core.durations import CharDurations
from typewriter.core.errors import ValidationError
from typewriter.core.logging import logger, LEVELS
from typewriter.presets import PRESETS, DEFAULT_PRESET, get_preset

SETTINGS_FILENAME = ".typewriter_settings.json"

@dataclass
class SettingsData:
    durations: str = ""            # builder literal, e.g. "default 30.ms, ' '->120.ms"; overrides preset
    preset: str = DEFAULT_PRESET   # fast / normal / slow / word / sentence
    speed: float = 1.0             # >1 types faster, <1 slower
    log_level: str = "INFO"        # DEBUG / INFO / WARN / ERROR

    def normalize(self):
        self.preset = str(self.preset).lower()
        if self.preset not in PRESETS:
            self.preset = DEFAULT_PRESET
        try:
            self.speed = float(self.speed)
        except (TypeError, ValueError):
            self.speed = 1.0
        if not self.speed > 0:
            self.speed = 1.0
        if self.log_level not in LEVELS:
            self.log_level = "INFO"
        if not isinstance(self.durations, str):
            self.durations = ""
        if self.durations:
            try:
                parse_char_durations(self.durations)
            except ValidationError as e:
                logger.warn("SettingsDurationsInvalid", literal=self.durations, error=str(e))
                self.durations = ""

class Settings:
    def __init__(self, data: SettingsData, path: Path):
        self.data = data
        self.path = path
        self._listeners: List[Callable[[SettingsData], None]] = []

    @classmethod
    def _resolve_path(cls) -> Path:
        home = Path(os.path.expanduser("~"))
        if home.is_dir() and os.access(home, os.W_OK):
            return home / SETTINGS_FILENAME
        return Path.cwd() / SETTINGS_FILENAME

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Settings":
        path = Path(path) if path is not None else cls._resolve_path()
        if path.exists():
            try:
                raw = json.loads(path.read_text(encoding="utf-8"))
                if not isinstance(raw, dict):
                    raise ValueError("settings root must be an object")
                # Unknown keys are dropped, missing ones take defaults
                field_names = {f.name for f in fields(SettingsData)}
                data = SettingsData(**{k: v for k, v in raw.items() if k in field_names})
                data.normalize()
                logger.debug("SettingsLoaded", path=str(path))
                return cls(data, path)
            except (OSError, ValueError, TypeError) as e:
                logger.warn("SettingsParseFailedUsingDefaults", path=str(path), error=str(e))
        data = SettingsData()
        data.normalize()
        return cls(data, path)

    def save(self):
        try:
            self.path.write_text(json.dumps(asdict(self.data), indent=2), encoding="utf-8")
            logger.debug("SettingsSaved", path=str(self.path))
        except OSError as e:
            logger.error("SettingsSaveFailed", error=str(e))

    def on_change(self, fn: Callable[[SettingsData], None]):
        self._listeners.append(fn)

    def _notify(self):
        for fn in self._listeners:
            fn(self.data)

    def update(self, **changes):
        """Apply field changes, normalize, persist and notify listeners."""
        for name, value in changes.items():
            if not hasattr(self.data, name):
                raise ValidationError(f"Unknown setting '{name}'")
            setattr(self.data, name, value)
        self.data.normalize()
        self.apply_log_level()
        self.save()
        self._notify()

    def apply_log_level(self):
        lvl: str = self.data.log_level
        if lvl in LEVELS:
            logger.set_level(lvl)  # type: ignore[arg-type]

    def base_durations(self) -> CharDurations:
        """The stored literal if any, else the named preset."""
        if self.data.durations:
            return parse_char_durations(self.data.durations)
        return get_preset(self.data.preset)

    def char_durations(self) -> CharDurations:
        """Effective table: base durations scaled by speed."""
        base = self.base_durations()
        if self.data.speed == 1.0:
            return base
        return base.scaled(1 / self.data.speed)
