from __future__ import annotations
import json, os
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Mapping, Optional

from tintlog.core.errors import ConfigError, InvalidLevelError
from tintlog.core.levels import Severity, level_label, parse_level
from tintlog.logger import ColorLog

SETTINGS_FILENAME = ".tintlog.json"

@dataclass
class LoggerSettings:
    level: str = "INFO"
    no_color: bool = False
    log_file: Optional[str] = None

    def normalize(self):
        try:
            self.level = level_label(parse_level(self.level)).strip()
        except InvalidLevelError:
            self.level = "INFO"
        self.no_color = bool(self.no_color)
        if not self.log_file:
            self.log_file = None

    @property
    def threshold(self):
        return parse_level(self.level)

class Settings:
    def __init__(self, data: LoggerSettings, path: Path):
        self.data = data
        self.path = path

    @classmethod
    def _resolve_path(cls) -> Path:
        home = Path(os.path.expanduser("~"))
        if home.is_dir() and os.access(home, os.W_OK):
            return home / SETTINGS_FILENAME
        return Path.cwd() / SETTINGS_FILENAME

    @classmethod
    def load(cls, path: Optional[Path] = None, *, strict: bool = False,
             env: Optional[Mapping[str, str]] = None) -> "Settings":
        """Read settings from JSON, then apply TINTLOG_* / NO_COLOR overrides.

        A broken file falls back to defaults with a warning, or raises
        ConfigError when `strict` is set.
        """
        path = Path(path) if path is not None else cls._resolve_path()
        data = LoggerSettings()
        if path.exists():
            try:
                data = LoggerSettings(**json.loads(path.read_text()))
            except (OSError, ValueError, TypeError) as e:
                if strict:
                    raise ConfigError(str(path), str(e)) from e
                ColorLog.new_colorless(Severity.WARN).warn(
                    "Failed to parse settings %s, using defaults: %s", path, e)
                data = LoggerSettings()
        cls._apply_env(data, os.environ if env is None else env)
        data.normalize()
        return cls(data, path)

    @staticmethod
    def _apply_env(data: LoggerSettings, env: Mapping[str, str]):
        if env.get("TINTLOG_LEVEL"):
            data.level = env["TINTLOG_LEVEL"]
        if env.get("TINTLOG_FILE"):
            data.log_file = env["TINTLOG_FILE"]
        # https://no-color.org: any non-empty value disables color
        if env.get("TINTLOG_NO_COLOR") == "1" or env.get("NO_COLOR"):
            data.no_color = True

    def save(self):
        self.path.write_text(json.dumps(asdict(self.data), indent=2))

    def build_logger(self, **kw) -> ColorLog:
        d = self.data
        if d.log_file:
            return ColorLog.new_file_log(d.threshold, d.log_file, no_color=d.no_color, **kw)
        if d.no_color:
            return ColorLog.new_colorless(d.threshold, **kw)
        return ColorLog.new(d.threshold, **kw)
