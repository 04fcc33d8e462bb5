"""Leveled, colorized console logging with an optional plain-text file mirror."""
from tintlog.core.colors import Color, LEVEL_COLORS, colorize, strip_ansi
from tintlog.core.errors import ConfigError, InvalidLevelError, LogFileError, TintlogError
from tintlog.core.levels import Severity, clamp_level, gate, level_label, parse_level
from tintlog.logger import ColorLog

__version__ = "0.1.0"

__all__ = [
    "ColorLog", "Severity", "Color", "LEVEL_COLORS",
    "clamp_level", "parse_level", "level_label", "gate", "colorize", "strip_ansi",
    "TintlogError", "LogFileError", "InvalidLevelError", "ConfigError",
]
