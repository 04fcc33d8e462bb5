"""Severity levels and the gate that decides whether a line is emitted.

Provides:
  Severity: ordered levels, NONE(0) suppresses everything when used as threshold
  clamp_level / parse_level: turn user input into a threshold
  level_label: fixed-width label used in every rendered line
  gate: the emission predicate shared by console and file sinks
"""
from __future__ import annotations
import re
from enum import IntEnum
from typing import Dict, Union

from tintlog.core.errors import InvalidLevelError

LABEL_WIDTH = 5
_NUMBER_RE = re.compile(r"-?[0-9]+")

class Severity(IntEnum):
    NONE = 0     # Log nothing
    DEBUG = 10   # Log Debug and above
    INFO = 11    # Log Info and above
    WARN = 12    # Log Warn and above
    ERROR = 13   # Log Error and above
    FATAL = 14   # Log Fatal

    @property
    def label(self) -> str:
        return self.name.rjust(LABEL_WIDTH)

Level = Union[Severity, int]

_ALIASES: Dict[str, Severity] = {
    "OFF": Severity.NONE,
    "WARNING": Severity.WARN,
    "CRITICAL": Severity.FATAL,
}

def level_label(level: Level) -> str:
    try:
        return Severity(level).label
    except ValueError:
        return str(int(level))

def clamp_level(value: Level) -> Level:
    """Normalize a threshold; anything above FATAL falls back to INFO."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidLevelError(value)
    if value > Severity.FATAL:
        return Severity.INFO
    try:
        return Severity(value)
    except ValueError:
        return int(value)

def parse_level(text: Union[str, int]) -> Level:
    if isinstance(text, int) and not isinstance(text, bool):
        return clamp_level(text)
    if not isinstance(text, str):
        raise InvalidLevelError(text)
    key = text.strip().upper()
    if _NUMBER_RE.fullmatch(key):
        return clamp_level(int(key))
    if key in Severity.__members__:
        return Severity[key]
    if key in _ALIASES:
        return _ALIASES[key]
    raise InvalidLevelError(text)

def gate(level: Level, threshold: Level) -> bool:
    return threshold > 0 and level >= threshold

__all__ = ["Severity", "Level", "LABEL_WIDTH", "level_label", "clamp_level", "parse_level", "gate"]
