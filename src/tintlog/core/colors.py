from __future__ import annotations
import re
from enum import IntEnum
from typing import Dict

from colorama import Style, just_fix_windows_console
from colorama.ansi import code_to_chars

from tintlog.core.levels import Severity

class Color(IntEnum):
    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 93
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    GREY = 37
    WHITE = 97

LEVEL_COLORS: Dict[Severity, Color] = {
    Severity.DEBUG: Color.GREEN,
    Severity.INFO: Color.GREY,
    Severity.WARN: Color.YELLOW,
    Severity.ERROR: Color.RED,
    Severity.FATAL: Color.MAGENTA,
}

RESET = Style.RESET_ALL

_console_fixed = False

def enable_windows_ansi() -> None:
    """Let legacy Windows consoles interpret escapes. No-op elsewhere."""
    global _console_fixed
    if not _console_fixed:
        just_fix_windows_console()
        _console_fixed = True

def color_prefix(color: int) -> str:
    return code_to_chars(f"0;{int(color)}")

def colorize(text: str, color: int) -> str:
    return f"{color_prefix(color)}{text}{RESET}"

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;]*m")

def strip_ansi(s: str) -> str:
    return ANSI_ESCAPE_RE.sub('', s)

__all__ = ["Color", "LEVEL_COLORS", "RESET", "enable_windows_ansi", "color_prefix", "colorize", "strip_ansi"]
