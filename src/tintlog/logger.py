"""
Leveled, colorized logger writing to the console and optionally to a file.

Console lines are colorized with ANSI escapes unless the logger was built
colorless; file lines always use the plain layout:

    [ INFO] <2026-10-18T09:15:02+02:00> message
"""
from __future__ import annotations
import sys
import threading
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Optional, TextIO, Union

from tintlog.core.colors import LEVEL_COLORS, Color, RESET, color_prefix, enable_windows_ansi
from tintlog.core.errors import LogFileError
from tintlog.core.levels import Level, Severity, clamp_level, gate, level_label

SCREEN_FORMAT = "{prefix}[{label}] <{ts}> {msg}{reset}\n"
COLOR_FORMAT = "{prefix}{msg}{reset}"
FILE_FORMAT = "[{label}] <{ts}> {msg}\n"

Clock = Callable[[], datetime]

def _local_now() -> datetime:
    return datetime.now().astimezone()

def _interpolate(msg: str, args: tuple) -> str:
    if not args:
        return msg
    try:
        return msg % args
    except (TypeError, ValueError):
        # mismatched arguments: keep the template and show what was passed
        return f"{msg} {list(args)!r}"


class ColorLog:
    def __init__(
        self,
        threshold: Level = Severity.INFO,
        *,
        path: Union[str, Path, None] = None,
        no_color: bool = False,
        stream: Optional[TextIO] = None,
        clock: Optional[Clock] = None,
    ):
        self.screen_format = SCREEN_FORMAT
        self.file_format = FILE_FORMAT
        self._threshold = clamp_level(threshold)
        self.no_color = no_color
        self._stream = stream
        self._clock = clock or _local_now
        self._lock = threading.Lock()
        self._file: Optional[TextIO] = None
        self.path: Optional[Path] = None
        self.closed = False
        if path is not None:
            self.path = Path(path)
            try:
                # buffered; flushed after every write
                self._file = open(self.path, "w", encoding="utf-8")
            except OSError as e:
                raise LogFileError(str(self.path), e.strerror or str(e)) from e
        if not no_color:
            enable_windows_ansi()

    @classmethod
    def new(cls, threshold: Level, **kw: Any) -> "ColorLog":
        return cls(threshold, **kw)

    @classmethod
    def new_colorless(cls, threshold: Level, **kw: Any) -> "ColorLog":
        return cls(threshold, no_color=True, **kw)

    @classmethod
    def new_file_log(cls, threshold: Level, path: Union[str, Path], **kw: Any) -> "ColorLog":
        """Console plus file logger. Raises LogFileError if `path` cannot be created."""
        return cls(threshold, path=path, **kw)

    # -- level state -----------------------------------------------------

    @property
    def is_file_logger(self) -> bool:
        return self._file is not None

    @property
    def log_level(self) -> Level:
        return self._threshold

    @log_level.setter
    def log_level(self, level: Level):
        self._threshold = clamp_level(level)

    def set_log_level(self, level: Level):
        self.log_level = level

    def get_log_level(self) -> Level:
        return self._threshold

    def enabled(self, level: Level) -> bool:
        return gate(level, self._threshold)

    def timestamp(self) -> str:
        return self._clock().isoformat(timespec="seconds")

    # -- level-specific calls --------------------------------------------

    def debug(self, msg: str, *args: Any): self._log(Severity.DEBUG, msg, args)
    def info(self, msg: str, *args: Any): self._log(Severity.INFO, msg, args)
    def warn(self, msg: str, *args: Any): self._log(Severity.WARN, msg, args)
    def error(self, msg: str, *args: Any): self._log(Severity.ERROR, msg, args)
    def fatal(self, msg: str, *args: Any): self._log(Severity.FATAL, msg, args)

    warning = warn

    def _log(self, level: Severity, msg: str, args: tuple):
        if not self.enabled(level):
            return
        msg = _interpolate(msg, args)
        ts = self.timestamp()
        self._emit_screen(msg, level, LEVEL_COLORS[level], ts)
        self._emit_file(msg, level, ts)

    # -- direct emission -------------------------------------------------

    def print(self, msg: str, level: Level, color: Union[Color, int]):
        """Write a pre-formatted message to the console in the screen layout."""
        if self.enabled(level):
            self._emit_screen(msg, level, color, self.timestamp())

    def printc(self, msg: str, level: Level, color: Union[Color, int], *args: Any):
        """Write a colored fragment with no prefix or newline, for appending to a line."""
        if not self.enabled(level):
            return
        msg = _interpolate(msg, args)
        if self.no_color:
            self._console_write(msg)
        else:
            self._console_write(COLOR_FORMAT.format(prefix=color_prefix(color), msg=msg, reset=RESET))

    def write(self, msg: str, level: Level):
        """Write the plain line to the file sink only, flushing immediately."""
        if self.enabled(level):
            self._emit_file(msg, level, self.timestamp())

    # -- sinks -----------------------------------------------------------

    def _render(self, msg: str, level: Level, ts: str, color: Union[Color, int, None] = None) -> str:
        label = level_label(level)
        if color is None:
            return self.file_format.format(label=label, ts=ts, msg=msg)
        return self.screen_format.format(prefix=color_prefix(color), label=label, ts=ts, msg=msg, reset=RESET)

    def _emit_screen(self, msg: str, level: Level, color: Union[Color, int], ts: str):
        self._console_write(self._render(msg, level, ts, None if self.no_color else color))

    def _emit_file(self, msg: str, level: Level, ts: str):
        if self._file is None:
            return
        line = self._render(msg, level, ts)
        with self._lock:
            if self.closed:
                return
            self._file.write(line)
            self._file.flush()

    def _console_write(self, text: str):
        stream = self._stream if self._stream is not None else sys.stdout
        with self._lock:
            stream.write(text)

    # -- lifecycle -------------------------------------------------------

    def close(self):
        """Flush and release the file sink. Safe to call more than once."""
        if self._file is None or self.closed:
            return
        with self._lock:
            self._file.flush()
            self._file.close()
            self.closed = True

    def __enter__(self) -> "ColorLog":
        return self

    def __exit__(self, *exc: Any):
        self.close()

    def __repr__(self) -> str:
        sink = f" file={str(self.path)!r}" if self.path else ""
        return f"<ColorLog level={level_label(self._threshold).strip()}{sink} color={not self.no_color}>"


__all__ = ["ColorLog", "SCREEN_FORMAT", "COLOR_FORMAT", "FILE_FORMAT"]
