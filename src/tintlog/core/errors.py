from __future__ import annotations

class TintlogError(Exception):
    """Base for internal errors."""

class LogFileError(TintlogError):
    def __init__(self, path: str, detail: str):
        super().__init__(f"Failed creating log file '{path}': {detail}")
        self.path = path
        self.detail = detail

class InvalidLevelError(TintlogError, ValueError):
    def __init__(self, value: object):
        super().__init__(f"Not a log level: {value!r}")
        self.value = value

class ConfigError(TintlogError):
    def __init__(self, path: str, detail: str):
        super().__init__(f"Failed loading settings '{path}': {detail}")
        self.path = path
        self.detail = detail
