"""Console logger for Branch Scout."""

from enum import IntEnum
from typing import Optional

from rich.console import Console
from rich.markup import escape


class LogLevel(IntEnum):
    """Log verbosity levels, lowest first."""

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40


_STYLES = {
    LogLevel.DEBUG: "dim",
    LogLevel.INFO: "",
    LogLevel.WARNING: "yellow",
    LogLevel.ERROR: "red",
}


class Logger:
    """Level-filtered logger that prints through a rich console."""

    def __init__(self, level: LogLevel = LogLevel.INFO, console: Optional[Console] = None):
        self.level = level
        self.console = console or Console(stderr=True)

    def set_level(self, level: LogLevel) -> None:
        self.level = level

    def set_console(self, console: Console) -> None:
        self.console = console

    def is_enabled_for(self, level: LogLevel) -> bool:
        return level >= self.level

    def log(self, level: LogLevel, message: str) -> None:
        if not self.is_enabled_for(level):
            return
        # Branch names and git output may contain square brackets
        text = f"{level.name}: {escape(message)}"
        style = _STYLES[level]
        self.console.print(f"[{style}]{text}[/{style}]" if style else text)

    def debug(self, message: str) -> None:
        self.log(LogLevel.DEBUG, message)

    def info(self, message: str) -> None:
        self.log(LogLevel.INFO, message)

    def warning(self, message: str) -> None:
        self.log(LogLevel.WARNING, message)

    def error(self, message: str) -> None:
        self.log(LogLevel.ERROR, message)


_logger: Optional[Logger] = None


def get_logger() -> Logger:
    """Return the process-wide logger, creating it on first use."""
    global _logger
    if _logger is None:
        _logger = Logger()
    return _logger
