import sys
from datetime import datetime, timezone
from typing import Any, TextIO

from akisa.services.logger.interface import LEVELS, LoggingInterface, check_level

_COLORS = {
    "INFO": "\033[32m",   # green
    "WARN": "\033[33m",   # yellow
    "ERROR": "\033[31m",  # red
    "DEBUG": "\033[36m",  # cyan
}
_RESET = "\033[0m"


class PrettyLogger(LoggingInterface):
    """Colorized human-readable logger for local development.

    Entries below *min_level* are dropped. *name* is printed before each
    message so container output can be told apart from the host app's.
    """

    def __init__(
        self,
        min_level: str = "DEBUG",
        name: str | None = None,
        stream: TextIO | None = None,
    ) -> None:
        self._threshold = LEVELS.index(check_level(min_level))
        self._name = name
        self._stream = stream

    def log(self, level: str, msg: str, ctx: dict[str, Any]) -> None:
        if LEVELS.index(check_level(level)) < self._threshold:
            return
        ts = datetime.now(timezone.utc).strftime("%H:%M:%S")
        color = _COLORS.get(level, "")
        prefix = f"{self._name}: " if self._name else ""
        extra = f"  {ctx}" if ctx else ""
        print(
            f"{color}{ts} [{level}]{_RESET} {prefix}{msg}{extra}",
            file=self._stream or sys.stderr,
        )
