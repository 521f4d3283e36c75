from dataclasses import dataclass, field
from typing import Any

from akisa.services.logger.interface import LoggingInterface, check_level


@dataclass
class LogEntry:
    level: str
    msg: str
    ctx: dict[str, Any] = field(default_factory=dict)


class MemoryLogger(LoggingInterface):
    """Keeps entries in a list so tests can assert on container output."""

    def __init__(self) -> None:
        self.entries: list[LogEntry] = []

    def log(self, level: str, msg: str, ctx: dict[str, Any]) -> None:
        self.entries.append(LogEntry(check_level(level), msg, dict(ctx)))

    @property
    def messages(self) -> list[str]:
        return [e.msg for e in self.entries]

    def at_level(self, level: str) -> list[LogEntry]:
        check_level(level)
        return [e for e in self.entries if e.level == level]

    def clear(self) -> None:
        self.entries.clear()
