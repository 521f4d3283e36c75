from abc import ABC, abstractmethod
from typing import Any

LEVELS = ("DEBUG", "INFO", "WARN", "ERROR")


class LoggingInterface(ABC):
    """Structured logging: a message plus keyword context.

    Implementations only provide log(); the level helpers funnel into it.
    """

    @abstractmethod
    def log(self, level: str, msg: str, ctx: dict[str, Any]) -> None: ...

    def debug(self, msg: str, **ctx: Any) -> None:
        self.log("DEBUG", msg, ctx)

    def info(self, msg: str, **ctx: Any) -> None:
        self.log("INFO", msg, ctx)

    def warn(self, msg: str, **ctx: Any) -> None:
        self.log("WARN", msg, ctx)

    def error(self, msg: str, **ctx: Any) -> None:
        self.log("ERROR", msg, ctx)


def check_level(level: str) -> str:
    if level not in LEVELS:
        raise ValueError(f"Unknown log level: '{level}' (available: {', '.join(LEVELS)})")
    return level
