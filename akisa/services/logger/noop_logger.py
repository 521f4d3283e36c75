from typing import Any

from akisa.services.logger.interface import LoggingInterface


class NoopLogger(LoggingInterface):
    """Discards every entry. Default for library use."""

    def log(self, level: str, msg: str, ctx: dict[str, Any]) -> None:
        pass
