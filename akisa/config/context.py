from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from akisa.config.env_loader import load_env_file

_TRUTHY = ("true", "1", "yes", "on")
_FALSY = ("false", "0", "no", "off")

DETECT_CYCLES_VAR = "AKISA_DETECT_CYCLES"
LOG_IMPL_VAR = "AKISA_LOG_IMPL"


class PlatformConfig:
    """Environment-based configuration with optional overrides."""

    def __init__(self, overrides: dict[str, str] | None = None) -> None:
        self._env = dict(os.environ)
        if overrides:
            self._env.update(overrides)

    def get(self, key: str, default: str = "") -> str:
        return self._env.get(key, default)

    def get_bool(self, key: str, default: bool = False) -> bool:
        raw = self._env.get(key)
        if raw is None or raw.strip() == "":
            return default
        value = raw.strip().lower()
        if value in _TRUTHY:
            return True
        if value in _FALSY:
            return False
        raise ValueError(f"{key} must be a boolean, got '{raw}'")

    def __contains__(self, key: str) -> bool:
        return key in self._env


@dataclass(frozen=True)
class ContainerSettings:
    """Tunables for a Container.

    detect_cycles: fail fast with CircularDependencyError instead of recursing
        until Python gives up.
    log_impl: LoggerFactory implementation used when no logger is passed in.
    """

    detect_cycles: bool = True
    log_impl: str = "noop"

    @classmethod
    def from_config(cls, config: PlatformConfig) -> ContainerSettings:
        return cls(
            detect_cycles=config.get_bool(DETECT_CYCLES_VAR, default=True),
            log_impl=config.get(LOG_IMPL_VAR, "noop") or "noop",
        )

    @classmethod
    def from_env(
        cls,
        env_file: str | None = None,
        overrides: dict[str, str] | None = None,
        project_root: Path | None = None,
    ) -> ContainerSettings:
        """Build settings from the process environment.

        Values from .env/<env_file>.env are the lowest priority; the process
        environment beats them and *overrides* beat both.
        """
        file_vars = load_env_file(env_file, project_root) if env_file else {}
        merged = {k: v for k, v in file_vars.items() if k not in os.environ}
        merged.update(overrides or {})
        return cls.from_config(PlatformConfig(merged))
