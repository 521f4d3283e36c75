from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from akisa.container.abstracts import is_factory


@dataclass(frozen=True)
class Binding:
    """Producer registered for an abstract key."""

    concrete: Any
    shared: bool = False

    @property
    def is_factory(self) -> bool:
        return is_factory(self.concrete)

    def produce(self, *parameters: Any) -> Any:
        """Call the factory with *parameters*, or return the stored value as-is."""
        if self.is_factory:
            return self.concrete(*parameters)
        return self.concrete
