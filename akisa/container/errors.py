"""Error taxonomy for the container.

Registration problems derive from ContainerConfigurationError and signal a
misconfigured application. BindingMissingError is the one error callers are
expected to catch and recover from.
"""

from __future__ import annotations

from typing import Any


class ContainerError(Exception):
    """Base class for every error raised by the container."""


class ContainerConfigurationError(ContainerError):
    """Raised at registration time for an invalid binding or alias."""


class InterfaceMismatchError(ContainerConfigurationError, TypeError):
    def __init__(self, abstract: Any, concrete: Any, reason: str) -> None:
        self.abstract = abstract
        self.concrete = concrete
        super().__init__(
            f"{concrete!r} does not implement {_name(abstract)}: {reason}"
        )


class AbstractStructConcreteNotNilError(ContainerConfigurationError, ValueError):
    def __init__(self, abstract: Any) -> None:
        self.abstract = abstract
        super().__init__(
            f"{_name(abstract)} is a concrete class and binds to itself; "
            "pass no concrete"
        )


class AliasAbstractMissingError(ContainerConfigurationError, LookupError):
    def __init__(self, abstract: Any, alias: str) -> None:
        self.abstract = abstract
        self.alias = alias
        super().__init__(
            f"Cannot alias '{alias}' to {_name(abstract)}: no binding registered"
        )


class AbstractNotInvocableError(ContainerConfigurationError, TypeError):
    def __init__(self, abstract: Any) -> None:
        self.abstract = abstract
        super().__init__(f"{abstract!r} is not invocable")


class BindingMissingError(ContainerError, LookupError):
    """No binding (direct or aliased) exists for the requested abstract."""

    def __init__(self, abstract: Any) -> None:
        self.abstract = abstract
        super().__init__(f"No binding registered for {_name(abstract)}")


class DependencyResolutionError(ContainerError):
    """A factory parameter could not be injected."""

    def __init__(self, factory: Any, parameter: str | None, reason: str) -> None:
        self.factory = factory
        self.parameter = parameter
        super().__init__(self._describe(reason))

    def _describe(self, reason: str) -> str:
        where = f"parameter '{self.parameter}' of " if self.parameter else ""
        return f"Cannot inject {where}{_name(self.factory)}: {reason}"


class CircularDependencyError(DependencyResolutionError):
    def __init__(self, path: list[str]) -> None:
        self.path = path
        super().__init__(None, None, " -> ".join(path))

    def _describe(self, reason: str) -> str:
        return f"Circular dependency detected: {reason}"


class ResolutionAbortedError(RuntimeError):
    """Raised by Container.get; the underlying error is chained as __cause__."""

    def __init__(self, abstract: Any, error: ContainerError) -> None:
        self.abstract = abstract
        self.error = error
        super().__init__(f"Resolution of {_name(abstract)} aborted: {error}")


def _name(obj: Any) -> str:
    if isinstance(obj, str):
        return repr(obj)
    qualname = getattr(obj, "__qualname__", None)
    if qualname is not None:
        return qualname
    return repr(obj)
