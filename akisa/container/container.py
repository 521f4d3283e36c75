"""Service container: bindings, aliases and shared instances keyed by abstract.

Abstracts are interfaces (Protocols or ABCs), concrete classes, or string
names. Factories bound to them are called lazily, with their parameters
resolved from type hints when the caller passes none.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Callable, Iterator, TypeVar

from akisa.config.context import ContainerSettings
from akisa.container.abstracts import (
    AbstractKind,
    InjectableParameter,
    conformance_error,
    describe,
    injectable_parameters,
    is_factory,
    key_of,
    optional_inner,
)
from akisa.container.binding import Binding
from akisa.container.errors import (
    AbstractNotInvocableError,
    AbstractStructConcreteNotNilError,
    AliasAbstractMissingError,
    BindingMissingError,
    CircularDependencyError,
    ContainerError,
    DependencyResolutionError,
    InterfaceMismatchError,
    ResolutionAbortedError,
)
from akisa.services.logger.factory import LoggerFactory
from akisa.services.logger.interface import LoggingInterface

T = TypeVar("T")


class Container:
    """Flat registry of bindings with lazy, auto-wired resolution.

    Not thread-safe: finish registration before resolving from several
    threads, or guard the container with an external lock.
    """

    def __init__(
        self,
        settings: ContainerSettings | None = None,
        logger: LoggingInterface | None = None,
    ) -> None:
        self._settings = settings or ContainerSettings()
        self._logger = logger or LoggerFactory(self._settings.log_impl).create()
        self._bindings: dict[str, Binding] = {}
        self._shared: dict[str, Any] = {}
        self._aliases: dict[str, str] = {}
        # keys whose factories are currently running, outermost first
        self._resolving: list[str] = []

    # -- registration -----------------------------------------------------

    def bind(self, abstract: Any, concrete: Any = None) -> None:
        """Register *concrete* for *abstract*; a new instance on every make()."""
        self._provide(abstract, concrete, shared=False)

    def bind_shared(self, abstract: Any, concrete: Any = None) -> None:
        """Register *concrete* for *abstract*; the first instance made is reused."""
        self._provide(abstract, concrete, shared=True)

    def singleton(self, abstract: Any, concrete: Any = None) -> None:
        self.bind_shared(abstract, concrete)

    def _provide(self, abstract: Any, concrete: Any, shared: bool) -> None:
        desc = describe(abstract)
        if desc.kind is AbstractKind.INTERFACE:
            reason = conformance_error(abstract, concrete)
            if reason is not None:
                raise InterfaceMismatchError(abstract, concrete, reason)
        elif desc.kind is AbstractKind.STRUCT:
            if concrete is not None:
                raise AbstractStructConcreteNotNilError(abstract)
            concrete = abstract
        self._bindings[desc.key] = Binding(concrete, shared)
        self._logger.debug(
            "Binding registered", abstract=desc.key, kind=desc.kind.value, shared=shared
        )

    def alias(self, abstract: Any, name: str) -> None:
        """Make *name* resolve to the binding of *abstract*."""
        target = self._canonical_key(key_of(abstract))
        if target not in self._bindings:
            raise AliasAbstractMissingError(abstract, name)
        self._aliases[key_of(name)] = target
        self._logger.debug("Alias registered", alias=name, abstract=target)

    # -- resolution -------------------------------------------------------

    def make(self, abstract: Any, *parameters: Any) -> Any:
        """Resolve *abstract* to an instance.

        Callables are invoked directly with injected arguments. Otherwise the
        binding is looked up (through at most one alias) and produced; explicit
        *parameters* are passed to its factory instead of auto-injection.

        Raises BindingMissingError if nothing is bound for *abstract*.
        """
        desc = describe(abstract)
        if desc.kind is AbstractKind.CALLABLE:
            return self.invoke(abstract)

        key = self._canonical_key(desc.key)
        if key in self._shared:
            return self._shared[key]

        binding = self._bindings.get(key)
        if binding is None:
            raise BindingMissingError(abstract)

        if binding.is_factory and not parameters:
            with self._constructing(key):
                instance = self._call_injected(binding.concrete)
        else:
            instance = binding.produce(*parameters)

        if binding.shared:
            self._shared[key] = instance
            self._logger.debug("Shared instance cached", abstract=key)
        return instance

    def get(self, abstract: type[T] | Any) -> T | Any:
        """Like make(), but any container error aborts with ResolutionAbortedError."""
        try:
            return self.make(abstract)
        except ContainerError as err:
            self._logger.error("Resolution aborted", abstract=key_of(abstract), error=str(err))
            raise ResolutionAbortedError(abstract, err) from err

    def has(self, abstract: Any) -> bool:
        """Check whether *abstract* is bound, directly or through an alias."""
        return self._canonical_key(key_of(abstract)) in self._bindings

    def __contains__(self, abstract: Any) -> bool:
        return self.has(abstract)

    def invoke(self, abstract: Callable[..., T]) -> T:
        """Call *abstract* with every parameter resolved from the container.

        The result is never cached, even when *abstract* is itself bound shared.
        """
        if not is_factory(abstract) or describe(abstract).kind is AbstractKind.INTERFACE:
            raise AbstractNotInvocableError(abstract)
        return self._call_injected(abstract)

    # -- internals --------------------------------------------------------

    def _canonical_key(self, key: str) -> str:
        return self._aliases.get(key, key)

    @contextmanager
    def _constructing(self, key: str) -> Iterator[None]:
        if self._settings.detect_cycles and key in self._resolving:
            start = self._resolving.index(key)
            raise CircularDependencyError(self._resolving[start:] + [key])
        self._resolving.append(key)
        try:
            yield
        finally:
            self._resolving.pop()

    def _call_injected(self, factory: Callable[..., Any]) -> Any:
        try:
            params = injectable_parameters(factory)
        except (AttributeError, NameError, TypeError, ValueError) as exc:
            raise DependencyResolutionError(
                factory, None, f"cannot read signature: {exc}"
            ) from exc

        args: list[Any] = []
        kwargs: dict[str, Any] = {}
        for param in params:
            value = self._resolve_parameter(factory, param)
            if param.positional_only:
                args.append(value)
            else:
                kwargs[param.name] = value
        return factory(*args, **kwargs)

    def _resolve_parameter(self, factory: Any, param: InjectableParameter) -> Any:
        if param.hint is None:
            if param.has_default:
                return param.default
            raise DependencyResolutionError(factory, param.name, "no type hint")
        hint = param.hint
        inner = optional_inner(hint)
        if inner is not None and not self.has(hint):
            hint = inner
        try:
            return self.make(hint)
        except DependencyResolutionError:
            raise
        except BindingMissingError as err:
            if param.has_default:
                return param.default
            if inner is not None:
                return None
            raise DependencyResolutionError(factory, param.name, str(err)) from err
        except ContainerError as err:
            raise DependencyResolutionError(factory, param.name, str(err)) from err


def new(
    settings: ContainerSettings | None = None,
    logger: LoggingInterface | None = None,
) -> Container:
    """Create an empty container."""
    return Container(settings=settings, logger=logger)
