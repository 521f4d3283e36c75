"""Classification and introspection of abstract descriptors.

An abstract is whatever callers hand to the container as a key: a string
name, an interface (Protocol or abstract base class), a concrete class, or a
callable. ``describe`` turns it into an explicit tagged ``Abstract`` so the
container never has to guess at lookup time.
"""

from __future__ import annotations

import enum
import functools
import inspect
import types
from dataclasses import dataclass
from typing import Any, Callable, Generic, Protocol, Union, get_args, get_origin, get_type_hints

_EMPTY = inspect.Parameter.empty

# Dunder methods installed by typing.Protocol itself, not part of any contract.
_PROTOCOL_MACHINERY = {
    "__annotate__",
    "__annotate_func__",
    "__init__",
    "__init_subclass__",
    "__class_getitem__",
    "__subclasshook__",
}


class AbstractKind(enum.Enum):
    NAME = "name"
    INTERFACE = "interface"
    STRUCT = "struct"
    CALLABLE = "callable"
    OTHER = "other"


@dataclass(frozen=True)
class Abstract:
    kind: AbstractKind
    key: str
    target: Any


@dataclass(frozen=True)
class InjectableParameter:
    """One parameter of a factory as seen by the auto-injector."""

    name: str
    kind: inspect._ParameterKind
    hint: Any = None
    default: Any = _EMPTY

    @property
    def has_default(self) -> bool:
        return self.default is not _EMPTY

    @property
    def positional_only(self) -> bool:
        return self.kind is inspect.Parameter.POSITIONAL_ONLY


def describe(abstract: Any) -> Abstract:
    """Classify *abstract* and compute its canonical key."""
    if isinstance(abstract, str):
        return Abstract(AbstractKind.NAME, abstract, abstract)
    if isinstance(abstract, type):
        kind = AbstractKind.INTERFACE if is_interface(abstract) else AbstractKind.STRUCT
        return Abstract(kind, key_of(abstract), abstract)
    if is_factory(abstract):
        return Abstract(AbstractKind.CALLABLE, key_of(abstract), abstract)
    return Abstract(AbstractKind.OTHER, key_of(abstract), abstract)


def key_of(abstract: Any) -> str:
    """Canonical string identity shared by all three container tables."""
    if isinstance(abstract, str):
        return abstract
    if isinstance(abstract, functools.partial):
        return f"partial({key_of(abstract.func)})"
    module = getattr(abstract, "__module__", None)
    qualname = getattr(abstract, "__qualname__", None)
    if (isinstance(abstract, type) or inspect.isroutine(abstract)) and qualname:
        return f"{module}.{qualname}" if module else qualname
    return repr(abstract)


def is_factory(obj: Any) -> bool:
    """True for classes, functions, methods, builtins and partials."""
    return (
        isinstance(obj, type)
        or inspect.isroutine(obj)
        or isinstance(obj, functools.partial)
    )


def optional_inner(hint: Any) -> Any:
    """Return X for an Optional[X] (or X | None) hint, otherwise None."""
    if get_origin(hint) not in (Union, types.UnionType):
        return None
    args = [a for a in get_args(hint) if a is not type(None)]
    if len(args) != 1 or len(args) == len(get_args(hint)):
        return None
    return args[0]


def is_protocol(cls: type) -> bool:
    return bool(getattr(cls, "_is_protocol", False)) and cls is not Protocol


def is_interface(cls: type) -> bool:
    """Protocols and classes that still have abstract methods."""
    return is_protocol(cls) or inspect.isabstract(cls)


def protocol_members(cls: type) -> set[str]:
    members: set[str] = set()
    for base in cls.__mro__:
        if base in (object, Protocol, Generic) or not is_protocol(base):
            continue
        members.update(n for n in inspect.get_annotations(base) if not n.startswith("_"))
        for name, value in base.__dict__.items():
            if not name.startswith("_"):
                members.add(name)
            elif _is_dunder(name) and callable(value) and name not in _PROTOCOL_MACHINERY:
                members.add(name)
    return members


def _is_dunder(name: str) -> bool:
    return len(name) > 4 and name.startswith("__") and name.endswith("__")


def conformance_error(interface: type, concrete: Any) -> str | None:
    """Return why *concrete* fails to implement *interface*, or None if it does."""
    if isinstance(concrete, type):
        return _class_conformance(interface, concrete)
    if is_factory(concrete):
        produced = return_hint(concrete)
        if produced is None:
            return "factory has no return type hint"
        if not isinstance(produced, type):
            return f"factory return type {produced!r} is not a class"
        return _class_conformance(interface, produced)
    if is_protocol(interface):
        missing = sorted(m for m in protocol_members(interface) if not hasattr(concrete, m))
        return f"missing {', '.join(missing)}" if missing else None
    if not isinstance(concrete, interface):
        return f"{type(concrete).__qualname__} is not a subclass"
    return None


def _class_conformance(interface: type, cls: type) -> str | None:
    if is_protocol(interface):
        members = protocol_members(interface)
        annotations = _all_annotations(cls)
        missing = sorted(m for m in members if not hasattr(cls, m) and m not in annotations)
        return f"missing {', '.join(missing)}" if missing else None
    if not issubclass(cls, interface):
        return f"{cls.__qualname__} is not a subclass"
    return None


def _all_annotations(cls: type) -> set[str]:
    names: set[str] = set()
    for base in cls.__mro__:
        names.update(inspect.get_annotations(base))
    return names


def _hint_source(factory: Any) -> Any:
    if isinstance(factory, functools.partial):
        return _hint_source(factory.func)
    if isinstance(factory, type):
        return factory.__init__
    if not inspect.isroutine(factory) and callable(factory):
        return type(factory).__call__
    return factory


def type_hints(factory: Any) -> dict[str, Any]:
    """Resolved type hints of *factory* (``__init__`` hints for classes)."""
    source = _hint_source(factory)
    if source is object.__init__:
        return {}
    return get_type_hints(source)


def return_hint(factory: Callable[..., Any]) -> Any:
    try:
        hints = get_type_hints(_hint_source(factory))
    except Exception:  # noqa: BLE001
        return None
    return hints.get("return")


def injectable_parameters(factory: Any) -> list[InjectableParameter]:
    """Parameters of *factory* in declaration order, excluding *args/**kwargs."""
    hints = type_hints(factory)
    sig = inspect.signature(factory)
    params: list[InjectableParameter] = []
    for name, param in sig.parameters.items():
        if param.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
            continue
        params.append(
            InjectableParameter(
                name=name,
                kind=param.kind,
                hint=hints.get(name),
                default=param.default,
            )
        )
    return params
