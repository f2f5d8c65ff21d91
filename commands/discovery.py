"""Handler discovery: where registries find declared command handlers."""

from __future__ import annotations

import inspect
import typing
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterable, Iterator, Protocol

from commands.context import CommandContext
from commands.schemas import CommandSpec, spec_of


class ParameterShape(str, Enum):
    NONE = "none"
    CONTEXT = "context"
    INVALID = "invalid"


@dataclass(frozen=True)
class DeclaredHandler:
    spec: CommandSpec
    handler: Callable[..., object]
    shape: ParameterShape
    origin: str = ""


class HandlerSource(Protocol):
    def handlers(self) -> Iterable[DeclaredHandler]: ...


def inspect_parameter_shape(handler: Callable[..., object]) -> ParameterShape:
    """Classify a handler by the parameters it declares.

    No parameters means the handler is called bare. A single positional parameter
    annotated with CommandContext means it receives the execution context.
    Anything else cannot be invoked by the dispatcher.
    """
    try:
        signature = inspect.signature(handler)
    except (TypeError, ValueError):
        return ParameterShape.INVALID

    params = list(signature.parameters.values())
    if not params:
        return ParameterShape.NONE
    if len(params) != 1:
        return ParameterShape.INVALID

    param = params[0]
    if param.kind not in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD):
        return ParameterShape.INVALID
    if _is_context_annotation(_resolve_annotation(handler, param)):
        return ParameterShape.CONTEXT
    return ParameterShape.INVALID


def _resolve_annotation(handler: Callable[..., object], param: inspect.Parameter) -> Any:
    try:
        hints = typing.get_type_hints(handler)
    except (NameError, TypeError, AttributeError):
        hints = {}
    return hints.get(param.name, param.annotation)


def _is_context_annotation(annotation: Any) -> bool:
    # The dispatcher only ever builds a plain CommandContext.
    return annotation is CommandContext


def _origin_of(handler: Callable[..., object]) -> str:
    module = getattr(handler, "__module__", None) or "?"
    qualname = getattr(handler, "__qualname__", None) or repr(handler)
    return f"{module}.{qualname}"


def declare(spec: CommandSpec, handler: Callable[..., object]) -> DeclaredHandler:
    return DeclaredHandler(
        spec=spec,
        handler=handler,
        shape=inspect_parameter_shape(handler),
        origin=_origin_of(handler),
    )


class ModuleHandlerSource:
    """Collects functions marked with @command from a module or object.

    Pass a module for the handlers it defines (imported ones are skipped), or
    an instance so that marked methods come back bound. Members are visited in
    name order.
    """

    def __init__(self, target: object) -> None:
        self._target = target

    def handlers(self) -> Iterator[DeclaredHandler]:
        module_name = self._target.__name__ if inspect.ismodule(self._target) else None
        for _name, member in inspect.getmembers(self._target, callable):
            spec = spec_of(member)
            if spec is None:
                continue
            if module_name is not None and getattr(member, "__module__", None) != module_name:
                # Imported from another module.
                continue
            yield declare(spec, member)

    def __repr__(self) -> str:
        return f"ModuleHandlerSource({getattr(self._target, '__name__', self._target)!r})"


class HandlerTable:
    """Explicit registration table, for handlers that are not decorated."""

    def __init__(self) -> None:
        self._entries: list[DeclaredHandler] = []

    def add(self, spec: CommandSpec, handler: Callable[..., object]) -> "HandlerTable":
        self._entries.append(declare(spec, handler))
        return self

    def handlers(self) -> Iterator[DeclaredHandler]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)
