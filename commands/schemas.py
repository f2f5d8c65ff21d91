"""Schema for declarative command registration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, TypeVar

SPEC_ATTRIBUTE = "__command_spec__"

F = TypeVar("F", bound=Callable[..., object])


@dataclass(frozen=True)
class CommandSpec:
    name: str
    aliases: tuple[str, ...] = ()
    usage: str = ""
    description: str = ""
    player_only: bool = False
    min_args: int = 0
    max_args: int = -1
    flags: tuple[str, ...] = ()
    permissions: tuple[str, ...] = ()


def command(
    name: str,
    *,
    aliases: Iterable[str] = (),
    usage: str = "",
    description: str = "",
    player_only: bool = False,
    min_args: int = 0,
    max_args: int = -1,
    flags: Iterable[str] = (),
    permissions: Iterable[str] = (),
) -> Callable[[F], F]:
    """Mark a function as a command handler.

    The function is returned unchanged; the metadata is attached as an attribute
    and picked up later by a handler source.

    Usage:
        @command("give", aliases=("g",), usage="<player> <item>", min_args=2, flags=("n:",))
        def give(context: CommandContext) -> None:
            ...
    """

    spec = CommandSpec(
        name=name,
        aliases=tuple(aliases),
        usage=usage,
        description=description,
        player_only=player_only,
        min_args=min_args,
        max_args=max_args,
        flags=tuple(flags),
        permissions=tuple(permissions),
    )

    def decorator(func: F) -> F:
        setattr(func, SPEC_ATTRIBUTE, spec)
        return func

    return decorator


def spec_of(obj: object) -> CommandSpec | None:
    spec = getattr(obj, SPEC_ATTRIBUTE, None)
    return spec if isinstance(spec, CommandSpec) else None
