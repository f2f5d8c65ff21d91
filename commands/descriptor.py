"""Normalized command definition built from a raw CommandSpec."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from commands.schemas import CommandSpec
from config.defaults import (
    FLAG_PREFIX,
    FLAG_VALUE_MARKER,
    MSG_MISSING_FLAG_VALUE,
    MSG_NO_DESCRIPTION,
    MSG_NO_PERMISSION,
    MSG_NO_USAGE,
    MSG_PLAYER_ONLY,
    MSG_TOO_FEW_ARGUMENTS,
    MSG_TOO_MANY_ARGUMENTS,
    MSG_UNSUPPORTED_FLAG,
    MSG_USAGE,
    UNBOUNDED_ARGS,
)


class CommandDefinitionError(ValueError):
    def __init__(self, name: str, message: str) -> None:
        super().__init__(f"{name or '<unnamed>'}: {message}")
        self.name = name
        self.message = message


class CommandDescriptor:
    """Immutable view of one command's metadata.

    Only `send_context` changes after construction, and only once, when the
    registry inspects the bound handler during build.
    """

    __slots__ = (
        "_name",
        "_aliases",
        "_identifiers",
        "_usage",
        "_description",
        "_player_only",
        "_min_args",
        "_max_args",
        "_flags",
        "_permissions",
        "_send_context",
    )

    def __init__(self, spec: CommandSpec) -> None:
        name = spec.name.strip()
        if name == "":
            raise CommandDefinitionError(spec.name, "command name must be non-empty")
        if spec.min_args < 0:
            raise CommandDefinitionError(name, f"min_args must be >= 0, got {spec.min_args}")
        if spec.max_args != UNBOUNDED_ARGS and spec.max_args < spec.min_args:
            raise CommandDefinitionError(
                name, f"max_args must be -1 or >= min_args ({spec.min_args}), got {spec.max_args}"
            )

        self._name = name
        self._aliases = frozenset(alias.strip() for alias in spec.aliases if alias.strip())
        self._identifiers = frozenset({name}) | self._aliases

        usage = spec.usage.strip()
        self._usage = f"/{name} {usage}" if usage else MSG_NO_USAGE.format(name=name)
        description = spec.description.strip()
        self._description = description or MSG_NO_DESCRIPTION.format(name=name)

        self._player_only = bool(spec.player_only)
        self._min_args = spec.min_args
        self._max_args = spec.max_args
        self._flags: Mapping[str, bool] = MappingProxyType(_parse_flags(name, spec.flags))
        self._permissions = frozenset(spec.permissions)
        self._send_context = False

    @property
    def name(self) -> str:
        return self._name

    @property
    def aliases(self) -> frozenset[str]:
        return self._aliases

    @property
    def identifiers(self) -> frozenset[str]:
        return self._identifiers

    @property
    def usage(self) -> str:
        return self._usage

    @property
    def description(self) -> str:
        return self._description

    @property
    def player_only(self) -> bool:
        return self._player_only

    @property
    def min_args(self) -> int:
        return self._min_args

    @property
    def max_args(self) -> int:
        return self._max_args

    @property
    def flags(self) -> Mapping[str, bool]:
        return self._flags

    @property
    def permissions(self) -> frozenset[str]:
        return self._permissions

    @property
    def send_context(self) -> bool:
        return self._send_context

    def mark_send_context(self) -> None:
        self._send_context = True

    def identify(self, token: str) -> bool:
        return token in self._identifiers

    def supports_flag(self, flag: str) -> bool:
        return flag in self._flags

    def flag_requires_value(self, flag: str) -> bool:
        return self._flags.get(flag, False)

    def has_permission(self, permission: str) -> bool:
        return not self._permissions or permission in self._permissions

    def player_only_message(self) -> tuple[str, ...]:
        return (MSG_PLAYER_ONLY,)

    def no_permission_message(self) -> tuple[str, ...]:
        return (MSG_NO_PERMISSION,)

    def too_few_arguments_message(self) -> tuple[str, ...]:
        return (MSG_TOO_FEW_ARGUMENTS, *self.usage_message())

    def too_many_arguments_message(self) -> tuple[str, ...]:
        return (MSG_TOO_MANY_ARGUMENTS, *self.usage_message())

    def unsupported_flag_message(self, flag: str) -> tuple[str, ...]:
        return (MSG_UNSUPPORTED_FLAG.format(flag=flag), *self.usage_message())

    def missing_flag_value_message(self, flag: str) -> tuple[str, ...]:
        return (MSG_MISSING_FLAG_VALUE.format(flag=flag), *self.usage_message())

    def usage_message(self) -> tuple[str, ...]:
        return (MSG_USAGE.format(usage=self._usage),)

    def help_text(self) -> str:
        lines = [
            f"Command: {self._name}",
            f"Description: {self._description}",
            f"Usage: {self._usage}",
        ]
        if self._aliases:
            lines.append(f"Aliases: {', '.join(sorted(self._aliases))}")
        if self._flags:
            rendered = []
            for flag in sorted(self._flags):
                rendered.append(f"{FLAG_PREFIX}{flag} <value>" if self._flags[flag] else f"{FLAG_PREFIX}{flag}")
            lines.append(f"Flags: {', '.join(rendered)}")
        if self._permissions:
            lines.append(f"Permissions: {', '.join(sorted(self._permissions))}")
        if self._player_only:
            lines.append("Players only")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"CommandDescriptor(name={self._name!r}, aliases={sorted(self._aliases)!r})"


def _parse_flags(name: str, raw_flags: tuple[str, ...]) -> dict[str, bool]:
    flags: dict[str, bool] = {}
    for raw in raw_flags:
        token = raw.strip()
        if token.startswith(FLAG_PREFIX):
            token = token[len(FLAG_PREFIX):]
        requires_value = token.endswith(FLAG_VALUE_MARKER)
        if requires_value:
            token = token[: -len(FLAG_VALUE_MARKER)]
        if token == "":
            raise CommandDefinitionError(name, f"invalid flag declaration: {raw!r}")
        flags[token] = requires_value
    return flags
