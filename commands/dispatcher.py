"""Routes incoming commands through validation to their handlers."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from commands.context import CommandContext
from commands.descriptor import CommandDescriptor
from commands.registry import CommandRegistry
from commands.results import (
    CODE_INTERNAL_ERROR,
    CODE_MISSING_FLAG_VALUE,
    CODE_NO_PERMISSION,
    CODE_PLAYER_ONLY,
    CODE_TOO_FEW_ARGUMENTS,
    CODE_TOO_MANY_ARGUMENTS,
    CODE_UNKNOWN_COMMAND,
    CODE_UNKNOWN_FLAG,
    DispatchResult,
    result_error,
    result_ok,
)
from commands.runtime import CommandRuntime
from commands.senders import CommandSender
from config.defaults import FLAG_PREFIX, UNBOUNDED_ARGS


@dataclass(frozen=True)
class SplitArguments:
    args: tuple[str, ...] = ()
    flags: dict[str, str | None] = field(default_factory=dict)
    error_code: str | None = None
    error_flag: str | None = None

    @property
    def ok(self) -> bool:
        return self.error_code is None


def is_flag_token(token: str) -> bool:
    return token.startswith(FLAG_PREFIX) and token != FLAG_PREFIX


def split_flags(descriptor: CommandDescriptor, raw_args: Sequence[str]) -> SplitArguments:
    """Separate flags from positional arguments, left to right.

    A value-requiring flag takes the following token verbatim, even when that
    token itself looks like a flag. Stops at the first unsupported flag or
    missing value.
    """
    args: list[str] = []
    flags: dict[str, str | None] = {}
    index = 0
    while index < len(raw_args):
        token = raw_args[index]
        if not is_flag_token(token):
            args.append(token)
            index += 1
            continue

        flag = token[len(FLAG_PREFIX):]
        if not descriptor.supports_flag(flag):
            return SplitArguments(error_code=CODE_UNKNOWN_FLAG, error_flag=token)

        if descriptor.flag_requires_value(flag):
            if index + 1 >= len(raw_args):
                return SplitArguments(error_code=CODE_MISSING_FLAG_VALUE, error_flag=token)
            flags[flag] = raw_args[index + 1]
            index += 2
        else:
            flags[flag] = None
            index += 1
    return SplitArguments(args=tuple(args), flags=flags)


class CommandDispatcher:
    def __init__(
        self,
        registry: CommandRegistry,
        logger: logging.Logger | None = None,
        runtime: CommandRuntime | None = None,
    ) -> None:
        self._registry = registry
        self._logger = logger or logging.getLogger(__name__)
        self._runtime = runtime or CommandRuntime()

    @property
    def registry(self) -> CommandRegistry:
        return self._registry

    def execute(self, sender: CommandSender, command_name: str, raw_args: Sequence[str]) -> DispatchResult:
        token = command_name.lower()
        registered = self._registry.get(token)
        if registered is None:
            return result_error(token, CODE_UNKNOWN_COMMAND, f"Unknown command: {command_name}")

        descriptor = registered.descriptor
        name = descriptor.name

        if descriptor.player_only and not sender.is_player:
            return self._reject(sender, name, CODE_PLAYER_ONLY, descriptor.player_only_message())

        if not self.is_permitted(sender, descriptor):
            return self._reject(sender, name, CODE_NO_PERMISSION, descriptor.no_permission_message())

        split = split_flags(descriptor, list(raw_args))
        if split.error_code == CODE_UNKNOWN_FLAG:
            return self._reject(sender, name, split.error_code, descriptor.unsupported_flag_message(split.error_flag or ""))
        if split.error_code == CODE_MISSING_FLAG_VALUE:
            return self._reject(sender, name, split.error_code, descriptor.missing_flag_value_message(split.error_flag or ""))

        count = len(split.args)
        if count < descriptor.min_args:
            return self._reject(sender, name, CODE_TOO_FEW_ARGUMENTS, descriptor.too_few_arguments_message())
        if descriptor.max_args != UNBOUNDED_ARGS and count > descriptor.max_args:
            return self._reject(sender, name, CODE_TOO_MANY_ARGUMENTS, descriptor.too_many_arguments_message())

        context = CommandContext(sender=sender, args=split.args, flags=split.flags) if descriptor.send_context else None
        outcome = self._runtime.invoke(registered.handler, context)
        if not outcome.ok:
            self._logger.error(
                "Could not invoke method for command: %s (%s)",
                name,
                outcome.cause,
                exc_info=outcome.error,
            )
            return result_error(name, CODE_INTERNAL_ERROR, outcome.cause)
        return result_ok(name)

    @staticmethod
    def is_permitted(sender: CommandSender, descriptor: CommandDescriptor) -> bool:
        if sender.is_operator or sender.is_trusted_console:
            return True
        if not descriptor.permissions:
            return True
        return any(descriptor.has_permission(permission) for permission in sender.effective_permissions())

    def _reject(self, sender: CommandSender, name: str, code: str, lines: tuple[str, ...]) -> DispatchResult:
        sender.send_lines(lines)
        self._logger.debug("%s rejected for %s: %s", name, sender.name, code)
        return result_error(name, code, "\n".join(lines))
