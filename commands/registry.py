"""Declarative command registry."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterator

from commands.descriptor import CommandDefinitionError, CommandDescriptor
from commands.discovery import DeclaredHandler, HandlerSource, ParameterShape
from config.defaults import DEFAULT_NAMESPACE
from host.command_table import CommandTable, Executor


@dataclass(frozen=True)
class RegisteredCommand:
    descriptor: CommandDescriptor
    handler: Callable[..., object]
    shape: ParameterShape
    origin: str = ""


class CommandRegistry:
    """Owns descriptors paired with their handlers.

    No identifier (name or alias) is shared between two registered commands. A
    handler whose identifiers collide with an earlier one is skipped entirely.
    """

    def __init__(self, namespace: str = DEFAULT_NAMESPACE, logger: logging.Logger | None = None) -> None:
        self._namespace = namespace
        self._logger = logger or logging.getLogger(__name__)
        self._commands: dict[str, RegisteredCommand] = {}
        self._built = False

    @property
    def namespace(self) -> str:
        return self._namespace

    @property
    def built(self) -> bool:
        return self._built

    def register(self, source: HandlerSource) -> "CommandRegistry":
        for declared in source.handlers():
            self._register_one(declared)
        return self

    def _register_one(self, declared: DeclaredHandler) -> bool:
        try:
            descriptor = CommandDescriptor(declared.spec)
        except CommandDefinitionError as exc:
            self._logger.error("Invalid command definition in %s, skipped: %s", declared.origin, exc)
            return False

        duplicate = self._find_collision(descriptor)
        if duplicate is not None:
            self._logger.warning(
                "A duplicate command identifier was found and will not be registered: %s (%s)",
                duplicate,
                declared.origin,
            )
            return False

        self._commands[descriptor.name] = RegisteredCommand(
            descriptor=descriptor,
            handler=declared.handler,
            shape=declared.shape,
            origin=declared.origin,
        )
        for identifier in sorted(descriptor.identifiers):
            if identifier != identifier.lower():
                # Incoming names are lower-cased before lookup, so this one never matches.
                self._logger.warning(
                    "Command identifier %s of %s contains upper-case letters and cannot be dispatched",
                    identifier,
                    declared.origin,
                )
        self._logger.debug("Registered command: %s", descriptor.name)
        return True

    def _find_collision(self, descriptor: CommandDescriptor) -> str | None:
        for registered in self._commands.values():
            for identifier in registered.descriptor.identifiers:
                if descriptor.identify(identifier):
                    return identifier
        return None

    def build(self, table: CommandTable, executor: Executor) -> list[str]:
        """Bind handler shapes and export every live identifier to the host table."""
        exported: list[str] = []
        for name in list(self._commands):
            registered = self._commands[name]
            if registered.shape is ParameterShape.INVALID:
                self._logger.error(
                    "Command methods may take no arguments or a single CommandContext; "
                    "%s (%s) will not be available",
                    name,
                    registered.origin,
                )
                del self._commands[name]
                continue
            if registered.shape is ParameterShape.CONTEXT and not registered.descriptor.send_context:
                registered.descriptor.mark_send_context()

            for identifier in sorted(registered.descriptor.identifiers):
                table.register(self._namespace, identifier, executor)
                exported.append(identifier)

        self._built = True
        self._logger.debug("Exported %d identifiers for %d commands", len(exported), len(self._commands))
        return exported

    def get(self, token: str) -> RegisteredCommand | None:
        for registered in self._commands.values():
            if registered.descriptor.identify(token):
                return registered
        return None

    def descriptors(self) -> list[CommandDescriptor]:
        return [registered.descriptor for registered in self._commands.values()]

    def __iter__(self) -> Iterator[RegisteredCommand]:
        return iter(list(self._commands.values()))

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __len__(self) -> int:
        return len(self._commands)
