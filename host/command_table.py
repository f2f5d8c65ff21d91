"""Host-side command table that routes raw input lines to executors."""

from __future__ import annotations

import logging
import shlex
from typing import Callable, Protocol, Sequence

from commands.results import CODE_BAD_INPUT, CODE_UNKNOWN_COMMAND, DispatchResult, result_error
from commands.senders import CommandSender
from config.defaults import MSG_UNKNOWN_COMMAND

Executor = Callable[[CommandSender, str, Sequence[str]], DispatchResult]

NAMESPACE_SEPARATOR = ":"
COMMAND_PREFIX = "/"


class CommandTable(Protocol):
    def register(self, namespace: str, identifier: str, executor: Executor) -> bool: ...


class InMemoryCommandTable:
    """Label table in the style of a game server's command map.

    Every identifier is reachable as ``namespace:identifier``. The plain label is
    kept by whichever namespace claimed it first.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._labels: dict[str, tuple[str, Executor]] = {}
        self._logger = logger or logging.getLogger(__name__)

    def register(self, namespace: str, identifier: str, executor: Executor) -> bool:
        namespace = namespace.strip().lower()
        label = identifier.strip().lower()
        entry = (identifier, executor)
        self._labels[f"{namespace}{NAMESPACE_SEPARATOR}{label}"] = entry

        existing = self._labels.get(label)
        if existing is not None and existing != entry:
            self._logger.debug("label %s already claimed, only %s:%s is available", label, namespace, label)
            return False
        self._labels[label] = entry
        return True

    def resolve(self, label: str) -> tuple[str, Executor] | None:
        return self._labels.get(label.strip().lower())

    def labels(self) -> list[str]:
        return sorted(self._labels)

    def dispatch_line(self, sender: CommandSender, line: str) -> DispatchResult:
        text = line.strip()
        if text.startswith(COMMAND_PREFIX):
            text = text[len(COMMAND_PREFIX):]
        try:
            tokens = shlex.split(text)
        except ValueError as exc:
            sender.send_message(f"Could not parse command: {exc}")
            return result_error(text, CODE_BAD_INPUT, str(exc))
        if not tokens:
            return result_error("", CODE_BAD_INPUT, "empty command")

        label, args = tokens[0], tokens[1:]
        resolved = self.resolve(label)
        if resolved is None:
            sender.send_message(MSG_UNKNOWN_COMMAND)
            return result_error(label, CODE_UNKNOWN_COMMAND, MSG_UNKNOWN_COMMAND)

        identifier, executor = resolved
        return executor(sender, identifier, args)

    def __contains__(self, label: object) -> bool:
        return isinstance(label, str) and label.strip().lower() in self._labels

    def __len__(self) -> int:
        return len(self._labels)
