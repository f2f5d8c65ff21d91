"""Unified execution runtime for registered commands."""

from __future__ import annotations

from typing import Callable

from commands.context import CommandContext
from commands.results import InvocationResult

CommandHandler = Callable[..., object]


class CommandRuntime:
    """Calls a handler and turns any raised fault into a failed result."""

    def invoke(self, handler: CommandHandler, context: CommandContext | None) -> InvocationResult:
        try:
            if context is None:
                handler()
            else:
                handler(context)
        except Exception as exc:  # noqa: BLE001
            return InvocationResult(ok=False, error=exc)
        return InvocationResult(ok=True)
