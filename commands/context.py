"""Execution context handed to handlers that ask for it."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from commands.senders import CommandSender


@dataclass(frozen=True)
class CommandContext:
    sender: CommandSender
    args: tuple[str, ...] = ()
    flags: Mapping[str, str | None] = field(default_factory=dict)

    def arg(self, index: int, default: str | None = None) -> str | None:
        if 0 <= index < len(self.args):
            return self.args[index]
        return default

    def has_flag(self, flag: str) -> bool:
        return flag in self.flags

    def flag_value(self, flag: str, default: str | None = None) -> str | None:
        value = self.flags.get(flag)
        return default if value is None else value

    def reply(self, text: str) -> None:
        self.sender.send_message(text)
