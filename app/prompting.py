"""InquirerPy prompts for the command shell."""

from __future__ import annotations

from typing import Iterable

from InquirerPy import inquirer

from commands.senders import SenderKind
from config.defaults import SHELL_PROMPT
from host.command_table import COMMAND_PREFIX


def label_completions(labels: Iterable[str]) -> dict[str, None]:
    # Nested-completer form: only the first word of the line is completed.
    return {f"{COMMAND_PREFIX}{label}": None for label in labels}


def choose_sender_kind(default: SenderKind = SenderKind.PLAYER) -> SenderKind:
    value = inquirer.select(
        message="Run commands as",
        choices=[kind.value for kind in SenderKind],
        default=default.value,
    ).execute()
    return SenderKind(value)


def read_command_line(sender_name: str, labels: Iterable[str]) -> str:
    line = inquirer.text(
        message=f"{SHELL_PROMPT} ({sender_name})>",
        completer=label_completions(labels),
    ).execute()
    return str(line or "").strip()
