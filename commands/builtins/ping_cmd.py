from __future__ import annotations

from commands.context import CommandContext
from commands.schemas import command


@command(
    "ping",
    description="Dispatcher health check",
    max_args=0,
)
def ping(context: CommandContext) -> None:
    context.reply("pong")
