from __future__ import annotations

from commands.context import CommandContext
from commands.schemas import command

MAX_REPEAT = 10


@command(
    "echo",
    aliases=("say",),
    usage="[-u] [-n <count>] <text...>",
    description="Repeat text back to the sender",
    min_args=1,
    flags=("u", "n:"),
    permissions=("framework.echo",),
)
def echo(context: CommandContext) -> None:
    text = " ".join(context.args)
    if context.has_flag("u"):
        text = text.upper()

    raw_count = context.flag_value("n", "1") or "1"
    try:
        count = int(raw_count)
    except ValueError:
        context.reply(f"Count must be a number, got '{raw_count}'.")
        return
    count = max(1, min(count, MAX_REPEAT))

    for _ in range(count):
        context.reply(text)
