from __future__ import annotations

from commands.context import CommandContext
from commands.schemas import command


@command(
    "whoami",
    aliases=("me",),
    usage="[-p]",
    description="Show who is issuing commands",
    max_args=0,
    flags=("p",),
)
def whoami(context: CommandContext) -> None:
    sender = context.sender
    role = "operator" if sender.is_operator else sender.kind.value
    context.reply(f"{sender.name} ({role})")
    if context.has_flag("p"):
        permissions = sorted(sender.effective_permissions())
        context.reply("Permissions: " + (", ".join(permissions) if permissions else "none"))
