from __future__ import annotations

from commands.context import CommandContext
from commands.registry import CommandRegistry
from commands.schemas import command


class HelpCommands:
    """Help listing bound to one registry."""

    def __init__(self, registry: CommandRegistry) -> None:
        self._registry = registry

    @command(
        "help",
        aliases=("?",),
        usage="[command]",
        description="List commands or show details for one",
        max_args=1,
    )
    def help(self, context: CommandContext) -> None:
        target = context.arg(0)
        if target is not None:
            registered = self._registry.get(target.lower())
            if registered is None:
                context.reply(f"Unknown command: {target}")
                return
            for line in registered.descriptor.help_text().splitlines():
                context.reply(line)
            return

        context.reply("Available commands:")
        for descriptor in sorted(self._registry.descriptors(), key=lambda d: d.name):
            context.reply(f"- {descriptor.name}: {descriptor.description}")
        context.reply("Use /help <command> for details.")
