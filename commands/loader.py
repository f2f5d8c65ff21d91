"""Load builtin command handlers into a registry."""

from __future__ import annotations

from commands.builtins import BUILTIN_MODULES
from commands.builtins.help_cmd import HelpCommands
from commands.builtins.shutdown_cmd import ShutdownCommand
from commands.discovery import ModuleHandlerSource
from commands.registry import CommandRegistry


def load_builtin_commands(registry: CommandRegistry, shutdown: ShutdownCommand | None = None) -> CommandRegistry:
    registry.register(ModuleHandlerSource(HelpCommands(registry)))
    for module in BUILTIN_MODULES:
        registry.register(ModuleHandlerSource(module))
    if shutdown is not None:
        registry.register(ModuleHandlerSource(shutdown))
    return registry
