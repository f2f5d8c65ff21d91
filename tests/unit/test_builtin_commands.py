from __future__ import annotations

import logging
import unittest

from commands.builtins.shutdown_cmd import ShutdownCommand
from commands.dispatcher import CommandDispatcher
from commands.loader import load_builtin_commands
from commands.registry import CommandRegistry
from commands.results import CODE_NO_PERMISSION, CODE_OK, CODE_TOO_FEW_ARGUMENTS
from commands.senders import ConsoleSender, PlayerSender
from host.command_table import InMemoryCommandTable


class BuiltinCommandTests(unittest.TestCase):
    def setUp(self) -> None:
        self.shutdown = ShutdownCommand()
        self.registry = CommandRegistry(namespace="framework", logger=logging.getLogger("tests.builtins"))
        load_builtin_commands(self.registry, shutdown=self.shutdown)
        self.dispatcher = CommandDispatcher(self.registry)
        self.table = InMemoryCommandTable()
        self.registry.build(self.table, self.dispatcher.execute)
        self.player = PlayerSender("alex")

    def test_all_builtins_are_registered(self) -> None:
        names = sorted(descriptor.name for descriptor in self.registry.descriptors())
        self.assertEqual(names, ["echo", "help", "ping", "shutdown", "whoami"])
        for label in ("?", "say", "me", "stop", "framework:ping"):
            self.assertIn(label, self.table)

    def test_ping(self) -> None:
        result = self.table.dispatch_line(self.player, "/ping")
        self.assertEqual(result.code, CODE_OK)
        self.assertEqual(self.player.messages, ["pong"])

    def test_help_lists_commands(self) -> None:
        self.table.dispatch_line(self.player, "/help")
        self.assertEqual(self.player.messages[0], "Available commands:")
        self.assertIn("- ping: Dispatcher health check", self.player.messages)

    def test_help_for_single_command(self) -> None:
        self.table.dispatch_line(self.player, "/? SAY")
        self.assertEqual(self.player.messages[0], "Command: echo")
        self.assertIn("Usage: /echo [-u] [-n <count>] <text...>", self.player.messages)

    def test_echo_requires_permission_for_players(self) -> None:
        result = self.table.dispatch_line(self.player, "/echo hi")
        self.assertEqual(result.code, CODE_NO_PERMISSION)

        self.player.grant("framework.echo")
        result = self.table.dispatch_line(self.player, '/say -u -n 2 "hi there"')
        self.assertEqual(result.code, CODE_OK)
        self.assertEqual(self.player.messages[-2:], ["HI THERE", "HI THERE"])

    def test_echo_needs_text(self) -> None:
        console = ConsoleSender()
        result = self.table.dispatch_line(console, "/echo -u")
        self.assertEqual(result.code, CODE_TOO_FEW_ARGUMENTS)

    def test_echo_rejects_non_numeric_count(self) -> None:
        console = ConsoleSender()
        self.table.dispatch_line(console, "/echo -n lots hi")
        self.assertEqual(console.messages, ["Count must be a number, got 'lots'."])

    def test_whoami_lists_permissions(self) -> None:
        self.player.grant("b.perm")
        self.player.grant("a.perm")
        self.table.dispatch_line(self.player, "/me -p")
        self.assertEqual(self.player.messages, ["alex (player)", "Permissions: a.perm, b.perm"])

    def test_shutdown_needs_admin_and_sets_flag(self) -> None:
        result = self.table.dispatch_line(self.player, "/stop")
        self.assertEqual(result.code, CODE_NO_PERMISSION)
        self.assertFalse(self.shutdown.requested)

        self.table.dispatch_line(ConsoleSender(), "/shutdown")
        self.assertTrue(self.shutdown.requested)


if __name__ == "__main__":
    unittest.main()
