from __future__ import annotations

import unittest

from commands.descriptor import CommandDefinitionError, CommandDescriptor
from commands.schemas import CommandSpec


class CommandDescriptorTests(unittest.TestCase):
    def test_identifiers_include_name_and_aliases(self) -> None:
        descriptor = CommandDescriptor(CommandSpec(name="teleport", aliases=("tp", "warp")))
        self.assertEqual(descriptor.identifiers, frozenset({"teleport", "tp", "warp"}))
        for identifier in ("teleport", "tp", "warp"):
            self.assertTrue(descriptor.identify(identifier))
        self.assertFalse(descriptor.identify("TP"))

    def test_missing_usage_and_description_fall_back(self) -> None:
        descriptor = CommandDescriptor(CommandSpec(name="spawn"))
        self.assertEqual(descriptor.usage, "No usage provided for 'spawn'")
        self.assertEqual(descriptor.description, "No description provided for 'spawn'")

    def test_usage_is_prefixed_with_command_name(self) -> None:
        descriptor = CommandDescriptor(CommandSpec(name="give", usage="<player> <item>", description="Give items"))
        self.assertEqual(descriptor.usage, "/give <player> <item>")
        self.assertEqual(descriptor.description, "Give items")

    def test_flag_tokens_with_colon_require_value(self) -> None:
        descriptor = CommandDescriptor(CommandSpec(name="build", flags=("v:", "f", "-q")))
        self.assertEqual(dict(descriptor.flags), {"v": True, "f": False, "q": False})
        self.assertTrue(descriptor.supports_flag("v"))
        self.assertTrue(descriptor.flag_requires_value("v"))
        self.assertFalse(descriptor.flag_requires_value("f"))
        self.assertFalse(descriptor.supports_flag("x"))
        self.assertFalse(descriptor.flag_requires_value("x"))

    def test_empty_permissions_allow_anything(self) -> None:
        descriptor = CommandDescriptor(CommandSpec(name="open"))
        self.assertTrue(descriptor.has_permission("anything.at.all"))

    def test_permissions_match_exactly(self) -> None:
        descriptor = CommandDescriptor(CommandSpec(name="ban", permissions=("mod.ban",)))
        self.assertTrue(descriptor.has_permission("mod.ban"))
        self.assertFalse(descriptor.has_permission("mod"))
        self.assertFalse(descriptor.has_permission("mod.ban.temp"))

    def test_invalid_bounds_are_rejected(self) -> None:
        with self.assertRaises(CommandDefinitionError):
            CommandDescriptor(CommandSpec(name="bad", min_args=-1))
        with self.assertRaises(CommandDefinitionError):
            CommandDescriptor(CommandSpec(name="bad", min_args=2, max_args=1))
        unbounded = CommandDescriptor(CommandSpec(name="ok", min_args=3, max_args=-1))
        self.assertEqual(unbounded.max_args, -1)

    def test_blank_name_and_empty_flag_are_rejected(self) -> None:
        with self.assertRaises(CommandDefinitionError):
            CommandDescriptor(CommandSpec(name="  "))
        with self.assertRaises(CommandDefinitionError):
            CommandDescriptor(CommandSpec(name="x", flags=(":",)))

    def test_send_context_is_set_by_mark(self) -> None:
        descriptor = CommandDescriptor(CommandSpec(name="ctx"))
        self.assertFalse(descriptor.send_context)
        descriptor.mark_send_context()
        self.assertTrue(descriptor.send_context)

    def test_rejection_messages_carry_usage(self) -> None:
        descriptor = CommandDescriptor(CommandSpec(name="give", usage="<player>"))
        self.assertEqual(descriptor.player_only_message(), ("You must be a player to use this command.",))
        self.assertEqual(descriptor.no_permission_message(), ("You do not have permission to use this command.",))
        self.assertEqual(descriptor.too_few_arguments_message(), ("Too few arguments.", "Usage: /give <player>"))
        self.assertEqual(descriptor.too_many_arguments_message(), ("Too many arguments.", "Usage: /give <player>"))
        self.assertEqual(
            descriptor.unsupported_flag_message("-z"),
            ("Flag '-z' is not supported on this command.", "Usage: /give <player>"),
        )
        self.assertEqual(
            descriptor.missing_flag_value_message("-n"),
            ("Flag '-n' requires a value after it.", "Usage: /give <player>"),
        )

    def test_help_text_lists_details(self) -> None:
        descriptor = CommandDescriptor(
            CommandSpec(name="echo", aliases=("say",), usage="<text>", flags=("n:", "u"), permissions=("x.echo",))
        )
        text = descriptor.help_text()
        self.assertIn("Command: echo", text)
        self.assertIn("Aliases: say", text)
        self.assertIn("Flags: -n <value>, -u", text)
        self.assertIn("Permissions: x.echo", text)


if __name__ == "__main__":
    unittest.main()
