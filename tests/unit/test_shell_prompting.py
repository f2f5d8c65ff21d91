from __future__ import annotations

import logging
import unittest

from app.prompting import label_completions
from commands.loader import load_builtin_commands
from commands.registry import CommandRegistry
from host.command_table import InMemoryCommandTable


class LabelCompletionTests(unittest.TestCase):
    def test_labels_get_command_prefix(self) -> None:
        self.assertEqual(
            label_completions(["ping", "framework:ping"]),
            {"/ping": None, "/framework:ping": None},
        )

    def test_completions_cover_exported_table(self) -> None:
        registry = CommandRegistry(namespace="demo", logger=logging.getLogger("tests.prompting"))
        load_builtin_commands(registry)
        table = InMemoryCommandTable()
        registry.build(table, lambda sender, identifier, args: None)

        completions = label_completions(table.labels())
        self.assertIn("/ping", completions)
        self.assertIn("/demo:ping", completions)
        self.assertEqual(len(completions), len(table))


if __name__ == "__main__":
    unittest.main()
