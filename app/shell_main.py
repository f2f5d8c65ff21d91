"""Interactive command shell entrypoint."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from app.prompting import choose_sender_kind, read_command_line
from commands.builtins.shutdown_cmd import ShutdownCommand
from commands.dispatcher import CommandDispatcher
from commands.loader import load_builtin_commands
from commands.registry import CommandRegistry
from commands.senders import CommandSender, SenderKind, make_sender
from common.reporting import make_reporter, show_table
from config.defaults import DEFAULT_NAMESPACE, DEFAULT_PLAYER_NAME, LOG_FORMAT, SHELL_EXIT_WORDS
from host.command_table import InMemoryCommandTable

SENDER_CHOICES = [kind.value for kind in SenderKind]


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Interactive shell for registered commands")
    parser.add_argument("--namespace", default=DEFAULT_NAMESPACE, help="Namespace prefix for exported command labels")
    parser.add_argument("--sender", choices=SENDER_CHOICES, default=None, help="Sender kind (asked interactively when omitted)")
    parser.add_argument("--player-name", default=DEFAULT_PLAYER_NAME, help="Name used for player senders")
    parser.add_argument("--permission", action="append", default=[], help="Permission granted to the sender (repeatable)")
    parser.add_argument("--op", action="store_true", help="Run as an operator")
    parser.add_argument("--plain", action="store_true", help="Disable rich output")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def build_sender(args: argparse.Namespace, reporter) -> CommandSender:
    kind = SenderKind(args.sender) if args.sender else choose_sender_kind()
    name = args.player_name if kind is SenderKind.PLAYER else kind.value.upper()
    return make_sender(kind, name, operator=args.op, permissions=args.permission, reporter=reporter)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)
    reporter, paneler, table_builder = make_reporter(use_rich=not args.plain)

    shutdown = ShutdownCommand()
    registry = CommandRegistry(namespace=args.namespace)
    load_builtin_commands(registry, shutdown=shutdown)
    dispatcher = CommandDispatcher(registry)
    table = InMemoryCommandTable()
    registry.build(table, dispatcher.execute)

    show_table(
        reporter,
        paneler,
        table_builder,
        title="Registered commands",
        columns=["Command", "Aliases", "Usage"],
        rows=[
            [descriptor.name, ", ".join(sorted(descriptor.aliases)), descriptor.usage]
            for descriptor in sorted(registry.descriptors(), key=lambda d: d.name)
        ],
    )

    sender = build_sender(args, reporter)
    labels = table.labels()
    while not shutdown.requested:
        line = read_command_line(sender.name, labels)
        if not line:
            continue
        if line.lower() in SHELL_EXIT_WORDS:
            break
        result = table.dispatch_line(sender, line)
        logging.getLogger(__name__).debug("%s -> %s", result.command, result.code)
    return 0


def run() -> int:
    try:
        return main()
    except KeyboardInterrupt:
        print("\n[shell] interrupted")
    return 0


if __name__ == "__main__":
    raise SystemExit(run())
