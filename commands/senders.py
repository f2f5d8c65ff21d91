"""Command sender abstraction."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Iterable

Reporter = Callable[[str], None]


class SenderKind(str, Enum):
    PLAYER = "player"
    CONSOLE = "console"
    REMOTE_CONSOLE = "remote"
    BLOCK = "block"


# Non-interactive senders that bypass permission checks.
TRUSTED_KINDS = frozenset({SenderKind.CONSOLE, SenderKind.REMOTE_CONSOLE, SenderKind.BLOCK})


class CommandSender:
    """Whoever issued a command.

    Every message sent is kept in `messages`; a reporter, when given, also
    receives it for display.
    """

    kind: SenderKind = SenderKind.PLAYER

    def __init__(
        self,
        name: str,
        *,
        operator: bool = False,
        permissions: Iterable[str] = (),
        reporter: Reporter | None = None,
    ) -> None:
        self.name = name
        self.operator = operator
        self._permissions = set(permissions)
        self._reporter = reporter
        self.messages: list[str] = []

    @property
    def is_operator(self) -> bool:
        return self.operator

    @property
    def is_player(self) -> bool:
        return self.kind is SenderKind.PLAYER

    @property
    def is_trusted_console(self) -> bool:
        return self.kind in TRUSTED_KINDS

    def effective_permissions(self) -> frozenset[str]:
        return frozenset(self._permissions)

    def grant(self, permission: str) -> None:
        self._permissions.add(permission)

    def revoke(self, permission: str) -> None:
        self._permissions.discard(permission)

    def send_message(self, text: str) -> None:
        self.messages.append(text)
        if self._reporter is not None:
            self._reporter(text)

    def send_lines(self, lines: Iterable[str]) -> None:
        for line in lines:
            self.send_message(line)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, operator={self.operator})"


class PlayerSender(CommandSender):
    kind = SenderKind.PLAYER


class ConsoleSender(CommandSender):
    kind = SenderKind.CONSOLE

    def __init__(self, name: str = "CONSOLE", *, reporter: Reporter | None = None) -> None:
        super().__init__(name, reporter=reporter)


class RemoteConsoleSender(CommandSender):
    kind = SenderKind.REMOTE_CONSOLE

    def __init__(self, name: str = "Rcon", *, reporter: Reporter | None = None) -> None:
        super().__init__(name, reporter=reporter)


class BlockSender(CommandSender):
    """Automated sender, e.g. a command block at a fixed location."""

    kind = SenderKind.BLOCK

    def __init__(self, name: str = "@", *, reporter: Reporter | None = None) -> None:
        super().__init__(name, reporter=reporter)


def make_sender(
    kind: SenderKind,
    name: str,
    *,
    operator: bool = False,
    permissions: Iterable[str] = (),
    reporter: Reporter | None = None,
) -> CommandSender:
    if kind is SenderKind.PLAYER:
        return PlayerSender(name, operator=operator, permissions=permissions, reporter=reporter)
    if kind is SenderKind.REMOTE_CONSOLE:
        return RemoteConsoleSender(name, reporter=reporter)
    if kind is SenderKind.BLOCK:
        return BlockSender(name, reporter=reporter)
    return ConsoleSender(name, reporter=reporter)
