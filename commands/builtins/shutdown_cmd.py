from __future__ import annotations

from commands.schemas import command


class ShutdownCommand:
    def __init__(self) -> None:
        self.requested = False

    @command(
        "shutdown",
        aliases=("stop",),
        description="Stop the command shell",
        max_args=0,
        permissions=("framework.admin",),
    )
    def shutdown(self) -> None:
        self.requested = True
