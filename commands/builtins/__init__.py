"""Built-in command modules."""

from commands.builtins import (
    echo_cmd,
    ping_cmd,
    whoami_cmd,
)

# Modules whose handlers are plain module-level functions.
BUILTIN_MODULES = (
    ping_cmd,
    whoami_cmd,
    echo_cmd,
)
