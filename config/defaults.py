"""Project defaults and message text constants."""

DEFAULT_NAMESPACE = "framework"
DEFAULT_PLAYER_NAME = "Steve"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s | %(message)s"

# Value suffix on a raw flag token, e.g. "n:" declares `-n <value>`.
FLAG_VALUE_MARKER = ":"
FLAG_PREFIX = "-"
UNBOUNDED_ARGS = -1

MSG_PLAYER_ONLY = "You must be a player to use this command."
MSG_NO_PERMISSION = "You do not have permission to use this command."
MSG_TOO_FEW_ARGUMENTS = "Too few arguments."
MSG_TOO_MANY_ARGUMENTS = "Too many arguments."
MSG_UNSUPPORTED_FLAG = "Flag '{flag}' is not supported on this command."
MSG_MISSING_FLAG_VALUE = "Flag '{flag}' requires a value after it."
MSG_USAGE = "Usage: {usage}"
MSG_NO_USAGE = "No usage provided for '{name}'"
MSG_NO_DESCRIPTION = "No description provided for '{name}'"
MSG_UNKNOWN_COMMAND = "Unknown command. Type \"/help\" for help."

SHELL_PROMPT = "command"
SHELL_EXIT_WORDS = ("exit", "quit")
