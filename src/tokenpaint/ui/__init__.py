"""UI package holding the command values exchanged with the editing surface."""

from .commands import BUILTIN_COMMANDS, Command, CommandType, UnknownCommandError

__all__ = [
    "BUILTIN_COMMANDS",
    "Command",
    "CommandType",
    "UnknownCommandError",
]
