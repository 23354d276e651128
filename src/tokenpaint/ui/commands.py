"""User command values produced by menus, accelerators and other UI elements.

Commands can target the application as a whole or an individual window.
They carry no payload; two commands are equal when their types match.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict


class CommandType(Enum):
    """Commands predefined for the whole system."""

    ABORT = auto()  # remote side closed the connection, etc.
    OPEN = auto()
    EXIT = auto()
    SHELL = auto()
    CUT = auto()
    COPY = auto()
    PASTE = auto()
    CLEAR = auto()  # delete the selection without touching the clipboard
    TILE = auto()
    CASCADE = auto()
    CLOSE_ALL = auto()
    WINDOW_MOVE = auto()
    WINDOW_ZOOM = auto()
    WINDOW_NEXT = auto()
    WINDOW_PREVIOUS = auto()
    WINDOW_CLOSE = auto()


class UnknownCommandError(ValueError):
    """Raised when a command name does not match any :class:`CommandType`."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown command '{name}'")
        self.name = name


@dataclass(slots=True, frozen=True)
class Command:
    """Immutable tagged command value with structural equality."""

    type: CommandType

    def __str__(self) -> str:
        return self.type.name

    @classmethod
    def parse(cls, name: str) -> "Command":
        """Build a command from names like ``"open"``, ``"window-next"`` or ``"CLOSE_ALL"``."""

        key = (name or "").strip().upper().replace("-", "_").replace(" ", "_")
        if key == "QUIT":
            key = "EXIT"
        try:
            return cls(CommandType[key])
        except KeyError:
            raise UnknownCommandError(name) from None


CM_ABORT = Command(CommandType.ABORT)
CM_EXIT = Command(CommandType.EXIT)
CM_QUIT = Command(CommandType.EXIT)
CM_OPEN = Command(CommandType.OPEN)
CM_SHELL = Command(CommandType.SHELL)
CM_CUT = Command(CommandType.CUT)
CM_COPY = Command(CommandType.COPY)
CM_PASTE = Command(CommandType.PASTE)
CM_CLEAR = Command(CommandType.CLEAR)
CM_TILE = Command(CommandType.TILE)
CM_CASCADE = Command(CommandType.CASCADE)
CM_CLOSE_ALL = Command(CommandType.CLOSE_ALL)
CM_WINDOW_MOVE = Command(CommandType.WINDOW_MOVE)
CM_WINDOW_ZOOM = Command(CommandType.WINDOW_ZOOM)
CM_WINDOW_NEXT = Command(CommandType.WINDOW_NEXT)
CM_WINDOW_PREVIOUS = Command(CommandType.WINDOW_PREVIOUS)
CM_WINDOW_CLOSE = Command(CommandType.WINDOW_CLOSE)

BUILTIN_COMMANDS: Dict[CommandType, Command] = {
    command.type: command
    for command in (
        CM_ABORT,
        CM_OPEN,
        CM_EXIT,
        CM_SHELL,
        CM_CUT,
        CM_COPY,
        CM_PASTE,
        CM_CLEAR,
        CM_TILE,
        CM_CASCADE,
        CM_CLOSE_ALL,
        CM_WINDOW_MOVE,
        CM_WINDOW_ZOOM,
        CM_WINDOW_NEXT,
        CM_WINDOW_PREVIOUS,
        CM_WINDOW_CLOSE,
    )
}


__all__ = [
    "BUILTIN_COMMANDS",
    "CM_ABORT",
    "CM_CASCADE",
    "CM_CLEAR",
    "CM_CLOSE_ALL",
    "CM_COPY",
    "CM_CUT",
    "CM_EXIT",
    "CM_OPEN",
    "CM_PASTE",
    "CM_QUIT",
    "CM_SHELL",
    "CM_TILE",
    "CM_WINDOW_CLOSE",
    "CM_WINDOW_MOVE",
    "CM_WINDOW_NEXT",
    "CM_WINDOW_PREVIOUS",
    "CM_WINDOW_ZOOM",
    "Command",
    "CommandType",
    "UnknownCommandError",
]
