"""Abstract input events consumed by the navigation state machine.

Key bindings are decided by the terminal layer (see terminal.py); the
state machine only ever sees these values.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Key(Enum):
    CONFIRM = "confirm"
    QUIT = "quit"
    THEME_CYCLE = "theme_cycle"
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    BACKSPACE = "backspace"


@dataclass(frozen=True)
class Char:
    """A single printable character typed by the user."""
    value: str


Event = Union[Key, Char]
