"""Data models and constants for ttodo."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List

TODO_PREFIX = "TODO: "
DONE_PREFIX = "DONE: "

TODO_HEADER = "TODO"
DONE_HEADER = "DONE"
TODO_MARKER = "- [ ] "
DONE_MARKER = "- [x] "

DEFAULT_STATUS = "q quit | w/s move | W/S drag | g/G first/last | Enter transfer | d delete | Tab focus | F2 save"


@dataclass(frozen=True)
class Vector2:
    """Integer 2D point or size; x is a column, y a row."""

    x: int = 0
    y: int = 0

    def __add__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def __mul__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x * other.x, self.y * other.y)


class LayoutKind(Enum):
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


class Style(Enum):
    REGULAR = "regular"
    HIGHLIGHT = "highlight"


class Focus(Enum):
    PENDING = "pending"
    COMPLETED = "completed"


class Command(Enum):
    """Logical commands produced by translating raw key presses."""

    QUIT = "quit"
    UP = "up"
    DOWN = "down"
    DRAG_UP = "drag_up"
    DRAG_DOWN = "drag_down"
    FIRST = "first"
    LAST = "last"
    TRANSFER = "transfer"
    DELETE = "delete"
    TOGGLE_FOCUS = "toggle_focus"
    SAVE = "save"


@dataclass
class Board:
    """The two task lists, their cursors and which one has focus."""

    pending: List[str] = field(default_factory=list)
    pending_cursor: int = 0
    completed: List[str] = field(default_factory=list)
    completed_cursor: int = 0
    focus: Focus = Focus.PENDING
