"""ttodo - two-list terminal task manager."""

import logging

__version__ = "1.0.0"

from .models import Board, Command, Focus, LayoutKind, Style, Vector2
from .layout import LayoutError, LayoutFrame, Ui
from .storage import ParseError, decode, encode, read_file, write_file
from .core import dispatch

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Board",
    "Command",
    "Focus",
    "LayoutKind",
    "Style",
    "Vector2",
    "LayoutError",
    "LayoutFrame",
    "Ui",
    "ParseError",
    "decode",
    "encode",
    "read_file",
    "write_file",
    "dispatch",
]
