"""List navigation and mutation helpers (pure functions, no I/O).

Each helper takes the list and cursor it works on and returns the new cursor.
Lists are changed in place. Calls outside a helper's preconditions are
no-ops rather than errors.
"""

import logging
from typing import List

from .models import Board, Command, Focus

logger = logging.getLogger(__name__)


def move_up(cursor: int) -> int:
    if cursor > 0:
        return cursor - 1
    return cursor


def move_down(items: List[str], cursor: int) -> int:
    if cursor + 1 < len(items):
        return cursor + 1
    return cursor


def jump_first(cursor: int) -> int:
    if cursor > 0:
        return 0
    return cursor


def jump_last(items: List[str], cursor: int) -> int:
    if items:
        return len(items) - 1
    return cursor


def drag_up(items: List[str], cursor: int) -> int:
    """Swap the item at cursor with the one above; the cursor follows it."""
    if 0 < cursor < len(items):
        items[cursor - 1], items[cursor] = items[cursor], items[cursor - 1]
        return cursor - 1
    return cursor


def drag_down(items: List[str], cursor: int) -> int:
    """Swap the item at cursor with the one below; the cursor follows it."""
    if 0 <= cursor and cursor + 1 < len(items):
        items[cursor + 1], items[cursor] = items[cursor], items[cursor + 1]
        return cursor + 1
    return cursor


def _clamp(items: List[str], cursor: int) -> int:
    if items and cursor >= len(items):
        return len(items) - 1
    return cursor


def delete_current(items: List[str], cursor: int) -> int:
    """Remove the item at cursor and keep the cursor on a valid index."""
    if 0 <= cursor < len(items):
        del items[cursor]
    return _clamp(items, cursor)


def transfer(dest: List[str], src: List[str], cursor: int) -> int:
    """Move src[cursor] to the end of dest; return the new src cursor."""
    if 0 <= cursor < len(src):
        dest.append(src.pop(cursor))
    return _clamp(src, cursor)


def toggle_focus(focus: Focus) -> Focus:
    if focus is Focus.PENDING:
        return Focus.COMPLETED
    return Focus.PENDING


def dispatch(board: Board, command: Command) -> None:
    """Apply a list command to the focused list of the board.

    QUIT and SAVE are handled by the application loop and ignored here.
    """
    if command is Command.TOGGLE_FOCUS:
        board.focus = toggle_focus(board.focus)
        logger.debug("focus -> %s", board.focus.value)
        return

    if board.focus is Focus.PENDING:
        items, other, cursor = board.pending, board.completed, board.pending_cursor
    else:
        items, other, cursor = board.completed, board.pending, board.completed_cursor

    if command is Command.UP:
        cursor = move_up(cursor)
    elif command is Command.DOWN:
        cursor = move_down(items, cursor)
    elif command is Command.FIRST:
        cursor = jump_first(cursor)
    elif command is Command.LAST:
        cursor = jump_last(items, cursor)
    elif command is Command.DRAG_UP:
        cursor = drag_up(items, cursor)
    elif command is Command.DRAG_DOWN:
        cursor = drag_down(items, cursor)
    elif command is Command.DELETE:
        before = len(items)
        cursor = delete_current(items, cursor)
        if len(items) < before:
            logger.debug("deleted item from %s list", board.focus.value)
    elif command is Command.TRANSFER:
        before = len(items)
        cursor = transfer(other, items, cursor)
        if len(items) < before:
            logger.debug("transferred %r out of %s list", other[-1], board.focus.value)
    else:
        return

    if board.focus is Focus.PENDING:
        board.pending_cursor = cursor
    else:
        board.completed_cursor = cursor
