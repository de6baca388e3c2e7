"""ttodo curses-based terminal user interface."""

import curses
import logging
from typing import Dict, List, Optional, Protocol, Tuple

from .core import dispatch
from .layout import Ui
from .models import (
    Board,
    Command,
    DEFAULT_STATUS,
    DONE_HEADER,
    DONE_MARKER,
    Focus,
    LayoutKind,
    Style,
    TODO_HEADER,
    TODO_MARKER,
    Vector2,
)
from .storage import write_file

logger = logging.getLogger(__name__)

REGULAR_PAIR = 1
HIGHLIGHT_PAIR = 2

KEYMAP: Dict[int, Command] = {
    ord("q"): Command.QUIT,
    ord("w"): Command.UP,
    ord("k"): Command.UP,
    curses.KEY_UP: Command.UP,
    ord("s"): Command.DOWN,
    ord("j"): Command.DOWN,
    curses.KEY_DOWN: Command.DOWN,
    ord("W"): Command.DRAG_UP,
    ord("K"): Command.DRAG_UP,
    ord("S"): Command.DRAG_DOWN,
    ord("J"): Command.DRAG_DOWN,
    ord("g"): Command.FIRST,
    curses.KEY_HOME: Command.FIRST,
    ord("G"): Command.LAST,
    curses.KEY_END: Command.LAST,
    10: Command.TRANSFER,
    13: Command.TRANSFER,
    curses.KEY_ENTER: Command.TRANSFER,
    ord("d"): Command.DELETE,
    9: Command.TOGGLE_FOCUS,
    curses.KEY_F2: Command.SAVE,
}


def command_for_key(key: int) -> Optional[Command]:
    """Translate a raw key code; None for keys with no binding."""
    return KEYMAP.get(key)


class Surface(Protocol):
    """What the renderer and the event loop need from a terminal."""

    def move_to(self, row: int, col: int) -> None: ...

    def draw_text(self, text: str, style: Style) -> None: ...

    def clear(self) -> None: ...

    def present(self) -> None: ...

    def terminal_size(self) -> Tuple[int, int]: ...

    def read_key(self) -> int: ...


class CursesSurface:
    """Surface backed by a curses window."""

    def __init__(self, stdscr):
        self.stdscr = stdscr
        self.row = 0
        self.col = 0
        curses.curs_set(0)
        self.stdscr.keypad(True)

        if curses.has_colors():
            curses.start_color()
            curses.init_pair(REGULAR_PAIR, curses.COLOR_WHITE, curses.COLOR_BLACK)
            curses.init_pair(HIGHLIGHT_PAIR, curses.COLOR_BLACK, curses.COLOR_WHITE)
            self.attrs = {
                Style.REGULAR: curses.color_pair(REGULAR_PAIR),
                Style.HIGHLIGHT: curses.color_pair(HIGHLIGHT_PAIR),
            }
        else:
            self.attrs = {
                Style.REGULAR: curses.A_NORMAL,
                Style.HIGHLIGHT: curses.A_REVERSE,
            }

    def move_to(self, row: int, col: int) -> None:
        self.row = row
        self.col = col

    def draw_text(self, text: str, style: Style) -> None:
        height, width = self.stdscr.getmaxyx()
        # Nothing scrolls: whatever falls outside the window is dropped.
        avail = width - 1 - self.col
        if self.row >= height or avail <= 0 or not text:
            return
        self.stdscr.addnstr(self.row, self.col, text, avail, self.attrs[style])

    def clear(self) -> None:
        self.stdscr.erase()

    def present(self) -> None:
        self.stdscr.refresh()

    def terminal_size(self) -> Tuple[int, int]:
        return self.stdscr.getmaxyx()

    def read_key(self) -> int:
        return self.stdscr.getch()


def _column(
    ui: Ui,
    header: str,
    marker: str,
    items: List[str],
    cursor: int,
    focused: bool,
    width: int,
    max_items: int,
) -> None:
    ui.begin_layout(LayoutKind.VERTICAL)
    ui.label_fixed_width(header, width, Style.HIGHLIGHT if focused else Style.REGULAR)
    for index, text in enumerate(items[:max_items]):
        style = Style.HIGHLIGHT if focused and index == cursor else Style.REGULAR
        ui.label_fixed_width(f"{marker}{text}", width, style)
    ui.end_layout()


def render(ui: Ui, board: Board, rows: int, cols: int, status: str) -> Vector2:
    """Lay out and draw one frame.

    The two list columns fill the rows above the last one, which always
    holds the status line. Returns the footprint of the list columns.
    """
    width = cols // 2
    # Header row plus one reserved for the status line.
    max_items = max(rows - 2, 0)
    ui.begin(Vector2(0, 0), LayoutKind.VERTICAL)

    ui.begin_layout(LayoutKind.HORIZONTAL)
    _column(
        ui,
        TODO_HEADER,
        TODO_MARKER,
        board.pending,
        board.pending_cursor,
        board.focus is Focus.PENDING,
        width,
        max_items,
    )
    _column(
        ui,
        DONE_HEADER,
        DONE_MARKER,
        board.completed,
        board.completed_cursor,
        board.focus is Focus.COMPLETED,
        width,
        max_items,
    )
    ui.end_layout()
    lists = ui.end()

    ui.begin(Vector2(0, max(rows - 1, 0)), LayoutKind.HORIZONTAL)
    ui.label(status, Style.REGULAR)
    ui.end()
    return lists


class TUI:
    """Render-then-read-key loop over a single board."""

    def __init__(self, surface: Surface, path: str, board: Board):
        self.surface = surface
        self.path = path
        self.board = board
        self.ui = Ui(surface)
        self.status = DEFAULT_STATUS

    def draw(self):
        self.surface.clear()
        rows, cols = self.surface.terminal_size()
        render(self.ui, self.board, rows, cols, self.status)
        self.surface.present()

    def message(self, text: str):
        self.status = text

    def save(self):
        """Write the board now; failures stay on the status line."""
        try:
            write_file(self.path, self.board)
        except OSError as e:
            logger.exception("saving %s failed", self.path)
            self.message(f"Save failed: {e}")
            return
        self.message(f"Saved to {self.path}.")

    def run(self):
        """Main event loop; returns when the user quits."""
        while True:
            self.draw()
            key = self.surface.read_key()
            command = command_for_key(key)
            if command is None:
                logger.debug("unbound key %d", key)
                continue

            if command is Command.QUIT:
                break
            elif command is Command.SAVE:
                self.save()
            else:
                dispatch(self.board, command)
                self.message(DEFAULT_STATUS)


def main(path: str, board: Board) -> None:
    """Run the TUI on an already loaded board until the user quits."""

    def _main(stdscr):
        TUI(CursesSurface(stdscr), path, board).run()

    curses.wrapper(_main)
