"""File I/O for ttodo task lists."""

import logging
from typing import Iterable, List, Tuple

from .models import Board, DONE_PREFIX, TODO_PREFIX

logger = logging.getLogger(__name__)


class ParseError(ValueError):
    """A line in a task file has neither the TODO nor the DONE prefix."""

    def __init__(self, path: str, line_no: int, line: str):
        super().__init__(f"{path}:{line_no}: ill-formed item line: {line!r}")
        self.path = path
        self.line_no = line_no
        self.line = line


def encode(pending: List[str], completed: List[str]) -> List[str]:
    """Serialize both lists, pending block first."""
    lines = [f"{TODO_PREFIX}{text}" for text in pending]
    lines.extend(f"{DONE_PREFIX}{text}" for text in completed)
    return lines


def decode(lines: Iterable[str], path: str = "<input>") -> Tuple[List[str], List[str]]:
    """Split prefixed lines back into (pending, completed).

    Raises ParseError with the 1-based line number of the first line that
    carries neither prefix.
    """
    pending: List[str] = []
    completed: List[str] = []
    for line_no, line in enumerate(lines, start=1):
        if line.startswith(TODO_PREFIX):
            pending.append(line[len(TODO_PREFIX):])
        elif line.startswith(DONE_PREFIX):
            completed.append(line[len(DONE_PREFIX):])
        else:
            raise ParseError(path, line_no, line)
    return pending, completed


def read_file(path: str) -> Board:
    """Load a task file.

    A missing file is a new document and yields an empty board; any other
    OSError propagates, as does UnicodeDecodeError for bytes that are not
    UTF-8. A leading byte-order mark is skipped.
    """
    try:
        with open(path, "r", encoding="utf-8-sig") as f:
            lines = [line.rstrip("\n") for line in f]
    except FileNotFoundError:
        logger.info("%s does not exist, starting with empty lists", path)
        return Board()

    pending, completed = decode(lines, path)
    logger.info(
        "loaded %d pending and %d completed items from %s",
        len(pending),
        len(completed),
        path,
    )
    return Board(pending=pending, completed=completed)


def write_file(path: str, board: Board) -> None:
    """Rewrite the file from in-memory state."""
    with open(path, "w", encoding="utf-8") as f:
        for line in encode(board.pending, board.completed):
            f.write(f"{line}\n")
    logger.info(
        "saved %d pending and %d completed items to %s",
        len(board.pending),
        len(board.completed),
        path,
    )
