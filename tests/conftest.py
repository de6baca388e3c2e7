from typing import List, Tuple

import pytest

from ttodo.models import Style


class FakeSurface:
    """Records draw calls and replays scripted key codes."""

    def __init__(self, rows: int = 24, cols: int = 80, keys=()):
        self.rows = rows
        self.cols = cols
        self.keys = list(keys)
        self.pos = (0, 0)
        self.draws: List[Tuple[int, int, str, Style]] = []
        self.frames = 0

    def move_to(self, row: int, col: int) -> None:
        self.pos = (row, col)

    def draw_text(self, text: str, style: Style) -> None:
        self.draws.append((self.pos[0], self.pos[1], text, style))

    def clear(self) -> None:
        self.draws = []

    def present(self) -> None:
        self.frames += 1

    def terminal_size(self) -> Tuple[int, int]:
        return self.rows, self.cols

    def read_key(self) -> int:
        return self.keys.pop(0)

    def text_at(self, row: int, col: int) -> str:
        for r, c, text, _ in self.draws:
            if (r, c) == (row, col):
                return text
        raise KeyError((row, col))

    def highlighted(self) -> List[str]:
        return [text for _, _, text, style in self.draws if style is Style.HIGHLIGHT]


@pytest.fixture
def surface():
    return FakeSurface()
