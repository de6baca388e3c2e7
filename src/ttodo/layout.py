"""Immediate-mode layout engine.

Widgets are positioned during a single top-to-bottom render pass. The engine
keeps a stack of open frames; each frame knows its origin and how much room
its children have taken so far, which is all that is needed to place the
next widget. A parent only learns a child's footprint when the child closes.
"""

import logging
from dataclasses import dataclass, field
from typing import List

from .models import LayoutKind, Style, Vector2

logger = logging.getLogger(__name__)

_ACROSS = Vector2(1, 0)
_DOWN = Vector2(0, 1)


class LayoutError(AssertionError):
    """Unbalanced begin/end calls or a widget drawn outside any frame."""


@dataclass
class LayoutFrame:
    """One open region on the layout stack."""

    kind: LayoutKind
    origin: Vector2
    size: Vector2 = field(default_factory=Vector2)

    def available_position(self) -> Vector2:
        """Where the next child of this frame goes."""
        if self.kind is LayoutKind.HORIZONTAL:
            return self.origin + self.size * _ACROSS
        return self.origin + self.size * _DOWN

    def absorb(self, child: Vector2) -> None:
        """Grow to make room for a child of the given size."""
        if self.kind is LayoutKind.HORIZONTAL:
            self.size = Vector2(self.size.x + child.x, max(self.size.y, child.y))
        else:
            self.size = Vector2(max(self.size.x, child.x), self.size.y + child.y)


class Ui:
    """Stack-based layout engine drawing onto a surface.

    The surface needs ``move_to(row, col)`` and ``draw_text(text, style)``.
    """

    def __init__(self, surface):
        self.surface = surface
        self.stack: List[LayoutFrame] = []

    def begin(self, origin: Vector2, kind: LayoutKind) -> None:
        if self.stack:
            raise LayoutError("begin() called while a frame is already open")
        self.stack.append(LayoutFrame(kind, origin))

    def begin_layout(self, kind: LayoutKind) -> None:
        top = self._top("begin_layout()")
        self.stack.append(LayoutFrame(kind, top.available_position()))

    def end_layout(self) -> None:
        if len(self.stack) < 2:
            raise LayoutError("end_layout() without a matching begin_layout()")
        child = self.stack.pop()
        self.stack[-1].absorb(child.size)

    def label_fixed_width(self, text: str, width: int, style: Style) -> None:
        """Draw one row of text and reserve ``width`` columns for it."""
        top = self._top("label_fixed_width()")
        pos = top.available_position()
        self.surface.move_to(pos.y, pos.x)
        self.surface.draw_text(text, style)
        top.absorb(Vector2(width, 1))

    def label(self, text: str, style: Style) -> None:
        self.label_fixed_width(text, len(text), style)

    def end(self) -> Vector2:
        """Close the root frame and return its final footprint."""
        if not self.stack:
            raise LayoutError("end() without a matching begin()")
        if len(self.stack) > 1:
            raise LayoutError(
                f"end() with {len(self.stack) - 1} unclosed begin_layout() call(s)"
            )
        root = self.stack.pop()
        logger.debug("frame laid out: %dx%d", root.size.x, root.size.y)
        return root.size

    def _top(self, caller: str) -> LayoutFrame:
        if not self.stack:
            raise LayoutError(f"{caller} called outside begin()/end()")
        return self.stack[-1]
