"""Immediate-mode drawing surface used by the frame composer."""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Literal

from .render_context import Color
from .shapes import Glyph, Shape


class CompositeMode(Enum):
    NORMAL = "normal"
    CLEAR = "clear"  # Painted pixels become fully transparent


class DrawingContext(ABC):
    """Stroke/fill/translate operations plus a scoped composite mode."""

    def __init__(self) -> None:
        self.mode = CompositeMode.NORMAL

    @abstractmethod
    def stroke(self, shape: Shape, color: Color, line_width: float) -> None:
        """Stroke the outline of ``shape``, centered on its edge."""
        raise NotImplementedError

    @abstractmethod
    def fill(self, shape: Shape, color: Color) -> None:
        raise NotImplementedError

    @abstractmethod
    def draw_text(self, glyph: Glyph, color: Color) -> None:
        raise NotImplementedError

    @abstractmethod
    def translate(self, dx: float, dy: float) -> None:
        """Move the drawing origin; applies to every later call."""
        raise NotImplementedError

    @contextmanager
    def composite_mode(self, mode: CompositeMode) -> Iterator["DrawingContext"]:
        """Switch composite mode for the duration of the block, then restore it."""
        previous = self.mode
        self.mode = mode
        try:
            yield self
        finally:
            self.mode = previous


OpKind = Literal["stroke", "fill", "text", "translate"]


@dataclass(frozen=True)
class DrawOp:
    kind: OpKind
    shape: Shape | Glyph | None = None
    color: Color | None = None
    line_width: float | None = None
    mode: CompositeMode = CompositeMode.NORMAL
    offset: tuple[float, float] | None = None


@dataclass(frozen=True)
class Frame:
    """Ordered draw operations for one tick."""

    width: int
    height: int
    ops: tuple[DrawOp, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.ops


class RecordingContext(DrawingContext):
    """Records draw calls instead of rasterizing them."""

    def __init__(self, width: int = 0, height: int = 0) -> None:
        super().__init__()
        self.width = width
        self.height = height
        self.ops: list[DrawOp] = []

    def stroke(self, shape: Shape, color: Color, line_width: float) -> None:
        self.ops.append(DrawOp("stroke", shape, color, line_width, self.mode))

    def fill(self, shape: Shape, color: Color) -> None:
        self.ops.append(DrawOp("fill", shape, color, mode=self.mode))

    def draw_text(self, glyph: Glyph, color: Color) -> None:
        self.ops.append(DrawOp("text", glyph, color, mode=self.mode))

    def translate(self, dx: float, dy: float) -> None:
        self.ops.append(DrawOp("translate", offset=(dx, dy), mode=self.mode))

    def to_frame(self) -> Frame:
        return Frame(self.width, self.height, tuple(self.ops))


def replay_frame(frame: Frame, target: DrawingContext) -> None:
    """Issue the recorded calls of ``frame`` against another context."""
    for op in frame.ops:
        with target.composite_mode(op.mode):
            if op.kind == "translate":
                target.translate(*op.offset)  # type: ignore[misc]
            elif op.kind == "text":
                target.draw_text(op.shape, op.color)  # type: ignore[arg-type]
            elif op.kind == "fill":
                target.fill(op.shape, op.color)  # type: ignore[arg-type]
            else:
                target.stroke(op.shape, op.color, op.line_width)  # type: ignore[arg-type]
