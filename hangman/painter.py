"""Draws the gallows picture for a stage of the game."""

from __future__ import annotations

from dataclasses import dataclass

from PIL import ImageDraw

from hangman.models import Drawing

_INK = "black"
_PAPER = "white"


@dataclass(frozen=True)
class Rect:
    """An area with exclusive right and bottom edges."""

    left: int
    top: int
    right: int
    bottom: int

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top


class HangmanPainter:
    """Paints gallows stages onto an area of a Pillow drawing surface."""

    def __init__(self, draw: ImageDraw.ImageDraw, canvas: Rect) -> None:
        self._draw = draw
        self._canvas = canvas
        self._position = (canvas.left, canvas.top)

    def paint(self, drawing: Drawing | int) -> None:
        """Clear the canvas and draw the given stage with every stage before it."""
        canvas = self._canvas
        if canvas.width > 0 and canvas.height > 0:
            self._draw.rectangle(
                (canvas.left, canvas.top, canvas.right - 1, canvas.bottom - 1),
                fill=_PAPER,
            )
        try:
            stage = Drawing(drawing)
        except ValueError:
            return
        parts = (self._paint_base, self._paint_pole, self._paint_hanger, self._paint_man)
        for part in reversed(parts[: stage + 1]):
            part()

    def _move_to(self, x: int, y: int) -> None:
        self._position = (x, y)

    def _line_to(self, x: int, y: int) -> None:
        self._draw.line([self._position, (x, y)], fill=_INK, width=1)
        self._position = (x, y)

    def _paint_base(self) -> None:
        c = self._canvas
        height = c.bottom - c.width // 20
        self._move_to(c.left, height)
        self._line_to(c.left + c.width // 10, height)

    def _paint_pole(self) -> None:
        c = self._canvas
        x = c.left + c.width // 20
        self._move_to(x, c.bottom - c.width // 20)
        self._line_to(x, c.top + c.height // 10)

    def _paint_hanger(self) -> None:
        c = self._canvas
        top = c.top + c.height // 10
        rope_x = c.right - c.width // 8
        self._move_to(c.left + c.width // 20, top)
        self._line_to(rope_x, top)
        self._line_to(rope_x, c.top + c.height // 5)

    def _paint_man(self) -> None:
        c = self._canvas
        left_x = c.right - c.width // 6
        middle_x = c.right - c.width // 8
        right_x = c.right - c.width // 12
        head_top = c.top + c.height // 5
        head_bottom = c.top + c.height // 3
        hip = c.bottom - c.height // 3
        feet = c.bottom - c.height // 5

        if right_x > left_x and head_bottom > head_top:
            self._draw.ellipse(
                (left_x, head_top, right_x - 1, head_bottom - 1),
                fill=_PAPER,
                outline=_INK,
                width=1,
            )

        self._move_to(middle_x, head_bottom)
        self._line_to(middle_x, hip)
        self._line_to(left_x, feet)
        self._move_to(middle_x, hip)
        self._line_to(right_x, feet)