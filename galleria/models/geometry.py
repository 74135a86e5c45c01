"""Pixel-space primitives used throughout the compositor."""

from __future__ import annotations
from pydantic import BaseModel


class Size(BaseModel):
    """Width and height in whole pixels."""
    width: int
    height: int

    def inset(self, amount: int) -> Size:
        """Shrink by `amount` on every side, never below 1 pixel."""
        return Size(
            width=max(1, self.width - 2 * amount),
            height=max(1, self.height - 2 * amount),
        )

    def as_tuple(self) -> tuple[int, int]:
        return (self.width, self.height)


class Placement(BaseModel):
    """A scaled rectangle and its offset inside a container."""
    width: int
    height: int
    left: int
    top: int

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    @property
    def offset(self) -> tuple[int, int]:
        return (self.left, self.top)

    def shifted(self, dx: int, dy: int) -> Placement:
        return Placement(
            width=self.width, height=self.height,
            left=self.left + dx, top=self.top + dy,
        )
