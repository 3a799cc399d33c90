"""Rectangle value object."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rectangle:
    """
    Axis-aligned rectangle.

    Attributes:
        width: Horizontal extent.
        height: Vertical extent.
    """

    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height
