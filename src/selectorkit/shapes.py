"""Plain geometric data objects."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rectangle:
    """A rectangle with a computed area.

    Example::

        r = Rectangle(10, 20)
        r.width       # 10
        r.height      # 20
        r.get_area()  # 200
    """

    width: float
    height: float

    def get_area(self) -> float:
        return self.width * self.height
