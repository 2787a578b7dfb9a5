from __future__ import annotations

from typing import TYPE_CHECKING, Any

from cubicseg.logging import CubicSegValueError

if TYPE_CHECKING:
    from cubicseg.types import PointLike


class vec2:
    """
    A class for storing points in :math:`R^2`. Segment endpoints are given as vec2 instances,
    the difference of two endpoints being the ``(dx, dy)`` extent of the segment.
    """

    def __init__(self, x, y):
        """
        Creates a vec2 instance.

        Args:
            x: The x component (the independent coordinate of a spline point).
            y: The y component (the dependent coordinate of a spline point).
        """
        self.x = float(x)
        self.y = float(y)

    @staticmethod
    def from_point(p: PointLike) -> vec2:
        """
        Converts a point-like value to a vec2.

        Args:
            p: Either a vec2, an object with ``x`` and ``y`` attributes, or a sequence of two numbers.

        Returns:
            The point as a vec2 instance.
        """
        if isinstance(p, vec2):
            return p
        if hasattr(p, "x") and hasattr(p, "y"):
            return vec2(p.x, p.y)
        try:
            x, y = p
        except (TypeError, ValueError):
            raise CubicSegValueError(f"Expected a point with two coordinates, got {p!r}.") from None
        return vec2(x, y)

    def __sub__(self, b: vec2) -> vec2:
        """
        Vector subtraction.

        Args:
            b: A given point to be subtracted from this point.

        Returns:
            The difference of the two points.
        """
        return vec2(self.x - b.x, self.y - b.y)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, vec2):
            return self.x == other.x and self.y == other.y

        return False

    def __repr__(self) -> str:
        return f"vec2({self.x!r}, {self.y!r})"
