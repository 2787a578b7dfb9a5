"""
.. module:: polynomial
    :synopsis: Cubic polynomial without constant term, used as the per-segment
               representation of a piecewise cubic spline.

A spline through a sequence of points is made of one polynomial per segment,
each evaluated in the local coordinate of its segment: ``0`` at the start
point and ``dx`` at the end point. The translation of each segment is known
from its start point, so no constant term is stored.

The factories divide by ``dx`` without checking it. A segment whose endpoints
share the same ``x`` yields ``inf``/``NaN`` coefficients, which propagate to
every evaluation. Call :func:`enable_degenerate_checks` to raise
:class:`~cubicseg.logging.DegenerateSegmentError` instead while debugging the
code that assembles the segments.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Any, Iterator

import numpy as np

from cubicseg.logging import (LOGGER_ID, CubicSegValueError,
                              DegenerateSegmentError, create_warning)
from cubicseg.vec2 import vec2

if TYPE_CHECKING:
    from cubicseg.types import Coefficients, PointLike, Scalar

module_logger = logging.getLogger(f"{LOGGER_ID}.polynomial")

_check_degenerate = False


def enable_degenerate_checks(enabled: bool = True) -> None:
    """
    Turns the check for segments with ``dx == 0`` on or off for all factories.

    The switch is process-wide state read by every factory call. Set it once at start-up, before any
    worker threads build polynomials, and leave it alone afterwards.

    Args:
        enabled: Whether the factories raise :class:`~cubicseg.logging.DegenerateSegmentError`
                 for a zero ``dx``. When disabled, non-finite coefficients are returned.
    """
    global _check_degenerate
    _check_degenerate = enabled
    module_logger.debug(f"Degenerate segment checks {'enabled' if enabled else 'disabled'}.")


def degenerate_checks_enabled() -> bool:
    return _check_degenerate


def _guard_degenerate(dx: float, factory: str) -> None:
    # factories build one segment, only the evaluators take arrays
    if np.ndim(dx) != 0:
        raise CubicSegValueError(f"{factory}: dx must be a scalar, got an array of shape {np.shape(dx)}.")
    if dx != 0.0:
        return
    if _check_degenerate:
        raise DegenerateSegmentError(f"{factory}: segment endpoints have the same x coordinate.")
    module_logger.debug(f"{factory}: dx is zero, coefficients will not be finite.")


class SplinePolynomial:
    """
    A 3rd degree polynomial without constant term: ``y = c3 * x^3 + c2 * x^2 + c1 * x``.

    The curve always passes through the local origin. Instances are immutable,
    the coefficients can be read but not reassigned.

    Args:
        c3: The coefficient of the cubic term.
        c2: The coefficient of the quadratic term.
        c1: The coefficient of the linear term.
    """

    __slots__ = ("_c3", "_c2", "_c1")

    def __init__(self, c3: float = 0.0, c2: float = 0.0, c1: float = 0.0):
        object.__setattr__(self, "_c3", float(c3))
        object.__setattr__(self, "_c2", float(c2))
        object.__setattr__(self, "_c1", float(c1))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable, cannot set '{name}'.")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable, cannot delete '{name}'.")

    def __reduce__(self):
        return (type(self), self.coefficients)

    @staticmethod
    def zero() -> SplinePolynomial:
        """
        The zero curve, ``y = 0``. Same as ``SplinePolynomial()``.
        """
        return SplinePolynomial(0.0, 0.0, 0.0)

    @property
    def c3(self) -> float:
        return self._c3

    @property
    def c2(self) -> float:
        return self._c2

    @property
    def c1(self) -> float:
        return self._c1

    @property
    def coefficients(self) -> Coefficients:
        """
        The coefficients in the order ``(c3, c2, c1)``.
        """
        return (self._c3, self._c2, self._c1)

    def value_at(self, x: Scalar) -> Scalar:
        """
        Evaluates the polynomial.

        Args:
            x: Local coordinate, a float or a ``NumPy`` array.

        Returns:
            ``c3 * x^3 + c2 * x^2 + c1 * x``
        """
        return ((self._c3 * x + self._c2) * x + self._c1) * x

    def slope_at(self, x: Scalar) -> Scalar:
        """
        Evaluates the first derivative of the polynomial.

        Args:
            x: Local coordinate, a float or a ``NumPy`` array.

        Returns:
            ``3 * c3 * x^2 + 2 * c2 * x + c1``
        """
        return (3.0 * self._c3 * x + 2.0 * self._c2) * x + self._c1

    def curvature_at(self, x: Scalar) -> Scalar:
        """
        Evaluates the second derivative of the polynomial.

        Args:
            x: Local coordinate, a float or a ``NumPy`` array.

        Returns:
            ``6 * c3 * x + 2 * c2``
        """
        return 6.0 * self._c3 * x + 2.0 * self._c2

    def is_finite(self) -> bool:
        """
        Returns:
            False if any coefficient is ``inf`` or ``NaN``, which is the case for polynomials built from a
            segment with ``dx == 0``.
        """
        return math.isfinite(self._c3) and math.isfinite(self._c2) and math.isfinite(self._c1)

    def approx_length(self, x0: float, x1: float, n: int = 9000) -> float:
        """
        Computes a numerical approximation of the arc-length of this polynomial.
        The curve is approximated as a polyline, and the length of each subsection is summed to a total length.

        Args:
            x0: The start value in x.
            x1: The end value in x.
            n (optional): The number of subdivisions to use across the polynomial.

        Returns:
            A numerical approximation of the arc-length between ``x0`` and ``x1``.
        """
        if n < 1:
            raise CubicSegValueError(f"The number of subdivisions must be positive, got {n}.")
        if not self.is_finite():
            create_warning("Arc-length of a polynomial with non-finite coefficients is undefined.", RuntimeWarning)
            return math.nan
        xs = np.linspace(x0, x1, n + 1)
        ys = self.value_at(xs)
        return float(np.sum(np.hypot(np.diff(xs), np.diff(ys))))

    @staticmethod
    def from_slopes(p1: PointLike, m1: float, p2: PointLike, m2: float) -> SplinePolynomial:
        """
        Computes the polynomial of the segment from ``p1`` to ``p2`` with the given slopes at both ends.

        Args:
            p1: The start point of the segment.
            m1: The slope at the start point.
            p2: The end point of the segment.
            m2: The slope at the end point.

        Returns:
            The polynomial in the local coordinate of the segment, see :meth:`from_slopes_delta`.
        """
        d = vec2.from_point(p2) - vec2.from_point(p1)
        return SplinePolynomial.from_slopes_delta(d.x, d.y, m1, m2)

    @staticmethod
    def from_slopes_delta(dx: float, dy: float, m1: float, m2: float) -> SplinePolynomial:
        """
        Computes the unique polynomial which passes through ``(dx, dy)`` and has the slopes ``m1`` at ``x = 0``
        and ``m2`` at ``x = dx``.

        Args:
            dx: The extent of the segment in x, a scalar that must not be 0.
            dy: The extent of the segment in y.
            m1: The slope at the start of the segment.
            m2: The slope at the end of the segment.

        Returns:
            The polynomial. For ``dx == 0`` the coefficients are not finite.
        """
        _guard_degenerate(dx, "from_slopes")
        x = np.float64(dx)
        y = np.float64(dy)
        m1 = np.float64(m1)
        m2 = np.float64(m2)
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            c2 = (3.0 * y / x - 2.0 * m1 - m2) / x
            c3 = ((m2 - m1) / x - 2.0 * c2) / (3.0 * x)

        return SplinePolynomial(c3, c2, m1)

    @staticmethod
    def from_curvatures(p1: PointLike, cv1: float, p2: PointLike, cv2: float) -> SplinePolynomial:
        """
        Computes the polynomial of the segment from ``p1`` to ``p2`` with the given curvatures at both ends.

        Args:
            p1: The start point of the segment.
            cv1: The curvature (second derivative) at the start point.
            p2: The end point of the segment.
            cv2: The curvature (second derivative) at the end point.

        Returns:
            The polynomial in the local coordinate of the segment, see :meth:`from_curvatures_delta`.
        """
        d = vec2.from_point(p2) - vec2.from_point(p1)
        return SplinePolynomial.from_curvatures_delta(d.x, d.y, cv1, cv2)

    @staticmethod
    def from_curvatures_delta(dx: float, dy: float, cv1: float, cv2: float) -> SplinePolynomial:
        """
        Computes the unique polynomial which passes through ``(dx, dy)`` and has the second derivatives ``cv1``
        at ``x = 0`` and ``cv2`` at ``x = dx``.

        Args:
            dx: The extent of the segment in x, a scalar that must not be 0.
            dy: The extent of the segment in y.
            cv1: The curvature at the start of the segment.
            cv2: The curvature at the end of the segment.

        Returns:
            The polynomial. For ``dx == 0`` the coefficients are not finite.
        """
        _guard_degenerate(dx, "from_curvatures")
        x = np.float64(dx)
        y = np.float64(dy)
        cv1 = np.float64(cv1)
        cv2 = np.float64(cv2)
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            c3 = (cv2 - cv1) / (6.0 * x)
            c2 = 0.5 * cv1
            c1 = y / x - (c3 * x + c2) * x

        return SplinePolynomial(c3, c2, c1)

    def __iter__(self) -> Iterator[float]:
        return iter(self.coefficients)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, SplinePolynomial):
            return self.coefficients == other.coefficients

        return False

    def __hash__(self) -> int:
        return hash(self.coefficients)

    def __str__(self) -> str:
        return format_polynomial(self)

    def __repr__(self) -> str:
        return f"SplinePolynomial(c3={self._c3!r}, c2={self._c2!r}, c1={self._c1!r})"


def format_polynomial(polynomial: SplinePolynomial) -> str:
    """
    Human-readable rendering of the coefficients, e.g. ``Polynomial(0.0, 0.5, 1.0)``.
    """
    return f"Polynomial({polynomial.c3!r}, {polynomial.c2!r}, {polynomial.c1!r})"
