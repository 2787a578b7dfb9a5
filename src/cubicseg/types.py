from __future__ import annotations

from typing import TYPE_CHECKING, Sequence, Tuple, Union

if TYPE_CHECKING:
    from numpy import ndarray

    from cubicseg.vec2 import vec2

# these empty comments are because of the autodocumentation

Float2 = Tuple[float, float]
""
Coefficients = Tuple[float, float, float]
"""
Polynomial coefficients in the order ``(c3, c2, c1)``.
"""
Scalar = Union[float, "ndarray"]
"""
Local coordinate, either a single float or a ``NumPy`` array evaluated element-wise.
"""
PointLike = Union["vec2", Float2, Sequence[float]]
"""
Segment endpoint. Can be either:

    - a :class:`~cubicseg.vec2.vec2` instance, or any object with ``x`` and ``y`` attributes,
    - an ``(x, y)`` tuple or other sequence of two floats.
"""
