"""Descartes' circle theorem and the starting configuration of a gasket.

If ``b1, b2, b3, b4`` are the bends of four mutually tangent circles then

    b1**2 + b2**2 + b3**2 + b4**2 == (b1 + b2 + b3 + b4)**2 / 2

and the same relation holds when every bend is replaced by the matching
bend-center.  See J. Lagarias, C. Mallows and A. Wilks, "Beyond the
Descartes circle theorem", Amer. Math. Monthly 109 (2002), 338-361.

The functions here only use ``+``, ``-``, ``*`` and :func:`sqrt`, so they
work on floats (bends), complex numbers (bend-centers) and
:class:`~apollonian.circle.Circle` values (both at once).
"""

from __future__ import annotations

import math
from typing import List, Sequence, Tuple, TypeVar

from .circle import Circle, sqrt
from .errors import InvalidArity, NumericDomainError

T = TypeVar("T")


def descartes(values: Sequence[T]) -> Tuple[T, T]:
    """Solve for the fourth value given three, returning both solutions.

    Parameters
    ----------
    values:
        Exactly three bends, bend-centers or circles.

    Returns
    -------
    tuple
        ``(s + r, s - r)`` where ``s`` is the sum of the inputs and
        ``r = 2 * sqrt(b1*b2 + b1*b3 + b2*b3)``.
    """
    if len(values) != 3:
        raise InvalidArity(f"descartes needs exactly 3 values, got {len(values)}")
    b1, b2, b3 = values
    products = (b1 * b2, b1 * b3, b2 * b3)
    r = 2 * sqrt(sum(products), scale=sum(abs(p) for p in products))
    s = b1 + b2 + b3
    return (s + r, s - r)


def other(xs: Sequence[T], x: T) -> T:
    """Return the dual of ``x`` with respect to the three values ``xs``.

    The two solutions ``b4`` and ``b4'`` of :func:`descartes` satisfy
    ``b4 + b4' == 2 * (b1 + b2 + b3)``, so no square root is needed.
    Pass whole circles rather than splitting bends from bend-centers.
    """
    return 2 * sum(xs) - x


def initial_config(b1: float, b2: float, b3: float) -> List[Circle]:
    """Place four mutually tangent circles given three signed bends.

    Circle 1 sits at the origin and circle 2 on the positive x axis.
    Circle 3 is placed with the law of cosines on the triangle of
    center distances, and circle 4 is the first :func:`descartes`
    solution for the other three.
    """
    if not all(math.isfinite(bend) for bend in (b1, b2, b3)):
        raise NumericDomainError(f"bends must be finite, got ({b1}, {b2}, {b3})")
    try:
        a = 1 / b1 + 1 / b2
        b = 1 / b1 + 1 / b3
        c = 1 / b2 + 1 / b3
        x = (b * b + a * a - c * c) / (2 * a)
    except ZeroDivisionError as exc:
        raise NumericDomainError(
            f"bends ({b1}, {b2}, {b3}) do not describe tangent circles"
        ) from exc
    y = sqrt(b * b - x * x, scale=b * b)
    cs = [
        Circle(b1, 0j),
        Circle(b2, complex(b2 / b1 + 1, 0)),
        Circle(b3, complex(b3 * x, b3 * y)),
    ]
    c4, _ = descartes(cs)
    return cs + [c4]
