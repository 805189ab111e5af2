"""Circle values that can be fed straight into Descartes' theorem.

A circle is stored as its *bend* (reciprocal of the signed radius) and
its *bend-center* (bend times the center, as a complex number).  Both
quantities satisfy the Descartes relation for four mutually tangent
circles, so the arithmetic below is lifted elementwise over the two
fields.  That lets one generic solver handle plain bends, complex
bend-centers and whole circles, and keeps a bend paired with the
bend-center it was solved with.
"""

from __future__ import annotations

import cmath
import math
from dataclasses import dataclass
from numbers import Complex, Real
from typing import Tuple, Union

from . import settings
from .errors import NumericDomainError

Scalar = Union[int, float, complex]


def sqrt(x, scale=1.0):
    """Square root over reals, complex numbers and circles.

    Reals use :func:`math.sqrt` and raise :class:`NumericDomainError` for
    negative or NaN input; complex values take the principal branch.
    ``scale`` is the magnitude of the terms that summed to ``x``: negative
    reals within ``SQRT_ROUNDING_TOL * scale`` of zero are rounding noise
    and give 0.
    """
    if isinstance(x, Circle):
        return x.sqrt(scale)
    if isinstance(x, Real):
        if math.isnan(x):
            raise NumericDomainError("square root of NaN")
        if x < 0:
            if x < -settings.SQRT_ROUNDING_TOL * abs(scale):
                raise NumericDomainError(f"square root of negative value {x!r}")
            return 0.0
        return math.sqrt(x)
    if isinstance(x, Complex):
        return cmath.sqrt(x)
    return x.sqrt()


@dataclass(frozen=True)
class Circle:
    bend: float
    bend_center: complex

    @classmethod
    def lift(cls, n: Scalar) -> "Circle":
        """Circle with both fields set to ``n``."""
        return cls(n, complex(n))

    @classmethod
    def from_radius(cls, signed_radius: float, center: Tuple[float, float]) -> "Circle":
        return mk_circle(signed_radius, center)

    @property
    def center(self) -> Tuple[float, float]:
        if self.bend == 0:
            raise NumericDomainError("a circle with zero bend has no center")
        z = self.bend_center / self.bend
        return (z.real, z.imag)

    @property
    def signed_radius(self) -> float:
        return 1.0 / self.bend if self.bend != 0 else math.inf

    @property
    def radius(self) -> float:
        """Unsigned radius; the sign lives in :attr:`bend`."""
        return abs(self.signed_radius)

    @property
    def is_outer(self) -> bool:
        return self.bend < 0

    # elementwise arithmetic ------------------------------------------------

    def _map(self, f) -> "Circle":
        return Circle(f(self.bend), f(self.bend_center))

    def _zip(self, other, f) -> "Circle":
        other = _as_circle(other)
        if other is NotImplemented:
            return NotImplemented
        return Circle(f(self.bend, other.bend), f(self.bend_center, other.bend_center))

    def __add__(self, other):
        return self._zip(other, lambda a, b: a + b)

    def __radd__(self, other):
        return self._zip(other, lambda a, b: b + a)

    def __sub__(self, other):
        return self._zip(other, lambda a, b: a - b)

    def __rsub__(self, other):
        return self._zip(other, lambda a, b: b - a)

    def __mul__(self, other):
        return self._zip(other, lambda a, b: a * b)

    def __rmul__(self, other):
        return self._zip(other, lambda a, b: b * a)

    def __truediv__(self, other):
        return self._zip(other, lambda a, b: a / b)

    def __rtruediv__(self, other):
        return self._zip(other, lambda a, b: b / a)

    def __neg__(self) -> "Circle":
        return self._map(lambda a: -a)

    def __abs__(self) -> "Circle":
        return Circle(abs(self.bend), complex(abs(self.bend_center)))

    def recip(self) -> "Circle":
        return 1 / self

    def sqrt(self, scale=1.0) -> "Circle":
        if isinstance(scale, Circle):
            scale = scale.bend
        return Circle(sqrt(self.bend, scale), cmath.sqrt(self.bend_center))


def _as_circle(value):
    if isinstance(value, Circle):
        return value
    if isinstance(value, Complex):
        return Circle.lift(value)
    return NotImplemented


def mk_circle(signed_radius: float, center: Tuple[float, float]) -> Circle:
    """Create a circle from a signed radius and an ``(x, y)`` center.

    A negative radius marks a circle whose inside is the unbounded region,
    e.g. the outer circle of a gasket.
    """
    if signed_radius == 0:
        raise NumericDomainError("radius must be non-zero")
    b = 1.0 / signed_radius
    x, y = center
    return Circle(b, complex(b * x, b * y))


def tangency_error(a: Circle, b: Circle) -> float:
    """Distance by which two circles miss touching each other.

    Zero for externally tangent circles, and for a circle sitting inside
    (and touching) a negatively bent enclosing circle.
    """
    (ax, ay), (bx, by) = a.center, b.center
    d = math.hypot(ax - bx, ay - by)
    return abs(d - abs(a.signed_radius + b.signed_radius))


def is_tangent(a: Circle, b: Circle, tol: float = settings.TANGENCY_TOL) -> bool:
    return tangency_error(a, b) <= tol
