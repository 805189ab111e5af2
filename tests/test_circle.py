import dataclasses
import math

import pytest

from apollonian.circle import Circle, is_tangent, mk_circle, sqrt, tangency_error
from apollonian.errors import NumericDomainError


def test_mk_circle_fields():
    c = mk_circle(2.0, (1.0, -1.0))
    assert c.bend == 0.5
    assert abs(c.bend_center - (0.5 - 0.5j)) < 1e-12
    assert c.center == pytest.approx((1.0, -1.0))
    assert c.radius == 2.0
    assert not c.is_outer


def test_negative_radius_is_outer():
    c = Circle.from_radius(-2.0, (0.0, 0.0))
    assert c.bend == -0.5
    assert c.radius == 2.0
    assert c.signed_radius == -2.0
    assert c.is_outer


def test_elementwise_arithmetic():
    a = Circle(1.0, 2 + 1j)
    b = Circle(3.0, 1 - 1j)
    assert a + b == Circle(4.0, 3 + 0j)
    assert a - b == Circle(-2.0, 1 + 2j)
    assert a * b == Circle(3.0, (2 + 1j) * (1 - 1j))
    assert -a == Circle(-1.0, -2 - 1j)


def test_scalars_are_lifted():
    c = Circle(1.0, 1 + 1j)
    assert Circle.lift(3) == Circle(3, 3 + 0j)
    assert 2 * c == Circle(2.0, 2 + 2j)
    assert c * 2 == Circle(2.0, 2 + 2j)
    assert c - 1 == Circle(0.0, 0 + 1j)
    assert 1 - c == Circle(0.0, 0 - 1j)
    assert sum([c, c, c]) == Circle(3.0, 3 + 3j)


def test_abs_sqrt_recip():
    assert abs(Circle(-3.0, 3 + 4j)) == Circle(3.0, 5 + 0j)
    root = Circle(4.0, -4 + 0j).sqrt()
    assert root.bend == 2.0
    assert abs(root.bend_center - 2j) < 1e-12
    inv = Circle(2.0, 2j).recip()
    assert inv.bend == 0.5
    assert abs(inv.bend_center - (-0.5j)) < 1e-12


def test_generic_sqrt():
    assert sqrt(9) == 3.0
    assert abs(sqrt(-1 + 0j) - 1j) < 1e-12
    assert sqrt(-1e-15) == 0.0
    assert sqrt(Circle(9.0, 9 + 0j)) == Circle(3.0, 3 + 0j)
    with pytest.raises(NumericDomainError):
        sqrt(-1.0)


def test_zero_bend():
    line = Circle(0.0, 1 + 0j)
    assert math.isinf(line.radius)
    with pytest.raises(NumericDomainError):
        line.center
    with pytest.raises(NumericDomainError):
        mk_circle(0.0, (0.0, 0.0))


def test_circle_is_immutable():
    c = Circle(1.0, 0j)
    with pytest.raises(dataclasses.FrozenInstanceError):
        c.bend = 2.0


def test_tangency_error():
    a = mk_circle(1.0, (0.0, 0.0))
    b = mk_circle(1.0, (2.0, 0.0))
    assert tangency_error(a, b) < 1e-12
    assert is_tangent(a, b)

    outer = mk_circle(-2.0, (0.0, 0.0))
    inner = mk_circle(1.0, (1.0, 0.0))
    assert tangency_error(outer, inner) < 1e-12

    apart = mk_circle(1.0, (3.0, 0.0))
    assert abs(tangency_error(a, apart) - 1.0) < 1e-12
    assert not is_tangent(a, apart)


def test_sqrt_tolerance_is_relative():
    assert sqrt(-1e-9, scale=1e6) == 0.0
    with pytest.raises(NumericDomainError):
        sqrt(-1e-9)
    with pytest.raises(NumericDomainError):
        sqrt(-1e-3, scale=1e6)
    scaled = Circle(-1e-9, 4 + 0j).sqrt(scale=Circle(1e6, 0j))
    assert scaled.bend == 0.0


def test_sqrt_of_nan():
    with pytest.raises(NumericDomainError):
        sqrt(float("nan"))
