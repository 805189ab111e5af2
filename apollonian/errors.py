"""Exceptions raised by the gasket generator."""


class GasketError(Exception):
    """Base class for gasket generation failures."""


class InvalidArity(GasketError, ValueError):
    """A solver or builder was handed the wrong number of values."""


class NumericDomainError(GasketError, ArithmeticError):
    """Square root of a negative real, or division by zero.

    Raised when the seed bends do not describe mutually tangent circles.
    """
