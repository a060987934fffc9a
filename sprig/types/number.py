"""Numeric tower for Sprig.

Two kinds of number exist at runtime:

- ``Fraction``: an exact rational, always kept in lowest terms with a
  strictly positive denominator (the sign lives in the numerator).
- ``float``: the host double, used as-is.

Mixing the two always yields a float; there is no promotion back to an
exact value. A fraction and a float never compare equal, even when they
denote the same quantity.
"""

from __future__ import annotations

import math
import re

from sprig.types.errors import SprigDivisionByZero, SprigTypeError

FRACTION_RE = re.compile(r"^[+-]?[0-9]+(?:/[0-9]+)?$")
FLOAT_RE = re.compile(r"^[+-]?[0-9]+\.[0-9]*$")


class Fraction:
    __slots__ = ("numerator", "denominator")

    def __init__(self, numerator: int, denominator: int = 1):
        if denominator == 0:
            raise SprigDivisionByZero(f"Zero denominator in {numerator}/{denominator}")
        g = math.gcd(numerator, denominator)
        if denominator < 0:
            g = -g
        self.numerator: int = numerator // g
        self.denominator: int = denominator // g

    @classmethod
    def from_token(cls, token: str) -> Fraction:
        """Build a fraction from reader text such as ``-4/8`` or ``12``."""
        if not FRACTION_RE.match(token):
            raise ValueError(f"Not a fraction literal: {token!r}")
        num, _, den = token.partition("/")
        return cls(int(num), int(den) if den else 1)

    # --- arithmetic ---

    def __add__(self, other):
        if isinstance(other, Fraction):
            return Fraction(
                self.numerator * other.denominator + other.numerator * self.denominator,
                self.denominator * other.denominator,
            )
        if isinstance(other, float):
            return float(self) + other
        return NotImplemented

    def __radd__(self, other):
        if isinstance(other, float):
            return other + float(self)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Fraction):
            return Fraction(
                self.numerator * other.denominator - other.numerator * self.denominator,
                self.denominator * other.denominator,
            )
        if isinstance(other, float):
            return float(self) - other
        return NotImplemented

    def __rsub__(self, other):
        if isinstance(other, float):
            return other - float(self)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, Fraction):
            return Fraction(
                self.numerator * other.numerator,
                self.denominator * other.denominator,
            )
        if isinstance(other, float):
            return float(self) * other
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, float):
            return other * float(self)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Fraction):
            if other.numerator == 0:
                raise SprigDivisionByZero(f"Division of {self} by zero")
            return Fraction(
                self.numerator * other.denominator,
                self.denominator * other.numerator,
            )
        if isinstance(other, float):
            return _float_div(float(self), other)
        return NotImplemented

    def __rtruediv__(self, other):
        if isinstance(other, float):
            return _float_div(other, float(self))
        return NotImplemented

    def __neg__(self) -> Fraction:
        return Fraction(-self.numerator, self.denominator)

    def __float__(self) -> float:
        try:
            return self.numerator / self.denominator
        except OverflowError:
            return math.copysign(math.inf, self.numerator)

    # --- comparison ---

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Fraction)
            and self.numerator == other.numerator
            and self.denominator == other.denominator
        )

    def __hash__(self) -> int:
        return hash((Fraction, self.numerator, self.denominator))

    def __str__(self) -> str:
        if self.denominator == 1:
            return str(self.numerator)
        return f"{self.numerator}/{self.denominator}"

    def __repr__(self) -> str:
        return f"Fraction({self.numerator}, {self.denominator})"


ZERO = Fraction(0)
ONE = Fraction(1)
MINUS_ONE = Fraction(-1)


def is_number(value) -> bool:
    return isinstance(value, (Fraction, float))


def _float_div(a: float, b: float) -> float:
    """IEEE division: a zero divisor yields an infinity or NaN instead of raising."""
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _check(op: str, a, b) -> None:
    for value in (a, b):
        if not is_number(value):
            raise SprigTypeError(f"Not a number for {op}: {value}")


def add(a, b):
    _check("+", a, b)
    return a + b


def subtract(a, b):
    _check("-", a, b)
    return a - b


def multiply(a, b):
    _check("*", a, b)
    return a * b


def divide(a, b):
    _check("/", a, b)
    if isinstance(a, float) and isinstance(b, float):
        return _float_div(a, b)
    return a / b


def numbers_equal(a, b) -> bool:
    """Structural equality; a fraction and a float are never equal."""
    _check("=", a, b)
    if type(a) is not type(b):
        return False
    return a == b
