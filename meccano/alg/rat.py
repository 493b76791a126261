"""Reduced rationals and rationals times a square root."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .reducer import Red32


@dataclass(frozen=True)
class Rat:
    """A sign with a natural numerator and denominator."""

    neg: bool = False
    num: int = 0
    den: int = 1

    def _signed_num(self) -> int:
        return -self.num if self.neg else self.num

    def add(self, other: "Rat") -> "Rat":
        n1 = self._signed_num() * other.den
        n2 = other._signed_num() * self.den
        return new_rat(n1 + n2, self.den * other.den)

    def mul(self, other: "Rat") -> "Rat":
        if self.num == 0 or other.num == 0:
            return Rat(den=1)
        return new_rat(self._signed_num() * other._signed_num(), self.den * other.den)

    def negate(self) -> "Rat":
        return Rat(not self.neg, self.num, self.den)

    def invert(self) -> "Rat":
        if self.num == 0:
            raise ZeroDivisionError("cannot invert zero")
        return Rat(self.neg, self.den, self.num)

    def sqrt(self, reducer: Red32) -> "Alg":
        """Return ``√(num/den)`` as ``(out/den)√in``.

        Raises ValueError for negative rationals and OverflowError when the
        reduced root exceeds 32 bits.
        """
        if self.neg:
            raise ValueError("square root of a negative rational is imaginary")
        out, inner = reducer.roi_n(1, self.num * self.den)
        return new_alg(new_rat(out, self.den), inner)

    def __str__(self) -> str:
        if self.num == 0:
            return "0"
        sign = "-" if self.neg else ""
        if self.den == 1:
            return f"{sign}{self.num}"
        return f"{sign}{self.num}/{self.den}"


def new_rat(n: int, d: int) -> Rat:
    """Return ``n/d`` in lowest terms; raises ZeroDivisionError for ``d == 0``."""
    if d == 0:
        raise ZeroDivisionError("rational with zero denominator")
    neg = (n < 0 < d) or (d < 0 < n)
    num, den = abs(n), abs(d)
    if num == 0:
        return Rat(neg, 0, den)
    g = math.gcd(num, den)
    return Rat(neg, num // g, den // g)


def new_rat_sin2c(a: int, b: int, c: int) -> Rat:
    """Return the squared sine of the angle opposite ``c``."""
    m = 4 * a * a * b * b
    n = a * a + b * b - c * c
    return new_rat(m - n * n, 4 * a * a * b * b)


@dataclass(frozen=True)
class Alg:
    """The number ``rat × √inner``."""

    rat: Rat
    inner: int

    def multiply(self, other: "Alg", reducer: Red32) -> "Alg":
        out, inner = reducer.roi_n(1, self.inner * other.inner)
        return Alg(self.rat.mul(new_rat(out, 1)).mul(other.rat), inner)

    def __str__(self) -> str:
        if self.inner == 0:
            return "0"
        if self.inner == 1:
            return str(self.rat)
        return f"({self.rat})√({self.inner})"


def new_alg(rat: Rat, inner: int) -> Alg:
    if rat is None:
        raise ValueError("an algebraic number needs a rational part")
    return Alg(rat, inner)


class Algs:
    """Trigonometry of integer triangles with algebraic results."""

    def __init__(self, reducer: Red32) -> None:
        self.reducer = reducer

    def cos_c(self, a: int, b: int, c: int) -> Rat:
        """Cosine of the angle opposite ``c`` by the law of cosines."""
        return new_rat(a * a + b * b - c * c, 2 * a * b)

    def sin_c(self, a: int, b: int, c: int) -> Alg:
        """Sine of the angle opposite ``c``."""
        p = 4 * a * a * b * b
        q = a * a + b * b - c * c
        d = 2 * a * b
        return new_rat(p - q * q, d * d).sqrt(self.reducer)