"""Rationals and simple algebraic numbers ``(b + c√d)/a``."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Optional

from .integers import AI32, I32, N32_MAX, new_i32
from .reducer import Red32


def reduce2(den: int, num: int) -> tuple[int, int, int]:
    """Divide ``den`` and ``num`` by their common divisor.

    Returns ``(g, den, num)`` where ``g`` is the divisor used.
    """
    g = math.gcd(den, num)
    if g > 1:
        den //= g
        num //= g
    return g, den, num


def reduce3(den: int, b: int, c: int) -> tuple[int, int, int, int]:
    """Divide ``den``, ``b`` and ``c`` by their common divisor.

    Returns ``(g, den, b, c)`` where ``g`` is the divisor used.
    """
    g = math.gcd(den, b, c)
    if g > 1:
        den //= g
        b //= g
        c //= g
    return g, den, b, c


def _value(i: Optional[I32]) -> int:
    return 0 if i is None else i.value()


@dataclass(frozen=True)
class B:
    """A rational with an optional signed numerator and a natural denominator."""

    num: Optional[I32]
    den: int

    def is_zero(self) -> bool:
        return self.num is None or self.num.n == 0

    def _clone(self) -> "B":
        if self.is_zero():
            return new_b0(self.den)
        return _new_b(self.num.negative, self.num.n, self.den)

    def add(self, other: "B") -> "B":
        if self.is_zero():
            return other._clone()
        if other.is_zero():
            return self._clone()
        left = self.num.mul_n(other.den)
        right = other.num.mul_n(self.den)
        total = left.add(right)
        return new_b(_value(total), self.den * other.den)

    def inv(self) -> "B":
        if self.is_zero():
            raise ZeroDivisionError("cannot invert zero")
        return B(I32(self.den, self.num.negative), self.num.n)

    def mul(self, other: "B") -> "B":
        if self.is_zero() or other.is_zero():
            return new_b0(self.den * other.den)
        product = self.num.mul(other.num)
        return new_b(_value(product), self.den * other.den)

    def reduce3(self, third: Optional[I32]) -> tuple["B", Optional[I32]]:
        """Reduce the denominator together with the numerator and ``third``.

        Returns the reduced rational and the reduced ``third``.
        """
        if third is None:
            return self, None
        if self.num is None:
            _, den, n = reduce2(self.den, third.n)
            return B(None, den), I32(n, third.negative)
        _, den, bn, tn = reduce3(self.den, self.num.n, third.n)
        return B(I32(bn, self.num.negative), den), I32(tn, third.negative)

    def __str__(self) -> str:
        if self.is_zero():
            return "+0"
        if self.den == 1:
            return str(self.num)
        return f"{self.num}/{self.den}"


def new_b0(den: int) -> B:
    """A zero with the denominator kept as given."""
    if den == 0:
        raise ZeroDivisionError("rational with zero denominator")
    if den > N32_MAX:
        raise OverflowError("denominator does not fit in 32 bits")
    return B(None, den)


def _check_den(den: int) -> None:
    if den == 0:
        raise ZeroDivisionError("rational with zero denominator")
    if den < 0:
        raise ValueError("denominator must be natural")


def new_b(num: int, den: int) -> B:
    """The reduced rational ``num/den``."""
    _check_den(den)
    if num == 0:
        return new_b0(den)
    _, den, num = reduce2(den, num)
    if den > N32_MAX:
        raise OverflowError("denominator does not fit in 32 bits")
    return B(new_i32(num), den)


def new_b_not_reduce(num: int, den: int) -> B:
    """The rational ``num/den`` without reduction."""
    _check_den(den)
    if num == 0:
        return new_b0(den)
    if den > N32_MAX:
        raise OverflowError("denominator does not fit in 32 bits")
    return B(new_i32(num), den)


def new_b_cos_c(a: int, b: int, c: int) -> B:
    """Cosine of the angle opposite ``c`` by the law of cosines."""
    return new_b(a * a + b * b - c * c, 2 * a * b)


def _new_b(negative: bool, num: int, den: int) -> B:
    if den == 0:
        raise ZeroDivisionError("rational with zero denominator")
    if num > N32_MAX or den > N32_MAX:
        raise OverflowError("value does not fit in 32 bits")
    if num == 0:
        return new_b0(den)
    g = math.gcd(num, den)
    return B(I32(num // g, negative), den // g)


def new_b_plus(num: int, den: int) -> B:
    """The positive reduced rational of two naturals."""
    return _new_b(False, num, den)


def new_b_minus(num: int, den: int) -> B:
    """The negative reduced rational of two naturals."""
    return _new_b(True, num, den)


@dataclass(frozen=True)
class D:
    """The number ``(b + c√d)/a`` with ``ab`` holding ``b/a`` and ``cd`` ``c√d``."""

    ab: B
    cd: AI32

    def __str__(self) -> str:
        ab_zero = self.ab.is_zero()
        cd_zero = self.cd.is_zero()
        if ab_zero and cd_zero:
            return "+0"
        text = ""
        if not ab_zero:
            text += str(self.ab.num)
        if not cd_zero:
            text += str(self.cd)
        if self.ab.den > 1:
            if not ab_zero and not cd_zero:
                text = f"({text})"
            text += f"/{self.ab.den}"
        return text


class Ds:
    """Factory of reduced ``D`` numbers."""

    def __init__(self, reducer: Red32) -> None:
        self.reducer = reducer

    def new_d(self, b: int, c: int, d: int, a: int) -> D:
        """Return the reduced ``(b + c√d)/a``."""
        if a == 0:
            raise ZeroDivisionError("zero denominator")
        _, a, b, c = reduce3(a, b, c)
        ab = new_b_not_reduce(b, a)
        cd = self.reducer.ai(c, d)
        ab, outer = ab.reduce3(cd.outer)
        return D(ab, replace(cd, outer=outer))

    def new_d_sqrt_b(self, b: int, a: int) -> D:
        """Return ``√(b/a)`` written as ``√(ab)/a``."""
        return self.new_d(0, 1, a * b, a)


@dataclass(frozen=True)
class H:
    """A number with nested roots ``gh``, ``ef``, ``cd`` and a rational ``ab``."""

    gh: Optional[AI32] = None
    ef: Optional[AI32] = None
    cd: Optional[AI32] = None
    ab: Optional[B] = None


class Hs:
    """Factory of ``H`` numbers."""

    def __init__(self, reducer: Red32) -> None:
        self.reducer = reducer

    def new_h(self, b: int, c: int, d: int, e: int, f: int, g: int, h: int, a: int) -> H:
        """Build an ``H`` from its coefficients; raises OverflowError on overflow."""
        gh = self.reducer.ai(g, h)
        self.reducer.ai(e, f)
        ab = new_b_not_reduce(b, a)
        return H(gh=gh, ab=ab)