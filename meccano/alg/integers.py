"""Signed 32-bit magnitudes and nested square roots built from them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

N32_MAX = 0xFFFFFFFF


def new_i32(z: int) -> Optional["I32"]:
    """Return the 32-bit integer for ``z``, or None when ``z`` is zero.

    Raises OverflowError when the magnitude does not fit in 32 bits.
    """
    if z == 0:
        return None
    if abs(z) > N32_MAX:
        raise OverflowError(f"{z} does not fit in 32 bits")
    return I32(abs(z), z < 0)


def _value(i: Optional["I32"]) -> int:
    return 0 if i is None else i.value()


def format_i32(value: Optional["I32"]) -> str:
    """Format an optional 32-bit integer, writing ``+0`` for None."""
    return "+0" if value is None else str(value)


@dataclass(frozen=True)
class I32:
    """A sign and a 32-bit magnitude."""

    n: int
    negative: bool = False

    def value(self) -> int:
        return -self.n if self.negative else self.n

    def add(self, other: Optional["I32"]) -> Optional["I32"]:
        return new_i32(self.value() + _value(other))

    def add_n(self, n: int) -> Optional["I32"]:
        return new_i32(self.value() + n)

    def mul(self, other: Optional["I32"]) -> Optional["I32"]:
        return new_i32(self.value() * _value(other))

    def mul_n(self, n: int) -> Optional["I32"]:
        return new_i32(self.value() * n)

    def __str__(self) -> str:
        return f"{'-' if self.negative else '+'}{self.n}"


@dataclass(frozen=True)
class AI32:
    """An algebraic integer ``outer√(inner + ext)``; missing parts are zero."""

    outer: Optional[I32] = None
    inner: Optional[I32] = None
    ext: Optional["AI32"] = None

    def out_value(self) -> int:
        return _value(self.outer)

    def in_value(self) -> int:
        return _value(self.inner)

    def is_zero(self) -> bool:
        if self.outer is None or self.outer.n == 0:
            return True
        if self.ext is None:
            return self.inner is None or self.inner.n == 0
        return False

    def __str__(self) -> str:
        if self.is_zero():
            return "+0"
        out = str(self.outer)
        inner = self.inner
        if self.ext is None or self.ext.is_zero():
            if inner is None or inner.n == 0:
                return "+0"
            if inner.negative:
                return out + "i" + (f"√{inner.n}" if inner.n > 1 else "")
            if inner.n == 1:
                return out
            return f"{out}√{inner.n}"
        if inner is None or inner.n == 0:
            head = ""
        else:
            head = f"{'-' if inner.negative else ''}{inner.n}"
        return f"{out}√({head}{self.ext})"