"""Reduction of square roots to a maximal outside factor."""

from __future__ import annotations

import math
from functools import lru_cache
from typing import Optional

from .integers import AI32, I32, N32_MAX, new_i32

_Z_MAX = 2**63 - 1
_SIEVE_LIMIT = 0xFFFF


@lru_cache(maxsize=None)
def _primes_below(limit: int) -> tuple:
    composite = bytearray(limit)
    for i in range(2, math.isqrt(limit) + 1):
        if not composite[i]:
            composite[i * i :: i] = b"\x01" * len(range(i * i, limit, i))
    return tuple(i for i in range(2, limit) if not composite[i])


def _check_z(*values: int) -> None:
    for v in values:
        if abs(v) > _Z_MAX:
            raise OverflowError(f"{v} does not fit in 64 bits")


def _signed(magnitude: int, negative: bool) -> int:
    return -magnitude if negative else magnitude


class Red32:
    """Factory of reduced algebraic integers using the primes below 65535."""

    def __init__(self) -> None:
        self.primes = _primes_below(_SIEVE_LIMIT)

    def ai(self, out: int, inner: int, ext: Optional[AI32] = None) -> AI32:
        """Return the reduced form of ``out√(inner + ext)``.

        Raises OverflowError when a reduced part exceeds 32 bits.
        """
        result = self._ai(out, inner, ext)
        return AI32() if result is None else result

    def roi(self, out: int, inner: int) -> AI32:
        """Return ``out√inner`` with the largest square moved outside."""
        result = self._roi(out, inner)
        return AI32() if result is None else result

    def _ai(self, out: int, inner: int, ext: Optional[AI32]) -> Optional[AI32]:
        if ext is None:
            return self._roi(out, inner)
        eo1 = ext.out_value()
        if eo1 == 0:
            return self._roi(out, inner)
        oi, ii, eo2 = self.roie(out, inner, eo1)
        if ext.ext is None and ext.in_value() == 1 and ii != 0:
            return self._roi(oi, ii + eo2)
        nested = self._ai(eo2, ext.in_value(), ext.ext)
        return AI32(new_i32(oi), new_i32(ii), nested)

    def _roi(self, out: int, inner: int) -> Optional[AI32]:
        _check_z(out, inner)
        if out == 0 or inner == 0:
            return None
        no, na = self.roi_n(abs(out), abs(inner))
        return AI32(I32(no, out < 0), I32(na, inner < 0))

    def roi_n(self, out: int, inner: int) -> tuple[int, int]:
        """Move every square factor of ``inner`` into ``out``.

        For example ``(3, 20)`` becomes ``(6, 5)``.
        """
        if out == 0 or inner == 0:
            return 0, 0
        for p in self.primes:
            pp = p * p
            if inner < pp:
                break
            while inner % pp == 0:
                out *= p
                inner //= pp
        if out > N32_MAX or inner > N32_MAX:
            raise OverflowError("reduced root does not fit in 32 bits")
        return out, inner

    def roie(self, out: int, inner_a: int, inner_b: int) -> tuple[int, int, int]:
        """Signed form of :meth:`roie_n`; zero ``out`` gives all zeros."""
        _check_z(out, inner_a, inner_b)
        if out == 0:
            return 0, 0, 0
        no, na, nb = self.roie_n(abs(out), abs(inner_a), abs(inner_b))
        return (
            _signed(no, out < 0),
            _signed(na, inner_a < 0),
            _signed(nb, inner_b < 0),
        )

    def roie_n(self, out: int, inner_a: int, inner_b: int) -> tuple[int, int, int]:
        """Move the squares common to both inner values into ``out``.

        For example ``(5, 12, 56)`` becomes ``(10, 3, 14)``.
        """
        if inner_a > 1 and inner_b > 1:
            for p in self.primes:
                pp = p * p
                if pp > inner_a or pp > inner_b:
                    break
                while inner_a % pp == 0 and inner_b % pp == 0:
                    out *= p
                    inner_a //= pp
                    inner_b //= pp
        if out > N32_MAX or inner_a > N32_MAX or inner_b > N32_MAX:
            raise OverflowError("reduced root does not fit in 32 bits")
        return out, inner_a, inner_b