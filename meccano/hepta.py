"""Integer diagonals in heptagon frames."""

from __future__ import annotations

import math

from .sols import Sols


def diagonals(max_size: int) -> Sols:
    """Find primitive ``a, b, c`` with ``c² = 2a² - ab + b²`` and ``b < a/2``."""
    sols = Sols()
    for a in range(2, max_size + 1):
        b_max = -(-a // 2)
        aa = 2 * a * a
        for b in range(1, b_max):
            f = aa - a * b + b * b
            c = math.isqrt(f)
            if c * c == f:
                sols.add(a, b, c)
    return sols