"""Integer diagonals in hexagon and equilateral triangle frames."""

from __future__ import annotations

import math

from .sols import gcd


def _square_root(value: int) -> int | None:
    root = math.isqrt(value)
    return root if root * root == value else None


def triangle_inside_hexagon(max_size: int) -> list[tuple[int, int, int, int, int]]:
    """Find coprime ``s, o`` where ``3(s² - so + o²)`` is a square.

    Prints and returns rows ``(s, o, c, p, b)``.
    """
    rows = []
    for s in range(1, max_size):
        for o in range(1, s // 2):
            if gcd(s, o) != 1:
                continue
            c = _square_root(3 * s * s - 3 * s * o + 3 * o * o)
            if c is not None:
                row = (s, o, c, s + o, s - 2 * o)
                rows.append(row)
                print("s=%d o=%d c=%d p=%d b=%d" % row)
    return rows


def _diagonal_rows(last: int):
    for a in range(1, last + 1):
        for b in range(1, a // 2 + 1):
            if gcd(a, b) != 1:
                continue
            d = _square_root((a - b) * (a - b) + a * b)
            if d is not None:
                yield a, b, d


def triangles_120_tex(max_size: int) -> list[tuple[int, int, int, int]]:
    """Print a LaTeX table of integer diagonals in equilateral triangles.

    Returns rows ``(a, d, p, b)`` with ``p = a - b``.
    """
    print("\\begin{tabular}{| c | c c c |}")
    print("\\hline")
    print("$a$ & $c$ & $p$ & $b$ \\\\ [0.5ex]")
    print("\\hline\\hline")
    rows = []
    for a, b, d in _diagonal_rows(max_size):
        rows.append((a, d, a - b, b))
        print(f"{a} & {d} & {a - b} & {b} \\\\ \\hline")
    print("\\end{tabular}")
    return rows


def diagonals(max_size: int) -> list[tuple[int, int, int]]:
    """Print and return rows ``(s, b, d)`` of integer diagonals with side below ``max_size``."""
    rows = []
    for a, b, d in _diagonal_rows(max_size - 1):
        rows.append((a - b, b, d))
        print(f"s={a - b:3d} b={b:3d} d={d:3d}")
    return rows