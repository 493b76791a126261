"""Collections of integer solutions that skip scaled repetitions."""

from __future__ import annotations

from typing import Iterable, Sequence

_DEFAULT_CHARS = "abcdefhijkl"


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of two non-negative numbers."""
    while b:
        a, b = b, a % b
    return a


class Sols:
    """Primitive solutions, printed as they are found."""

    def __init__(self, chars: str = _DEFAULT_CHARS) -> None:
        self.chars = chars or _DEFAULT_CHARS
        self.solutions: list[tuple[int, ...]] = []

    @staticmethod
    def _is_scaled(sol: Sequence[int], values: Sequence[int]) -> bool:
        if values[0] % sol[0] != 0:
            return False
        factor = values[0] // sol[0]
        return all(
            s == 0 or (v % s == 0 and v // s == factor)
            for s, v in zip(sol[1:], values[1:])
        )

    def add(self, *values: int, last: str = "") -> bool:
        """Add a solution unless it scales an earlier one.

        Returns True when the solution was added and printed.
        """
        if not values:
            raise ValueError("a solution needs at least one value")
        if len(values) > len(self.chars):
            raise ValueError("more values than names for them")
        if any(self._is_scaled(sol, values) for sol in self.solutions):
            return False
        self.solutions.append(tuple(values))
        line = f"{len(self.solutions):4d}) " + "".join(
            f" {ch}={v:3d}" for ch, v in zip(self.chars, values)
        )
        if last:
            line += f" {last}"
        print(line)
        return True

    def compare(self, expected: Iterable[Sequence[int]]) -> None:
        """Raise ValueError unless the solutions equal ``expected``."""
        expected = [tuple(e) for e in expected]
        if len(expected) != len(self.solutions):
            raise ValueError(
                f"size expected: {len(expected)}, got:{len(self.solutions)}"
            )
        for pos, (exp, sol) in enumerate(zip(expected, self.solutions)):
            if len(exp) != len(sol):
                raise ValueError(
                    f"Pos:{pos} size expected: {len(exp)}, got:{len(sol)}"
                )
            if exp != sol:
                raise ValueError(f"Pos:{pos} size expected: {list(exp)}, got:{list(sol)}")