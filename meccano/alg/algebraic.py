"""Algebraic integers and rationals written as nested square roots."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class AZ32:
    """An algebraic integer ``o√(parts...)`` built from nested parts."""

    o: int = 0
    parts: tuple["AZ32", ...] = ()

    def out(self) -> int:
        """The outside factor."""
        return self.o

    def inner(self) -> int:
        """The outside factor of the first inside part, or 1 when there is none."""
        if not self.parts:
            return 1
        return self.parts[0].o

    def format(self, sign: bool) -> str:
        """Format the number, with an explicit ``+`` sign when ``sign`` is set."""
        text = f"{self.o:+d}" if sign else f"{self.o}"
        if self.o == 0 or not self.parts:
            return text
        if len(self.parts) == 1:
            o = self.parts[0].o
            if o < 0:
                text += "i"
                if o != -1:
                    text += f"√{-o}"
            elif o > 1:
                text += f"√{o}"
            return text
        body = "".join(part.format(pos != 0) for pos, part in enumerate(self.parts))
        return f"{text}√({body})"

    def __str__(self) -> str:
        return self.format(True)


def new_az32(*args: int) -> Optional[AZ32]:
    """Build an algebraic integer from its flattened coefficients.

    The first value is the outside factor; the second is the first inside
    part, and the values 2-3, 4-7 and 8-15 form deeper nested parts.
    Returns None when no value is given.
    """
    if not args:
        return None
    count = len(args)
    parts = []
    if count >= 2:
        parts.append(new_az32(args[1]))
    for low, high in ((2, 4), (4, 8), (8, 16)):
        if count >= high:
            parts.append(new_az32(*args[low:high]))
    return AZ32(args[0], tuple(parts))


@dataclass(frozen=True)
class AQ32:
    """A sum of algebraic integers over a natural denominator."""

    num: tuple[AZ32, ...]
    den: int = 1

    def __str__(self) -> str:
        body = "".join(n.format(pos != 0) for pos, n in enumerate(self.num))
        if len(self.num) > 1:
            body = f"({body})"
        if self.den > 1:
            body += f"/{self.den}"
        return body


def new_aq32(num: int, den: int) -> AQ32:
    """The rational ``num/den``."""
    return AQ32((new_az32(num),), den)


def new_aq32_root(out: int, inner: int, den: int) -> AQ32:
    """The number ``out√inner / den``."""
    return AQ32((new_az32(out, inner),), den)