# meccano

Tools for finding lengths that meccano strips can make exactly: integer
diagonals inside heptagonal and hexagonal frames, and exact arithmetic on the
rationals, square roots and nested radicals that come out of triangle frames.

## Install

    pip install .

For the tests:

    pip install ".[test]"
    pytest

## Command line

    meccano [SEARCH] [--max N]

`SEARCH` is one of:

- `hexa-diagonals` (the default): prints `s, b, d` rows of integer
  diagonals in equilateral triangle frames with side below `N`.
- `hexa-triangles`: prints the same triangles as a LaTeX tabular.
- `hexa-inside`: prints `s, o, c, p, b` rows of triangles inside hexagons.
- `hepta-diagonals`: prints scale-free `a, b, c` heptagon diagonals.

`--max` sets the search limit; it defaults to 200.

## Library

Integer diagonals:

```python
from meccano.hepta import diagonals

sols = diagonals(20)          # a Sols collection of scale-free (a, b, c) triples
print(sols.solutions)
```

```python
from meccano.hexa import diagonals, triangle_inside_hexagon, triangles_120_tex

rows = diagonals(50)          # prints and returns (s, b, d) rows
table = triangles_120_tex(48) # prints a LaTeX tabular, returns (a, d, p, b) rows
inside = triangle_inside_hexagon(100)  # prints and returns (s, o, c, p, b) rows
```

`meccano.sols.Sols` keeps only solutions that are not scaled copies of
earlier ones. `Sols.add(*values, last="")` prints each new solution and
returns whether it was kept; `Sols.compare(expected)` raises `ValueError`
when the kept solutions differ from the expected rows.
`meccano.sols.gcd` is the greatest common divisor.

Exact algebra, in `meccano.alg`:

- `meccano.alg.rat`: `new_rat`, `new_rat_sin2c`, `Rat` (`add`, `mul`,
  `negate`, `invert`, `sqrt`), `Alg` (a rational times the square root of a
  natural, with `multiply`) and `Algs` (`cos_c`, `sin_c` from the law of
  cosines).
- `meccano.alg.reducer.Red32`: reduces `out√in` (`roi`, `roi_n`) and nested
  `out√(in + e√f)` forms (`ai`, `roie`, `roie_n`) by pulling square factors
  out, raising `OverflowError` when a result exceeds 32 bits.
- `meccano.alg.integers`: `new_i32`, `I32` signed 32-bit magnitudes and
  `AI32` algebraic integers.
- `meccano.alg.algebraic`: `new_az32`, `new_aq32` and `new_aq32_root` for
  writing nested radicals such as `+2√(17+3√17-1√(170+38√17))`.
- `meccano.alg.rational`: `B` rationals (`new_b`, `new_b_cos_c`, ...),
  `Ds` building reduced `(b + c√d)/a` numbers and `Hs` building `H` numbers.

Division by zero raises `ZeroDivisionError`, square roots of negative
rationals raise `ValueError`, and values beyond 32 bits raise
`OverflowError`.

```python
from meccano.alg.rat import new_rat
from meccano.alg.reducer import Red32

red = Red32()
print(new_rat(1, 18).sqrt(red))   # (1/6)√(2)
```

## What it does not do

The searches cover only heptagon and hexagon integer diagonals. There are no
searches over triangle frames with extended strips or pairs of triangles, and
the algebra has no general arithmetic (sums, products or square roots) on
nested radicals: `AZ32` and `AQ32` only build and print them, and `Hs`
keeps just the reduced `g√h` part and the rational part.