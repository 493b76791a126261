import pytest

from meccano.alg.integers import N32_MAX
from meccano.alg.rational import (
    Ds,
    Hs,
    new_b,
    new_b_cos_c,
    new_b_minus,
    new_b_not_reduce,
    new_b_plus,
    reduce2,
    reduce3,
)
from meccano.alg.reducer import Red32

PRIMORIAL = 2 * 3 * 5 * 7 * 11 * 13


@pytest.fixture(scope="module")
def ds():
    return Ds(Red32())


@pytest.mark.parametrize(
    "a, b, c, expected",
    [
        (0, 0, 0, (0, 0, 0, 0)),
        (1, 0, 0, (1, 1, 0, 0)),
        (1, 1, 0, (1, 1, 1, 0)),
        (1, 1, 1, (1, 1, 1, 1)),
        (3, 4, 6, (1, 3, 4, 6)),
        (1, 10, 20, (1, 1, 10, 20)),
        (19, 23, 29, (1, 19, 23, 29)),
        (1001, 1001, 1001, (1001, 1, 1, 1)),
        (3003, 1001, 7007, (1001, 3, 1, 7)),
        (1000, 1001, 1002, (1, 1000, 1001, 1002)),
        (30, -45, -60, (15, 2, -3, -4)),
        (2, 0, 1, (1, 2, 0, 1)),
    ],
)
def test_reduce3(a, b, c, expected):
    assert reduce3(a, b, c) == expected


def test_reduce2():
    assert reduce2(4, -6) == (2, 2, -3)


@pytest.mark.parametrize(
    "num, den, expected",
    [
        (0, 1, "+0"),
        (-1, 1, "-1"),
        (2, 4, "+1/2"),
        (-2 * 5 * 7 * 11, 2 * 3 * 5 * 11, "-7/3"),
        (PRIMORIAL, PRIMORIAL * 17, "+1/17"),
        (10, 1, "+10"),
        (N32_MAX, N32_MAX, "+1"),
        (N32_MAX, 1, "+4294967295"),
        (1, N32_MAX, "+1/4294967295"),
    ],
)
def test_new_b(num, den, expected):
    assert str(new_b(num, den)) == expected


def test_new_b_infinite():
    with pytest.raises(ZeroDivisionError):
        new_b(0, 0)


@pytest.mark.parametrize(
    "num, den", [(1, N32_MAX + 1), (N32_MAX + 1, 1), (-(N32_MAX + 1), 1)]
)
def test_new_b_overflow(num, den):
    with pytest.raises(OverflowError):
        new_b(num, den)


def _named():
    return {
        "zero": new_b(0, 1),
        "minus1": new_b(-1, 1),
        "half": new_b(2, 4),
        "ten": new_b(10, 1),
        "one_17th": new_b(PRIMORIAL, PRIMORIAL * 17),
    }


def test_add():
    n = _named()
    half, one_17th = n["half"], n["one_17th"]
    assert str(n["zero"].add(n["zero"])) == "+0"
    assert str(n["zero"].add(n["minus1"])) == "-1"
    assert str(n["minus1"].add(n["minus1"])) == "-2"
    assert str(half.add(half)) == "+1"
    assert str(one_17th.add(one_17th)) == "+2/17"
    assert str(half.add(one_17th)) == "+19/34"
    assert str(half.add(one_17th).add(one_17th)) == "+21/34"
    assert str(half.add(one_17th).add(one_17th).add(half)) == "+19/17"
    assert str(n["ten"].add(half)) == "+21/2"


def test_mul():
    n = _named()
    half, one_17th = n["half"], n["one_17th"]
    assert str(n["zero"].mul(n["zero"])) == "+0"
    assert str(n["zero"].mul(n["minus1"])) == "+0"
    assert str(n["minus1"].mul(n["minus1"])) == "+1"
    assert str(half.mul(half)) == "+1/4"
    assert str(one_17th.mul(one_17th)) == "+1/289"
    assert str(half.mul(one_17th)) == "+1/34"
    assert str(half.mul(one_17th).mul(one_17th)) == "+1/578"
    assert str(half.mul(one_17th).mul(one_17th).mul(half)) == "+1/1156"
    assert str(n["ten"].mul(half)) == "+5"
    assert str(new_b(-144, 130).mul(new_b(26, 12))) == "-12/5"


def test_inv():
    n = _named()
    assert str(n["minus1"].inv()) == "-1"
    assert str(n["minus1"].inv().inv().inv()) == "-1"
    assert str(n["half"].inv()) == "+2"
    assert str(new_b(-2 * 5 * 7 * 11, 2 * 3 * 5 * 11).inv()) == "-3/7"
    assert str(n["one_17th"].inv()) == "+17"
    assert str(n["ten"].inv()) == "+1/10"
    assert str(n["ten"].inv().inv()) == "+10"
    with pytest.raises(ZeroDivisionError):
        n["zero"].inv()


def test_is_zero():
    assert new_b(0, 5).is_zero()
    assert not new_b(1, 5).is_zero()


def test_not_reduce_keeps_terms():
    assert str(new_b_not_reduce(3, 6)) == "+3/6"


def test_plus_minus_and_cosine():
    assert str(new_b_plus(2, 4)) == "+1/2"
    assert str(new_b_minus(2, 4)) == "-1/2"
    assert str(new_b_cos_c(1, 1, 1)) == "+1/2"
    with pytest.raises(ZeroDivisionError):
        new_b_plus(1, 0)


@pytest.mark.parametrize(
    "b, c, d, a, expected",
    [
        (0, 0, 0, 1, "+0"),
        (-1, 0, 0, 1, "-1"),
        (1, 0, 0, 2, "+1/2"),
        (10, 0, 0, 1, "+10"),
        (PRIMORIAL, 0, 0, PRIMORIAL * 17, "+1/17"),
        (0, 1, -1, 1, "+1i"),
        (0, 1, 2, 1, "+1√2"),
        (0, 1, 2, 2, "+1√2/2"),
        (1, 1, 2, 2, "(+1+1√2)/2"),
        (-2, -2, 2, 2, "-1-1√2"),
        (-2, -1, 8, 2, "-1-1√2"),
        (-1, 1, 5, 4, "(-1+1√5)/4"),
        (158, 632, 5, 316, "(+1+4√5)/2"),
    ],
)
def test_new_d(ds, b, c, d, a, expected):
    assert str(ds.new_d(b, c, d, a)) == expected


def test_new_d_infinite(ds):
    with pytest.raises(ZeroDivisionError):
        ds.new_d(0, 0, 0, 0)


@pytest.mark.parametrize(
    "b, a, expected",
    [
        (0, 1, "+0"),
        (1, 1, "+1"),
        (1, 5, "+1√5/5"),
        (-1, 1, "+1i"),
        (-1, 2, "+1i√2/2"),
    ],
)
def test_new_d_sqrt_b(ds, b, a, expected):
    assert str(ds.new_d_sqrt_b(b, a)) == expected


def test_new_d_sqrt_b_infinite(ds):
    with pytest.raises(ZeroDivisionError):
        ds.new_d_sqrt_b(0, 0)


def test_new_h():
    h = Hs(Red32()).new_h(1, 2, 3, 4, 5, 6, 7, 9)
    assert str(h.gh) == "+6√7"
    assert str(h.ab) == "+1/9"