import pytest

from meccano.alg.algebraic import AQ32, new_aq32, new_aq32_root, new_az32


@pytest.mark.parametrize(
    "args, expected",
    [
        ((1,), "+1"),
        ((1, 5), "+1√5"),
        ((1, 30, -6, 5), "+1√(30-6√5)"),
        ((1, 2, 0, 0, 1, 2, 1, 3), "+1√(2+0+1√(2+1√3))"),
        ((-1,), "-1"),
        ((1, 17), "+1√17"),
        ((1, 34, -2, 17), "+1√(34-2√17)"),
        ((2, 17, 3, 17, -1, 170, 38, 17), "+2√(17+3√17-1√(170+38√17))"),
    ],
)
def test_az32_strings(args, expected):
    assert str(new_az32(*args)) == expected


def test_az32_empty_is_none():
    assert new_az32() is None


def test_az32_imaginary():
    assert str(new_az32(2, -1)) == "+2i"
    assert str(new_az32(2, -3)) == "+2i√3"


def test_az32_zero_outside_hides_root():
    assert str(new_az32(0, 5)) == "+0"


def test_az32_out_and_inner():
    a = new_az32(7, 5)
    assert a.out() == 7
    assert a.inner() == 5
    assert new_az32(7).inner() == 1


def test_az32_format_without_sign():
    assert new_az32(1, 5).format(False) == "1√5"


def test_aq32_rational():
    assert str(new_aq32(3, 4)) == "3/4"
    assert str(new_aq32(-3, 1)) == "-3"


def test_aq32_root():
    assert str(new_aq32_root(2, 5, 3)) == "2√5/3"


def test_aq32_sum():
    q = AQ32((new_az32(1), new_az32(1, 5)), 4)
    assert str(q) == "(1+1√5)/4"