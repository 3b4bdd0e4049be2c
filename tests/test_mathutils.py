import pytest

from libmykit import mathutils


@pytest.mark.parametrize("nb", [0, 1, 7, 15, 16, 255, 4096, 123456])
@pytest.mark.parametrize("base", [2, 8, 10, 16])
def test_to_base_round_trip(nb, base):
    assert int(mathutils.to_base(nb, base), base) == nb


def test_to_base_decimal_matches_str():
    assert mathutils.to_base(987654, 10) == str(987654)


@pytest.mark.parametrize("nb", [10, 171, 48879])
def test_to_base_uppercase(nb):
    lower = mathutils.to_base(nb, 16)
    upper = mathutils.to_base(nb, 16, True)
    assert upper == lower.upper()
    assert lower == lower.lower()


@pytest.mark.parametrize("nb", [0, 5, 255, 1000, 65535])
@pytest.mark.parametrize("base", [2, 10, 16, 20])
def test_base_length_counts_digits(nb, base):
    expected = len(mathutils.to_base(nb, base)) if base <= 16 else None
    length = mathutils.base_length(nb, base)
    if expected is not None:
        assert length == expected
    assert base ** (length - 1) <= max(nb, 1) < base**length or nb == 0


@pytest.mark.parametrize("args", [(-1, 10), (5, 0), (5, -2), (5, 1), (5, 17)])
def test_to_base_rejects_bad_input(args):
    with pytest.raises(ValueError):
        mathutils.to_base(*args)


def test_base_length_rejects_negative():
    with pytest.raises(ValueError):
        mathutils.base_length(-3, 10)


def test_is_prime_small_values():
    assert [n for n in range(-5, 12) if mathutils.is_prime(n)] == [2, 3, 5, 7, 11]


def test_is_prime_large():
    assert mathutils.is_prime(2147483647) is True
    assert mathutils.is_prime(2147483647 - 2) is False


@pytest.mark.parametrize("nb", [-10, 0, 1, 2, 14, 24, 90, 1000])
def test_find_prime_sup_is_next_prime(nb):
    found = mathutils.find_prime_sup(nb)
    assert found >= nb
    assert mathutils.is_prime(found)
    assert not any(mathutils.is_prime(k) for k in range(nb, found))


def test_is_neg():
    assert mathutils.is_neg(-1) is True
    assert mathutils.is_neg(0) is False
    assert mathutils.is_neg(3) is False


@pytest.mark.parametrize(
    "text, start, expected",
    [
        ("42", 0, 42),
        ("-42abc", 0, -42),
        ("--42", 0, 42),
        ("+-+7", 0, -7),
        ("abc", 0, 0),
        ("xx-12", 2, -12),
        ("", 0, 0),
    ],
)
def test_getnbr(text, start, expected):
    assert mathutils.getnbr(text, start) == expected


@pytest.mark.parametrize("nb, p", [(2, 10), (3, 5), (-2, 7), (7, 1), (10, 9)])
def test_power_in_range(nb, p):
    assert mathutils.power(nb, p) == nb**p


def test_power_edges():
    assert mathutils.power(3, 0) == 1
    assert mathutils.power(5, -1) == 0
    assert mathutils.power(2, 31) == 0


@pytest.mark.parametrize("nb", [0, 1, 2, 15, 16, 17, 99, 100, 12345])
def test_square_root_is_ceiling(nb):
    root = mathutils.square_root(nb)
    assert root * root >= nb
    assert root == 0 or (root - 1) * (root - 1) < nb


def test_square_root_negative_is_zero():
    assert mathutils.square_root(-9) == 0


def test_sqrt_fixed_values():
    assert mathutils.sqrt(0) == 0
    assert mathutils.sqrt(1) == 1
    assert mathutils.sqrt(2) == mathutils.SQRT_2


@pytest.mark.parametrize("nb", [4, 9, 144, 10000])
def test_sqrt_perfect_squares(nb):
    root = mathutils.sqrt(nb)
    assert root * root == nb


@pytest.mark.parametrize("nb", [3, 10, 50, 777, 123456.5])
def test_sqrt_approximates(nb):
    root = mathutils.sqrt(nb)
    assert abs(root * root - nb) < 1e-6 * nb


def test_sqrt_too_large():
    with pytest.raises(OverflowError):
        mathutils.sqrt(mathutils.MAX_SQRT_VALUE)


def test_sqrt_negative():
    with pytest.raises(ValueError):
        mathutils.sqrt(-4)