"""Integer helpers: base conversion, primes, parsing, powers and roots."""

from __future__ import annotations

import math

MAX_SQRT_VALUE = 1048577
MAX_SQRT_PRECISION = 1.0e-15
SQRT_2 = 1.41421356237309504880
INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

_DIGITS = "0123456789abcdef"


def _check_base(nb: int, base: int, max_base: int | None) -> None:
    if nb < 0:
        raise ValueError("number must not be negative")
    if base < 2 or (max_base is not None and base > max_base):
        raise ValueError(f"unsupported base {base}")


def to_base(nb: int, base: int, uppercase: bool = False) -> str:
    """Return ``nb`` written in ``base`` (2 to 16)."""
    _check_base(nb, base, len(_DIGITS))
    digits = _DIGITS.upper() if uppercase else _DIGITS
    out = []
    while True:
        nb, rem = divmod(nb, base)
        out.append(digits[rem])
        if nb == 0:
            break
    return "".join(reversed(out))


def base_length(nb: int, base: int) -> int:
    """Return how many digits ``nb`` takes in ``base``."""
    _check_base(nb, base, None)
    length = 1
    while nb >= base:
        nb //= base
        length += 1
    return length


def is_prime(nb: int) -> bool:
    """Return whether ``nb`` is a prime number."""
    if nb < 2:
        return False
    return all(nb % x for x in range(2, math.isqrt(nb) + 1))


def find_prime_sup(nb: int) -> int:
    """Return the smallest prime greater than or equal to ``nb``."""
    candidate = max(nb, 2)
    while not is_prime(candidate):
        candidate += 1
    return candidate


def is_neg(n: int) -> bool:
    """Return whether ``n`` is negative."""
    return n < 0


def getnbr(text: str, start: int = 0) -> int:
    """Parse the number at ``start``: leading signs, then digits.

    An odd count of ``-`` signs makes the result negative; no digits gives 0.
    """
    pos = start
    minus = 0
    while pos < len(text) and text[pos] in "+-":
        minus += text[pos] == "-"
        pos += 1
    nb = 0
    while pos < len(text) and "0" <= text[pos] <= "9":
        nb = nb * 10 + ord(text[pos]) - ord("0")
        pos += 1
    return -nb if minus % 2 else nb


def power(nb: int, p: int) -> int:
    """Return ``nb`` to the power ``p``.

    Negative exponents give 0, and so does a result outside 32-bit range.
    """
    if p == 0:
        return 1
    if p < 0:
        return 0
    result = nb
    for _ in range(p - 1):
        result *= nb
        if not INT_MIN <= result <= INT_MAX:
            return 0
    return result


def square_root(nb: int) -> int:
    """Return the smallest whole number whose square is at least ``nb``."""
    i = 0
    while i * i < nb:
        i += 1
    return i


def _digit_count(nb: int) -> int:
    return len(str(abs(nb))) if nb else 1


def sqrt(nb: float) -> float:
    """Return the square root of ``nb`` by decimal refinement.

    Raises OverflowError from MAX_SQRT_VALUE upwards, ValueError below zero.
    """
    if nb == 0:
        return 0.0
    if nb == 1:
        return 1.0
    if nb == 2:
        return SQRT_2
    if nb >= MAX_SQRT_VALUE:
        raise OverflowError("value too large for sqrt")
    if nb < 0:
        raise ValueError("sqrt of a negative number")
    max_precision = MAX_SQRT_PRECISION * (_digit_count(int(nb)) * 10)
    step = 0.1
    root = float(square_root(int(nb)))
    while step > max_precision and root * root != nb:
        if root * root < nb:
            root += step
            step /= 10
        if root * root <= nb:
            break
        root -= step
    return root