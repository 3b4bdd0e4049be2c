"""Character classes, searching and comparison helpers for ASCII text."""

from __future__ import annotations

from collections.abc import Iterable


def _is_ascii_upper(c: str) -> bool:
    return "A" <= c <= "Z"


def _is_ascii_lower(c: str) -> bool:
    return "a" <= c <= "z"


def find_char(c: str, text: str | None) -> int | None:
    """Return the index of the first ``c`` in ``text``, or None."""
    if text is None:
        return None
    index = text.find(c)
    return None if index == -1 else index


def find_any(chars: str | None, text: str | None) -> tuple[int, int] | None:
    """Find the first character of ``text`` that is one of ``chars``.

    Returns ``(index in text, index in chars)``, or None when nothing matches.
    """
    if text is None or not chars:
        return None
    for text_index, c in enumerate(text):
        chars_index = chars.find(c)
        if chars_index != -1:
            return text_index, chars_index
    return None


def is_alpha_char(c: str) -> bool:
    """Return whether ``c`` is an ASCII letter."""
    return _is_ascii_upper(c) or _is_ascii_lower(c)


def is_digit_char(c: str) -> bool:
    """Return whether ``c`` is an ASCII digit (a ``-`` is not)."""
    return "0" <= c <= "9"


def is_alnum_char(c: str) -> bool:
    """Return whether ``c`` is an ASCII letter or digit."""
    return is_alpha_char(c) or is_digit_char(c)


def is_fence_char(c: str) -> bool:
    """Return whether ``c`` is anything but an ASCII letter or digit."""
    return not is_alnum_char(c)


def is_lower_char(c: str) -> bool:
    """Return whether ``c`` is an ASCII lowercase letter."""
    return _is_ascii_lower(c)


def is_upper_char(c: str) -> bool:
    """Return whether ``c`` is an ASCII uppercase letter."""
    return _is_ascii_upper(c)


def is_print_char(c: str) -> bool:
    """Return whether ``c`` is visible: ``!`` to ``~``, space excluded."""
    return "!" <= c <= "~"


def _all(text: str, predicate) -> bool:
    return all(predicate(c) for c in text)


def is_alnum(text: str) -> bool:
    """Return whether ``text`` holds only ASCII letters and digits."""
    return _all(text, is_alnum_char)


def is_alnum_and(text: str, specials: Iterable[str] | None) -> bool:
    """Return whether ``text`` holds only letters, digits or ``specials``."""
    allowed = set(specials) if specials is not None else set()
    return all(is_alnum_char(c) or c in allowed for c in text)


def is_alpha(text: str) -> bool:
    """Return whether ``text`` holds only ASCII letters."""
    return _all(text, is_alpha_char)


def is_lower(text: str) -> bool:
    """Return whether ``text`` holds only lowercase ASCII letters."""
    return _all(text, is_lower_char)


def is_upper(text: str) -> bool:
    """Return whether ``text`` holds only uppercase ASCII letters."""
    return _all(text, is_upper_char)


def is_print(text: str) -> bool:
    """Return whether every character of ``text`` is visible."""
    return _all(text, is_print_char)


def is_numeric(text: str, include_negatives: bool = False) -> bool:
    """Return whether ``text`` holds only digits.

    With ``include_negatives``, ``-`` is accepted anywhere as well.
    """
    return all(
        is_digit_char(c) or (include_negatives and c == "-") for c in text
    )


def _code_at(text: str, i: int) -> int:
    return ord(text[i]) if i < len(text) else 0


def compare(s1: str, s2: str) -> int:
    """Return 0 when equal, else ``s1[i] - s2[i]`` at the first difference.

    The end of a string counts as a character of code 0.
    """
    for i in range(max(len(s1), len(s2))):
        a, b = _code_at(s1, i), _code_at(s2, i)
        if a != b:
            return a - b
    return 0


def compare_n(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns 0 when they match, else the absolute difference of the first
    differing character codes.
    """
    for i in range(min(n, max(len(s1), len(s2)))):
        a, b = _code_at(s1, i), _code_at(s2, i)
        if a != b:
            return abs(a - b)
    return 0


def find_str(haystack: str, needle: str) -> int | None:
    """Return the index of ``needle`` in ``haystack``, or None.

    An empty haystack never matches.
    """
    index = haystack.find(needle)
    if index == -1 or index >= len(haystack):
        return None
    return index


def count_occurrences(text: str, c: str) -> int:
    """Return how many times ``c`` appears in ``text``."""
    return text.count(c)


def span_until(text: str, n: int, stops: str | None) -> int:
    """Return the length from index ``n`` to the first character in ``stops``.

    Runs to the end of ``text`` when no stop is met. Raises ValueError when
    ``n`` lies outside ``text``.
    """
    if not 0 <= n <= len(text):
        raise ValueError(f"start index {n} outside text of length {len(text)}")
    stop_set = set(stops) if stops else set()
    length = 0
    for c in text[n:]:
        if c in stop_set:
            break
        length += 1
    return length


def int_len(nb: int) -> int:
    """Return the characters ``nb`` takes in decimal, sign included."""
    return len(str(nb))