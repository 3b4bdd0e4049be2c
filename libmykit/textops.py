"""Word splitting, case changes, slicing, joining and writing of text."""

from __future__ import annotations

import sys
from itertools import groupby
from typing import TextIO

DEFAULT_SEPARATORS = " \n"
NIL_TEXT = "(nil)"

_UPPER_TABLE = str.maketrans(
    "abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
)
_LOWER_TABLE = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def _check_index(text: str, n: int, allow_end: bool) -> None:
    limit = len(text) if allow_end else len(text) - 1
    if not 0 <= n <= limit:
        raise ValueError(f"index {n} outside text of length {len(text)}")


def split_words(text: str | None, separators: str | None = None) -> list[str]:
    """Return the words of ``text``: runs of characters not in ``separators``.

    ``separators`` defaults to space and newline.
    """
    if not text:
        return []
    seps = set(DEFAULT_SEPARATORS if separators is None else separators)
    return [
        "".join(run)
        for is_sep, run in groupby(text, key=lambda c: c in seps)
        if not is_sep
    ]


def count_words(text: str | None, separators: str | None = None) -> int:
    """Return how many words :func:`split_words` finds in ``text``."""
    return len(split_words(text, separators))


def split_words_from(text: str, separators: str | None, n: int) -> list[str]:
    """Split the part of ``text`` starting at index ``n`` into words."""
    _check_index(text, n, allow_end=True)
    return split_words(text[n:], separators)


def split_words_until(text: str, separators: str | None, c: str) -> list[str]:
    """Split the part of ``text`` before the first ``c`` into words.

    When ``c`` does not occur the whole text is split.
    """
    index = text.find(c)
    if index != -1:
        text = text[:index]
    return split_words(text, separators)


def reverse(text: str) -> str:
    """Return ``text`` reversed."""
    return "".join(reversed(text))


def capitalize(text: str) -> str:
    """Uppercase every ASCII lowercase letter that starts the text or follows a space."""
    chars = list(text)
    for i, c in enumerate(chars):
        if "a" <= c <= "z" and (i == 0 or chars[i - 1] == " "):
            chars[i] = c.translate(_UPPER_TABLE)
    return "".join(chars)


def lowcase(text: str) -> str:
    """Lowercase the ASCII letters of ``text``; other characters are kept."""
    return text.translate(_LOWER_TABLE)


def upcase(text: str) -> str:
    """Uppercase the ASCII letters of ``text``; other characters are kept."""
    return text.translate(_UPPER_TABLE)


def int_to_str(nb: int) -> str:
    """Return ``nb`` written in decimal."""
    return str(nb)


def nullify_from_till(text: str, n: int, c: str, backward: bool = False) -> str:
    """Blank characters from index ``n`` up to the first ``c`` and return what still reads.

    Going forward only index ``n`` itself is blanked; going backward every
    character from ``n`` down to (not including) the nearest ``c`` is blanked.
    The result is cut at the first blanked character.
    """
    _check_index(text, n, allow_end=False)
    if text[n] == c:
        return text
    if not backward:
        return text[:n]
    stop = text.rfind(c, 0, n)
    return text[: stop + 1]


def slice_range(src: str, n: int, m: int) -> str:
    """Return ``src`` from index ``n`` to index ``m`` inclusive.

    An ``m`` past the end copies up to the end. Raises ValueError when ``n``
    is not an index of ``src``.
    """
    _check_index(src, n, allow_end=False)
    if m < n:
        return ""
    return src[n : m + 1]


def copy_until(src: str, n: int, c: str) -> str:
    """Return ``src`` from index ``n`` up to (not including) the next ``c``."""
    _check_index(src, n, allow_end=True)
    stop = src.find(c, n)
    return src[n:] if stop == -1 else src[n:stop]


def dup_till(src: str, c: str) -> str:
    """Return ``src`` up to (not including) the first ``c``."""
    return copy_until(src, 0, c)


def dupcat(s1: str | None, s2: str | None) -> str | None:
    """Return ``s1 + s2``; a missing side is left out, both missing gives None."""
    if s1 is None and s2 is None:
        return None
    return (s1 or "") + (s2 or "")


def dup2cat(s1: str | None, s2: str | None, s3: str | None) -> str | None:
    """Return ``s1 + s2 + s3``, or None when any of them is missing."""
    if s1 is None or s2 is None or s3 is None:
        return None
    return s1 + s2 + s3


def dupncat(s1: str | None, s2: str, n: int) -> str | None:
    """Return ``s1`` followed by the first ``n`` characters of ``s2``."""
    if n < 0:
        raise ValueError("length must not be negative")
    return dupcat(s1, s2[:n])


def putstr(text: str | None, stream: TextIO | None = None) -> int:
    """Write ``text`` (``(nil)`` for None) and return the characters written."""
    out = sys.stdout if stream is None else stream
    shown = NIL_TEXT if text is None else text
    out.write(shown)
    return len(shown)


def putint(nb: int, stream: TextIO | None = None) -> int:
    """Write ``nb`` in decimal and return the characters written."""
    return putstr(int_to_str(nb), stream)


def putstr_range(text: str, i: int, end: int, stream: TextIO | None = None) -> int:
    """Write ``text`` from index ``i`` to ``end`` inclusive."""
    return putstr(slice_range(text, i, end), stream)