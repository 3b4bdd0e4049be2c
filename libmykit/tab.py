"""Helpers for lists of strings."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TextIO

from libmykit.textops import putstr

DEFAULT_SEPARATOR = ", "


def put_tab(
    items: Sequence[str], separator: str | None = None, stream: TextIO | None = None
) -> int:
    """Write the items joined by ``separator`` (default ``", "``).

    Returns the characters written.
    """
    sep = DEFAULT_SEPARATOR if separator is None else separator
    written = 0
    for i, item in enumerate(items):
        if i:
            written += putstr(sep, stream)
        written += putstr(item, stream)
    return written


def extend_tab(items: Sequence[str], nmemb: int) -> list[str | None]:
    """Return a new list of ``nmemb`` slots holding the items, then None.

    Raises ValueError when ``nmemb`` is not positive or too small for the items.
    """
    if nmemb <= 0:
        raise ValueError("number of members must be positive")
    if nmemb < len(items):
        raise ValueError(f"{nmemb} slots cannot hold {len(items)} items")
    extended: list[str | None] = list(items)
    extended.extend([None] * (nmemb - len(items)))
    return extended


def nullify_tab(items: list[str | None] | None) -> None:
    """Set every item up to the first None to None, in place."""
    if items is None:
        raise ValueError("no list to nullify")
    for i, item in enumerate(items):
        if item is None:
            break
        items[i] = None