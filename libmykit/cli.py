"""Command that searches a sample text for separator characters."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from libmykit.printf import printf
from libmykit.textcheck import find_any

_SAMPLE = "hello why not, i am dying.\nwaaaaaaaaaahhhhhh\n"
_SEPARATORS = " \n\t"
_SEARCH_START = 20


def _report(text: str) -> None:
    found = find_any(_SEPARATORS, text)
    if found is None:
        printf("%s%c%s%.0d\n", "found nothing", ".", "", 0)
        return
    text_index, separator_index = found
    printf(
        "%s%c%s%.0d\n",
        "found '",
        _SEPARATORS[separator_index],
        "' at: ",
        text_index,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Report the first separator in two parts of the sample text."""
    parser = argparse.ArgumentParser(
        prog="libmykit",
        description="Look for separators in a sample text and report where.",
    )
    parser.parse_args(argv)
    _report(_SAMPLE[_SEARCH_START:])
    _report(_SAMPLE[len(_SAMPLE):])
    return 0


if __name__ == "__main__":
    raise SystemExit(main())