"""Terminal escape sequences for coloured and bold output."""

from enum import Enum


class Color(str, Enum):
    """ANSI escape sequences."""

    DEFAULT = "\033[m"
    BLACK = "\033[30m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    PURPLE = "\033[35m"
    CYAN = "\033[36m"
    WHITE = "\033[37m"
    BOLD = "\033[1m"

    def __str__(self) -> str:
        return self.value