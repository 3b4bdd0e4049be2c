"""Text, math, linked-list, file, error-message and printf-style formatting helpers."""

__version__ = "0.1.0"

__all__ = [
    "bits",
    "cli",
    "colors",
    "errors",
    "files",
    "linked_list",
    "mathutils",
    "printf",
    "tab",
    "textcheck",
    "textops",
]