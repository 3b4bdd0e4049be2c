"""Byte-order helpers for 32-bit signed integers."""


def swap_int_endians(value: int) -> int:
    """Return ``value`` with the byte order of its 32-bit form reversed."""
    raw = (value & 0xFFFFFFFF).to_bytes(4, "big")
    return int.from_bytes(raw, "little", signed=True)