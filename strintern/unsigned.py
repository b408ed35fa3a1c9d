"""Decimal formatting of 32-bit unsigned integers."""

_UINT32_MAX = 0xFFFFFFFF


def unsigned_string(num: int) -> str:
    """Return the decimal representation of a 32-bit unsigned integer."""
    if not 0 <= num <= _UINT32_MAX:
        raise ValueError(f"{num} is not a 32-bit unsigned integer")
    return str(num)