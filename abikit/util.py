"""Small helpers shared by the encoding and ABI description code."""

from __future__ import annotations

_U32_MAX = 0xFFFFFFFF


def pad_u32(value: int) -> bytes:
    """Return a 32-bit unsigned value right-aligned in a 32-byte word."""
    if not 0 <= value <= _U32_MAX:
        raise ValueError(f"value does not fit in 32 bits: {value}")
    return value.to_bytes(32, "big")


def sanitize_name(name: str) -> str:
    """Cut a function or event name at its first ``(``.

    Some ABI files carry names such as ``foo()``; only the part before the
    parenthesis is the name.
    """
    return name.split("(", 1)[0]