"""Numeric and bit-pattern conversions between 64-bit integers and doubles."""

from __future__ import annotations

import struct

_INT64_MIN = -(1 << 63)
_UINT64_MAX = (1 << 64) - 1


def double_to_int(value: float) -> int:
    """Truncate a double towards zero."""
    return int(value)


def long_to_double(value: int) -> float:
    """Convert an integer to a double."""
    return float(value)


def double_to_bits(value: float) -> int:
    """Return the IEEE 754 bit pattern of a double as a signed 64-bit integer."""
    return struct.unpack("<q", struct.pack("<d", value))[0]


def bits_to_double(bits: int) -> float:
    """Interpret a 64-bit pattern (signed or unsigned) as a double."""
    if not _INT64_MIN <= bits <= _UINT64_MAX:
        raise OverflowError("bit pattern does not fit in 64 bits")
    return struct.unpack("<d", struct.pack("<Q", bits & _UINT64_MAX))[0]