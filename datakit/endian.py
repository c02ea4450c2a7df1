"""Byte-order detection and conversion."""

from __future__ import annotations

import sys


def is_little_endian() -> bool:
    """Return whether the host stores integers least significant byte first."""
    return sys.byteorder == "little"


def reverse_bytes(data: bytes) -> bytes:
    """Return ``data`` with its byte order reversed."""
    return bytes(data)[::-1]


def to_big_endian(data: bytes) -> bytes:
    """Convert a value in host byte order to big-endian byte order."""
    if is_little_endian():
        return reverse_bytes(data)
    return bytes(data)