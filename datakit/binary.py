"""Byte-buffer helpers and conversion between bytes and bit strings."""

from __future__ import annotations


def _check_size(size: int, *buffers) -> None:
    if size < 0:
        raise ValueError("size must not be negative")
    for buffer in buffers:
        if size > len(buffer):
            raise ValueError("size exceeds buffer length")


def bytes_equal(a: bytes, b: bytes, size: int) -> bool:
    """Return whether the first ``size`` bytes of ``a`` and ``b`` are equal."""
    _check_size(size, a, b)
    return bytes(a[:size]) == bytes(b[:size])


def fill_bytes(buffer: bytearray, value: int, size: int) -> None:
    """Set the first ``size`` bytes of ``buffer`` to ``value`` truncated to a byte."""
    _check_size(size, buffer)
    buffer[:size] = bytes([value & 0xFF]) * size


def copy_bytes(dst: bytearray, src: bytes, size: int) -> None:
    """Copy the first ``size`` bytes of ``src`` into ``dst``."""
    _check_size(size, dst, src)
    dst[:size] = bytes(src[:size])


def byte_to_bitchar(byte: int) -> str:
    """Return the eight-character bit string of a byte, most significant first."""
    if not 0 <= byte <= 0xFF:
        raise ValueError("byte out of range")
    return format(byte, "08b")


def bitchar_to_byte(bits: str) -> int:
    """Return the byte described by an eight-character bit string."""
    if len(bits) != 8 or any(c not in "01" for c in bits):
        raise ValueError("expected exactly eight '0' or '1' characters")
    return int(bits, 2)