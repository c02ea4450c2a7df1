"""Packed 32-bit error codes and the codes used by the linked list."""

from __future__ import annotations

from enum import IntEnum

MASK_SIGN = 0x80000000
MASK_RESERVED = 0x7F000000
MASK_RECORD_A = 0x00FFF000
MASK_RECORD_B = 0x00000FFF

SHIFT_SIGN = 31
SHIFT_RESERVED = 24
SHIFT_RECORD_A = 12
SHIFT_RECORD_B = 0


class ListError(IntEnum):
    """Error codes of the linked-list container."""

    SUCCESS = 0x00000000
    UNDEFINED = 0x00000001
    ERROR = 0x80000000
    LISTNULL = 0x80001000
    ALLOCNULL = 0x80001001
    ACCESSNULL = 0x80001002
    OUTOFRANGE = 0x80002000


def get_sign(code: int) -> int:
    """Return the sign bit of a packed code."""
    return (code & MASK_SIGN) >> SHIFT_SIGN


def get_reserved(code: int) -> int:
    """Return the 7-bit reserved field of a packed code."""
    return (code & MASK_RESERVED) >> SHIFT_RESERVED


def get_record_a(code: int) -> int:
    """Return the 12-bit record A field of a packed code."""
    return (code & MASK_RECORD_A) >> SHIFT_RECORD_A


def get_record_b(code: int) -> int:
    """Return the 12-bit record B field of a packed code."""
    return (code & MASK_RECORD_B) >> SHIFT_RECORD_B


def make_code(sign: int, reserved: int, record_a: int, record_b: int) -> int:
    """Pack the four fields into one code."""
    return (
        (sign << SHIFT_SIGN)
        + (reserved << SHIFT_RESERVED)
        + (record_a << SHIFT_RECORD_A)
        + (record_b << SHIFT_RECORD_B)
    )