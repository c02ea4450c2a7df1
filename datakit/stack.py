"""A fixed-capacity byte stack with helpers for fixed-width values."""

from __future__ import annotations

import struct

STACK_SIZE = 512


class StackError(Exception):
    """Raised when a push overflows or a pop underflows the stack."""


class ByteStack:
    """A last-in, first-out stack of bytes with a fixed capacity."""

    def __init__(self, capacity: int = STACK_SIZE) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._data = bytearray()

    def free_size(self) -> int:
        """Return how many more bytes fit on the stack."""
        return self._capacity - len(self._data)

    def capacity(self) -> int:
        """Return the total number of bytes the stack can hold."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._data)

    def push(self, byte: int) -> None:
        """Push a single byte."""
        if not 0 <= byte <= 0xFF:
            raise ValueError("byte out of range")
        if self.free_size() < 1:
            raise StackError("stack is full")
        self._data.append(byte)

    def pop(self) -> int:
        """Pop and return the most recently pushed byte."""
        if not self._data:
            raise StackError("stack is empty")
        return self._data.pop()

    def push_bytes(self, data: bytes) -> None:
        """Push a block of bytes; nothing is pushed if it does not fit."""
        block = bytes(data)
        if self.free_size() < len(block):
            raise StackError("not enough free space on the stack")
        self._data.extend(block)

    def pop_bytes(self, size: int) -> bytes:
        """Pop the most recently pushed ``size`` bytes, in the order they were pushed."""
        if size < 0:
            raise ValueError("size must not be negative")
        if len(self._data) < size:
            raise StackError("not enough data on the stack")
        if size == 0:
            return b""
        block = bytes(self._data[-size:])
        del self._data[-size:]
        return block

    def _push_packed(self, fmt: str, value) -> None:
        try:
            packed = struct.pack(fmt, value)
        except struct.error as exc:
            raise ValueError(str(exc)) from exc
        self.push_bytes(packed)

    def _pop_packed(self, fmt: str):
        return struct.unpack(fmt, self.pop_bytes(struct.calcsize(fmt)))[0]

    def push_word(self, value: int) -> None:
        """Push an unsigned 16-bit value."""
        self._push_packed("<H", value)

    def pop_word(self) -> int:
        """Pop an unsigned 16-bit value."""
        return self._pop_packed("<H")

    def push_dword(self, value: int) -> None:
        """Push an unsigned 32-bit value."""
        self._push_packed("<I", value)

    def pop_dword(self) -> int:
        """Pop an unsigned 32-bit value."""
        return self._pop_packed("<I")

    def push_qword(self, value: int) -> None:
        """Push an unsigned 64-bit value."""
        self._push_packed("<Q", value)

    def pop_qword(self) -> int:
        """Pop an unsigned 64-bit value."""
        return self._pop_packed("<Q")

    def push_float(self, value: float) -> None:
        """Push a single-precision float."""
        self._push_packed("<f", value)

    def pop_float(self) -> float:
        """Pop a single-precision float."""
        return self._pop_packed("<f")

    def push_double(self, value: float) -> None:
        """Push a double-precision float."""
        self._push_packed("<d", value)

    def pop_double(self) -> float:
        """Pop a double-precision float."""
        return self._pop_packed("<d")