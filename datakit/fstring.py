"""A growable string that tracks its used and reserved sizes in 16-unit blocks."""

from __future__ import annotations

from typing import Optional

BLOCK_SIZE = 16


def reserved_size(size: int) -> int:
    """Return the reserved capacity for ``size`` units: the next multiple of 16 above it."""
    if size < 0:
        raise ValueError("size must not be negative")
    return BLOCK_SIZE * (size // BLOCK_SIZE + 1)


def cstring_length(text: Optional[str]) -> int:
    """Return the length of ``text`` up to its first NUL, counting the terminator.

    ``None`` has length 0.
    """
    if text is None:
        return 0
    return len(text.partition("\0")[0]) + 1


class FString:
    """A string with a used size (terminator included) and a reserved capacity."""

    def __init__(self, text: str) -> None:
        if text is None:
            raise TypeError("text must be a string")
        self._text = text.partition("\0")[0]
        self.size = cstring_length(self._text)
        self.reserved = reserved_size(self.size)

    def reset(self, text: str) -> None:
        """Replace the content, growing the reserved capacity if it is too small."""
        if text is None:
            raise TypeError("text must be a string")
        content = text.partition("\0")[0]
        size = cstring_length(content)
        if self.reserved < size:
            self.reserved = reserved_size(size)
        self._text = content
        self.size = size

    def resize(self, target_size: int) -> None:
        """Set the reserved capacity to the block size that holds ``target_size`` units."""
        reserved = reserved_size(target_size)
        if reserved < self.size:
            raise ValueError("target size too small for the current content")
        self.reserved = reserved

    def fill(self, char: str) -> None:
        """Replace every character of the content with ``char``."""
        if len(char) != 1 or char == "\0":
            raise ValueError("fill needs exactly one non-NUL character")
        self._text = char * len(self._text)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"FString({self._text!r})"