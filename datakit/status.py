"""A global-style last-error register and a switchable throw record."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class ErrorRecord:
    """A return value, an error id, an optional buffer and a message."""

    ret: int = 0
    id: int = 0
    buffer: Any = None
    message: Optional[str] = None


class ErrorRegister:
    """Holds the most recently stored error record."""

    def __init__(self) -> None:
        self._record = ErrorRecord()

    def set(self, record: ErrorRecord) -> None:
        """Store ``record`` as the current error."""
        self._record = record

    def get(self) -> ErrorRecord:
        """Return the current error record."""
        return self._record


@dataclass(frozen=True)
class ThrowRecord:
    """A flag word, an id and descriptive strings for a raised condition."""

    flag: int = 0
    id: int = 0
    msg: str = ""
    name: str = ""
    func: str = ""


class ThrowState:
    """A throw record that is only written while the state is switched on."""

    def __init__(self) -> None:
        self._record = ThrowRecord()
        self._mode = 0

    def set(self, flag: int, id: int, msg: str, name: str, func: str) -> None:
        """Store a record; ignored while the state is off."""
        if not self._mode:
            return
        self._record = ThrowRecord(flag, id, msg, name, func)

    def get(self) -> ThrowRecord:
        """Return the stored record while on, an empty record while off."""
        if not self._mode & 0x00000001:
            return ThrowRecord()
        return self._record

    @property
    def last(self) -> ThrowRecord:
        """The stored record, whether the state is on or off."""
        return self._record

    def check(self) -> bool:
        """Return whether the stored record has its lowest flag bit set."""
        return bool(self._record.flag & 0x00000001)

    def on(self) -> bool:
        """Switch recording on; returns True."""
        self._mode = 1
        return True

    def off(self) -> bool:
        """Switch recording off; returns False."""
        self._mode = 0
        return False